from __future__ import annotations

from collections import deque
from typing import Tuple

import numpy as np

from ..types import Direction, Maze, offset, opposite


class MazeInvariantError(RuntimeError):
    """A generated maze is not a perfect maze."""


def _in_bounds(x: int, y: int, height: int, width: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def count_components(maze: Maze) -> int:
    """Number of connected regions when walking only through open sides.

    Sides that point outside the grid are ignored.
    """
    H, W = maze.shape
    visited = np.zeros((H, W), dtype=np.uint8)
    components = 0
    for sy in range(H):
        for sx in range(W):
            if visited[sy, sx]:
                continue
            components += 1
            visited[sy, sx] = 1
            q: deque[Tuple[int, int]] = deque()
            q.append((sx, sy))
            while q:
                x, y = q.popleft()
                for d in maze.open_dirs(x, y):
                    dx, dy = offset(d)
                    nx, ny = x + dx, y + dy
                    if _in_bounds(nx, ny, H, W) and not visited[ny, nx]:
                        visited[ny, nx] = 1
                        q.append((nx, ny))
    return components


def is_symmetric(maze: Maze) -> bool:
    """Every open side with a neighbor is matched by the opposite side there."""
    H, W = maze.shape
    for x, y, dirs in maze.cells():
        for d in dirs:
            dx, dy = offset(d)
            nx, ny = x + dx, y + dy
            if _in_bounds(nx, ny, H, W) and not maze.is_open(nx, ny, opposite(d)):
                return False
    return True


def respects_boundary(maze: Maze) -> bool:
    """No side on the outer rim of the grid is open."""
    op = maze.openings
    return not (
        np.any(op[0, :] & Direction.N.bit)
        or np.any(op[-1, :] & Direction.S.bit)
        or np.any(op[:, 0] & Direction.W.bit)
        or np.any(op[:, -1] & Direction.E.bit)
    )


def check_maze(maze: Maze) -> None:
    """Raise MazeInvariantError naming the first perfect-maze property that fails."""
    if not respects_boundary(maze):
        raise MazeInvariantError("open side on the grid boundary")
    if not is_symmetric(maze):
        raise MazeInvariantError("open side without a matching opposite side")
    expected = maze.height * maze.width - 1
    carved = maze.num_carved_edges
    if carved != expected:
        raise MazeInvariantError(f"expected {expected} carved edges, found {carved}")
    components = count_components(maze)
    if components != 1:
        raise MazeInvariantError(f"maze has {components} disconnected regions")


def is_perfect(maze: Maze) -> bool:
    try:
        check_maze(maze)
    except MazeInvariantError:
        return False
    return True


__all__ = [
    "MazeInvariantError",
    "check_maze",
    "count_components",
    "is_perfect",
    "is_symmetric",
    "respects_boundary",
]
