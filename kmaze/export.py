"""Text export of a maze (output only, nothing is read back)."""

from __future__ import annotations

import numpy as np

from .types import Direction, Maze


def to_wall_grid(maze: Maze) -> np.ndarray:
    """(2h+1, 2w+1) bool array, True where a wall is drawn.

    Cell (x, y) sits at [2y+1, 2x+1]; the square between two cells is free
    when the passage between them is carved.
    """
    H, W = maze.shape
    walls = np.ones((2 * H + 1, 2 * W + 1), dtype=bool)
    walls[1::2, 1::2] = False
    op = maze.openings
    # East and South sides cover every interior gap once
    east = (op & Direction.E.bit).astype(bool)
    south = (op & Direction.S.bit).astype(bool)
    walls[1::2, 2::2][east] = False
    walls[2::2, 1::2][south] = False
    return walls


def to_ascii(maze: Maze, wall: str = "#", passage: str = " ") -> str:
    walls = to_wall_grid(maze)
    return "\n".join("".join(wall if w else passage for w in row) for row in walls)
