"""Randomized Kruskal maze generation.

Responsibilities:
- Build the candidate edge list (one North or West edge per interior adjacency).
- Shuffle it with an explicitly passed random source.
- Carve every edge joining two different components, so the result is a
  spanning tree over the grid (a perfect maze).
"""

from __future__ import annotations

from numbers import Integral
from typing import Tuple, Union

import numpy as np

from ..constants import MERGE_RELABEL, MERGE_STRATEGIES, MERGE_UNION_FIND
from ..types import Direction, Maze, offset, opposite
from .disjoint_set import DisjointSet

RngLike = Union[np.random.Generator, int, None]


def _check_dim(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return int(value)


def neighbor(
    x: int, y: int, direction: Direction, height: int, width: int
) -> Tuple[int, int]:
    """Coordinates of the cell next to (x, y) on ``direction``.

    Raises ValueError if that cell is outside a height x width grid.
    """
    dx, dy = offset(direction)
    nx, ny = x + dx, y + dy
    if not (0 <= nx < width and 0 <= ny < height):
        raise ValueError(
            f"No {direction.name} neighbor for ({x}, {y}) in a {height}x{width} grid"
        )
    return nx, ny


def build_edges(height: int, width: int) -> np.ndarray:
    """Candidate edges as an (E, 3) int array of (x, y, direction bit).

    Row-major: for each cell a North edge when y > 0, then a West edge when x > 0.
    E == 2*height*width - height - width.
    """
    edges = []
    for y in range(height):
        for x in range(width):
            if y > 0:
                edges.append((x, y, Direction.N.bit))
            if x > 0:
                edges.append((x, y, Direction.W.bit))
    return np.asarray(edges, dtype=np.int64).reshape(-1, 3)


def generate(
    height: int,
    width: int,
    rng: RngLike = None,
    merge: str = MERGE_RELABEL,
) -> Maze:
    """Generate a perfect maze of height x width cells.

    Args:
        height: number of rows, >= 1.
        width: number of columns, >= 1.
        rng: numpy Generator, integer seed, or None for fresh entropy.
        merge: "relabel" rewrites every cell of the absorbed component on each
            carve; "union_find" uses a DisjointSet. Both carve the same edges
            for the same shuffle.

    Returns:
        Maze whose carved passages form a spanning tree of the grid.
    """
    height = _check_dim("height", height)
    width = _check_dim("width", width)
    if merge not in MERGE_STRATEGIES:
        raise ValueError(f"merge must be one of {MERGE_STRATEGIES}, got {merge!r}")
    gen = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)

    openings = np.zeros((height, width), dtype=np.uint8)
    edges = build_edges(height, width)
    order = gen.permutation(edges.shape[0])

    if merge == MERGE_UNION_FIND:
        dsu = DisjointSet(height * width)

        def join(x: int, y: int, nx: int, ny: int) -> bool:
            return dsu.union(x + y * width, nx + ny * width)

    else:
        labels = np.arange(height * width, dtype=np.int64).reshape(height, width)

        def join(x: int, y: int, nx: int, ny: int) -> bool:
            set1, set2 = labels[y, x], labels[ny, nx]
            if set1 == set2:
                return False
            labels[labels == set1] = set2
            return True

    for k in order:
        x, y, bit = (int(v) for v in edges[k])
        direction = Direction(bit)
        nx, ny = neighbor(x, y, direction, height, width)
        if not join(x, y, nx, ny):
            continue
        openings[y, x] |= direction.bit
        openings[ny, nx] |= opposite(direction).bit

    return Maze(height=height, width=width, openings=openings)


__all__ = [
    "build_edges",
    "generate",
    "neighbor",
]
