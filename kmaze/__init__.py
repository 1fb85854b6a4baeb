"""Random perfect-maze generation on rectangular grids."""

from .gen import generate
from .types import Direction, Maze, offset, opposite

__all__ = [
    "Direction",
    "Maze",
    "generate",
    "offset",
    "opposite",
]
