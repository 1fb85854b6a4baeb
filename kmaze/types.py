from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterator, List, Set, Tuple

import numpy as np


class Direction(Enum):
    """Side of a cell. Values are the bit used in an openings bitmask."""

    N = 1
    S = 2
    E = 4
    W = 8

    @property
    def bit(self) -> int:
        return int(self.value)


_OFFSETS = {
    Direction.E: (1, 0),
    Direction.W: (-1, 0),
    Direction.N: (0, -1),
    Direction.S: (0, 1),
}

_OPPOSITES = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
}


def offset(direction: Direction) -> Tuple[int, int]:
    """Unit step (dx, dy) towards the neighbor on ``direction``.

    y grows downwards, so North is (0, -1).
    """
    if not isinstance(direction, Direction):
        raise TypeError(f"Expected Direction, got {type(direction).__name__}")
    return _OFFSETS[direction]


def opposite(direction: Direction) -> Direction:
    """Direction pointing back from the neighbor (N<->S, E<->W)."""
    if not isinstance(direction, Direction):
        raise TypeError(f"Expected Direction, got {type(direction).__name__}")
    return _OPPOSITES[direction]


def dirs_from_mask(mask: int) -> FrozenSet[Direction]:
    return frozenset(d for d in Direction if int(mask) & d.bit)


@dataclass(frozen=True, eq=False)
class Maze:
    """
    Result of a generation pass.

    - openings: (height, width) uint8 array; bit ``d.bit`` set at [y, x] means
      there is no wall between (x, y) and its neighbor on side ``d``.

    The array is copied on construction and the copy is read-only; the
    caller keeps its own array writable.
    """

    height: int
    width: int
    openings: np.ndarray

    def __post_init__(self) -> None:
        assert self.openings.shape == (self.height, self.width), (
            f"openings shape {self.openings.shape} != ({self.height}, {self.width})"
        )
        openings = np.array(self.openings, dtype=np.uint8, copy=True)
        openings.setflags(write=False)
        object.__setattr__(self, "openings", openings)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    def open_dirs(self, x: int, y: int) -> FrozenSet[Direction]:
        return dirs_from_mask(self.openings[y, x])

    def is_open(self, x: int, y: int, direction: Direction) -> bool:
        return bool(int(self.openings[y, x]) & direction.bit)

    def cells(self) -> Iterator[Tuple[int, int, FrozenSet[Direction]]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.open_dirs(x, y)

    def carved_edges(self) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """Each carved passage once, from a cell to its North or West neighbor."""
        edges = []
        for y in range(self.height):
            for x in range(self.width):
                if y > 0 and self.is_open(x, y, Direction.N):
                    edges.append(((x, y), (x, y - 1)))
                if x > 0 and self.is_open(x, y, Direction.W):
                    edges.append(((x, y), (x - 1, y)))
        return edges

    @property
    def num_carved_edges(self) -> int:
        return len(self.carved_edges())

    def to_sets(self) -> List[List[Set[Direction]]]:
        """Plain nested lists indexed ``[y][x]``."""
        return [
            [set(self.open_dirs(x, y)) for x in range(self.width)]
            for y in range(self.height)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self.openings, other.openings)
        )
