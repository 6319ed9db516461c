# core/grid.py  (pure board geometry, no pygame)
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, NamedTuple, Tuple
import numpy as np


class GridPoint(NamedTuple):
    x: int
    y: int


class Heading(Enum):
    # declaration order doubles as key priority order
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def reverse(self) -> "Heading":
        dx, dy = self.value
        return Heading((-dx, -dy))


@dataclass(frozen=True, slots=True)
class GridModel:
    """Board coordinate space. (0, 0) is the top-left cell, y grows downward."""
    width: int = 32
    height: int = 32

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"board must be at least 1x1, got {self.width}x{self.height}")

    def in_bounds(self, p: Tuple[int, int]) -> bool:
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def step(self, p: Tuple[int, int], h: Heading) -> GridPoint:
        # unchecked: may return a point off the board
        dx, dy = h.delta
        return GridPoint(p[0] + dx, p[1] + dy)

    def at_edge(self, p: Tuple[int, int], h: Heading) -> bool:
        """True if moving from p towards h would leave the board."""
        x, y = p
        if h is Heading.LEFT:
            return x == 0
        elif h is Heading.RIGHT:
            return x == self.width - 1
        elif h is Heading.UP:
            return y == 0
        elif h is Heading.DOWN:
            return y == self.height - 1
        raise ValueError(f"unknown heading {h!r}")

    def cells(self) -> Iterator[GridPoint]:
        for y in range(self.height):
            for x in range(self.width):
                yield GridPoint(x, y)

    def occupancy(self, cells: Iterable[Tuple[int, int]]) -> np.ndarray:
        """(height, width) bool mask, True where a cell is taken. Off-board cells are ignored."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in cells:
            if 0 <= x < self.width and 0 <= y < self.height:
                mask[y, x] = True
        return mask
