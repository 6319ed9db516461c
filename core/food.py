# core/food.py
from __future__ import annotations
from typing import Iterable, Optional, Tuple
import random
import numpy as np

from .grid import GridModel, GridPoint


class BoardFullError(RuntimeError):
    """Raised when there is no free cell left to put food on."""


class FoodPlacer:
    """
    Picks food cells uniformly at random.

    allow_occupied=True samples x and y independently over the whole board,
    so food can land under the snake (it becomes reachable once the snake
    moves off it). The default only draws from free cells.
    """

    def __init__(self, grid: GridModel, seed: Optional[int] = None, allow_occupied: bool = False):
        self.grid = grid
        self.allow_occupied = allow_occupied
        self.rng = random.Random(seed)

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    def place(self, occupied: Iterable[Tuple[int, int]] = ()) -> GridPoint:
        if self.allow_occupied:
            return GridPoint(self.rng.randrange(self.grid.width), self.rng.randrange(self.grid.height))

        free = np.argwhere(~self.grid.occupancy(occupied))   # rows of (y, x)
        if len(free) == 0:
            raise BoardFullError(f"no free cell on a {self.grid.width}x{self.grid.height} board")
        y, x = free[self.rng.randrange(len(free))]
        return GridPoint(int(x), int(y))
