# core/snake_sim.py  (pure rules, no pygame)
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple
import logging
import math

from .grid import GridModel, GridPoint, Heading

logger = logging.getLogger(__name__)


class Outcome(Enum):
    NO_MOVE = "no_move"
    MOVED = "moved"
    CRASHED_INTO_WALL = "crashed_into_wall"
    CRASHED_INTO_SELF = "crashed_into_self"


@dataclass(frozen=True, slots=True)
class AdvanceResult:
    outcome: Outcome
    food_eaten: bool = False

    @property
    def moved(self) -> bool:
        return self.outcome is Outcome.MOVED

    @property
    def crashed(self) -> bool:
        return self.outcome in (Outcome.CRASHED_INTO_WALL, Outcome.CRASHED_INTO_SELF)

    @property
    def reason(self) -> str | None:
        if self.outcome is Outcome.CRASHED_INTO_WALL:
            return "wall"
        elif self.outcome is Outcome.CRASHED_INTO_SELF:
            return "self"
        return None


NO_MOVE = AdvanceResult(Outcome.NO_MOVE)
MOVED = AdvanceResult(Outcome.MOVED, food_eaten=False)
ATE = AdvanceResult(Outcome.MOVED, food_eaten=True)
CRASHED_INTO_WALL = AdvanceResult(Outcome.CRASHED_INTO_WALL)
CRASHED_INTO_SELF = AdvanceResult(Outcome.CRASHED_INTO_SELF)

DEFAULT_BODY = ((0, 0), (0, 1), (0, 2))


def choose_heading(held: Iterable[Heading], current: Heading) -> Optional[Heading]:
    """First held heading in priority order (UP, DOWN, LEFT, RIGHT) that is not a reversal."""
    held = set(held)
    for h in Heading:
        if h in held and h is not current.reverse:
            return h
    return None


def _check_body(grid: GridModel, body: Sequence[GridPoint]) -> None:
    if not body:
        raise ValueError("snake body needs at least one cell")
    for p in body:
        if not grid.in_bounds(p):
            raise ValueError(f"body cell {tuple(p)} is off a {grid.width}x{grid.height} board")
    if len(set(body)) != len(body):
        raise ValueError("body cells must be distinct")
    for a, b in zip(body, list(body)[1:]):
        if abs(a.x - b.x) + abs(a.y - b.y) != 1:
            raise ValueError(f"body cells {tuple(a)} and {tuple(b)} are not adjacent")


class SnakeSimulation:
    """
    Owns the snake: body (head first), heading and move timing.

    The caller feeds it wall-clock time every frame through advance(); a
    logical move happens once at least move_interval seconds have piled up.
    At most one move is resolved per call and leftover time is dropped.
    Crashes are returned, never raised, and are final.
    """

    def __init__(
        self,
        grid: GridModel,
        body: Optional[Iterable[Tuple[int, int]]] = None,
        heading: Heading = Heading.RIGHT,
        move_interval: float = 0.075,
    ):
        if not (math.isfinite(move_interval) and move_interval > 0):
            raise ValueError(f"move_interval must be a positive number, got {move_interval!r}")
        cells = [GridPoint(*p) for p in (DEFAULT_BODY if body is None else body)]
        _check_body(grid, cells)

        self.grid = grid
        self._body: deque[GridPoint] = deque(cells)
        self._heading = heading
        self._move_interval = float(move_interval)
        self._accumulator = 0.0
        self._crash: Optional[AdvanceResult] = None

    @classmethod
    def from_config(cls, cfg) -> "SnakeSimulation":
        return cls(
            GridModel(cfg.grid_w, cfg.grid_h),
            body=cfg.start_body,
            heading=Heading[cfg.start_heading],
            move_interval=cfg.move_interval,
        )

    # ---- read-only views ----
    @property
    def body(self) -> Tuple[GridPoint, ...]:
        return tuple(self._body)

    @property
    def head(self) -> GridPoint:
        return self._body[0]

    @property
    def heading(self) -> Heading:
        return self._heading

    @property
    def move_interval(self) -> float:
        return self._move_interval

    @property
    def accumulator(self) -> float:
        return self._accumulator

    @property
    def crashed(self) -> Optional[AdvanceResult]:
        return self._crash

    def __len__(self) -> int:
        return len(self._body)

    # ---- operations ----
    def set_heading(self, requested: Heading) -> None:
        if self._crash is not None:
            return
        # ignore instant 180° reversal into the neck
        if requested is self._heading.reverse:
            return
        self._heading = requested

    def advance(self, food: Tuple[int, int], elapsed: float) -> AdvanceResult:
        if self._crash is not None:
            return self._crash
        if not math.isfinite(elapsed) or elapsed < 0:
            logger.warning("ignoring invalid elapsed time %r", elapsed)
            return NO_MOVE

        self._accumulator += elapsed
        if self._accumulator < self._move_interval:
            return NO_MOVE
        self._accumulator = 0.0

        head = self._body[0]
        candidate = self.grid.step(head, self._heading)

        # collisions
        if self.grid.at_edge(head, self._heading):
            return self._crashed(CRASHED_INTO_WALL)
        if candidate in self._body:
            return self._crashed(CRASHED_INTO_SELF)

        self._body.appendleft(candidate)
        if candidate == food:
            return ATE
        self._body.pop()
        return MOVED

    def _crashed(self, result: AdvanceResult) -> AdvanceResult:
        self._crash = result
        logger.debug("snake crashed (%s) at %s heading %s", result.reason, tuple(self.head), self._heading.name)
        return result
