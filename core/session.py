# core/session.py  (per-game driver state: score, food, game over)
from __future__ import annotations
from typing import Iterable, Optional
import logging

from config import AppConfig
from .events import NullEventLog
from .food import BoardFullError, FoodPlacer
from .grid import GridPoint, Heading
from .interfaces import EventLog, Snapshot
from .snake_sim import AdvanceResult, SnakeSimulation, choose_heading

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """The session already ended; start a new one."""


class Session:
    def __init__(self, sim: SnakeSimulation, placer: FoodPlacer, event_log: Optional[EventLog] = None):
        self.sim = sim
        self.placer = placer
        self.event_log = event_log if event_log is not None else NullEventLog()
        self.score = 0
        self.frames = 0
        self.over = False
        self.reason: str | None = None
        self.food: GridPoint | None = None
        self._place_food()

    @classmethod
    def new(cls, cfg: AppConfig, event_log: Optional[EventLog] = None) -> "Session":
        sim = SnakeSimulation.from_config(cfg)
        placer = FoodPlacer(sim.grid, seed=cfg.seed, allow_occupied=cfg.food_on_snake)
        return cls(sim, placer, event_log)

    def update(self, held: Iterable[Heading], elapsed: float) -> AdvanceResult:
        """One frame: apply input, advance the snake, settle score/food."""
        if self.over:
            raise GameOverError(f"session ended ({self.reason}) after {self.frames} frames")
        self.frames += 1

        requested = choose_heading(held, self.sim.heading)
        if requested is not None:
            self.sim.set_heading(requested)

        result = self.sim.advance(self.food, elapsed)
        if result.crashed:
            self._end(result.reason)
        elif result.food_eaten:
            self.score += 1
            self._record("food")
            self._place_food()
        return result

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.sim.body,
            food=self.food,
            heading=self.sim.heading.name,
            score=self.score,
            frame=self.frames,
            terminated=self.over,
            reason=self.reason,
            grid_w=self.sim.grid.width,
            grid_h=self.sim.grid.height,
        )

    def _place_food(self) -> None:
        try:
            self.food = self.placer.place(self.sim.body)
        except BoardFullError:
            # food keeps its last cell (None when the board starts full)
            self._end("board_full")

    def _end(self, reason: str | None) -> None:
        self.over, self.reason = True, reason
        self._record("game_over", reason)
        self.event_log.flush()
        logger.info("game over: %s, score %d, length %d", reason, self.score, len(self.sim))

    def _record(self, event: str, reason: str | None = None) -> None:
        hx, hy = self.sim.head
        logger.debug("frame %d: %s (score %d)", self.frames, event, self.score)
        self.event_log.log(self.frames, {
            "event": event,
            "score": self.score,
            "length": len(self.sim),
            "head_x": hx,
            "head_y": hy,
            "reason": reason or "",
        })
