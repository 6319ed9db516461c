# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Dict, Any, Protocol

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Tuple[int,int], ...]   # head first
    food: Tuple[int,int] | None        # None when the board filled up before food was placed
    heading: str
    score: int
    frame: int
    terminated: bool
    reason: str | None
    grid_w: int
    grid_h: int

    @property
    def head(self) -> Tuple[int,int]:
        return self.snake[0]

class Renderer(Protocol):
    def open(self, cfg) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def tick(self, fps: int) -> float: ...
    def close(self) -> None: ...

class EventLog(Protocol):
    """Sink for game events (food eaten, crashes, ...)."""
    def log(self, frame: int, row: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...
