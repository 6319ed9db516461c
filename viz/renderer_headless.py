# viz/renderer_headless.py
from __future__ import annotations
import logging
from typing import List, Optional
from config import AppConfig
from core.interfaces import Snapshot

logger = logging.getLogger(__name__)

def board_lines(s: Snapshot) -> List[str]:
    """Text board: '.' empty, 'H' head, 'o' body, 'F' food."""
    grid = [["." for _ in range(s.grid_w)] for _ in range(s.grid_h)]
    if s.food is not None:
        fx, fy = s.food
        grid[fy][fx] = "F"
    for (x, y) in s.snake[1:]:
        grid[y][x] = "o"
    hx, hy = s.head
    grid[hy][hx] = "H"
    return ["".join(row) for row in grid]

class HeadlessRenderer:
    """Keeps the last frame as text; optionally logs every frame."""
    def __init__(self, echo: bool = False):
        self.echo = echo
        self.cfg: Optional[AppConfig] = None
        self.last: List[str] = []
        self.frames = 0

    def open(self, cfg: AppConfig) -> None:
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.frames = 0

    def draw(self, snap: Snapshot) -> None:
        self.last = board_lines(snap)
        self.frames += 1
        if self.echo:
            logger.info("frame %d score %d\n%s", snap.frame, snap.score, "\n".join(self.last))

    def tick(self, fps: int) -> float:
        return 1.0 / fps

    def close(self) -> None:
        self.cfg = None
