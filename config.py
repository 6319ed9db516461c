# config.py
import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

HEADINGS = ("UP", "DOWN", "LEFT", "RIGHT")

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / simulation
    grid_w: int = 32
    grid_h: int = 32
    move_interval: float = 0.075         # seconds of logical time per move
    start_body: Tuple[Tuple[int, int], ...] = ((0, 0), (0, 1), (0, 2))  # head first
    start_heading: str = "RIGHT"
    seed: Optional[int] = None
    food_on_snake: bool = False          # True = x and y sampled over the whole board, snake cells included

    # render
    fps: int = 60
    win_w: int = 1280
    win_h: int = 720
    render_cell: int = 16
    render_title: str = "snake"
    render_grid_lines: bool = True
    render_show_hud: bool = True

    # logging
    log_level: str = "INFO"
    event_log_path: Optional[str] = None

    def __post_init__(self):
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"grid must be positive, got {self.grid_w}x{self.grid_h}")
        if not (math.isfinite(self.move_interval) and self.move_interval > 0):
            raise ValueError(f"move_interval must be a positive number, got {self.move_interval!r}")
        if not self.start_body:
            raise ValueError("start_body needs at least one cell")
        if self.start_heading not in HEADINGS:
            raise ValueError(f"start_heading must be one of {HEADINGS}, got {self.start_heading!r}")
        if self.fps <= 0 or self.render_cell <= 0:
            raise ValueError("fps and render_cell must be positive")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
