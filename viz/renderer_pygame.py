# viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional, Tuple
from config import AppConfig
from core.interfaces import Snapshot
import viz.renderer_colors as theme

class PygameRenderer:
    """Draws the board centered in the window: grid lines, snake, food and score."""
    def __init__(self):
        self.cell = 16
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self.font: Optional[pg.font.Font] = None
        self._auto_flip = True
        self._offset: Tuple[int, int] = (0, 0)

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.win_w, cfg.win_h))
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._layout()

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into an existing surface; the caller owns timing and flipping."""
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.surf = surface
        self.clock = None
        self._auto_flip = False
        self._layout()

    def cell_rect(self, x: int, y: int) -> pg.Rect:
        ox, oy = self._offset
        c = self.cell
        return pg.Rect(ox + x * c, oy + y * c, c, c)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell
        # the snapshot decides the board size; cells and grid lines share this offset
        self._center(s.grid_w, s.grid_h)
        ox, oy = self._offset

        surf.fill(theme.BG)

        if self.cfg.render_grid_lines:
            bw, bh = s.grid_w * c, s.grid_h * c
            for i in range(s.grid_w + 1):
                pg.draw.line(surf, theme.GRID, (ox + i * c, oy), (ox + i * c, oy + bh))
            for i in range(s.grid_h + 1):
                pg.draw.line(surf, theme.GRID, (ox, oy + i * c), (ox + bw, oy + i * c))

        for (x, y) in s.snake[1:]:
            pg.draw.rect(surf, theme.BODY, self.cell_rect(x, y))
        hx, hy = s.head
        pg.draw.rect(surf, theme.HEAD, self.cell_rect(hx, hy))

        if s.food is not None:
            fx, fy = s.food
            pg.draw.rect(surf, theme.FOOD, self.cell_rect(fx, fy))

        if self.cfg.render_show_hud:
            txt = self.font.render(f"SCORE: {s.score}", True, theme.TEXT)
            surf.blit(txt, txt.get_rect(center=(surf.get_width() // 2, 50)))

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> float:
        """Wait for the next frame; returns seconds since the previous tick."""
        if self.clock:
            return self.clock.tick(fps) / 1000.0
        return 1.0 / fps

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self.font = None

    # internals
    def _layout(self) -> None:
        assert self.surf is not None and self.cfg is not None
        self.cell = self.cfg.render_cell
        self._center(self.cfg.grid_w, self.cfg.grid_h)
        self.font = pg.font.Font(None, 32)

    def _center(self, grid_w: int, grid_h: int) -> None:
        assert self.surf is not None
        bw, bh = grid_w * self.cell, grid_h * self.cell
        self._offset = ((self.surf.get_width() - bw) // 2, (self.surf.get_height() - bh) // 2)
