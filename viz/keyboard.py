# viz/keyboard.py
import pygame as pg
from core.grid import Heading

KEYMAP = {
    Heading.UP: (pg.K_w, pg.K_UP),
    Heading.DOWN: (pg.K_s, pg.K_DOWN),
    Heading.LEFT: (pg.K_a, pg.K_LEFT),
    Heading.RIGHT: (pg.K_d, pg.K_RIGHT),
}
QUIT_KEYS = (pg.K_ESCAPE, pg.K_q)

def held_headings(pressed):
    """Headings whose key is currently down; `pressed` is indexable by key code."""
    return {h for h, keys in KEYMAP.items() if any(pressed[k] for k in keys)}

class Keyboard:
    """Reads held keys once per frame (not key-down events)."""
    def poll(self):
        for e in pg.event.get():
            if e.type == pg.QUIT:
                return "quit"
        pressed = pg.key.get_pressed()
        if any(pressed[k] for k in QUIT_KEYS):
            return "quit"
        return held_headings(pressed)
