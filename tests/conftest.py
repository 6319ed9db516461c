# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw tests (no need for display mode)
    return pg.Surface((320, 240))

@pytest.fixture
def grid():
    from core.grid import GridModel
    return GridModel(32, 32)

@pytest.fixture
def sim_factory(grid):
    from core.grid import Heading
    from core.snake_sim import SnakeSimulation
    def make(body=((0, 0), (0, 1), (0, 2)), heading=Heading.RIGHT, move_interval=0.075, board=None):
        return SnakeSimulation(board or grid, body=body, heading=heading, move_interval=move_interval)
    return make

@pytest.fixture
def small_cfg():
    from config import AppConfig
    return AppConfig(grid_w=8, grid_h=6, seed=7, render_cell=10, win_w=160, win_h=120)
