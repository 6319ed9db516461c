# tests/test_session.py
import csv
import pytest
from config import AppConfig
from core.events import CSVEventLog, EVENT_KEYS
from core.food import FoodPlacer
from core.grid import GridModel, GridPoint, Heading
from core.session import GameOverError, Session
from core.snake_sim import ATE, CRASHED_INTO_WALL, MOVED, NO_MOVE, SnakeSimulation

def test_new_session_places_food_off_snake(small_cfg):
    s = Session.new(small_cfg)
    assert s.score == 0 and not s.over
    assert s.food not in s.sim.body
    assert s.sim.grid == GridModel(8, 6)

def test_eating_scores_and_replaces_food(small_cfg):
    s = Session.new(small_cfg)
    s.food = GridPoint(1, 0)
    assert s.update(set(), 0.075) == ATE
    assert s.score == 1
    assert len(s.sim) == 4
    assert s.food not in s.sim.body

def test_time_below_interval_only_counts_frames(small_cfg):
    s = Session.new(small_cfg)
    body = s.sim.body
    assert s.update(set(), 0.01) == NO_MOVE
    assert s.frames == 1
    assert s.sim.body == body

def test_held_keys_steer(small_cfg):
    s = Session.new(small_cfg.with_(start_body=((3, 3), (2, 3))))
    s.food = GridPoint(7, 5)
    # LEFT reverses RIGHT, so DOWN wins
    assert s.update({Heading.LEFT, Heading.DOWN}, 0.075) == MOVED
    assert s.sim.head == (3, 4)

def test_wall_crash_ends_session(small_cfg):
    s = Session.new(small_cfg)
    assert s.update({Heading.UP}, 0.075) == CRASHED_INTO_WALL
    assert s.over and s.reason == "wall"
    snap = s.snapshot()
    assert snap.terminated and snap.reason == "wall"
    with pytest.raises(GameOverError):
        s.update(set(), 0.075)

def test_filling_the_board_ends_session():
    g = GridModel(2, 1)
    s = Session(SnakeSimulation(g, body=((0, 0),)), FoodPlacer(g, seed=0))
    assert s.food == (1, 0)
    assert s.update(set(), 0.075) == ATE
    assert s.score == 1
    assert s.over and s.reason == "board_full"

def test_snapshot_mirrors_state(small_cfg):
    s = Session.new(small_cfg)
    snap = s.snapshot()
    assert snap.snake == ((0, 0), (0, 1), (0, 2))
    assert snap.head == (0, 0)
    assert snap.heading == "RIGHT"
    assert (snap.grid_w, snap.grid_h) == (8, 6)
    assert snap.food == s.food

def test_events_written_to_csv(small_cfg, tmp_path):
    path = tmp_path / "logs" / "events.csv"
    log = CSVEventLog(str(path))
    s = Session.new(small_cfg, event_log=log)
    s.food = GridPoint(1, 0)
    s.update(set(), 0.075)
    s.update({Heading.UP}, 0.075)
    log.close()

    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == EVENT_KEYS
    assert [r["event"] for r in rows] == ["food", "game_over"]
    assert rows[0]["score"] == "1" and rows[0]["length"] == "4"
    assert rows[1]["reason"] == "wall"
    assert (rows[1]["head_x"], rows[1]["head_y"]) == ("1", "0")

def test_csv_header_written_once(tmp_path):
    path = str(tmp_path / "events.csv")
    for _ in range(2):
        log = CSVEventLog(path)
        log.log(1, {"event": "food"})
        log.close()
    with open(path) as f:
        lines = f.read().splitlines()
    assert lines[0].startswith("frame,")
    assert len(lines) == 3

def test_start_body_filling_board_ends_session(tmp_path):
    cfg = AppConfig(grid_w=2, grid_h=1, start_body=((0, 0), (1, 0)))
    log = CSVEventLog(str(tmp_path / "events.csv"))
    s = Session.new(cfg, event_log=log)
    log.close()
    assert s.over and s.reason == "board_full"
    assert s.food is None
    assert s.snapshot().terminated and s.snapshot().food is None
    with pytest.raises(GameOverError):
        s.update(set(), 0.075)
    with open(tmp_path / "events.csv", newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["event"] for r in rows] == ["game_over"]
    assert rows[0]["reason"] == "board_full"

def test_food_under_snake_is_eaten_after_body_leaves(small_cfg):
    s = Session.new(small_cfg.with_(food_on_snake=True))
    assert s.placer.allow_occupied
    # body (0,0) (0,1) (0,2); put food under the middle segment
    s.food = GridPoint(0, 1)

    res = s.update(set(), 0.075)
    assert res.moved and not res.food_eaten
    assert s.sim.body == ((1, 0), (0, 0), (0, 1))
    assert s.food in s.sim.body

    res = s.update({Heading.DOWN}, 0.075)
    assert res.moved and not res.food_eaten
    assert s.sim.body == ((1, 1), (1, 0), (0, 0))
    assert s.food not in s.sim.body
    assert s.score == 0

    assert s.update({Heading.LEFT}, 0.075) == ATE
    assert s.sim.body == ((0, 1), (1, 1), (1, 0), (0, 0))
    assert s.score == 1
