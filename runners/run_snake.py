# runners/run_snake.py
import logging
from config import AppConfig
from core.events import make_event_log
from core.session import Session
from viz.keyboard import Keyboard
from core.interfaces import Renderer
from viz.renderer_pygame import PygameRenderer

logger = logging.getLogger(__name__)

def main(cfg: AppConfig = None):
    cfg = cfg or AppConfig()
    log = make_event_log(cfg.event_log_path)
    session = Session.new(cfg, event_log=log)

    rend: Renderer = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard()

    elapsed = 0.0
    try:
        while not session.over:
            keys = kbd.poll()
            if keys == "quit":
                logger.info("quit by player, score %d", session.score)
                break
            session.update(keys, elapsed)
            rend.draw(session.snapshot())
            elapsed = rend.tick(cfg.fps)
    finally:
        rend.close()
        log.close()

    if session.over:
        print(f"Crashed ({session.reason})! Score: {session.score}")
    return session
