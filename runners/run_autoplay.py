# runners/run_autoplay.py
import logging
import random
from config import AppConfig
from core.events import make_event_log
from core.grid import Heading
from core.session import Session
from core.interfaces import Renderer
from viz.renderer_headless import HeadlessRenderer

logger = logging.getLogger(__name__)

def main(cfg: AppConfig = None, frames: int = 10_000, show: bool = False, turn_prob: float = 0.05):
    """Headless game with a random key-presser; one fixed-length frame per update."""
    cfg = cfg or AppConfig()
    rng = random.Random(cfg.seed)
    log = make_event_log(cfg.event_log_path)
    session = Session.new(cfg, event_log=log)

    rend: Renderer = HeadlessRenderer(echo=show)
    rend.open(cfg)
    dt = rend.tick(cfg.fps)
    try:
        for _ in range(frames):
            held = {rng.choice(list(Heading))} if rng.random() < turn_prob else set()
            session.update(held, dt)
            rend.draw(session.snapshot())
            if session.over:
                break
    finally:
        rend.close()
        log.close()

    logger.info("autoplay finished after %d frames: score=%d length=%d reason=%s",
                session.frames, session.score, len(session.sim), session.reason)
    return session
