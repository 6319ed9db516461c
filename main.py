# main.py
import argparse
import logging

from config import AppConfig
from runners.run_snake import main as snake
from runners.run_autoplay import main as autoplay

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Grid snake")
    p.add_argument("mode", choices=["snake", "autoplay"])
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--frames", type=int, default=10_000, help="autoplay frame limit")
    p.add_argument("--show", action="store_true", help="autoplay: log every frame as text")
    p.add_argument("--event-log", default=None, help="append game events to this CSV file")
    p.add_argument("--log-level", default=None)
    return p.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    cfg = AppConfig().with_(seed=args.seed, event_log_path=args.event_log)
    if args.log_level:
        cfg = cfg.with_(log_level=args.log_level.upper())
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.mode == "snake":
        snake(cfg)
    elif args.mode == "autoplay":
        autoplay(cfg, frames=args.frames, show=args.show)

if __name__ == "__main__":
    main()
