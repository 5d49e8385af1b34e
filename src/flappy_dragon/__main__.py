#!/usr/bin/env python3
"""
Entry point: python -m flappy_dragon [--preset NAME] [--seed N] [--fps N]
"""

import argparse
import sys

from .constants import RENDER_FPS
from .data_models import GameConfig, PRESETS
from .logger import get_logger

log = get_logger("main")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy_dragon", description="Flappy Dragon")
    parser.add_argument("--preset", default="dragon", choices=sorted(PRESETS),
                        help="game revision to play (default: dragon)")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle placement")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="render ticks per second")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = GameConfig.preset(args.preset)

    # pygame is only needed once a window is actually opened.
    import pygame

    from .terminal_client import run_client

    try:
        run_client(config, seed=args.seed, fps=args.fps)
    except pygame.error as e:
        log.error(f"client stopped: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
