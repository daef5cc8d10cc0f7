"""Entry point: parse options, configure logging and run the game."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from striker.constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from striker.game import Game
from striker.settings import settings
from striker.storage import STATE_PATH


def main() -> None:
    parser = argparse.ArgumentParser(description="Desi Street Striker: tap, hold and swipe the ball into the goal.")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="Window width in pixels.")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="Window height in pixels.")
    parser.add_argument("--fps", type=int, default=FPS, help="Frames (and physics ticks) per second.")
    parser.add_argument(
        "--no-commentary",
        action="store_true",
        help="Skip the remote commentary request and use the built-in lines.",
    )
    parser.add_argument(
        "--state-file",
        type=Path,
        default=STATE_PATH,
        help="JSON file holding the best and last score.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if not args.no_commentary and not settings.commentary_enabled:
        logging.getLogger(__name__).info("STRIKER_OPENAI_API_KEY not set; commentary uses built-in lines")

    game = Game(
        width=args.width,
        height=args.height,
        fps=args.fps,
        state_path=args.state_file,
        commentary_enabled=not args.no_commentary,
        config=settings,
    )
    game.run()


if __name__ == "__main__":
    main()
