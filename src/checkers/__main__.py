"""Main entry point for the checkers engine."""

import sys
import argparse
import logging
from typing import List, Optional

from .board import Board
from .types import Coordinate
from .config import get_config
from .render import render_board
from .utils import setup_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="checkers",
        description="Set up a checkers board, optionally apply moves, and print it.",
    )
    parser.add_argument("--move", nargs=2, action="append", default=[],
                        metavar=("FROM", "TO"),
                        help="Apply a move such as 'C3 D4' (repeatable)")
    parser.add_argument("--multiplayer", action="store_true",
                        help="Mark the board as a multiplayer board")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable ANSI colors")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logger = setup_logger("checkers", level=logging.DEBUG if args.verbose else logging.INFO)
    config = get_config()

    board = Board.initial(multiplayer=args.multiplayer or config.game.multiplayer)

    for from_name, to_name in args.move:
        try:
            move = board.move_piece(Coordinate.from_name(from_name),
                                    Coordinate.from_name(to_name), config)
        except ValueError as e:
            logger.error("%s", e)
            return 1
        logger.info("Played %r", move)

    use_color = config.display.use_color and not args.no_color

    print("+=+=+-----Checkers Debugger-----+=+=+")
    print(render_board(board, use_color=use_color))
    return 0


if __name__ == "__main__":
    sys.exit(main())
