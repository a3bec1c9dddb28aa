"""Terminal rendering of a board."""

from typing import TYPE_CHECKING

from .types import Color, Coordinate, COLUMN_LETTERS
from .rules import MIN_INDEX, MAX_INDEX

if TYPE_CHECKING:
    from .board import Board

# ANSI escape codes
RESET = "\033[0m"
BLACK = "\033[30m"
RED = "\033[31m"

EMPTY_GLYPH = "*"
FRAME = " +-----------------+"


def _square_color(row: int, column: int) -> str:
    return RED if (row + column) % 2 == 1 else BLACK


def render_board(board: "Board", use_color: bool = True) -> str:
    """
    Render the board as text, row 8 at the top and columns A-H left to right.

    Empty squares show '*', men 'P' and kings 'K'. With ``use_color`` the
    glyphs are wrapped in ANSI red/black codes. Only ``get_piece`` is called
    on the board.
    """
    lines = ["    Checker Board", FRAME]

    for row in range(MAX_INDEX, MIN_INDEX - 1, -1):
        cells = []
        for column in range(MIN_INDEX, MAX_INDEX + 1):
            piece = board.get_piece(Coordinate(row, column))

            if piece is None:
                glyph = EMPTY_GLYPH
                color = _square_color(row, column)
            else:
                glyph = piece.symbol
                color = RED if piece.color == Color.RED else BLACK

            if use_color:
                cells.append(f"{color}{glyph}{RESET}")
            else:
                cells.append(glyph)

        lines.append(f"{row}| " + " ".join(cells) + " |")

    lines.append(FRAME)
    lines.append("   " + " ".join(COLUMN_LETTERS))
    return "\n".join(lines)
