"""Type definitions for the checkers rules engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Color(Enum):
    """Piece colors."""
    RED = "red"      # Starts on rows 1-3, moves toward increasing row
    BLACK = "black"  # Starts on rows 6-8, moves toward decreasing row

    def opponent(self) -> "Color":
        """Return the opposing color."""
        return Color.BLACK if self == Color.RED else Color.RED


COLUMN_LETTERS = "ABCDEFGH"


@dataclass(frozen=True)
class Coordinate:
    """
    A square on the board.

    Rows and columns are 1-indexed; the playable range is 1..8 on both axes.
    Instances outside that range can be built (they are what callers ask
    about) but are never occupied.
    """
    row: int
    column: int

    @property
    def in_bounds(self) -> bool:
        """Check if this coordinate lies on the 8x8 board."""
        return 1 <= self.row <= 8 and 1 <= self.column <= 8

    def offset(self, d_row: int, d_column: int) -> "Coordinate":
        """Return the coordinate shifted by the given deltas."""
        return Coordinate(self.row + d_row, self.column + d_column)

    @property
    def name(self) -> str:
        """Square name such as 'A1' (column letter, then row)."""
        if not self.in_bounds:
            return f"({self.row},{self.column})"
        return f"{COLUMN_LETTERS[self.column - 1]}{self.row}"

    @classmethod
    def from_name(cls, name: str) -> "Coordinate":
        """Parse a square name such as 'c3'."""
        text = name.strip().upper()
        if len(text) != 2 or text[0] not in COLUMN_LETTERS or not text[1].isdigit():
            raise ValueError(f"Invalid square name: {name!r}")
        coord = cls(int(text[1]), COLUMN_LETTERS.index(text[0]) + 1)
        if not coord.in_bounds:
            raise ValueError(f"Square off the board: {name!r}")
        return coord

    def __repr__(self) -> str:
        return f"Coordinate({self.row},{self.column})"


@dataclass(frozen=True)
class Move:
    """
    A single move of one piece.

    Attributes:
        start: Square the piece leaves.
        end: Square the piece lands on.
        captures: Squares of opposing pieces removed by this move.
        promotion: True if a man reaches the far rank with this move.
    """
    start: Coordinate
    end: Coordinate
    captures: Tuple[Coordinate, ...] = ()
    promotion: bool = False

    @property
    def is_capture(self) -> bool:
        """Check if this move removes any pieces."""
        return len(self.captures) > 0

    def __repr__(self) -> str:
        text = f"{self.start.name}->{self.end.name}"
        if self.captures:
            text += " x" + ",".join(c.name for c in self.captures)
        if self.promotion:
            text += " =K"
        return f"Move({text})"
