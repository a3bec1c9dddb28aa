"""Game rules constants for checkers."""

from typing import List

from .types import Color, Coordinate

# Board dimensions (1-indexed)
BOARD_SIZE = 8
MIN_INDEX = 1
MAX_INDEX = 8

# Starting rows for each color
RED_ROWS = range(1, 4)    # Rows 1, 2, 3
BLACK_ROWS = range(6, 9)  # Rows 6, 7, 8

# Forward row direction
# Red moves toward increasing row, black toward decreasing row
FORWARD = {
    Color.RED: 1,
    Color.BLACK: -1,
}

# Step lengths for men (in rows)
MAN_STEP = 1
MAN_JUMP = 2

# Far ranks; a man reaching either is promotable
PROMOTION_ROWS = (MIN_INDEX, MAX_INDEX)

# Diagonal directions (row_delta, column_delta)
ALL_DIRECTIONS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


def is_playable(row: int, column: int) -> bool:
    """Check if a square is one of the squares pieces start and travel on."""
    return (row + column) % 2 == 0


def squares_between(start: Coordinate, end: Coordinate) -> List[Coordinate]:
    """
    List the squares strictly between two points on a shared diagonal.

    Walks from the square just past ``start`` to the square just before
    ``end``, stepping by the signs of the row and column deltas. Returns an
    empty list when the points are adjacent, identical, or not diagonal.
    """
    d_row = end.row - start.row
    d_column = end.column - start.column
    if d_row == 0 or abs(d_row) != abs(d_column):
        return []

    step_row = 1 if d_row > 0 else -1
    step_column = 1 if d_column > 0 else -1
    return [
        start.offset(step_row * i, step_column * i)
        for i in range(1, abs(d_row))
    ]
