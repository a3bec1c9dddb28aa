"""Board encoding for search and learning code."""

from typing import TYPE_CHECKING

import numpy as np

from .types import Color
from .rules import BOARD_SIZE

if TYPE_CHECKING:
    from .board import Board

BOARD_PLANES = 4


def encode_board(board: "Board", perspective: Color = Color.RED) -> np.ndarray:
    """
    Encode a board as stacked binary planes.

    Returns:
        numpy array of shape (4, 8, 8):
        - Plane 0: Perspective color's men
        - Plane 1: Perspective color's kings
        - Plane 2: Opponent's men
        - Plane 3: Opponent's kings

        Square (row, column) maps to index [row - 1, column - 1].
    """
    planes = np.zeros((BOARD_PLANES, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)

    for piece in board.get_pieces():
        plane = 0 if piece.color == perspective else 2
        if piece.is_king:
            plane += 1
        planes[plane, piece.position.row - 1, piece.position.column - 1] = 1.0

    return planes
