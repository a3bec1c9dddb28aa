"""Board state representation for checkers."""

import logging
from typing import Iterator, List, Optional, Tuple

from .types import Color, Coordinate, Move
from .pieces import Piece, Man
from .rules import RED_ROWS, BLACK_ROWS, BOARD_SIZE, is_playable, squares_between
from .config import Config
from .evaluation import build_move
from .render import render_board

logger = logging.getLogger(__name__)


class Board:
    """
    8x8 checkers board.

    Pieces are kept in an unordered list and looked up by linear scan. Rows
    and columns run 1..8; red starts on rows 1-3, black on rows 6-8, and only
    squares where (row + column) is even are used.
    """

    SIZE = BOARD_SIZE

    def __init__(self, multiplayer: bool = False):
        """Create an empty board."""
        self.pieces: List[Piece] = []
        # Stored for embedding applications; no rule reads it
        self.multiplayer = multiplayer

    @classmethod
    def initial(cls, multiplayer: bool = False) -> "Board":
        """Create a board with the standard initial setup."""
        board = cls()
        board.init(multiplayer)
        return board

    def init(self, multiplayer: bool = False) -> None:
        """Replace all pieces with the standard 24-man starting layout."""
        pieces: List[Piece] = []

        # Black men on rows 8, 7, 6
        for row in reversed(BLACK_ROWS):
            for column in range(1, self.SIZE + 1):
                if is_playable(row, column):
                    pieces.append(Man(Color.BLACK, Coordinate(row, column)))

        # Red men on rows 3, 2, 1
        for row in reversed(RED_ROWS):
            for column in range(1, self.SIZE + 1):
                if is_playable(row, column):
                    pieces.append(Man(Color.RED, Coordinate(row, column)))

        self.pieces = pieces
        self.multiplayer = multiplayer
        logger.debug("Board initialised with %d pieces (multiplayer=%s)",
                     len(self.pieces), multiplayer)

    def clone(self) -> "Board":
        """Create a copy of this board. Pieces are immutable and shared."""
        new_board = Board(self.multiplayer)
        new_board.pieces = list(self.pieces)
        return new_board

    @staticmethod
    def squares_between(start: Coordinate, end: Coordinate) -> List[Coordinate]:
        """Squares strictly between two points on a shared diagonal."""
        return squares_between(start, end)

    def get_piece(self, pos: Coordinate) -> Optional[Piece]:
        """Get the piece at a position, or None if empty."""
        for piece in self.pieces:
            if piece.position == pos:
                return piece
        return None

    def is_empty(self, pos: Coordinate) -> bool:
        """Check if a position is empty."""
        return self.get_piece(pos) is None

    def get_pieces(self, color: Optional[Color] = None) -> Iterator[Piece]:
        """Iterate over all pieces, optionally filtered by color."""
        for piece in self.pieces:
            if color is None or piece.color == color:
                yield piece

    def count_pieces(self, color: Color) -> Tuple[int, int]:
        """Count (men, kings) for a color."""
        men = 0
        kings = 0
        for piece in self.get_pieces(color):
            if piece.is_king:
                kings += 1
            else:
                men += 1
        return men, kings

    def has_pieces(self, color: Color) -> bool:
        """Check if a color has any pieces on the board."""
        return any(p.color == color for p in self.pieces)

    def place_piece(self, piece: Piece) -> None:
        """Put a piece on its square."""
        if not piece.position.in_bounds:
            raise ValueError(f"Cannot place piece off the board at {piece.position.name}")
        if not self.is_empty(piece.position):
            raise ValueError(f"Square {piece.position.name} is already occupied")
        self.pieces.append(piece)

    def remove_piece(self, pos: Coordinate) -> Optional[Piece]:
        """Remove and return the piece at a position."""
        piece = self.get_piece(pos)
        if piece is not None:
            self.pieces.remove(piece)
        return piece

    def move_piece(self, start: Coordinate, end: Coordinate,
                   config: Optional[Config] = None) -> Move:
        """
        Move the piece on ``start`` to ``end``.

        The move is checked with the piece's own predicates. Opposing pieces
        jumped over are removed and a man reaching the far rank is replaced
        by a king. A single move is applied; jumps are not chained.

        Raises:
            ValueError: If ``start`` is empty or ``end`` is not a legal
                destination for the piece.
        """
        piece = self.get_piece(start)
        if piece is None:
            raise ValueError(f"No piece at {start.name}")

        move = build_move(self, piece, end, config)
        if move is None:
            raise ValueError(
                f"Illegal move for {piece.color.value} "
                f"{'king' if piece.is_king else 'man'}: {start.name} -> {end.name}"
            )

        for square in move.captures:
            self.remove_piece(square)

        self.remove_piece(start)
        moved = piece.moved_to(end)
        if move.promotion and isinstance(moved, Man):
            moved = moved.promote()
        self.pieces.append(moved)

        logger.debug("Applied %r", move)
        return move

    def __str__(self) -> str:
        """Plain text representation of the board."""
        return render_board(self, use_color=False)

    def __repr__(self) -> str:
        return f"Board({len(self.pieces)} pieces)"
