"""Move enumeration and game evaluation predicates."""

from typing import TYPE_CHECKING, List, Optional

from .types import Color, Coordinate, Move
from .pieces import Piece
from .rules import ALL_DIRECTIONS, BOARD_SIZE, squares_between
from .config import Config, get_config

if TYPE_CHECKING:
    from .board import Board


def build_move(board: "Board", piece: Piece, to: Coordinate,
               config: Optional[Config] = None) -> Optional[Move]:
    """
    Classify a destination for ``piece``.

    Returns the Move if ``to`` is a legal simple move or a legal capture,
    otherwise None. The landing square must be empty in both cases.
    """
    if not to.in_bounds or board.get_piece(to) is not None:
        return None

    between = squares_between(piece.position, to)

    if piece.is_valid_move(to, capturing=False) and all(board.is_empty(sq) for sq in between):
        return Move(
            start=piece.position,
            end=to,
            captures=(),
            promotion=piece.is_promotable(to),
        )

    if config is None:
        config = get_config()

    if piece.is_valid_capture(board, to, config):
        captures = []
        for square in between:
            jumped = board.get_piece(square)
            if jumped is not None and jumped.color != piece.color:
                captures.append(square)
        return Move(
            start=piece.position,
            end=to,
            captures=tuple(captures),
            promotion=piece.is_promotable(to),
        )

    return None


def legal_moves(board: "Board", piece: Piece, config: Optional[Config] = None) -> List[Move]:
    """Generate every legal move for a single piece."""
    if config is None:
        config = get_config()

    moves = []
    for dr, dc in ALL_DIRECTIONS:
        for distance in range(1, BOARD_SIZE):
            to = piece.position.offset(distance * dr, distance * dc)
            if not to.in_bounds:
                break
            move = build_move(board, piece, to, config)
            if move is not None:
                moves.append(move)
    return moves


def generate_all_moves(board: "Board", color: Color,
                       config: Optional[Config] = None) -> List[Move]:
    """Generate all legal moves for a color."""
    if config is None:
        config = get_config()
    moves = []
    for piece in board.get_pieces(color):
        moves.extend(legal_moves(board, piece, config))
    return moves


# =============================================================================
# GAME EVALUATION
# =============================================================================

def all_captured(board: "Board", color: Color) -> bool:
    """Check if every piece of ``color`` has been removed from the board."""
    return not board.has_pieces(color)


def any_legal_moves(board: "Board", color: Color,
                    config: Optional[Config] = None) -> bool:
    """Check if at least one piece of ``color`` can move or capture."""
    if config is None:
        config = get_config()
    for piece in board.get_pieces(color):
        if legal_moves(board, piece, config):
            return True
    return False


def any_sufficient_material(board: "Board") -> bool:
    """
    Check that the position is not a draw by insufficient material.

    The only dead draw recognised is a lone king against a lone king. A board
    where one side has no pieces left is a decided game, not a draw.
    """
    red_men, red_kings = board.count_pieces(Color.RED)
    black_men, black_kings = board.count_pieces(Color.BLACK)

    lone_kings = (
        red_men == 0 and red_kings == 1
        and black_men == 0 and black_kings == 1
    )
    return not lone_kings
