"""Pieces and their movement rules."""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from .types import Color, Coordinate
from .rules import FORWARD, MAN_STEP, MAN_JUMP, PROMOTION_ROWS, squares_between
from .config import Config, get_config

if TYPE_CHECKING:
    from .board import Board


class GameRules:
    """
    Rules contract implemented by every piece kind.

    All predicates are total: an illegal destination yields False, never an
    exception.
    """

    def is_valid_move(self, to: Coordinate, capturing: bool = False) -> bool:
        """Check bounds and the piece's movement geometry for ``to``."""
        raise NotImplementedError

    def is_valid_capture(self, board: "Board", to: Coordinate,
                         config: Optional[Config] = None) -> bool:
        """Check that a jump to ``to`` is legal on ``board``."""
        raise NotImplementedError

    def is_promotable(self, to: Coordinate) -> bool:
        """Check if landing on ``to`` promotes this piece."""
        raise NotImplementedError


@dataclass(frozen=True)
class Piece(GameRules):
    """A piece placed on the board."""
    color: Color
    position: Coordinate

    @property
    def is_king(self) -> bool:
        """Check if this piece is a king."""
        return False

    @property
    def symbol(self) -> str:
        """Single-letter glyph used by the renderer."""
        return "K" if self.is_king else "P"

    def moved_to(self, to: Coordinate) -> "Piece":
        """Return a copy of this piece standing on ``to``."""
        return replace(self, position=to)

    def _deltas(self, to: Coordinate):
        return to.row - self.position.row, to.column - self.position.column

    def _is_diagonal(self, to: Coordinate) -> bool:
        d_row, d_column = self._deltas(to)
        return abs(d_row) == abs(d_column)


@dataclass(frozen=True)
class Man(Piece):
    """
    Non-promoted piece.

    A man steps one square diagonally forward, or jumps exactly two squares
    diagonally forward when capturing. Red moves toward row 8, black toward
    row 1.
    """

    def is_valid_move(self, to: Coordinate, capturing: bool = False) -> bool:
        if not to.in_bounds:
            return False

        if not self._is_diagonal(to):
            return False

        d_row, _ = self._deltas(to)

        # Backward moves
        if d_row * FORWARD[self.color] < 0:
            return False

        if capturing:
            return abs(d_row) == MAN_JUMP
        return abs(d_row) == MAN_STEP

    def is_valid_capture(self, board: "Board", to: Coordinate,
                         config: Optional[Config] = None) -> bool:
        """
        Check a two-square jump to ``to``.

        By default only the jumped (midpoint) square is inspected and it must
        be empty; the landing square and the colour of any jumped piece are
        not checked. With ``strict_capture`` enabled the landing square must
        be empty and the midpoint must hold an opposing piece.
        """
        if not self.is_valid_move(to, capturing=True):
            return False

        d_row, d_column = self._deltas(to)
        midpoint = self.position.offset(d_row // 2, d_column // 2)
        jumped = board.get_piece(midpoint)

        if config is None:
            config = get_config()

        if config.game.rules.strict_capture:
            return (
                board.get_piece(to) is None
                and jumped is not None
                and jumped.color != self.color
            )

        return jumped is None

    def is_promotable(self, to: Coordinate) -> bool:
        return to.row in PROMOTION_ROWS

    def promote(self) -> "King":
        """Return the king this man becomes."""
        return King(self.color, self.position)


@dataclass(frozen=True)
class King(Piece):
    """Promoted piece: any distance along a diagonal, in any direction."""

    @property
    def is_king(self) -> bool:
        return True

    def is_valid_move(self, to: Coordinate, capturing: bool = False) -> bool:
        return to.in_bounds and self._is_diagonal(to)

    def is_valid_capture(self, board: "Board", to: Coordinate,
                         config: Optional[Config] = None) -> bool:
        """
        Check a flying capture to ``to``.

        The landing square must be empty. By default every square strictly
        between the king and ``to`` must be empty too; with
        ``strict_capture`` enabled exactly one of them must be occupied, by
        an opposing piece.
        """
        if not self.is_valid_move(to, capturing=True):
            return False

        if board.get_piece(to) is not None:
            return False

        occupants = []
        for square in squares_between(self.position, to):
            piece = board.get_piece(square)
            if piece is not None:
                occupants.append(piece)

        if config is None:
            config = get_config()

        if config.game.rules.strict_capture:
            return len(occupants) == 1 and occupants[0].color != self.color

        return not occupants

    def is_promotable(self, to: Coordinate) -> bool:
        return False
