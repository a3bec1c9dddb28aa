"""
Checkers Rules Engine
Board model and move, capture and promotion legality for 8x8 checkers.
"""

from .types import Color, Coordinate, Move
from .pieces import GameRules, Piece, Man, King
from .board import Board
from .evaluation import (
    all_captured,
    any_legal_moves,
    any_sufficient_material,
    build_move,
    generate_all_moves,
    legal_moves,
)
from .render import render_board
from .encoding import encode_board
from .config import Config, get_config

__version__ = "1.0.0"

__all__ = [
    "Color",
    "Coordinate",
    "Move",
    "GameRules",
    "Piece",
    "Man",
    "King",
    "Board",
    "all_captured",
    "any_legal_moves",
    "any_sufficient_material",
    "build_move",
    "generate_all_moves",
    "legal_moves",
    "render_board",
    "encode_board",
    "Config",
    "get_config",
]
