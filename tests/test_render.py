"""
Tests for the terminal renderer, board encoding and the CLI.
"""

import numpy as np

from checkers.__main__ import main
from checkers.board import Board
from checkers.encoding import BOARD_PLANES, encode_board
from checkers.pieces import King, Man
from checkers.config import get_config_file
from checkers.render import BLACK, RED, RESET, render_board
from checkers.types import Color, Coordinate


class TestRender:
    """Tests for render_board."""

    def test_initial_board_plain(self, initial_board):
        lines = render_board(initial_board, use_color=False).splitlines()

        assert lines[0] == "    Checker Board"
        assert lines[1] == " +-----------------+"
        assert lines[2] == "8| * P * P * P * P |"
        assert lines[3] == "7| P * P * P * P * |"
        assert lines[5] == "5| * * * * * * * * |"
        assert lines[9] == "1| P * P * P * P * |"
        assert lines[10] == " +-----------------+"
        assert lines[11] == "   A B C D E F G H"

    def test_king_glyph(self, empty_board):
        empty_board.place_piece(King(Color.RED, Coordinate(4, 4)))

        lines = render_board(empty_board, use_color=False).splitlines()

        assert lines[6] == "4| * * * K * * * * |"

    def test_colors(self, empty_board):
        empty_board.place_piece(Man(Color.RED, Coordinate(1, 1)))

        text = render_board(empty_board)

        assert f"{RED}P{RESET}" in text
        assert "\033[30m*" in text

    def test_colors_for_both_sides_and_kings(self, empty_board):
        empty_board.place_piece(Man(Color.BLACK, Coordinate(6, 2)))
        empty_board.place_piece(King(Color.RED, Coordinate(4, 4)))
        empty_board.place_piece(King(Color.BLACK, Coordinate(5, 5)))

        lines = render_board(empty_board).splitlines()

        assert f"{BLACK}P{RESET}" in lines[4]
        assert f"{RED}K{RESET}" in lines[6]
        assert f"{BLACK}K{RESET}" in lines[5]
        assert f"{RED}P" not in "".join(lines)

    def test_str_is_plain_render(self, initial_board):
        assert str(initial_board) == render_board(initial_board, use_color=False)

    def test_render_does_not_mutate(self, initial_board):
        before = list(initial_board.pieces)

        render_board(initial_board)

        assert initial_board.pieces == before


class TestEncoding:
    """Tests for encode_board."""

    def test_shape_and_dtype(self, initial_board):
        encoded = encode_board(initial_board)

        assert encoded.shape == (BOARD_PLANES, 8, 8)
        assert encoded.dtype == np.float32

    def test_initial_planes(self, initial_board):
        encoded = encode_board(initial_board)

        assert encoded[0].sum() == 12
        assert encoded[1].sum() == 0
        assert encoded[2].sum() == 12
        assert encoded[3].sum() == 0
        assert encoded[0, 0, 0] == 1.0   # red man on (1, 1)
        assert encoded[2, 7, 1] == 1.0   # black man on (8, 2)

    def test_perspective_swaps_planes(self, initial_board):
        red = encode_board(initial_board, Color.RED)
        black = encode_board(initial_board, Color.BLACK)

        assert np.array_equal(red[0], black[2])
        assert np.array_equal(red[2], black[0])

    def test_king_plane(self, empty_board):
        empty_board.place_piece(King(Color.BLACK, Coordinate(5, 3)))

        encoded = encode_board(empty_board, Color.RED)

        assert encoded[3, 4, 2] == 1.0
        assert encoded.sum() == 1.0


class TestCli:
    """Tests for the command line entry point."""

    def test_prints_initial_board(self, capsys):
        assert main(["--no-color"]) == 0

        out = capsys.readouterr().out
        assert "Checkers Debugger" in out
        assert render_board(Board.initial(), use_color=False) in out

    def test_applies_moves(self, capsys):
        assert main(["--no-color", "--move", "C3", "D4", "--move", "f6", "e5"]) == 0

        out = capsys.readouterr().out
        assert "4| * * * P * * * * |" in out
        assert "3| P * * * P * P * |" in out
        assert "5| * * * * P * * * |" in out

    def test_illegal_move_fails(self, capsys):
        assert main(["--move", "C3", "B2"]) == 1
        assert "Checker Board" not in capsys.readouterr().out

    def test_bad_square_name_fails(self):
        assert main(["--move", "Z9", "A1"]) == 1

    def test_bad_settings_warning_uses_log_format(self, capsys):
        path = get_config_file()
        path.parent.mkdir(parents=True)
        path.write_text("game: [1, 2\n")

        assert main(["--no-color"]) == 0

        out = capsys.readouterr().out
        assert "| WARNING | Failed to load config" in out
        assert "Checker Board" in out
