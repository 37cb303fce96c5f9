"""
Tests for win and draw detection in logic.win_checker.
"""

from logic.game_state import Player, new_board
from logic.win_checker import WinChecker, get_winner


def test_row_win():
    board = [
        ["X", "X", "X"],
        [" ", " ", " "],
        [" ", " ", " "],
    ]
    assert get_winner(board) == "X"
    assert get_winner(board) == Player.X


def test_column_win():
    board = [
        ["X", "O", " "],
        ["X", "O", " "],
        [" ", "O", "X"],
    ]
    assert get_winner(board) == "O"


def test_anti_diagonal_win():
    board = [
        [" ", " ", "O"],
        [" ", "O", " "],
        ["O", " ", " "],
    ]
    assert get_winner(board) == "O"


def test_no_winner_on_empty_board():
    assert get_winner(new_board()) is None


def test_no_winner_on_full_board():
    board = [
        ["X", "O", "X"],
        ["X", "O", "O"],
        ["O", "X", "X"],
    ]
    assert get_winner(board) is None


def test_winning_line():
    checker = WinChecker()
    board = [
        ["X", "O", " "],
        ["O", "X", " "],
        [" ", " ", "X"],
    ]
    assert checker.get_winning_line(board) == [(0, 0), (1, 1), (2, 2)]
    assert checker.get_winning_line(new_board()) is None


def test_check_draw():
    checker = WinChecker()
    full = [
        ["X", "O", "X"],
        ["X", "O", "O"],
        ["O", "X", "X"],
    ]
    won = [
        ["X", "X", "X"],
        ["O", "O", "X"],
        ["X", "O", "O"],
    ]
    assert checker.check_draw(full)
    assert not checker.check_draw(won)
    assert not checker.check_draw(new_board())


def test_winning_line_matches_reported_winner():
    checker = WinChecker()
    # Both players have a line; X is reported first
    board = [
        ["O", "O", "O"],
        [" ", " ", " "],
        ["X", "X", "X"],
    ]
    assert checker.check_winner(board) == Player.X
    assert checker.get_winning_line(board) == [(2, 0), (2, 1), (2, 2)]
