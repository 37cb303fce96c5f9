"""
Tests for move parsing and validation in logic.move_validator.
"""

import pytest

from logic.game_state import Move, new_board
from logic.move_validator import (
    MoveError, InvalidFormatError, OutOfBoundsError, CellTakenError,
    parse_move, validate_move, get_valid_moves,
)


def test_parse_move_is_zero_based():
    assert parse_move("2 3") == Move(x=1, y=2)
    assert parse_move("1 1") == Move(x=0, y=0)
    assert parse_move("3 1") == Move(x=2, y=0)


def test_parse_move_does_not_check_range():
    assert parse_move("0 4") == Move(x=-1, y=3)


@pytest.mark.parametrize("text", ["a b", "10 2", "", "1  ", " 12", "1,2", "12", "1 a", "- 1", None, 12, ["1", "2"]])
def test_parse_move_invalid_format(text):
    with pytest.raises(InvalidFormatError):
        parse_move(text)


def test_parse_move_error_message():
    with pytest.raises(MoveError) as excinfo:
        parse_move("a b")
    assert str(excinfo.value) == 'Invalid input: the move must be in the format "x y"'


def test_move_errors_are_value_errors():
    assert issubclass(MoveError, ValueError)
    for error in (InvalidFormatError, OutOfBoundsError, CellTakenError):
        assert issubclass(error, MoveError)


def test_validate_move_returns_move_for_empty_cells():
    board = new_board()
    for y in range(3):
        for x in range(3):
            move = Move(x, y)
            assert validate_move(move, board) is move


@pytest.mark.parametrize("move", [Move(-1, 0), Move(0, -1), Move(3, 0), Move(0, 3), Move(3, 3), Move(-1, -1)])
def test_validate_move_out_of_bounds(move):
    with pytest.raises(OutOfBoundsError) as excinfo:
        validate_move(move, new_board())
    assert str(excinfo.value) == "Invalid move: the coordinates are outside the game board"


def test_validate_move_cell_taken():
    board = [
        [" ", "X", " "],
        [" ", " ", " "],
        [" ", " ", "O"],
    ]
    with pytest.raises(CellTakenError) as excinfo:
        validate_move(Move(x=1, y=0), board)
    assert str(excinfo.value) == "Invalid move: that spot is already taken"

    with pytest.raises(CellTakenError):
        validate_move(Move(x=2, y=2), board)


def test_validate_move_does_not_change_board():
    board = new_board()
    validate_move(Move(1, 1), board)
    assert board == new_board()


def test_get_valid_moves():
    board = [
        ["X", "O", "X"],
        [" ", "O", " "],
        ["O", "X", "X"],
    ]
    assert get_valid_moves(board) == [Move(x=0, y=1), Move(x=2, y=1)]
