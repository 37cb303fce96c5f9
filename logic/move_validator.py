"""
Move parsing and validation for console TicTacToe.
Turns typed text into moves and checks that they follow the rules.
"""

from typing import List

from .config import GameConfig
from .game_state import Board, Move, get_empty_cells


class MoveError(ValueError):
    """Base class for rejected moves. The message is shown to the player."""

    default_message = "Invalid move"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class InvalidFormatError(MoveError):
    """The move text is not in the "x y" format."""

    default_message = 'Invalid input: the move must be in the format "x y"'


class OutOfBoundsError(MoveError):
    """The move is outside the board."""

    default_message = "Invalid move: the coordinates are outside the game board"


class CellTakenError(MoveError):
    """The target cell already has a mark."""

    default_message = "Invalid move: that spot is already taken"


def _parse_coordinate(text: str) -> int:
    """Parse one half of the move text."""
    if not (text.isascii() and text.isdigit()):
        raise InvalidFormatError()
    return int(text)


def parse_move(text) -> Move:
    """
    Convert move text like "2 3" into a zero-based Move.

    The first number is the column and the second the row, both
    starting at 1 on screen. So "2 3" becomes Move(x=1, y=2).

    Raises:
        InvalidFormatError: If the text is not exactly "<digit> <digit>".
    """
    if not isinstance(text, str) or len(text) != 3:
        raise InvalidFormatError()

    parts = text.split(" ")
    if len(parts) != 2:
        raise InvalidFormatError()

    col = _parse_coordinate(parts[0])
    row = _parse_coordinate(parts[1])

    return Move(x=col - 1, y=row - 1)


def validate_move(move: Move, board: Board) -> Move:
    """
    Check a move against the board. The board is not changed.

    Rules:
    1. Both coordinates must be on the board (0-2)
    2. The target cell must be empty

    Returns:
        The same move if it is valid.

    Raises:
        OutOfBoundsError: If either coordinate is off the board.
        CellTakenError: If the cell is already taken.
    """
    last = GameConfig.BOARD_SIZE - 1

    if not (0 <= move.x <= last and 0 <= move.y <= last):
        raise OutOfBoundsError()

    if board[move.y][move.x] != GameConfig.EMPTY:
        raise CellTakenError()

    return move


def get_valid_moves(board: Board) -> List[Move]:
    """Get every move that can still be played, row by row."""
    return [Move(x=col, y=row) for row, col in get_empty_cells(board)]
