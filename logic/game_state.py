"""
Board state for console TicTacToe.
Players, moves, and the helpers that read and change the board.
"""

from enum import Enum
from typing import List, Tuple
from dataclasses import dataclass

from .config import GameConfig


class Player(str, Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


@dataclass(frozen=True)
class Move:
    """
    A move on the board, zero-based.
    """
    x: int                  # Column (0-2)
    y: int                  # Row (0-2)


# A board is a list of rows; each cell is " ", "X" or "O"
Board = List[List[str]]


def new_board() -> Board:
    """Create an empty 3x3 board."""
    size = GameConfig.BOARD_SIZE
    return [[GameConfig.EMPTY for _ in range(size)] for _ in range(size)]


def make_move(player: str, move: Move, board: Board) -> Board:
    """
    Place the player's mark on the board.

    Args:
        player: "X" or "O".
        move: Where to place the mark.
        board: The board to change (changed in place).

    Returns:
        The same board, for convenience.

    Raises:
        ValueError: If player is not X or O.
    """
    mark = Player(player)
    board[move.y][move.x] = mark.value
    return board


def get_next_player(current: str) -> Player:
    """Return the player who goes after the current one."""
    return Player(current).opposite()


def get_empty_cells(board: Board) -> List[Tuple[int, int]]:
    """
    Get all empty cells on the board.
    Works for any board shape, including ragged rows.

    Returns:
        List of (row, col) tuples.
    """
    empty = []
    for row, cells in enumerate(board):
        for col, cell in enumerate(cells):
            if cell == GameConfig.EMPTY:
                empty.append((row, col))
    return empty


def get_empty_space_count(board: Board) -> int:
    """Count the empty cells, whatever the board's size."""
    return len(get_empty_cells(board))


def copy_board(board: Board) -> Board:
    """Copy the board so it can be changed without touching the original."""
    return [list(row) for row in board]


def get_game_board_string(board: Board) -> str:
    """
    Render a 3x3 board as text.

    For a board with an X in the top middle:

             1   2   3
          ~~~~~~~~~~~~~
        1 |   | X |   |
          ~~~~~~~~~~~~~
        2 |   |   |   |
          ~~~~~~~~~~~~~
        3 |   |   |   |
          ~~~~~~~~~~~~~
    """
    separator = "  ~~~~~~~~~~~~~\n"
    lines = ["     1   2   3 \n", separator]

    for row in range(3):
        cells = " | ".join(board[row][col] for col in range(3))
        lines.append(f"{row + 1} | {cells} |\n")
        lines.append(separator)

    return "".join(lines)


# Quick test
if __name__ == "__main__":
    print("Testing game state...")

    board = new_board()

    moves = [
        ("X", Move(1, 1)),  # Center
        ("O", Move(0, 0)),  # Top-left
        ("X", Move(2, 0)),  # Top-right
    ]

    for player, move in moves:
        print(f"\n{player} moves to ({move.x}, {move.y})")
        make_move(player, move, board)
        print(get_game_board_string(board))

    print(f"Empty spaces: {get_empty_space_count(board)}")
    print("\nGame state test done!")
