"""
Win checker for console TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

from .game_state import Board, Player, get_empty_space_count


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally).
    Only 3x3 boards are supported.
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        X is checked on every line before O is.

        Args:
            board: The game board.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in Player:
            for line in self.WINNING_LINES:
                if self._line_belongs_to(board, line, player):
                    return player

        return None

    def _line_belongs_to(
        self,
        board: Board,
        line: List[Tuple[int, int]],
        player: Player
    ) -> bool:
        """True if every cell of the line holds the player's mark."""
        return all(board[row][col] == player.value for row, col in line)

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Uses the same X-before-O order as check_winner, so the line
        always belongs to the reported winner.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for player in Player:
            for line in self.WINNING_LINES:
                if self._line_belongs_to(board, line, player):
                    return line
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw: the board is full and nobody won.
        """
        if self.check_winner(board) is not None:
            return False

        return get_empty_space_count(board) == 0


def get_winner(board: Board) -> Optional[Player]:
    """Return "X" or "O" if that player has three in a row, else None."""
    return WinChecker().check_winner(board)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    board1 = [
        ["X", "X", "X"],
        [" ", "O", " "],
        ["O", " ", " "],
    ]
    winner = checker.check_winner(board1)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == Player.X

    # Test 2: Anti-diagonal win
    board2 = [
        ["X", "X", "O"],
        [" ", "O", " "],
        ["O", " ", "X"],
    ]
    winner = checker.check_winner(board2)
    print(f"Test 2 (diagonal): winner = {winner}")
    assert winner == Player.O

    # Test 3: Draw (full board, no winner)
    board3 = [
        ["X", "O", "X"],
        ["X", "O", "O"],
        ["O", "X", "X"],
    ]
    is_draw = checker.check_draw(board3)
    print(f"Test 3 (draw): is_draw = {is_draw}")
    assert is_draw

    print("\nWinChecker test done!")
