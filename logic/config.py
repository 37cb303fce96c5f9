"""
Game configuration for console TicTacToe.
All the settings for the board, the computer player and its name.
"""

from enum import Enum


class ComputerStrategy(Enum):
    """How the computer player picks its move."""
    FIRST_EMPTY = "first_empty"   # First empty cell, row by row
    HEURISTIC = "heuristic"       # Win > block > fork > ... > empty side
    MINIMAX = "minimax"           # Full search with alpha-beta pruning


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak how the game plays.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # What an empty cell looks like on the board
    EMPTY = " "

    # ==================== COMPUTER PLAYER ====================
    # Default strategy used when none is given
    COMPUTER_STRATEGY = ComputerStrategy.FIRST_EMPTY

    # Minimax search depth (9 covers a whole game)
    MINIMAX_DEPTH = 9

    # Print how many positions the AI looked at
    VERBOSE = False

    # ==================== COMPUTER NAME ====================
    # Computer names are random characters with code points 0..50
    COMPUTER_NAME_LENGTH = 5
    COMPUTER_NAME_MAX_CODE_POINT = 50
