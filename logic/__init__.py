"""
Logic module for console TicTacToe.
Handles the board, rules, input checks, and the AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig, ComputerStrategy
from .game_state import (
    Player, Move, new_board, make_move, get_next_player,
    get_empty_cells, get_empty_space_count, get_game_board_string,
)
from .input_validator import (
    GameType, validate_game_type, validate_name, validate_yes_no,
    generate_computer_name,
)
from .move_validator import (
    MoveError, InvalidFormatError, OutOfBoundsError, CellTakenError,
    parse_move, validate_move, get_valid_moves,
)
from .win_checker import WinChecker, get_winner
from .ai_player import AIPlayer, get_computer_player_move
