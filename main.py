"""
Console TicTacToe.

This script ties the logic package to the terminal:
- Asks for the game type and the players' names
- Reads moves as "column row" (e.g. "2 3")
- Lets the computer play O in one-player games

Run this script to play TicTacToe in your terminal!
"""

import random
from typing import Optional

from logic.config import GameConfig, ComputerStrategy
from logic.game_state import (
    Player, new_board, make_move, get_next_player,
    get_empty_space_count, get_game_board_string,
)
from logic.input_validator import (
    GameType, validate_game_type, validate_name, validate_yes_no,
    generate_computer_name,
)
from logic.move_validator import MoveError, parse_move, validate_move
from logic.win_checker import get_winner
from logic.ai_player import AIPlayer


class TicTacToeGame:
    """
    Main controller for a console game.

    Game flow:
    1. Choose one or two players and enter names
    2. X moves first; players take turns typing "column row"
    3. In one-player mode the computer plays O
    4. Repeat until someone wins or the board is full
    5. Ask whether to play again
    """

    def __init__(
        self,
        strategy: Optional[ComputerStrategy] = None,
        rng=None,
        verbose: Optional[bool] = None,
        input_fn=input,
        output_fn=print
    ):
        """
        Initialize the game.

        Args:
            strategy: Computer strategy (default: GameConfig.COMPUTER_STRATEGY).
            rng: Random source for the computer's name.
            verbose: Print AI search statistics (default: GameConfig.VERBOSE).
            input_fn: Reads a line of input given a prompt.
            output_fn: Prints a line of output.
        """
        self.strategy = strategy or GameConfig.COMPUTER_STRATEGY
        self.rng = rng
        self.verbose = verbose
        self.input = input_fn
        self.output = output_fn

        self.names = {}
        self.computer: Optional[AIPlayer] = None

    def start(self):
        """Play games until the players stop."""
        self.output("\n" + "="*40)
        self.output("   Welcome to TicTacToe!")
        self.output("="*40 + "\n")

        game_type = self._ask_game_type()
        self._ask_names(game_type)

        while True:
            self.play_round()
            if not self._ask_play_again():
                break

        self.output("Thanks for playing!")

    def _ask(self, prompt: str, validator):
        """Keep asking until the validator accepts the answer."""
        while True:
            result = validator(self.input(prompt))
            if result is not None:
                return result
            self.output("Sorry, that is not a valid answer. Please try again.")

    def _ask_game_type(self) -> GameType:
        return self._ask("One or two players? ", validate_game_type)

    def _ask_names(self, game_type: GameType):
        """Set up the player names (and the computer in one-player mode)."""
        self.names[Player.X] = self._ask("Player X, what is your name? ", validate_name)

        if game_type == GameType.TWO_PLAYER:
            self.names[Player.O] = self._ask("Player O, what is your name? ", validate_name)
            self.computer = None
        else:
            self.names[Player.O] = generate_computer_name(self.rng)
            self.computer = AIPlayer(Player.O, strategy=self.strategy, verbose=self.verbose)
            self.output(f"You are playing against the computer ({self.names[Player.O]}).")

    def _ask_play_again(self) -> bool:
        return self._ask("Play again? (y/n) ", validate_yes_no)

    def play_round(self) -> Optional[Player]:
        """
        Play one game on a fresh board.

        Returns:
            The winning Player, or None for a draw.
        """
        board = new_board()
        player = Player.X

        while True:
            self.output(get_game_board_string(board))

            if self.computer is not None and player == self.computer.player:
                move = self.computer.get_best_move(board)
                self.output(f"{self.names[player]} ({player.value}) plays {move.x + 1} {move.y + 1}")
            else:
                move = self._ask_move(player, board)

            make_move(player, move, board)

            winner = get_winner(board)
            if winner is not None or get_empty_space_count(board) == 0:
                self._show_game_result(board, winner)
                return winner

            player = get_next_player(player)

    def _ask_move(self, player: Player, board):
        """Ask a human for a move until it is valid."""
        prompt = f"{self.names[player]} ({player.value}), enter your move as \"column row\": "
        while True:
            try:
                return validate_move(parse_move(self.input(prompt)), board)
            except MoveError as e:
                self.output(str(e))

    def _show_game_result(self, board, winner: Optional[Player]):
        """Show the final board and result."""
        self.output(get_game_board_string(board))
        self.output("="*40)

        if winner is not None:
            self.output(f"{self.names[winner]} ({winner.value}) wins!")
        else:
            self.output("It's a draw!")

        self.output("="*40)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in ComputerStrategy],
        default=GameConfig.COMPUTER_STRATEGY.value,
        help="How the computer chooses its moves"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random name"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print AI search statistics"
    )

    args = parser.parse_args()

    rng = random.Random(args.seed) if args.seed is not None else None

    game = TicTacToeGame(
        strategy=ComputerStrategy(args.strategy),
        rng=rng,
        verbose=args.verbose or None
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
