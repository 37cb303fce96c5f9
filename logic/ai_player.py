"""
AI player for console TicTacToe.
Chooses the computer's move with one of three strategies:

- FIRST_EMPTY: the first empty cell, row by row
- HEURISTIC: the classic rule list (win, block, fork, block fork,
  center, opposite corner, empty corner, empty side)
  https://en.wikipedia.org/wiki/Tic-tac-toe#Strategy
- MINIMAX: full search with alpha-beta pruning
"""

from typing import Optional, Tuple, List

from .config import GameConfig, ComputerStrategy
from .game_state import Board, Move, Player, copy_board, get_empty_cells
from .win_checker import WinChecker


CENTER = (1, 1)
CORNERS = [(0, 0), (0, 2), (2, 0), (2, 2)]
SIDES = [(0, 1), (1, 0), (1, 2), (2, 1)]


class AIPlayer:
    """
    An AI that plays TicTacToe.

    The HEURISTIC and MINIMAX strategies never lose; FIRST_EMPTY
    just fills the board in order.
    """

    def __init__(
        self,
        player: str = Player.O,
        strategy: Optional[ComputerStrategy] = None,
        verbose: Optional[bool] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays ("X" or "O").
            strategy: How to choose moves (default: GameConfig.COMPUTER_STRATEGY).
            verbose: Print search statistics (default: GameConfig.VERBOSE).
        """
        self.player = Player(player)
        self.opponent = self.player.opposite()
        self.strategy = ComputerStrategy(strategy or GameConfig.COMPUTER_STRATEGY)
        self.verbose = GameConfig.VERBOSE if verbose is None else verbose
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, board: Board) -> Optional[Move]:
        """
        Get the move for the current position. The board is not changed.

        Args:
            board: Current board.

        Returns:
            The Move to play, or None if the board is full.
        """
        self.moves_evaluated = 0

        if self.strategy == ComputerStrategy.HEURISTIC:
            cell = self._heuristic_move(copy_board(board))
        elif self.strategy == ComputerStrategy.MINIMAX:
            cell = self._minimax_move(copy_board(board))
        else:
            cell = self._first_empty_move(board)

        if cell is None:
            return None

        row, col = cell
        move = Move(x=col, y=row)

        if self.verbose:
            print(f"AI ({self.strategy.value}) evaluated {self.moves_evaluated} positions. "
                  f"Best move: ({move.x}, {move.y})")

        return move

    # ==================== FIRST EMPTY ====================

    def _first_empty_move(self, board: Board) -> Optional[Tuple[int, int]]:
        """The first empty cell, scanning row by row."""
        empty = get_empty_cells(board)
        return empty[0] if empty else None

    # ==================== HEURISTIC ====================

    def _heuristic_move(self, board: Board) -> Optional[Tuple[int, int]]:
        """
        Pick the first rule that gives a move:
        win, block, fork, block fork, center, opposite corner,
        empty corner, empty side.
        """
        empty = get_empty_cells(board)
        if not empty:
            return None

        # 1. Win
        wins = self._winning_cells(board, self.player)
        if wins:
            return wins[0]

        # 2. Block
        blocks = self._winning_cells(board, self.opponent)
        if blocks:
            return blocks[0]

        # 3. Fork
        forks = self._fork_cells(board, self.player)
        if forks:
            return forks[0]

        # 4. Block the opponent's fork
        opponent_forks = self._fork_cells(board, self.opponent)
        if opponent_forks:
            return self._block_fork(board, opponent_forks)

        # 5. Center
        if CENTER in empty:
            return CENTER

        # 6. Opposite corner
        for row, col in CORNERS:
            opposite = (2 - row, 2 - col)
            if board[row][col] == self.opponent.value and opposite in empty:
                return opposite

        # 7. Empty corner
        for cell in CORNERS:
            if cell in empty:
                return cell

        # 8. Empty side
        for cell in SIDES:
            if cell in empty:
                return cell

        return empty[0]

    def _winning_cells(self, board: Board, player: Player) -> List[Tuple[int, int]]:
        """
        Empty cells that would complete a line for the player.

        Returns:
            List of (row, col), row by row, no duplicates.
        """
        cells = []
        for row, col in get_empty_cells(board):
            self.moves_evaluated += 1
            board[row][col] = player.value
            if self.win_checker.check_winner(board) == player:
                cells.append((row, col))
            board[row][col] = GameConfig.EMPTY
        return cells

    def _fork_cells(self, board: Board, player: Player) -> List[Tuple[int, int]]:
        """Empty cells that give the player two winning threats at once."""
        cells = []
        for row, col in get_empty_cells(board):
            board[row][col] = player.value
            if len(self._winning_cells(board, player)) >= 2:
                cells.append((row, col))
            board[row][col] = GameConfig.EMPTY
        return cells

    def _block_fork(
        self,
        board: Board,
        opponent_forks: List[Tuple[int, int]]
    ) -> Tuple[int, int]:
        """
        Stop the opponent from forking.

        Option 1: make two in a row so the opponent has to block,
        as long as the block does not give them a fork.
        Option 2: take the opponent's fork cell.
        """
        for row, col in get_empty_cells(board):
            board[row][col] = self.player.value
            threats = self._winning_cells(board, self.player)
            forced_ok = False

            # Only a single threat forces the reply; two would be a fork
            if len(threats) == 1:
                reply_row, reply_col = threats[0]
                board[reply_row][reply_col] = self.opponent.value
                opponent_threats = self._winning_cells(board, self.opponent)
                forced_ok = len(opponent_threats) < 2
                board[reply_row][reply_col] = GameConfig.EMPTY

            board[row][col] = GameConfig.EMPTY

            if forced_ok:
                return (row, col)

        return opponent_forks[0]

    # ==================== MINIMAX ====================

    def _minimax_move(self, board: Board) -> Optional[Tuple[int, int]]:
        """Search every reply and keep the best-scoring move."""
        valid_moves = get_empty_cells(board)

        if not valid_moves:
            return None

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        best_score = float('-inf')
        best_move = valid_moves[0]

        for row, col in valid_moves:
            # Try this move
            board[row][col] = self.player.value

            score = self._minimax(board, depth=GameConfig.MINIMAX_DEPTH, is_maximizing=False)

            board[row][col] = GameConfig.EMPTY

            if score > best_score:
                best_score = score
                best_move = (row, col)

        return best_move

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to evaluate (restored before returning).
            depth: How deep to search.
            is_maximizing: True if it's the AI's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        # Check terminal states
        winner = self.win_checker.check_winner(board)

        if winner == self.player:
            return 10 + depth  # Win (prefer faster wins)
        elif winner == self.opponent:
            return -10 - depth  # Loss (prefer slower losses)

        valid_moves = get_empty_cells(board)

        if not valid_moves or depth == 0:
            return 0  # Draw or out of depth

        mark = self.player.value if is_maximizing else self.opponent.value

        if is_maximizing:
            max_score = float('-inf')
            for row, col in valid_moves:
                board[row][col] = mark
                score = self._minimax(board, depth - 1, False, alpha, beta)
                board[row][col] = GameConfig.EMPTY
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for row, col in valid_moves:
                board[row][col] = mark
                score = self._minimax(board, depth - 1, True, alpha, beta)
                board[row][col] = GameConfig.EMPTY
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score


def get_computer_player_move(
    player: str,
    board: Board,
    strategy: Optional[ComputerStrategy] = None
) -> Optional[Move]:
    """
    Get the computer's move for the given player.

    Args:
        player: "X" or "O".
        board: Current board (not changed).
        strategy: Override GameConfig.COMPUTER_STRATEGY.

    Returns:
        The Move, or None if the board is full.
    """
    return AIPlayer(player, strategy=strategy).get_best_move(board)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Player.O, strategy=ComputerStrategy.MINIMAX, verbose=True)

    # Test 1: AI should block a winning move
    board = [
        ["X", "X", " "],
        [" ", "O", " "],
        [" ", " ", " "],
    ]
    print("\nAI is O. X is about to win with (2, 0)!")
    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == Move(2, 0), f"Expected Move(2, 0), got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board2 = [
        ["O", "O", " "],
        [" ", "X", " "],
        ["X", " ", " "],
    ]
    print("\nAI is O. Can win with (2, 0)!")
    move = ai.get_best_move(board2)
    print(f"AI's move: {move}")
    assert move == Move(2, 0), f"Expected Move(2, 0), got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
