"""
AI players for TicTacToe.
Two strategies pick the computer's move: a fixed-priority heuristic
and a full Minimax search.
"""

import random
from typing import Optional, List, Union

from .board import Board, CENTER, CORNERS, EDGES, EMPTY, WINNING_LINES
from .config import GameConfig
from .win_checker import WinChecker


class MoveSelector:
    """
    Base class for computer move selection.

    Subclasses return the index (0-8) of the move to play, or None
    when the board has no empty cell left. The board passed in is
    never modified.
    """

    name = "base"

    def choose_move(
        self,
        board: Board,
        computer_marker: str,
        opponent_marker: str
    ) -> Optional[int]:
        raise NotImplementedError


class HeuristicAI(MoveSelector):
    """
    A rule-based AI. Not perfect, but quick and hard to beat by accident.

    Rules, first match wins:
    1. Complete our own line
    2. Block the opponent's line
    3. Take the center
    4. Take a random empty corner
    5. Take a random empty edge
    """

    name = "heuristic"

    def __init__(self, rng: Union[random.Random, int, None] = None):
        """
        Initialize the heuristic AI.

        Args:
            rng: Random source for corner/edge picks, or a seed for one.
        """
        if rng is None or isinstance(rng, int):
            rng = random.Random(rng)
        self.rng = rng

    def choose_move(
        self,
        board: Board,
        computer_marker: str,
        opponent_marker: str
    ) -> Optional[int]:
        move = self.find_line_completion(board, computer_marker)
        if move is not None:
            return move

        move = self.find_line_completion(board, opponent_marker)
        if move is not None:
            return move

        if board.get_cell(CENTER) == EMPTY:
            return CENTER

        corners = [index for index in CORNERS if board.get_cell(index) == EMPTY]
        if corners:
            return self.rng.choice(corners)

        edges = [index for index in EDGES if board.get_cell(index) == EMPTY]
        if edges:
            return self.rng.choice(edges)

        return None

    @staticmethod
    def find_line_completion(board: Board, marker: str) -> Optional[int]:
        """
        Find a line where the marker holds 2 cells and the third is empty.

        Args:
            board: The game board.
            marker: The marker to look for.

        Returns:
            The empty index that completes the line, or None.
        """
        for line in WINNING_LINES:
            cells = [board.get_cell(index) for index in line]
            if cells.count(marker) == 2 and cells.count(EMPTY) == 1:
                return line[cells.index(EMPTY)]
        return None


class MinimaxAI(MoveSelector):
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    name = "minimax"

    def __init__(self, config: Optional[GameConfig] = None, verbose: bool = False):
        """
        Initialize the Minimax AI.

        Args:
            config: Game configuration (scores).
            verbose: Print a summary after every search.
        """
        self.config = config or GameConfig()
        self.verbose = verbose
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def choose_move(
        self,
        board: Board,
        computer_marker: str,
        opponent_marker: str
    ) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            board: Current board.
            computer_marker: The marker the AI plays.
            opponent_marker: The marker the opponent plays.

        Returns:
            Index of the best move, or None if no moves available.
        """
        self.positions_evaluated = 0

        valid_moves = board.empty_cells()
        if not valid_moves:
            return None

        best_score = float('-inf')
        best_move = None

        for index in valid_moves:
            # Try this move on a copy, the caller's board stays untouched
            new_board = board.copy()
            new_board.set_cell(index, computer_marker)
            score = self._minimax(
                new_board, 0, False, computer_marker, opponent_marker
            )

            # Strictly greater: the first best move found is kept
            if score > best_score:
                best_score = score
                best_move = index

        if self.verbose:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        computer_marker: str,
        opponent_marker: str
    ) -> int:
        """
        Score a position by searching every continuation.

        Args:
            board: Position to evaluate.
            depth: Plies played since the root move.
            is_maximizing: True if it's the computer's turn.
            computer_marker: The marker the AI plays.
            opponent_marker: The marker the opponent plays.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        # Check terminal states
        if self.win_checker.has_won(board, computer_marker):
            return self.config.WIN_SCORE - depth  # Prefer faster wins
        if self.win_checker.has_won(board, opponent_marker):
            return -self.config.WIN_SCORE + depth  # Prefer slower losses
        if board.is_full():
            return self.config.DRAW_SCORE

        marker = computer_marker if is_maximizing else opponent_marker
        scores: List[int] = []

        for index in board.empty_cells():
            new_board = board.copy()
            new_board.set_cell(index, marker)
            scores.append(self._minimax(
                new_board, depth + 1, not is_maximizing, computer_marker, opponent_marker
            ))

        return max(scores) if is_maximizing else min(scores)


STRATEGIES = {
    HeuristicAI.name: HeuristicAI,
    MinimaxAI.name: MinimaxAI,
}


def create_ai(strategy: str, rng: Union[random.Random, int, None] = None) -> MoveSelector:
    """
    Build a move selector by name.

    Args:
        strategy: "heuristic" or "minimax".
        rng: Random source (or seed) for the heuristic AI.

    Returns:
        A MoveSelector.
    """
    if strategy == HeuristicAI.name:
        return HeuristicAI(rng)
    if strategy == MinimaxAI.name:
        return MinimaxAI()
    raise ValueError(
        f"Unknown strategy {strategy!r}. Choose from: {', '.join(sorted(STRATEGIES))}"
    )
