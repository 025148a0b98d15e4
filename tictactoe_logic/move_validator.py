"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board, BOARD_CELLS, EMPTY


# Failure reasons reported back to the caller
GAME_NOT_STARTED = "game not started"
GAME_OVER = "game is over"
CELL_TAKEN = "cell already taken"
INVALID_CELL = "invalid cell"
NOT_COMPUTER_TURN = "not computer's turn"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The game must have started and must not be over
    2. The index must be on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        board: Board,
        index: int,
        started: bool = True,
        game_over: bool = False
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place a marker on (0-8).
            started: Whether the game has been initialized.
            game_over: Whether the game has already ended.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not started:
            return ValidationResult(is_valid=False, error_message=GAME_NOT_STARTED)

        if game_over:
            return ValidationResult(is_valid=False, error_message=GAME_OVER)

        cell = board.get_cell(index)
        if cell is None:
            return ValidationResult(is_valid=False, error_message=INVALID_CELL)

        if cell != EMPTY:
            return ValidationResult(is_valid=False, error_message=CELL_TAKEN)

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board, game_over: bool = False) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of cell indices, empty once the game is over.
        """
        if game_over:
            return []
        return [index for index in range(BOARD_CELLS) if board.get_cell(index) == EMPTY]
