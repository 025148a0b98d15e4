"""
Win checker for TicTacToe.
Checks if a marker has won or if the game is a draw.
"""

from typing import Optional, Tuple

from .board import Board, WINNING_LINES, EMPTY


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same marker in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def has_won(self, board: Board, marker: str) -> bool:
        """
        Check if a marker fills any winning line.

        Args:
            board: The game board.
            marker: The marker to check.

        Returns:
            True if the marker has three in a row.
        """
        return self.winning_line(board, marker) is not None

    def winning_line(self, board: Board, marker: str) -> Optional[Tuple[int, int, int]]:
        """
        Get the first winning line held by a marker.

        Args:
            board: The game board.
            marker: The marker to check.

        Returns:
            The line as a tuple of 3 indices, or None.
        """
        if marker == EMPTY:
            return None

        for line in self.WINNING_LINES:
            if self._check_line(board, line, marker):
                return line
        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int], marker: str) -> bool:
        return all(board.get_cell(index) == marker for index in line)

    def check_winner(self, board: Board) -> Optional[str]:
        """
        Check if there's a winner.

        Args:
            board: The game board.

        Returns:
            The winning marker, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            first = board.get_cell(line[0])
            if first != EMPTY and self._check_line(board, line, first):
                return first
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has won.
        """
        return board.is_full() and self.check_winner(board) is None
