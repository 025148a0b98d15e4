"""
Board storage for TicTacToe.
A flat list of 9 cells, indexed row by row:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
"""

from typing import Iterable, List, Optional

from .config import GameConfig


BOARD_CELLS = 9

# Value of an unoccupied cell
EMPTY = GameConfig.EMPTY

# Returned by Board.get_cell() for an index outside the board
INVALID = None

# All possible winning lines: rows, then columns, then diagonals.
# The order matters, the first match wins everywhere it is scanned.
WINNING_LINES = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)


class Board:
    """
    The 3x3 TicTacToe board.

    Each cell is either EMPTY or one of the two markers. Writes only
    succeed on empty, in-range cells; nothing else is ever stored.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self._cells: List[str] = [EMPTY] * BOARD_CELLS

    @classmethod
    def from_cells(
        cls,
        cells: Iterable[str],
        config: Optional[GameConfig] = None
    ) -> "Board":
        """
        Build a board from a sequence of 9 cell values.

        Args:
            cells: Cell values in index order. None counts as empty.
            config: Game configuration.

        Returns:
            A new Board.
        """
        board = cls(config)
        values = list(cells)
        if len(values) != BOARD_CELLS:
            raise ValueError(f"A board needs {BOARD_CELLS} cells, got {len(values)}")

        for index, value in enumerate(values):
            if value is None or value == EMPTY:
                continue
            if not board.set_cell(index, value):
                raise ValueError(f"Invalid cell value at {index}: {value!r}")
        return board

    def _in_range(self, index) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_CELLS

    def set_cell(self, index: int, marker: str) -> bool:
        """
        Place a marker on the board.

        Args:
            index: Cell index (0-8).
            marker: One of the two markers.

        Returns:
            True if the marker was placed, False otherwise.
        """
        if not self._in_range(index):
            return False
        if marker not in self.config.markers:
            return False
        if self._cells[index] != EMPTY:
            return False

        self._cells[index] = marker
        return True

    def get_cell(self, index: int) -> Optional[str]:
        """Get a cell's value, or INVALID for an index off the board."""
        if not self._in_range(index):
            return INVALID
        return self._cells[index]

    def reset(self):
        """Clear every cell."""
        for index in range(BOARD_CELLS):
            self._cells[index] = EMPTY

    def is_full(self) -> bool:
        return EMPTY not in self._cells

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of indices, in ascending order.
        """
        return [index for index, cell in enumerate(self._cells) if cell == EMPTY]

    @property
    def cells(self) -> List[str]:
        """A copy of the 9 cell values."""
        return list(self._cells)

    def copy(self) -> "Board":
        new_board = Board(self.config)
        new_board._cells = list(self._cells)
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"

    def print_board(self):
        """Print the board to console. Empty cells show their number (1-9)."""
        print()
        for row in range(3):
            row_cells = []
            for col in range(3):
                index = row * 3 + col
                cell = self._cells[index]
                row_cells.append(cell if cell != EMPTY else str(index + 1))
            print(" " + " | ".join(row_cells))
            if row < 2:
                print("---+---+---")
        print()
