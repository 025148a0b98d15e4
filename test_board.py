"""
Tests for the board.
"""

import pytest

from tictactoe_logic.board import Board, EMPTY, INVALID, WINNING_LINES


def test_new_board_is_empty():
    board = Board()
    assert board.cells == [EMPTY] * 9
    assert board.empty_cells() == list(range(9))
    assert not board.is_full()


def test_set_cell_on_empty_cell():
    board = Board()
    assert board.set_cell(4, "X")
    assert board.get_cell(4) == "X"


def test_set_cell_refuses_occupied_cell():
    board = Board()
    board.set_cell(0, "X")
    assert not board.set_cell(0, "O")
    assert board.get_cell(0) == "X"


@pytest.mark.parametrize("index", [-1, 9, 42, None, "3", 1.0, True])
def test_set_cell_refuses_bad_index(index):
    board = Board()
    assert not board.set_cell(index, "X")
    assert board.cells == [EMPTY] * 9


def test_set_cell_refuses_unknown_marker():
    board = Board()
    assert not board.set_cell(0, "Z")
    assert not board.set_cell(0, EMPTY)
    assert board.get_cell(0) == EMPTY


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_get_cell_out_of_range_is_invalid(index):
    assert Board().get_cell(index) is INVALID


def test_reset_clears_every_cell():
    board = Board.from_cells(["X", "O", "X", "O", "X", "O", "O", "X", "O"])
    assert board.is_full()
    board.reset()
    assert not board.is_full()
    assert board.cells == [EMPTY] * 9


def test_is_full_only_when_all_nine_set():
    board = Board()
    for index in range(8):
        board.set_cell(index, "X" if index % 2 else "O")
        assert not board.is_full()
    board.set_cell(8, "X")
    assert board.is_full()


def test_copy_is_independent():
    board = Board.from_cells(["X", "", "", "", "", "", "", "", ""])
    clone = board.copy()
    clone.set_cell(1, "O")
    assert board.get_cell(1) == EMPTY
    assert clone == Board.from_cells(["X", "O", "", "", "", "", "", "", ""])


def test_cells_returns_a_copy():
    board = Board()
    cells = board.cells
    cells[0] = "X"
    assert board.get_cell(0) == EMPTY


def test_from_cells_rejects_wrong_length():
    with pytest.raises(ValueError):
        Board.from_cells(["X", "O"])


def test_from_cells_treats_none_as_empty():
    board = Board.from_cells([None, "O", None, None, None, None, None, None, "X"])
    assert board.empty_cells() == [0, 2, 3, 4, 5, 6, 7]


def test_winning_lines_order():
    assert len(WINNING_LINES) == 8
    assert WINNING_LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert WINNING_LINES[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
    assert WINNING_LINES[6:] == ((0, 4, 8), (2, 4, 6))


def test_print_board_shows_numbers_for_empty_cells(capsys):
    Board.from_cells(["X", "", "", "", "O", "", "", "", ""]).print_board()
    out = capsys.readouterr().out
    assert " X | 2 | 3" in out
    assert " 4 | O | 6" in out
