"""
Tests for move-local win detection.

Boards are built directly so each axis, window edge and blocking case can be
set up precisely; check_win is then asked about a single landing cell.
"""

import pytest

from connect4_engine.game import Board, check_win, winning_line
from connect4_engine.utils import Player, MIN_MOVES_FOR_WIN

from helpers import board_with

ONE = Player.ONE
TWO = Player.TWO


class TestAxes:
    """A line of four through the landing cell on each axis."""

    def test_horizontal(self):
        board = board_with(7, 6, {(5, c): ONE for c in range(4)})
        assert check_win(board, 5, 3, ONE)

    def test_horizontal_landing_in_the_middle(self):
        board = board_with(7, 6, {(5, 1): TWO, (5, 2): TWO, (5, 4): TWO, (5, 3): TWO})
        assert check_win(board, 5, 3, TWO)

    def test_vertical(self):
        board = board_with(7, 6, {(r, 6): ONE for r in range(2, 6)})
        assert check_win(board, 2, 6, ONE)

    def test_diagonal_down_right(self):
        # top-left to bottom-right
        board = board_with(7, 6, {(2 + i, 1 + i): TWO for i in range(4)})
        assert check_win(board, 2, 1, TWO)
        assert check_win(board, 4, 3, TWO)

    def test_diagonal_down_left(self):
        # top-right to bottom-left
        board = board_with(7, 6, {(5 - i, i): ONE for i in range(4)})
        assert check_win(board, 2, 3, ONE)
        assert check_win(board, 5, 0, ONE)

    def test_longer_line_counts(self):
        board = board_with(7, 6, {(5, c): ONE for c in range(7)})
        assert check_win(board, 5, 3, ONE)
        assert check_win(board, 5, 6, ONE)


class TestNoFalseWins:
    """Positions that must not be reported as wins."""

    def test_three_in_a_row(self):
        board = board_with(7, 6, {(5, c): ONE for c in range(3)})
        assert not check_win(board, 5, 2, ONE)

    def test_broken_by_opponent(self):
        cells = {(5, c): ONE for c in (0, 1, 3, 4)}
        cells[(5, 2)] = TWO
        board = board_with(7, 6, cells)
        assert not check_win(board, 5, 4, ONE)
        assert not check_win(board, 5, 1, ONE)

    def test_broken_by_gap(self):
        board = board_with(7, 6, {(5, c): ONE for c in (0, 1, 3, 4)})
        assert not check_win(board, 5, 4, ONE)

    def test_line_elsewhere_is_ignored(self):
        cells = {(5, c): ONE for c in range(4)}
        cells[(0, 6)] = ONE
        board = board_with(7, 6, cells)
        assert not check_win(board, 0, 6, ONE)

    def test_line_beyond_window_is_ignored(self):
        # the four cells at columns 4..7 do not include column 0
        board = board_with(9, 6, {(5, c): ONE for c in (0, 4, 5, 6, 7)})
        assert not check_win(board, 5, 0, ONE)
        assert check_win(board, 5, 4, ONE)

    def test_opponent_line_is_not_a_win_for_mover(self):
        board = board_with(7, 6, {(5, c): TWO for c in range(4)})
        assert not check_win(board, 5, 3, ONE)

    def test_edges_truncate_the_window(self):
        board = board_with(4, 4, {(3, 0): ONE, (2, 1): ONE, (1, 2): ONE})
        assert not check_win(board, 3, 0, ONE)
        board.place(0, 3, ONE)
        assert check_win(board, 0, 3, ONE)


class TestMoveCountGuard:
    """No win is possible before move MIN_MOVES_FOR_WIN."""

    def test_minimum_is_seven(self):
        assert MIN_MOVES_FOR_WIN == 7

    @pytest.mark.parametrize("move_count", [0, 1, 4, 6])
    def test_guard_skips_early_checks(self, move_count):
        board = board_with(7, 6, {(5, c): ONE for c in range(4)})
        assert not check_win(board, 5, 3, ONE, move_count)

    def test_guard_allows_check_from_move_seven(self):
        board = board_with(7, 6, {(5, c): ONE for c in range(4)})
        assert check_win(board, 5, 3, ONE, 7)


class CountingBoard(Board):
    """Board that counts how many cells win detection looks at."""

    def __init__(self, width, height):
        super().__init__(width, height)
        self.reads = 0

    def in_bounds(self, row, column):
        self.reads += 1
        return super().in_bounds(row, column)


class TestBoundedCost:
    """The check reads a fixed window, whatever the board size."""

    @pytest.mark.parametrize("size", [4, 7, 50, 300])
    def test_reads_at_most_28_cells(self, size):
        board = CountingBoard(size, size)
        col = size // 2
        board.place(size - 1, col, ONE)
        assert not check_win(board, size - 1, col, ONE)
        assert board.reads <= 28

    def test_reads_are_the_same_on_small_and_large_boards(self):
        small, large = CountingBoard(7, 6), CountingBoard(500, 400)
        small.place(5, 3, ONE)
        large.place(399, 250, ONE)
        check_win(small, 5, 3, ONE)
        check_win(large, 399, 250, ONE)
        assert small.reads == large.reads == 28


class TestWinningLine:
    def test_returns_four_cells_along_the_axis(self):
        board = board_with(7, 6, {(5, c): TWO for c in range(1, 5)})
        assert winning_line(board, 5, 2) == [(5, 1), (5, 2), (5, 3), (5, 4)]

    def test_diagonal_line(self):
        board = board_with(7, 6, {(5 - i, i): ONE for i in range(4)})
        line = winning_line(board, 3, 2)
        assert sorted(line) == sorted((5 - i, i) for i in range(4))

    def test_empty_when_no_line(self):
        board = board_with(7, 6, {(5, 0): ONE})
        assert winning_line(board, 5, 0) == []
        assert winning_line(board, 0, 0) == []
