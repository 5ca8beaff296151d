"""Helpers shared by the engine tests."""

from connect4_engine.game import Board, apply_move

# Row by row fill of a 7x6 board whose final position holds no line of four
DRAW_SEQUENCE_7X6 = [0, 2, 1, 3, 4, 6, 5] * 6

# 4x4 game where player two completes a vertical four in column 3 on move 16
LAST_CELL_WIN_4X4 = [0, 2, 0, 2, 2, 0, 0, 3, 1, 1, 1, 3, 1, 3, 2, 3]


def play(session, columns):
    """Apply a list of moves and return the list of results."""
    return [apply_move(session, col) for col in columns]


def board_with(width, height, cells):
    """Build a board with ``cells`` mapping (row, col) to a Player."""
    board = Board(width, height)
    for (row, col), player in cells.items():
        board.place(row, col, player)
    return board
