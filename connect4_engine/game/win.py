"""
win.py - Move-local win detection

Only the piece just placed can complete a new line, so instead of scanning
the whole board after every move we inspect the four lines that pass through
the landing cell. Each line is limited to a window of WINDOW_REACH cells on
either side, which keeps the check at a fixed 28 cell reads on any board.
"""

from typing import List, Optional, Tuple

from connect4_engine.debug import debug
from connect4_engine.game.board import Board
from connect4_engine.utils import (CONNECT_N, WINDOW_REACH, MIN_MOVES_FOR_WIN,
                                   DIRECTION_VECTORS, Player)

Coord = Tuple[int, int]


def _scan_window(board: Board, row: int, column: int,
                 dr: int, dc: int, player_value: int) -> Optional[int]:
    """
    Walk the window along (dr, dc) centred on (row, column).

    Returns:
        The offset at which the run of ``player_value`` reached CONNECT_N,
        or None if it never did
    """
    run = 0
    for offset in range(-WINDOW_REACH, WINDOW_REACH + 1):
        r = row + offset * dr
        c = column + offset * dc
        if board.in_bounds(r, c) and board.grid[r, c] == player_value:
            run += 1
            if run >= CONNECT_N:
                return offset
        else:
            run = 0
    return None


def check_win(board: Board, row: int, column: int, player: Player,
              move_count: Optional[int] = None) -> bool:
    """
    Check whether the piece at (row, column) completed a line for ``player``.

    Args:
        board: The board after the move was placed
        row: Landing row of the move
        column: Column of the move
        player: Player who made the move
        move_count: Total moves made so far, including this one. When given,
            positions with fewer than MIN_MOVES_FOR_WIN moves are skipped.

    Returns:
        True if any of the four axes through the cell holds CONNECT_N in a row
    """
    if move_count is not None and move_count < MIN_MOVES_FOR_WIN:
        return False

    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        if _scan_window(board, row, column, dr, dc, player.value) is not None:
            debug.debug(f"{player.name} wins {direction.name.lower()} through ({row}, {column})", "win")
            return True

    return False


def winning_line(board: Board, row: int, column: int) -> List[Coord]:
    """
    Cells of the winning line passing through (row, column).

    Args:
        board: The board to inspect
        row: Row of an occupied cell, usually the last move
        column: Column of that cell

    Returns:
        CONNECT_N (row, col) positions ordered along the axis, or an empty
        list if the cell is empty or part of no line
    """
    owner = board.grid[row, column]
    if owner == Player.EMPTY.value:
        return []

    for dr, dc in DIRECTION_VECTORS.values():
        end = _scan_window(board, row, column, dr, dc, owner)
        if end is not None:
            return [(row + offset * dr, column + offset * dc)
                    for offset in range(end - CONNECT_N + 1, end + 1)]

    return []
