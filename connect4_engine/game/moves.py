"""
moves.py - Move processing for Connect Four

apply_move() is the only place a session changes during play: it validates
the requested column, drops the piece, asks the win detector about it and
advances the turn.
"""

import numbers
from typing import Any

from connect4_engine.debug import debug
from connect4_engine.game.session import Session
from connect4_engine.game.win import check_win
from connect4_engine.utils import GameResult, MoveOutcome, MoveResult


def _reject(session: Session, column: Any, outcome: MoveOutcome) -> MoveResult:
    debug.debug(f"Rejected move {column!r}: {outcome.name}", "moves")
    return MoveResult(outcome=outcome, player=session.current_player, column=column)


def apply_move(session: Session, column: Any) -> MoveResult:
    """
    Drop the current player's piece into ``column``.

    Rejected moves leave the session exactly as it was.

    Args:
        session: The game to play in
        column: Requested column index

    Returns:
        A MoveResult whose outcome is one of CONTINUED, WON, TIED,
        COLUMN_FULL, INVALID_COLUMN or GAME_ALREADY_OVER
    """
    if session.status.is_game_over():
        return _reject(session, column, MoveOutcome.GAME_ALREADY_OVER)

    if (isinstance(column, bool) or not isinstance(column, numbers.Integral)
            or not 0 <= column < session.width):
        return _reject(session, column, MoveOutcome.INVALID_COLUMN)

    column = int(column)
    board = session.board
    row = board.landing_row(column)
    if row is None:
        return _reject(session, column, MoveOutcome.COLUMN_FULL)

    player = session.current_player
    board.place(row, column, player)
    session.move_count += 1
    session.last_move = (row, column)
    debug.debug(f"Move {session.move_count}: {player.name} -> ({row}, {column})", "moves")

    debug.start_timer("win_check")
    won = check_win(board, row, column, player, session.move_count)
    debug.end_timer("win_check", "win")

    if won:
        session.status = GameResult.won_by(player)
        debug.info(f"Player {player.name} wins after {session.move_count} moves", "moves")
        return MoveResult(outcome=MoveOutcome.WON, player=player, column=column, row=row)

    if session.move_count == session.max_moves:
        session.status = GameResult.DRAW
        debug.info("Game ends in a draw", "moves")
        return MoveResult(outcome=MoveOutcome.TIED, player=player, column=column, row=row)

    session.current_player = player.other()
    return MoveResult(outcome=MoveOutcome.CONTINUED, player=player, column=column, row=row)
