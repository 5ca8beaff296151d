"""
connect4_engine.game - Core game mechanics for Connect Four

This package contains dimension validation, the board model, move
processing, win detection and session management, plus thin adapters
(ConnectFourGame, ConnectFourEnv) built on top of them.
"""

from connect4_engine.game.board import Board
from connect4_engine.game.dimensions import validate_dimension, validate_dimensions
from connect4_engine.game.moves import apply_move
from connect4_engine.game.rules import ConnectFourGame, ConnectFourEnv
from connect4_engine.game.session import Session, create_session, restart
from connect4_engine.game.win import check_win, winning_line

__all__ = [
    'Board', 'Session', 'create_session', 'restart', 'apply_move',
    'check_win', 'winning_line', 'validate_dimension', 'validate_dimensions',
    'ConnectFourGame', 'ConnectFourEnv',
]
