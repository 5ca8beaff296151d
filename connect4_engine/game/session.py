"""
session.py - Game session state for Connect Four

A Session bundles everything one game needs: the board, whose turn it is,
how many moves have been made and the current status. Sessions are plain
values owned by the caller; several games can run side by side.
"""

from typing import Any, Optional, Tuple

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.game.board import Board
from connect4_engine.game.dimensions import validate_dimension
from connect4_engine.utils import Player, GameResult


class Session:
    """
    State of a single game.

    Attributes:
        board: The Board being played on
        current_player: Player whose turn it is (the winner once won)
        move_count: Number of accepted moves
        max_moves: Number of cells, reached only when the board is full
        status: GameResult of the game so far
        last_move: (row, column) of the latest accepted move, or None
    """

    def __init__(self, width: int, height: int):
        self.board = Board(width, height)
        self.current_player = Player.ONE
        self.move_count = 0
        self.max_moves = self.board.capacity
        self.status = GameResult.IN_PROGRESS
        self.last_move: Optional[Tuple[int, int]] = None

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    def snapshot(self) -> np.ndarray:
        """Copy of the grid for a presentation layer."""
        return self.board.snapshot()

    def is_full(self) -> bool:
        return self.move_count == self.max_moves

    def is_over(self) -> bool:
        return self.status.is_game_over()

    def winner(self) -> Optional[Player]:
        return self.status.winner()

    def __repr__(self) -> str:
        return (f"Session({self.width}x{self.height}, status={self.status.name}, "
                f"current={self.current_player.name}, moves={self.move_count})")


def create_session(width: Any = None, height: Any = None) -> Session:
    """
    Start a new game.

    Args:
        width: Requested number of columns, normalised by validate_dimension
        height: Requested number of rows, normalised by validate_dimension

    Returns:
        A fresh in-progress Session with player one to move
    """
    width = validate_dimension(width, 'width')
    height = validate_dimension(height, 'height')
    session = Session(width, height)
    debug.info(f"New {width}x{height} session", "session")
    return session


def restart(session: Session, width: Any = None, height: Any = None) -> Session:
    """
    Replace a session with a brand new one.

    Dimensions that are not given carry over from ``session``. The old
    session is left untouched.
    """
    if width is None:
        width = session.width
    if height is None:
        height = session.height

    debug.debug(f"Restarting session {session!r}", "session")
    return create_session(width, height)
