"""
utils.py - Constants, enumerations and helpers shared across the engine

Board defaults, player and status enumerations, move outcome descriptors and
the ASCII renderer used by the text front end all live here.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

import numpy as np

# Board defaults
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
MIN_SIZE = 4  # minimum for both width and height

CONNECT_N = 4  # pieces in a row needed to win
WINDOW_REACH = CONNECT_N - 1  # cells inspected on each side of the latest move

# One player needs CONNECT_N pieces and the other has moved CONNECT_N - 1 times
MIN_MOVES_FOR_WIN = 2 * CONNECT_N - 1


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self) -> str:
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Status of a game session."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    @classmethod
    def won_by(cls, player: Player) -> 'GameResult':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win status for {player!r}")

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    def winner(self) -> Optional[Player]:
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None


class MoveOutcome(Enum):
    """What happened to a requested move."""
    CONTINUED = auto()
    WON = auto()
    TIED = auto()
    COLUMN_FULL = auto()
    INVALID_COLUMN = auto()
    GAME_ALREADY_OVER = auto()

    @property
    def accepted(self) -> bool:
        return self in (MoveOutcome.CONTINUED, MoveOutcome.WON, MoveOutcome.TIED)


@dataclass(frozen=True)
class MoveResult:
    """
    Result descriptor returned for every move request.

    ``player`` is the player who moved, or whose turn it was when the move
    was rejected. ``row`` is only set for accepted moves.
    """
    outcome: MoveOutcome
    player: Player
    column: Any
    row: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return self.outcome.accepted

    @property
    def is_game_over(self) -> bool:
        return self.outcome in (MoveOutcome.WON, MoveOutcome.TIED, MoveOutcome.GAME_ALREADY_OVER)


class Direction(Enum):
    """Axes a winning line can run along."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()    # top-right to bottom-left


# Direction vectors (row, col); scanning order matters for short-circuiting
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art with column numbers underneath.

    Args:
        grid: 2D array of player values, row 0 on top

    Returns:
        ASCII representation of the board
    """
    height, width = grid.shape
    symbols = {player.value: str(player) for player in Player}
    # Wide boards need wider cells so the column numbers line up
    cell_width = len(str(width - 1))

    border = "|" + "-" * (width * (cell_width + 1) - 1) + "|"
    lines = [border]
    for row in range(height):
        cells = [symbols.get(int(value), "?").rjust(cell_width) for value in grid[row]]
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)
    lines.append("|" + " ".join(str(col).rjust(cell_width) for col in range(width)) + "|")

    return "\n".join(lines)
