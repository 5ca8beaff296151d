"""
board.py - Board representation for Connect Four

This module implements the Board class, which owns the grid of cells and
answers column queries. It knows nothing about turns, counters or results;
those belong to the session.
"""

from typing import List, Optional

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.utils import Player, render_board_ascii


class Board:
    """
    A rectangular Connect Four grid.

    Row 0 is the top of the board and row ``height - 1`` the bottom, so
    pieces fill each column from the highest row index downward.
    """

    def __init__(self, width: int, height: int):
        """
        Create an empty board.

        Args:
            width: Number of columns (already validated by the caller)
            height: Number of rows (already validated by the caller)
        """
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")

        debug.debug(f"Creating {width}x{height} board", "board")
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=int)

    @property
    def capacity(self) -> int:
        """Number of cells, i.e. the maximum number of moves."""
        return self.width * self.height

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self.width

    def cell(self, row: int, column: int) -> Player:
        return Player(int(self.grid[row, column]))

    def is_column_full(self, column: int) -> bool:
        return bool(self.grid[0, column] != Player.EMPTY.value)

    def landing_row(self, column: int) -> Optional[int]:
        """
        Find where a piece dropped into ``column`` comes to rest.

        Args:
            column: Column index, assumed to be in range

        Returns:
            The bottom-most empty row, or None if the column is full
        """
        if self.is_column_full(column):
            return None

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row

        return None

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Write ``player`` into a cell.

        The row must come from landing_row() in the same turn; emptiness is
        not checked again here.
        """
        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self.grid[row, column] = player.value

    def valid_columns(self) -> List[int]:
        """Columns that still accept a piece."""
        return [col for col in range(self.width) if not self.is_column_full(col)]

    def snapshot(self) -> np.ndarray:
        """Copy of the grid for rendering or observation."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height})"
