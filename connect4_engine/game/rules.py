"""
rules.py - High-level game manager and Gymnasium environment for Connect Four

This module provides:
1. ConnectFourGame, an object wrapper around a Session for front ends
2. ConnectFourEnv, a gymnasium-compatible environment driven by the same engine
"""

from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4_engine.debug import debug
from connect4_engine.game.moves import apply_move
from connect4_engine.game.session import Session, create_session, restart
from connect4_engine.game.win import winning_line
from connect4_engine.utils import Player, MoveOutcome, MoveResult


class ConnectFourGame:
    """
    High-level Connect Four game manager.

    Holds one session at a time and swaps it out on reset.
    """

    def __init__(self, width: Any = None, height: Any = None):
        debug.debug("Initializing ConnectFourGame", "session")
        self.session = create_session(width, height)

    def reset(self, width: Any = None, height: Any = None) -> None:
        """Start over, keeping the current dimensions unless new ones are given."""
        self.session = restart(self.session, width, height)

    def make_move(self, column: Any) -> MoveResult:
        return apply_move(self.session, column)

    @property
    def board(self):
        return self.session.board

    def is_game_over(self) -> bool:
        return self.session.is_over()

    def get_winner(self) -> Optional[Player]:
        return self.session.winner()

    def get_current_player(self) -> Player:
        return self.session.current_player

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of valid moves.

        Returns:
            Columns that accept a piece, or an empty list once the game is over
        """
        if self.session.is_over():
            return []
        return self.session.board.valid_columns()

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """Cells of the winning line, or an empty list if nobody has won."""
        if self.session.winner() is None or self.session.last_move is None:
            return []
        row, col = self.session.last_move
        return winning_line(self.session.board, row, col)

    def render(self) -> str:
        return self.session.board.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Actions are column indices and observations are the grid as int8 values
    (0 empty, 1 player one, 2 player two). Both players act through the same
    environment; rewards are from player one's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_lose = -1.0
    reward_draw = 0.1
    reward_invalid_move = -0.5
    reward_step = -0.01

    def __init__(self, width: Any = None, height: Any = None,
                 render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            width: Requested board width
            height: Requested board height
            render_mode: One of metadata['render_modes'] or None
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.session: Session = create_session(width, height)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(self.session.width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(self.session.height, self.session.width), dtype=np.int8
        )

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to a new game of the same size.

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        self.session = restart(self.session)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: Any) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play ``action`` for whichever player is to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = apply_move(self.session, action)

        if not result.accepted:
            debug.warning(f"Invalid action {action}: {result.outcome.name}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['outcome'] = result.outcome.name
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        if result.outcome == MoveOutcome.WON:
            reward = self.reward_win if result.player == Player.ONE else self.reward_lose
            terminated = True
        elif result.outcome == MoveOutcome.TIED:
            reward = self.reward_draw
            terminated = True

        if self.render_mode == "human":
            self.render()

        info = self._get_info()
        info['outcome'] = result.outcome.name
        return self._get_observation(), reward, terminated, False, info

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.session.board.render()
        if self.render_mode == "human":
            print(self.session.board.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.session.snapshot().astype(np.int8)

    def _get_info(self) -> Dict:
        valid_moves = [] if self.session.is_over() else self.session.board.valid_columns()
        return {
            'valid_moves': valid_moves,
            'current_player': self.session.current_player.value,
            'game_result': self.session.status.name,
            'moves_made': self.session.move_count,
            'last_move': self.session.last_move,
        }
