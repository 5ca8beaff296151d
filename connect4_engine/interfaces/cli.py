"""
cli.py - Command-line interface for the Connect Four engine

This module provides a hot-seat text game for two people sharing a terminal
and a benchmark that times win detection on boards of different sizes.
"""

import argparse
import sys
import time
from typing import Callable, List, Optional, Sequence

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.game.board import Board
from connect4_engine.game.rules import ConnectFourGame
from connect4_engine.game.win import check_win
from connect4_engine.utils import Player, MoveOutcome, MIN_MOVES_FOR_WIN

QUIT = 'q'
RESTART = 'r'

BENCHMARK_SIZES = [(7, 6), (20, 20), (100, 100), (500, 500)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four')
    parser.add_argument('--debug-level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging verbosity')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write log output to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
    play_parser.add_argument('--width', default=None, help='Number of columns (default 7)')
    play_parser.add_argument('--height', default=None, help='Number of rows (default 6)')

    benchmark_parser = subparsers.add_parser('benchmark', help='Time win detection')
    benchmark_parser.add_argument('--iterations', type=int, default=10000,
                                  help='Win checks per board size')

    return parser


class SimpleCLI:
    """Simple command-line front end for Connect Four."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.input = input_func
        self.output = output_func
        self.game: Optional[ConnectFourGame] = None
        self.args = None

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> None:
        """Parse command-line arguments and apply the logging options."""
        self.args = build_parser().parse_args(argv)
        debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Run the CLI and return a process exit code."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game(self.args.width, self.args.height)
        elif self.args.command == 'benchmark':
            self.benchmark(self.args.iterations)
        else:
            self.output("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self, width=None, height=None) -> None:
        """Play a game between two people at the same terminal."""
        self.game = ConnectFourGame(width, height)
        self.output("Starting a new Connect Four game!")
        self.output(f"Commands: column number to move, '{QUIT}' to quit, '{RESTART}' to restart.")
        self.output(self.game.render())

        while True:
            if self.game.is_game_over():
                self.announce_result()
                if not self.ask_play_again():
                    return
                self.game.reset()
                self.output(self.game.render())
                continue

            command = self.get_human_move()
            if command is None:
                continue
            if command == QUIT:
                self.output("Quitting game.")
                return
            if command == RESTART:
                debug.debug("Restart requested", "cli")
                self.game.reset()
                self.output("Game restarted.")
                self.output(self.game.render())
                continue

            result = self.game.make_move(command)
            if not result.accepted:
                debug.debug(f"Rejected input {command!r}: {result.outcome.name}", "cli")
            if result.outcome == MoveOutcome.COLUMN_FULL:
                self.output(f"Column {command} is full, pick another.")
            elif result.outcome == MoveOutcome.INVALID_COLUMN:
                self.output(f"There is no column {command}.")
            else:
                self.output(self.game.render())

    def get_human_move(self):
        """
        Read one command from the player to move.

        Returns:
            A column index, QUIT, RESTART, or None if the input was unusable
        """
        player = self.game.get_current_player()
        last_col = self.game.board.width - 1
        try:
            user_input = self.input(f"Player {player} move (0-{last_col}, {QUIT}/{RESTART}): ")
        except EOFError:
            return QUIT

        user_input = user_input.strip().lower()
        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            debug.debug(f"Unparseable input {user_input!r}", "cli")
            self.output("Invalid input. Please enter a column number or command.")
            return None

    def announce_result(self) -> None:
        winner = self.game.get_winner()
        if winner is None:
            self.output("It's a draw!")
            return

        self.output(f"Player {winner} wins!")
        line = self.game.get_winning_line()
        if line:
            self.output("Winning line: " + ", ".join(f"({r}, {c})" for r, c in line))

    def ask_play_again(self) -> bool:
        try:
            answer = self.input("Play again? (y/n): ")
        except EOFError:
            return False
        return answer.strip().lower().startswith('y')

    def benchmark(self, iterations: int) -> List[float]:
        """
        Time check_win on boards of increasing size.

        Each board gets a vertical stack in its middle column and the check is
        run against the top piece, which walks every window in full.

        Returns:
            Average microseconds per check, one entry per board size
        """
        self.output(f"Timing {iterations} win checks per board size")
        averages = []
        for width, height in BENCHMARK_SIZES:
            board = Board(width, height)
            col = width // 2
            for row in range(height - 1, height - 4, -1):
                board.place(row, col, Player.ONE)
            row = height - 3

            start = time.perf_counter()
            for _ in range(iterations):
                check_win(board, row, col, Player.ONE, MIN_MOVES_FOR_WIN)
            elapsed = time.perf_counter() - start

            average_us = elapsed / max(iterations, 1) * 1e6
            averages.append(average_us)
            self.output(f"  {width:>4}x{height:<4} {average_us:8.2f} us/check")
        return averages


def main(argv: Optional[Sequence[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
