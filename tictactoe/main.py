"""
Entry point for TicTacToe.

Starts the window by default. With --no-ui the game is played in the
terminal by typing "row col".

Run this script to play TicTacToe against the computer!
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from tictactoe.assets import load_font
from tictactoe.config import GameConfig
from tictactoe.logic import AssetUnavailable, Mark, MoveError
from tictactoe.session import GameSession

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


class ConsoleGame:
    """
    Terminal front end for a GameSession.

    Game flow:
    1. Print the board
    2. Read "row col" from the human
    3. Show the AI's reply
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        session: GameSession,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print
    ):
        self.session = session
        self.input_fn = input_fn
        self.output_fn = output_fn

    def play(self):
        """Play one game to the end. Returns the final GameResult, or None if quit."""
        session = self.session

        for move in session.start():
            self.output_fn(f">>> Computer placed {move.mark} at ({move.row}, {move.col})")

        while not session.is_over:
            self.output_fn("\n" + session.game_state.render_text())

            try:
                line = self.input_fn(f"Your move as {session.human_player} (row col): ")
            except EOFError:
                self.output_fn("\nGame quit by user.")
                return None

            if line.strip().lower() in ("q", "quit", "exit"):
                self.output_fn("Game quit by user.")
                return None

            cell = self._parse(line)
            if cell is None:
                self.output_fn("Please type two numbers 0-2, e.g. '1 1'.")
                continue

            try:
                moves = session.handle_move(*cell)
            except MoveError as exc:
                self.output_fn(f"Illegal move: {exc} Try again.")
                continue

            for move in moves[1:]:
                self.output_fn(f">>> Computer placed {move.mark} at ({move.row}, {move.col})")

        self._show_game_result()
        return session.result

    def _parse(self, line: str):
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            return None
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            return None

    def _show_game_result(self):
        """Show the final game result."""
        self.output_fn("\n" + "=" * 40)
        self.output_fn("   GAME OVER!")
        self.output_fn("=" * 40)
        self.output_fn(self.session.game_state.render_text())
        self.output_fn("\n" + self.session.status_text())


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TicTacToe against a computer that never loses")
    parser.add_argument(
        "--font",
        default=GameConfig.FONT_PATH,
        help="TrueType font used to draw the marks"
    )
    parser.add_argument(
        "--font-size",
        type=int,
        default=GameConfig.FONT_SIZE,
        help="Font size in pixels"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--plain-scoring",
        action="store_true",
        help="Score every win/loss the same instead of preferring faster wins"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="-v logs moves, -vv adds search statistics"
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Apply command line overrides to the default configuration."""
    return GameConfig(
        FONT_PATH=args.font,
        FONT_SIZE=args.font_size,
        HUMAN_MARK=Mark.O.value if args.computer_first else Mark.X.value,
        PREFER_FASTER_WINS=not args.plain_scoring,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVELS[min(args.verbose, len(LOG_LEVELS) - 1)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    config = build_config(args)

    if args.no_ui:
        session = GameSession(human_player=Mark(config.HUMAN_MARK), config=config)
        print("\n" + "=" * 40)
        print("   TicTacToe")
        print("=" * 40)
        print(f"   You play: {session.human_player}")
        print(f"   Computer plays: {session.ai_player}")
        print("=" * 40)
        try:
            ConsoleGame(session).play()
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user.")
        return 0

    try:
        font = load_font(config.FONT_PATH, config.FONT_SIZE)
    except AssetUnavailable as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    session = GameSession(human_player=Mark(config.HUMAN_MARK), config=config)

    # Imported here so --no-ui works without a display/Tk install
    from tictactoe.ui import TicTacToeUI

    ui = TicTacToeUI(session, font, config)
    ui.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
