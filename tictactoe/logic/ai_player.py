"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .game_state import GameState
from .marks import Mark

logger = logging.getLogger(__name__)

# Base magnitude for depth-aware scores; a 3x3 game never lasts 10 plies
WIN_SCORE = 10


@dataclass
class SearchResult:
    """Best move found by a search, scored from the AI's point of view."""
    score: int
    move: Optional[Tuple[int, int]]
    positions_evaluated: int = 0


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI searches the whole remaining game tree, so it always plays
    optimally: it wins if possible, blocks the opponent if needed, and
    never loses (at worst, draw).
    """

    def __init__(self, player: Mark = Mark.O, prefer_faster_wins: bool = True):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI controls (default: O)
            prefer_faster_wins: Score wins higher the sooner they happen and
                losses higher the later they happen. With False every win
                is +1, every loss -1.
        """
        self.player = player
        self.prefer_faster_wins = prefer_faster_wins

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state. It is not modified.

        Returns:
            (row, col) of best move, or None if no moves are available
            or it isn't the AI's turn.
        """
        if game_state.current_player != self.player:
            logger.warning("It's not %s's turn!", self.player)
            return None
        return self.search(game_state).move

    def search(self, game_state: GameState) -> SearchResult:
        """
        Score every legal move with minimax and keep the best.

        Ties go to the first move in row-major order.

        Args:
            game_state: Position with the AI to move.

        Returns:
            SearchResult. move is None when the game is already over.
        """
        self.moves_evaluated = 0

        outcome = game_state.is_terminal()
        if outcome.is_over:
            return SearchResult(score=self._score(outcome.winner, 0), move=None)

        best_score = None
        best_move = None

        for row, col in game_state.get_empty_cells():
            # Try this move on a snapshot
            new_state = game_state.copy()
            new_state.make_move(row, col)

            score = self._minimax(new_state, plies=1, is_maximizing=False)

            if best_score is None or score > best_score:
                best_score = score
                best_move = (row, col)

        logger.debug(
            "AI evaluated %d positions. Best move: %s (score: %s)",
            self.moves_evaluated, best_move, best_score
        )

        return SearchResult(
            score=best_score,
            move=best_move,
            positions_evaluated=self.moves_evaluated
        )

    def _minimax(self, game_state: GameState, plies: int, is_maximizing: bool) -> int:
        """
        Plain minimax over the full remaining tree.

        Args:
            game_state: State to evaluate.
            plies: Moves made since the root of the search.
            is_maximizing: True if it's the AI's turn.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        outcome = game_state.is_terminal()
        if outcome.is_over:
            return self._score(outcome.winner, plies)

        scores = []
        for row, col in game_state.get_empty_cells():
            new_state = game_state.copy()
            new_state.make_move(row, col)
            scores.append(self._minimax(new_state, plies + 1, not is_maximizing))

        return max(scores) if is_maximizing else min(scores)

    def _score(self, winner: Optional[Mark], plies: int) -> int:
        """Leaf value: positive for an AI win, negative for a loss, 0 for a draw."""
        if winner is None:
            return 0
        magnitude = WIN_SCORE - plies if self.prefer_faster_wins else 1
        return magnitude if winner == self.player else -magnitude
