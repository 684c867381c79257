"""
Game session for TicTacToe.

Ties together the board, the rules, and the AI:
1. The human picks a cell (click or typed coordinates)
2. The move is validated and applied
3. If the game isn't over, the AI calculates and plays its reply
4. Repeat until someone wins or it's a draw
"""

import logging
from typing import Callable, List, Optional, Tuple

from tictactoe.config import GameConfig
from tictactoe.logic import (
    AIPlayer,
    GameOver,
    GameResult,
    GameState,
    Mark,
    Move,
    MoveError,
    OutOfTurn,
)

logger = logging.getLogger(__name__)


def cell_at(x: int, y: int, cell_size: int) -> Tuple[int, int]:
    """
    Translate a pixel position into a (row, col) cell.

    Positions outside the board give coordinates outside 0-2, which the
    board then rejects.
    """
    return (y // cell_size, x // cell_size)


class GameSession:
    """
    One game between a human and the AI.

    The session owns the GameState. Front ends only read it and hand
    moves in through handle_move() / handle_click(). on_change is called
    after every state change so the front end can redraw.
    """

    def __init__(
        self,
        human_player: Mark = Mark.X,
        ai: Optional[AIPlayer] = None,
        config: Optional[GameConfig] = None,
        on_change: Optional[Callable[["GameSession"], None]] = None
    ):
        """
        Initialize the session.

        Args:
            human_player: Which mark the human controls.
            ai: The AI opponent. Created for the other mark if not provided.
            config: Game configuration (cell size for clicks).
            on_change: Called with the session after every state change.
        """
        self.config = config or GameConfig()
        self.human_player = human_player
        self.ai_player = human_player.opposite()
        self.ai = ai or AIPlayer(
            self.ai_player, prefer_faster_wins=self.config.PREFER_FASTER_WINS
        )
        if self.ai.player != self.ai_player:
            raise ValueError(
                f"AI plays {self.ai.player} but the human already plays {human_player}"
            )
        self.on_change = on_change

        self.game_state = GameState()
        self.result: GameResult = self.game_state.is_terminal()
        self.last_error: Optional[MoveError] = None

    @property
    def is_over(self) -> bool:
        return self.result.is_over

    @property
    def is_human_turn(self) -> bool:
        return not self.is_over and self.game_state.current_player == self.human_player

    def start(self) -> List[Move]:
        """
        Begin the game. Plays the AI's opening move when the AI is X.

        Returns:
            The moves played (empty when the human starts).
        """
        logger.info(
            "New game: human plays %s, AI plays %s", self.human_player, self.ai_player
        )
        self._notify()
        if self.is_over or self.is_human_turn:
            return []
        return [self._ai_move()]

    def reset(self) -> List[Move]:
        """Throw away the current game and start a new one."""
        self.game_state = GameState()
        self.result = self.game_state.is_terminal()
        self.last_error = None
        return self.start()

    def handle_click(self, x: int, y: int) -> List[Move]:
        """Play the cell under a pixel position. See handle_move()."""
        row, col = cell_at(x, y, self.config.CELL_SIZE)
        return self.handle_move(row, col)

    def handle_move(self, row: int, col: int) -> List[Move]:
        """
        Apply a human move and, if the game goes on, the AI's reply.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The moves applied, human first.

        Raises:
            GameOver: The game has already ended.
            OutOfTurn: It's the AI's turn.
            InvalidCoordinate / CellOccupied: Rejected by the board.
            The board is unchanged whenever an error is raised.
        """
        try:
            if self.is_over:
                raise GameOver(f"Game is already over! {self.result.describe()}", row, col)
            if not self.is_human_turn:
                raise OutOfTurn(f"Wait for {self.ai_player} to move", row, col)
            human_move = self.game_state.make_move(row, col, self.human_player)
        except MoveError as exc:
            logger.info("Rejected move (%s, %s): %s", row, col, exc)
            self.last_error = exc
            self._notify()
            raise

        self.last_error = None
        played = [human_move]
        logger.info("Human placed %s at (%d, %d)", human_move.mark, row, col)
        self._after_move()

        if not self.is_over:
            played.append(self._ai_move())

        return played

    def _ai_move(self) -> Move:
        """Search for and apply the AI's move."""
        search = self.ai.search(self.game_state)
        row, col = search.move
        move = self.game_state.make_move(row, col, self.ai_player)
        logger.info(
            "AI placed %s at (%d, %d) (score %d, %d positions)",
            move.mark, row, col, search.score, search.positions_evaluated
        )
        self._after_move()
        return move

    def _after_move(self):
        self.result = self.game_state.is_terminal()
        if self.is_over:
            logger.info("Game over: %s", self.result.describe())
        self._notify()

    def _notify(self):
        if self.on_change is not None:
            self.on_change(self)

    def status_text(self) -> str:
        """One line describing the game for the front end."""
        if self.is_over:
            if self.result.winner == self.human_player:
                return f"You win as {self.human_player}!"
            if self.result.winner == self.ai_player:
                return f"Computer wins as {self.ai_player}!"
            return "It's a draw!"

        if self.last_error is not None:
            return str(self.last_error)

        if self.is_human_turn:
            return f"Your turn ({self.human_player})"
        return f"Computer is thinking ({self.ai_player})..."
