"""
Move validator for TicTacToe.
Validates that moves follow the rules before the board is touched.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from .errors import CellOccupied, InvalidCoordinate, MoveError, OutOfTurn
from .marks import Mark
from .win_checker import WinChecker

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board (0-2)
    2. Can only place on empty cells
    3. Marks alternate, X first
    """

    BOARD_SIZE = 3

    def validate_move(
        self,
        game_state: "GameState",
        row: int,
        col: int,
        mark: Optional[Mark] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).
            mark: Mark being placed. Defaults to the mark whose turn it is.

        Returns:
            ValidationResult with is_valid and the error to raise.
        """
        if not self._on_board(row) or not self._on_board(col):
            return ValidationResult(
                is_valid=False,
                error=InvalidCoordinate(
                    f"Invalid position ({row}, {col}). Must be 0-2.", row, col
                )
            )

        occupant = game_state.board[row][col]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=CellOccupied(
                    f"Cell ({row}, {col}) is already occupied by {occupant}", row, col
                )
            )

        if mark is not None and mark != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error=OutOfTurn(
                    f"It's {game_state.current_player}'s turn, not {mark}'s", row, col
                )
            )

        return ValidationResult(is_valid=True)

    def _on_board(self, index) -> bool:
        # bool is an int subclass but never a coordinate
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < self.BOARD_SIZE

    def get_valid_moves(self, game_state: "GameState") -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) in row-major order. Empty once the game is over.
        """
        if WinChecker().evaluate(game_state.board).is_over:
            return []
        return game_state.get_empty_cells()
