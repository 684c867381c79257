"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .marks import Mark

Cell = Tuple[int, int]
Grid = Sequence[Sequence[Optional[Mark]]]


class GameStatus(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of evaluating a board.

    winner and line are only set when status is WIN.
    """
    status: GameStatus
    winner: Optional[Mark] = None
    line: Optional[Tuple[Cell, ...]] = None

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_win(self) -> bool:
        return self.status == GameStatus.WIN

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW

    def describe(self) -> str:
        """Short human-readable description."""
        if self.is_win:
            return f"Player {self.winner} wins!"
        if self.is_draw:
            return "It's a draw!"
        return "Game in progress"


IN_PROGRESS = GameResult(GameStatus.IN_PROGRESS)
DRAW = GameResult(GameStatus.DRAW)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as tuples of (row, col)), checked in order
    WINNING_LINES: Tuple[Tuple[Cell, Cell, Cell], ...] = (
        # Rows
        ((0, 0), (0, 1), (0, 2)),
        ((1, 0), (1, 1), (1, 2)),
        ((2, 0), (2, 1), (2, 2)),
        # Columns
        ((0, 0), (1, 0), (2, 0)),
        ((0, 1), (1, 1), (2, 1)),
        ((0, 2), (1, 2), (2, 2)),
        # Diagonals
        ((0, 0), (1, 1), (2, 2)),
        ((0, 2), (1, 1), (2, 0)),
    )

    def check_winner(self, board: Grid) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The 3x3 grid.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        row, col = line[0]
        return board[row][col]

    def get_winning_line(self, board: Grid) -> Optional[Tuple[Cell, Cell, Cell]]:
        """
        Get the first completed line, if any.

        Args:
            board: The 3x3 grid.

        Returns:
            The winning line as (row, col) tuples, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None

    def _check_line(self, board: Grid, line: Sequence[Cell]) -> Optional[Mark]:
        """Return the mark filling the whole line, or None."""
        (r0, c0), (r1, c1), (r2, c2) = line
        first = board[r0][c0]
        if first is None:
            return None  # Empty cell, no winner on this line
        if first == board[r1][c1] == board[r2][c2]:
            return first
        return None

    def is_full(self, board: Grid) -> bool:
        """True when no cell is empty."""
        return all(cell is not None for row in board for cell in row)

    def check_draw(self, board: Grid) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has won.
        """
        return self.check_winner(board) is None and self.is_full(board)

    def evaluate(self, board: Grid) -> GameResult:
        """
        Classify the board as won, drawn, or still in progress.

        Args:
            board: The 3x3 grid.

        Returns:
            A GameResult. Evaluating does not modify the board.
        """
        line = self.get_winning_line(board)
        if line is not None:
            row, col = line[0]
            return GameResult(GameStatus.WIN, winner=board[row][col], line=line)
        if self.is_full(board):
            return DRAW
        return IN_PROGRESS
