"""
Game state management for TicTacToe.
Tracks the board, the mark to play, and the move history.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .errors import InvalidBoard
from .marks import Mark
from .move_validator import MoveValidator
from .win_checker import GameResult, WinChecker

BOARD_SIZE = 3

_validator = MoveValidator()
_win_checker = WinChecker()


@dataclass(frozen=True)
class Move:
    """
    An accepted move.
    """
    mark: Mark              # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # 0 for the first move of the game

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.row, self.col)


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 board (None means empty)
    - The mark whose turn it is
    - Move history

    Invariant: the number of X marks equals the number of O marks,
    or exceeds it by one.
    """

    board: List[List[Optional[Mark]]] = field(
        default_factory=lambda: [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
    )

    current_player: Mark = Mark.X

    moves: List[Move] = field(default_factory=list)

    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence[str]]]) -> "GameState":
        """
        Build a state from three rows of symbols.

        Args:
            rows: e.g. ["XOX", "XOO", "OXX"] or [["X", "O", " "], ...].
                  " " or "." marks an empty cell.

        Returns:
            A GameState with the mark to play derived from the counts.
            The move history is left empty.

        Raises:
            InvalidBoard: Wrong shape, unknown symbol, or impossible counts.
        """
        if len(rows) != BOARD_SIZE:
            raise InvalidBoard(f"Expected {BOARD_SIZE} rows, got {len(rows)}")

        board: List[List[Optional[Mark]]] = []
        for row in rows:
            if len(row) != BOARD_SIZE:
                raise InvalidBoard(f"Expected {BOARD_SIZE} cells per row, got {row!r}")
            try:
                board.append([Mark.parse(symbol) for symbol in row])
            except ValueError as exc:
                raise InvalidBoard(f"Unknown symbol in row {row!r}") from exc

        x_count = _count(board, Mark.X)
        o_count = _count(board, Mark.O)
        if x_count - o_count not in (0, 1):
            raise InvalidBoard(
                f"X has {x_count} marks and O has {o_count}; X must lead by 0 or 1"
            )

        current = Mark.X if x_count == o_count else Mark.O
        return cls(board=board, current_player=current)

    def make_move(self, row: int, col: int, mark: Optional[Mark] = None) -> Move:
        """
        Place the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: Optional mark to check against the turn indicator.

        Returns:
            The accepted Move.

        Raises:
            InvalidCoordinate: row or col is off the board.
            CellOccupied: the cell already holds a mark.
            OutOfTurn: mark is not the mark to play.
        """
        result = _validator.validate_move(self, row, col, mark)
        if not result.is_valid:
            raise result.error

        placed = self.current_player
        self.board[row][col] = placed
        move = Move(mark=placed, row=row, col=col, move_number=len(self.moves))
        self.moves.append(move)

        # Winner/draw is checked separately, just switch turns here
        self.current_player = placed.opposite()
        return move

    def is_terminal(self) -> GameResult:
        """Evaluate the board: win, draw, or still in progress."""
        return _win_checker.evaluate(self.board)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        return [
            (row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.board[row][col] is None
        ]

    legal_moves = get_empty_cells

    def count(self, mark: Mark) -> int:
        """Number of cells holding mark."""
        return _count(self.board, mark)

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            board=[row[:] for row in self.board],
            current_player=self.current_player,
            moves=list(self.moves)
        )

    def rows(self) -> List[str]:
        """The board as three strings, "." for empty cells."""
        return ["".join(str(cell) if cell else "." for cell in row) for row in self.board]

    def render_text(self) -> str:
        """The board as a small text grid with row/column indices."""
        lines = ["   0   1   2"]
        for index, row in enumerate(self.board):
            cells = " | ".join(str(cell) if cell else " " for cell in row)
            lines.append(f"{index}  {cells}")
            if index < BOARD_SIZE - 1:
                lines.append("  ---+---+---")
        return "\n".join(lines)


def _count(board: Iterable[Iterable[Optional[Mark]]], mark: Mark) -> int:
    return sum(1 for row in board for cell in row if cell == mark)
