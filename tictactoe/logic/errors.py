"""
Exceptions raised by the TicTacToe core.

Move errors are recoverable: the board is left unchanged and the
front end decides whether to ask again. AssetUnavailable is fatal and
is turned into an exit status by the bootstrap code in main.py.
"""

from typing import Optional


class TicTacToeError(Exception):
    """Base class for all TicTacToe errors."""


class MoveError(TicTacToeError):
    """A move was rejected. The board was not modified."""

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.row = row
        self.col = col


class InvalidCoordinate(MoveError):
    """Row or column outside the board."""


class CellOccupied(MoveError):
    """The target cell already holds a mark."""


class OutOfTurn(MoveError):
    """A mark tried to move when it was the other mark's turn."""


class GameOver(MoveError):
    """The game has already been won or drawn."""


class InvalidBoard(TicTacToeError):
    """A board that cannot occur in an alternating game."""


class AssetUnavailable(TicTacToeError):
    """A required resource (font) could not be loaded."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
