"""
Marks placed on the TicTacToe board.
"""

from enum import Enum
from typing import Optional


class Mark(Enum):
    """The two marks in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X

    @classmethod
    def parse(cls, symbol: str) -> Optional["Mark"]:
        """
        Convert a board symbol into a mark.

        Args:
            symbol: "X", "O" (any case), or " "/"."/"" for an empty cell.

        Returns:
            The Mark, or None for an empty cell.

        Raises:
            ValueError: If the symbol is not recognised.
        """
        text = symbol.strip().upper()
        if text in ("", "."):
            return None
        return cls(text)

    def __str__(self) -> str:
        return self.value
