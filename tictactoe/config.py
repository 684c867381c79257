"""
Configuration for the TicTacToe window and players.
All the settings for drawing the board, the font, and who plays what.
"""

from typing import Tuple


class GameConfig:
    """
    Configuration class for game settings.
    Change these values based on your setup, or pass overrides:

        config = GameConfig(FONT_PATH="/usr/share/fonts/TTF/DejaVuSans.ttf")
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Size of each cell in pixels
    CELL_SIZE = 100

    # Total window size
    WINDOW_SIZE = CELL_SIZE * BOARD_SIZE  # 300px

    # Thickness of the grid lines
    LINE_WIDTH = 5

    # ==================== FONT SETTINGS ====================
    # TrueType font used to draw the marks
    FONT_PATH = "/usr/share/fonts/truetype/msttcorefonts/arial.ttf"
    FONT_SIZE = 50

    # Where a mark is drawn inside its cell (x, y offset from the top-left corner)
    MARK_OFFSET: Tuple[int, int] = (25, 10)

    # ==================== COLORS ====================
    BACKGROUND_COLOR = "#ffffff"
    LINE_COLOR = "#000000"
    MARK_COLOR = "#000000"
    WIN_HIGHLIGHT_COLOR = "#d9f2df"
    STATUS_FONT = ("Helvetica", 11)

    WINDOW_TITLE = "Tic Tac Toe"

    # ==================== PLAYERS ====================
    # Mark the human plays. X always moves first.
    HUMAN_MARK = "X"

    # Prefer quick wins and slow losses when several moves score the same
    PREFER_FASTER_WINS = True

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(type(self), name):
                raise AttributeError(f"Unknown config setting: {name}")
            setattr(self, name, value)

        # Keep the derived size in sync with overridden cell size
        if "CELL_SIZE" in overrides and "WINDOW_SIZE" not in overrides:
            self.WINDOW_SIZE = self.CELL_SIZE * self.BOARD_SIZE

    def cell_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Pixel position of the top-left corner of a cell."""
        return (col * self.CELL_SIZE, row * self.CELL_SIZE)

    def mark_position(self, row: int, col: int) -> Tuple[int, int]:
        """Pixel position where a mark is drawn."""
        x, y = self.cell_origin(row, col)
        dx, dy = self.MARK_OFFSET
        return (x + dx, y + dy)
