"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board with grid lines and marks
- Game status (whose turn, rejected moves, result)

Controls:
- Left click: place your mark
- r: start a new game
- q / Escape: quit
"""

import logging
import tkinter as tk
from typing import Dict, Optional

from PIL import ImageFont, ImageTk

from tictactoe.assets import render_mark
from tictactoe.config import GameConfig
from tictactoe.logic import Mark, MoveError
from tictactoe.session import GameSession

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Reads the session's board to draw it and forwards clicks to the
    session. Everything runs on the Tk thread.
    """

    def __init__(
        self,
        session: GameSession,
        font: ImageFont.FreeTypeFont,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the UI.

        Args:
            session: The game session to display and drive.
            font: Font used for the marks (see assets.load_font).
            config: Game configuration. Uses the session's if not provided.
        """
        self.session = session
        self.font = font
        self.config = config or session.config

        # PhotoImages must outlive the canvas items that show them
        self.mark_images: Dict[Mark, ImageTk.PhotoImage] = {}

        self._create_ui()
        self.session.on_change = self._on_session_change

    def _create_ui(self):
        """Create the Tkinter UI."""
        config = self.config

        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.configure(bg=config.BACKGROUND_COLOR)
        self.root.resizable(False, False)

        # Board canvas
        self.canvas = tk.Canvas(
            self.root,
            width=config.WINDOW_SIZE,
            height=config.WINDOW_SIZE,
            bg=config.BACKGROUND_COLOR,
            highlightthickness=0
        )
        self.canvas.pack()

        # Status line under the board
        self.status_label = tk.Label(
            self.root,
            text="",
            font=config.STATUS_FONT,
            bg=config.BACKGROUND_COLOR,
            fg=config.LINE_COLOR,
            anchor="w"
        )
        self.status_label.pack(fill=tk.X, padx=6, pady=4)

        for mark in Mark:
            image = render_mark(mark.value, self.font, config.MARK_COLOR)
            self.mark_images[mark] = ImageTk.PhotoImage(image, master=self.root)

        # Bind input
        self.canvas.bind("<Button-1>", self._on_click)
        self.root.bind("<KeyPress-r>", lambda event: self._reset_game())
        self.root.bind("<KeyPress-q>", lambda event: self._quit())
        self.root.bind("<Escape>", lambda event: self._quit())
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Forward a click to the session."""
        try:
            self.session.handle_click(event.x, event.y)
        except MoveError as exc:
            self.status_label.configure(text=str(exc))

    def _on_session_change(self, session: GameSession):
        """Redraw after every state change, before more input is handled."""
        self.draw_board()
        # Flush so the human's mark shows while the AI is searching
        self.root.update_idletasks()

    def draw_board(self):
        """Draw grid lines, winning line highlight, and marks."""
        config = self.config
        size = config.CELL_SIZE
        board = self.session.game_state.board

        self.canvas.delete("all")

        # Highlight the winning line
        result = self.session.result
        if result.is_win:
            for row, col in result.line:
                x, y = config.cell_origin(row, col)
                self.canvas.create_rectangle(
                    x, y, x + size, y + size,
                    fill=config.WIN_HIGHLIGHT_COLOR, width=0
                )

        # Grid lines
        for i in range(1, config.BOARD_SIZE):
            offset = i * size
            # Vertical line
            self.canvas.create_rectangle(
                offset, 0, offset + config.LINE_WIDTH, config.WINDOW_SIZE,
                fill=config.LINE_COLOR, width=0
            )
            # Horizontal line
            self.canvas.create_rectangle(
                0, offset, config.WINDOW_SIZE, offset + config.LINE_WIDTH,
                fill=config.LINE_COLOR, width=0
            )

        # Marks
        for row in range(config.BOARD_SIZE):
            for col in range(config.BOARD_SIZE):
                mark = board[row][col]
                if mark is None:
                    continue
                x, y = config.mark_position(row, col)
                self.canvas.create_image(x, y, anchor=tk.NW, image=self.mark_images[mark])

        self.status_label.configure(text=self.session.status_text())

    def _reset_game(self):
        """Start a new game."""
        logger.info("Resetting game...")
        self.session.reset()

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Start the session and run the UI main loop."""
        self.session.start()
        self.draw_board()
        self.root.mainloop()
