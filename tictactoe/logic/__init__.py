"""
Logic module for TicTacToe.
Handles board state, rules, win detection, and the AI opponent.
"""

from .marks import Mark
from .errors import (
    TicTacToeError,
    MoveError,
    InvalidCoordinate,
    CellOccupied,
    OutOfTurn,
    GameOver,
    InvalidBoard,
    AssetUnavailable,
)
from .win_checker import WinChecker, GameResult, GameStatus
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameState, Move
from .ai_player import AIPlayer, SearchResult
