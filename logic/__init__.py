"""
Logic module for console TicTacToe.
Handles the board, rules, and the minimax AI opponent.
"""

from .marks import Cell, Side, Outcome, GameStatus
from .config import GameConfig
from .game_state import Board
from .move_validator import MoveValidator, MoveError, ValidationResult
from .win_checker import WinChecker, WINNING_LINES
from .ai_player import AIPlayer, SearchPreconditionViolated

__version__ = "1.0.0"
