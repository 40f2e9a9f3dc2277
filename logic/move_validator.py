"""
Move validator for TicTacToe.
Validates and parses moves typed by the human side.
"""

from enum import Enum
from typing import Optional, Tuple, List
from dataclasses import dataclass

from .game_state import Board
from .marks import Side


class MoveError(Enum):
    """Why a move was rejected."""
    INVALID_POSITION = "invalid_position"
    OCCUPIED_CELL = "occupied_cell"
    MALFORMED_INPUT = "malformed_input"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


VALID = ValidationResult(is_valid=True)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must both be in 0-2
    2. Can only place on empty cells

    Every rejection is recoverable, the caller shows the message and asks again.
    """

    BOUNDS_MESSAGE = "Place tile in bounds (0 <= row <= 2, 0 <= col <= 2)!"
    OCCUPIED_MESSAGE = "Choose a free cell!"
    MALFORMED_MESSAGE = "Please enter a move as row,col (for example 1,2)!"
    FIRST_SIDE_MESSAGE = "Please enter C (computer) or P (player)!"

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        if not board.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_POSITION,
                error_message=self.BOUNDS_MESSAGE,
            )

        if not board.is_legal(row, col):
            return ValidationResult(
                is_valid=False,
                error=MoveError.OCCUPIED_CELL,
                error_message=self.OCCUPIED_MESSAGE,
            )

        return VALID

    def parse_move(self, text: str) -> Tuple[Optional[Tuple[int, int]], ValidationResult]:
        """
        Parse a "row,col" pair.

        Only the syntax is checked here, bounds and occupancy are left to
        validate_move.

        Args:
            text: Raw line typed by the user.

        Returns:
            ((row, col), VALID) on success, (None, failure) otherwise.
        """
        parts = text.strip().split(",")
        if len(parts) != 2:
            return None, self._malformed()

        try:
            row, col = int(parts[0].strip()), int(parts[1].strip())
        except ValueError:
            return None, self._malformed()

        return (row, col), VALID

    def parse_and_validate(self, board: Board, text: str) -> Tuple[Optional[Tuple[int, int]], ValidationResult]:
        """Parse a move and check it against the board in one go."""
        move, result = self.parse_move(text)
        if move is None:
            return None, result

        result = self.validate_move(board, *move)
        if not result.is_valid:
            return None, result
        return move, result

    def parse_first_side(self, text: str) -> Tuple[Optional[Side], ValidationResult]:
        """
        Parse who moves first: C for the computer, P for the player.
        """
        choice = text.strip().lower()
        if choice == "c":
            return Side.ENGINE, VALID
        if choice == "p":
            return Side.HUMAN, VALID

        return None, ValidationResult(
            is_valid=False,
            error=MoveError.MALFORMED_INPUT,
            error_message=self.FIRST_SIDE_MESSAGE,
        )

    def get_valid_moves(self, board: Board) -> List[Tuple[int, int]]:
        """
        Get all valid moves, empty when the game is already decided.
        """
        if board.outcome() is not None:
            return []
        return board.get_empty_cells()

    def _malformed(self) -> ValidationResult:
        return ValidationResult(
            is_valid=False,
            error=MoveError.MALFORMED_INPUT,
            error_message=self.MALFORMED_MESSAGE,
        )
