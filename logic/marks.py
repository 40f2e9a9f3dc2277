"""
Marks, sides and outcomes for TicTacToe.
Small value types shared by the board, the win checker and the AI.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass


class Cell(Enum):
    """The three values a board cell can hold."""
    MARK_A = "X"
    MARK_B = "O"
    EMPTY = " "


class Side(Enum):
    """The two sides in the game."""
    HUMAN = "human"
    ENGINE = "engine"

    def opposite(self) -> "Side":
        """Get the opposite side."""
        return Side.ENGINE if self == Side.HUMAN else Side.HUMAN


@dataclass(frozen=True)
class Outcome:
    """
    Result of a finished game.

    A winner of None means the game ended in a draw. A game that is still
    going has no Outcome at all (None).
    """
    winner: Optional[Side] = None

    @classmethod
    def win(cls, side: Side) -> "Outcome":
        return cls(winner=side)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(winner=None)

    @property
    def is_win(self) -> bool:
        return self.winner is not None

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class GameStatus(Enum):
    """
    Game-level state machine.

    IN_PROGRESS is the initial state. WON and DRAW are terminal.
    """
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"

    @classmethod
    def from_outcome(cls, outcome: Optional[Outcome]) -> "GameStatus":
        if outcome is None:
            return cls.IN_PROGRESS
        return cls.WON if outcome.is_win else cls.DRAW

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.IN_PROGRESS
