"""
Win checker for TicTacToe.
Checks if a side has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

from .marks import Cell, Outcome, GameStatus


Line = Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]

# All possible winning lines, rows before columns before diagonals
WINNING_LINES: List[Line] = [
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
]


def find_winning_line(grid: List[List[Cell]]) -> Optional[Line]:
    """
    Find the first line holding three identical marks.

    Args:
        grid: The 3x3 grid of cells.

    Returns:
        The completed line, or None if no line is complete.
    """
    for line in WINNING_LINES:
        (r0, c0), (r1, c1), (r2, c2) = line
        first = grid[r0][c0]
        if first is not Cell.EMPTY and first is grid[r1][c1] and first is grid[r2][c2]:
            return line
    return None


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)

    The win is credited to the board's current side. Call this right after
    a move and before the turn is toggled, so the current side is the mover.
    """

    WINNING_LINES = WINNING_LINES

    def check_outcome(self, board) -> Optional[Outcome]:
        """
        Work out the result of the position.

        Args:
            board: The board to inspect.

        Returns:
            Outcome.win(mover), Outcome.draw(), or None if still in progress.
        """
        if find_winning_line(board.grid) is not None:
            return Outcome.win(board.current_side)

        if not board.has_empty_cell():
            return Outcome.draw()

        return None

    def check_draw(self, board) -> bool:
        """True if the board is full and no line is complete."""
        outcome = self.check_outcome(board)
        return outcome is not None and outcome.is_draw

    def get_status(self, board) -> GameStatus:
        """Map the current position onto the game state machine."""
        return GameStatus.from_outcome(self.check_outcome(board))

    def get_winning_line(self, board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Args:
            board: The board.

        Returns:
            The winning line as three (row, col) tuples, or None.
        """
        return find_winning_line(board.grid)
