"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and which mark belongs to which side.
"""

from typing import Optional, List, Tuple, Dict, Sequence

from .config import GameConfig
from .marks import Cell, Side, Outcome
from .win_checker import WinChecker


def _empty_grid() -> List[List[Cell]]:
    size = GameConfig.BOARD_SIZE
    return [[Cell.EMPTY for _ in range(size)] for _ in range(size)]


class Board:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 grid (which mark is in each cell)
    - The side to move next
    - The mark each side plays with

    The board is the only mutable object in a game. Placing a mark never
    toggles the turn, that is a separate call so the AI can try moves and
    take them back without touching whose real turn it is.
    """

    _win_checker = WinChecker()

    def __init__(
        self,
        current_side: Side = Side.HUMAN,
        engine_mark: Cell = GameConfig.ENGINE_MARK,
        human_mark: Cell = GameConfig.HUMAN_MARK,
        grid: Optional[List[List[Cell]]] = None,
    ):
        """
        Initialize the board.

        Args:
            current_side: Which side moves first.
            engine_mark: Mark placed by the engine.
            human_mark: Mark placed by the human.
            grid: Optional preset grid (defaults to all empty).
        """
        if engine_mark == human_mark:
            raise ValueError(f"Sides must use different marks, both got {engine_mark.value!r}")
        if Cell.EMPTY in (engine_mark, human_mark):
            raise ValueError("Sides cannot play with the empty cell as their mark")

        self.current_side = current_side
        self.engine_mark = engine_mark
        self.human_mark = human_mark
        self.grid = grid if grid is not None else _empty_grid()

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Cell]],
        current_side: Side = Side.ENGINE,
        engine_mark: Cell = GameConfig.ENGINE_MARK,
        human_mark: Cell = GameConfig.HUMAN_MARK,
    ) -> "Board":
        """Build a board from a preset 3x3 grid (used for puzzles and tests)."""
        size = GameConfig.BOARD_SIZE
        if len(rows) != size or any(len(row) != size for row in rows):
            raise ValueError(f"Grid must be {size}x{size}")

        allowed = (engine_mark, human_mark, Cell.EMPTY)
        for row in rows:
            for cell in row:
                if cell not in allowed:
                    raise ValueError(f"Unexpected mark {cell!r} on the grid")

        return cls(
            current_side=current_side,
            engine_mark=engine_mark,
            human_mark=human_mark,
            grid=[list(row) for row in rows],
        )

    # ==================== SIDES AND MARKS ====================

    def mark_for(self, side: Side) -> Cell:
        """Get the mark a side plays with."""
        return self.engine_mark if side == Side.ENGINE else self.human_mark

    def side_for(self, mark: Cell) -> Optional[Side]:
        """Get the side owning a mark, or None for an empty cell."""
        if mark == self.engine_mark:
            return Side.ENGINE
        if mark == self.human_mark:
            return Side.HUMAN
        return None

    def toggle_turn(self):
        """Hand the turn to the other side."""
        self.current_side = self.current_side.opposite()

    # ==================== MOVES ====================

    def in_bounds(self, row: int, col: int) -> bool:
        size = GameConfig.BOARD_SIZE
        return 0 <= row < size and 0 <= col < size

    def is_legal(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board and the cell is empty."""
        return self.in_bounds(row, col) and self.grid[row][col] == Cell.EMPTY

    def apply_move(self, row: int, col: int, mark: Cell) -> bool:
        """
        Place a mark at the given position.

        Does not toggle the turn.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: The mark to place.

        Returns:
            True if the mark was placed, False if the move was rejected.
        """
        if mark not in (self.engine_mark, self.human_mark):
            return False

        if not self.is_legal(row, col):
            return False

        self.grid[row][col] = mark
        return True

    def clear_cell(self, row: int, col: int):
        """Put a cell back to empty (used to take back a trial move)."""
        self.grid[row][col] = Cell.EMPTY

    def has_empty_cell(self) -> bool:
        return any(Cell.EMPTY in row for row in self.grid)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty = []
        for row in range(GameConfig.BOARD_SIZE):
            for col in range(GameConfig.BOARD_SIZE):
                if self.grid[row][col] == Cell.EMPTY:
                    empty.append((row, col))
        return empty

    # ==================== RESULT ====================

    def outcome(self) -> Optional[Outcome]:
        """
        Work out whether the game is over.

        The winner is credited to the current side, so call this right
        after a move and before toggling the turn.

        Returns:
            Outcome.win(side), Outcome.draw(), or None while in progress.
        """
        return self._win_checker.check_outcome(self)

    # ==================== HELPERS ====================

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(
            current_side=self.current_side,
            engine_mark=self.engine_mark,
            human_mark=self.human_mark,
            grid=[list(row) for row in self.grid],
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.grid == other.grid
            and self.current_side == other.current_side
            and self.engine_mark == other.engine_mark
            and self.human_mark == other.human_mark
        )

    def __repr__(self) -> str:
        rows = ["".join(cell.value for cell in row) for row in self.grid]
        return f"Board({rows!r}, current_side={self.current_side.name})"

    def render(self, glyphs: Optional[Dict[Cell, str]] = None) -> str:
        """
        Draw the board as text.

        Args:
            glyphs: Mapping from cell value to the character shown for it.

        Returns:
            The grid framed with dashes and bars, one line per row.
        """
        glyphs = glyphs or GameConfig.MARK_GLYPHS
        separator = "-" * (4 * GameConfig.BOARD_SIZE + 1)

        lines = [separator]
        for row in self.grid:
            lines.append("| " + " | ".join(glyphs[cell] for cell in row) + " |")
            lines.append(separator)
        return "\n".join(lines)
