"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional, Tuple

from .config import GameConfig
from .game_state import Board
from .marks import Side


class SearchPreconditionViolated(RuntimeError):
    """
    The AI was asked to move on a board where no move makes sense.

    This is a bug in the caller (it should have noticed the game was over),
    not something a player can recover from.
    """


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The search is plain minimax over every continuation, no pruning and
    no caching. Trial moves are made on the real board and taken back
    before returning, so the board comes back exactly as it was passed in.
    """

    def __init__(self, side: Side = Side.ENGINE, verbose: Optional[bool] = None):
        """
        Initialize the AI player.

        Args:
            side: Which side the AI optimizes for by default.
            verbose: Print a summary after each search (default: GameConfig.DEBUG_MODE).
        """
        self.side = side
        self.verbose = GameConfig.DEBUG_MODE if verbose is None else verbose
        self.reward = GameConfig.WIN_REWARD
        self.bound = GameConfig.SCORE_BOUND

        # Stats from the last search (for debugging)
        self.nodes_evaluated = 0
        self.last_score: Optional[int] = None

    def choose_move(self, board: Board, side: Optional[Side] = None) -> Tuple[int, int]:
        """
        Pick the best move and play it on the board.

        The turn is not toggled, the caller checks the outcome first.

        Args:
            board: Current board, with side to move.
            side: Side to optimize for (default: the AI's own side).

        Returns:
            (row, col) of the move that was played.

        Raises:
            SearchPreconditionViolated: if the board is full or it is not side's turn.
        """
        side = side or self.side
        row, col = self.find_best_move(board, side)
        board.apply_move(row, col, board.mark_for(side))
        return row, col

    def find_best_move(self, board: Board, side: Optional[Side] = None) -> Tuple[int, int]:
        """
        Get the best move for the current position without playing it.

        Ties go to the first cell in row-major order.

        Args:
            board: Current board.
            side: Side to optimize for (default: the AI's own side).

        Returns:
            (row, col) of the best move.
        """
        side = side or self.side

        if not board.has_empty_cell():
            raise SearchPreconditionViolated("No free tiles!")

        # Wins are credited to the side to move, so the search must start on side's turn
        if board.current_side != side:
            raise SearchPreconditionViolated(
                f"It's not {side.value}'s turn, {board.current_side.value} is to move!"
            )

        self.nodes_evaluated = 0
        mark = board.mark_for(side)

        best_score = -self.bound
        best_move: Optional[Tuple[int, int]] = None

        for row, col in board.get_empty_cells():
            board.grid[row][col] = mark
            try:
                move_score = self.score(board, 0, side)
            finally:
                board.clear_cell(row, col)

            if move_score > best_score:
                best_score = move_score
                best_move = (row, col)

        self.last_score = best_score

        if self.verbose:
            print(f"AI evaluated {self.nodes_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def score(self, board: Board, depth: int, side: Side) -> int:
        """
        Minimax score of the position just after a move.

        Args:
            board: Board with the last move already placed and the mover
                still set as current side.
            depth: Number of plies below the root move.
            side: Side the score is measured for.

        Returns:
            REWARD - depth for a win, depth - REWARD for a loss, 0 for a draw,
            otherwise the best score reachable with both sides playing well.
        """
        self.nodes_evaluated += 1

        outcome = board.outcome()
        if outcome is not None:
            if outcome.is_draw:
                return 0
            if outcome.winner == side:
                return self.reward - depth  # Win (prefer faster wins)
            return -self.reward + depth  # Loss (prefer slower losses)

        board.toggle_turn()
        try:
            mover = board.current_side
            mark = board.mark_for(mover)
            is_maximizing = mover == side
            best = -self.bound if is_maximizing else self.bound

            for row, col in board.get_empty_cells():
                board.grid[row][col] = mark
                try:
                    value = self.score(board, depth + 1, side)
                finally:
                    board.clear_cell(row, col)

                if is_maximizing:
                    best = max(best, value)
                else:
                    best = min(best, value)

            return best
        finally:
            board.toggle_turn()

    def get_move_suggestion(self, board: Board, side: Optional[Side] = None) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.
            side: Side to suggest a move for.

        Returns:
            A string describing the suggested move.
        """
        side = side or board.current_side

        if not board.has_empty_cell():
            return "No moves available!"

        row, col = self.find_best_move(board, side)
        return f"Suggested move: {row},{col}"
