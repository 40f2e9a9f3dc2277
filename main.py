"""
Main orchestration script for console TicTacToe.

This script ties together:
- The board (marks, turns, results)
- Move validation for typed input
- The minimax AI opponent

Run this script to play TicTacToe against the computer!
"""

from typing import Callable, Optional, Tuple

from logic.game_state import Board
from logic.marks import Side, Outcome, GameStatus
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer


HINT_COMMAND = "hint"
QUIT_COMMAND = "quit"


class ConsoleGame:
    """
    Text-mode game between a human and the computer.

    Game flow:
    1. The side to move is announced
    2. Human types "row,col" (or the computer searches for its move)
    3. The move is placed and the result is checked before the turn changes
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        first_side: Side = Side.HUMAN,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        verbose: Optional[bool] = None,
    ):
        """
        Initialize the game.

        Args:
            first_side: Which side moves first.
            input_fn: Reads one line of user input.
            output_fn: Shows one message to the user.
            verbose: Print AI search statistics.
        """
        self.input_fn = input_fn
        self.output_fn = output_fn

        self.board = Board(current_side=first_side)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Side.ENGINE, verbose=verbose)

        self.status = GameStatus.IN_PROGRESS
        self.outcome: Optional[Outcome] = None

    def play(self) -> Optional[Outcome]:
        """
        Run the game to the end.

        Returns:
            The final Outcome, or None if the human quit.
        """
        self._show_board()

        while not self.status.is_terminal:
            side = self.board.current_side
            self.output_fn(f"{side.name.title()}'s move: ")

            if side == Side.HUMAN:
                move = self._read_human_move()
                if move is None:
                    self.output_fn("Game quit by user.")
                    return None
                row, col = move
                self.board.apply_move(row, col, self.board.human_mark)
            else:
                self.ai.choose_move(self.board)

            self._show_board()

            # Result is checked before the turn changes, the mover gets the win
            self.outcome = self.board.outcome()
            self.status = GameStatus.from_outcome(self.outcome)

            if not self.status.is_terminal:
                self.board.toggle_turn()

        self._show_game_result()
        return self.outcome

    def _read_human_move(self) -> Optional[Tuple[int, int]]:
        """
        Ask until the human types a legal move.

        Returns:
            (row, col), or None if the human typed quit.
        """
        while True:
            line = self.input_fn("").strip()

            if line.lower() == QUIT_COMMAND:
                return None

            if line.lower() == HINT_COMMAND:
                self.output_fn(self.ai.get_move_suggestion(self.board, Side.HUMAN))
                continue

            move, result = self.validator.parse_and_validate(self.board, line)
            if move is not None:
                return move

            self.output_fn(result.error_message)

    def _show_board(self):
        self.output_fn("Current board configuration:")
        self.output_fn(self.board.render())

    def _show_game_result(self):
        """Show the final game result."""
        if self.status == GameStatus.DRAW:
            self.output_fn("Draw!")
            return

        winner = self.outcome.winner
        if winner == Side.HUMAN:
            self.output_fn("Human won! Congratulations!")
        else:
            self.output_fn("Engine won! Better luck next time!")


def ask_first_side(
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> Side:
    """Prompt until the user picks who moves first."""
    validator = MoveValidator()

    output_fn("Computer - C, Player - P")
    output_fn("Enter who will play first: ")
    while True:
        side, result = validator.parse_first_side(input_fn(""))
        if side is not None:
            return side
        output_fn(result.error_message)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a minimax AI")
    first = parser.add_mutually_exclusive_group()
    first.add_argument(
        "--engine-first",
        action="store_true",
        help="Let the computer play first"
    )
    first.add_argument(
        "--human-first",
        action="store_true",
        help="Play the first move yourself"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print AI search statistics"
    )

    args = parser.parse_args()

    try:
        if args.engine_first:
            first_side = Side.ENGINE
        elif args.human_first:
            first_side = Side.HUMAN
        else:
            first_side = ask_first_side()

        game = ConsoleGame(first_side=first_side, verbose=args.verbose or None)
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
