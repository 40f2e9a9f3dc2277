"""Tests for the board, its moves and its results."""

import pytest

from logic.game_state import Board
from logic.marks import Cell, Side, Outcome, GameStatus
from logic.win_checker import WinChecker

X, O, _ = Cell.MARK_A, Cell.MARK_B, Cell.EMPTY


def test_new_board_is_empty():
    board = Board()
    assert board.has_empty_cell()
    assert len(board.get_empty_cells()) == 9
    assert board.current_side == Side.HUMAN
    assert board.engine_mark == X
    assert board.human_mark == O
    assert board.outcome() is None


def test_marks_must_be_distinct_and_not_empty():
    with pytest.raises(ValueError):
        Board(engine_mark=X, human_mark=X)
    with pytest.raises(ValueError):
        Board(engine_mark=_, human_mark=O)


def test_from_rows_rejects_bad_shapes():
    with pytest.raises(ValueError):
        Board.from_rows([[_, _, _], [_, _, _]])
    with pytest.raises(ValueError):
        Board.from_rows([[_, _], [_, _], [_, _]])


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_out_of_range_is_illegal(row, col):
    assert not Board().is_legal(row, col)


def test_occupied_cell_is_illegal():
    board = Board()
    assert board.is_legal(1, 1)
    assert board.apply_move(1, 1, O)
    assert not board.is_legal(1, 1)


def test_apply_move_does_not_toggle_turn():
    board = Board(current_side=Side.ENGINE)
    board.apply_move(0, 0, X)
    assert board.grid[0][0] == X
    assert board.current_side == Side.ENGINE


def test_apply_move_rejects_illegal_targets():
    board = Board()
    board.apply_move(0, 0, X)
    before = board.copy()

    assert board.apply_move(0, 0, O) is False
    assert board.apply_move(3, 1, O) is False
    assert board.apply_move(1, 1, Cell.EMPTY) is False
    assert board == before


def test_toggle_turn_flips_between_sides():
    board = Board(current_side=Side.HUMAN)
    board.toggle_turn()
    assert board.current_side == Side.ENGINE
    board.toggle_turn()
    assert board.current_side == Side.HUMAN


def test_mark_and_side_mapping():
    board = Board()
    assert board.mark_for(Side.ENGINE) == X
    assert board.mark_for(Side.HUMAN) == O
    assert board.side_for(X) == Side.ENGINE
    assert board.side_for(O) == Side.HUMAN
    assert board.side_for(_) is None


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    clone.apply_move(2, 2, X)
    clone.toggle_turn()
    assert board.grid[2][2] == _
    assert board.current_side == Side.HUMAN
    assert board != clone


@pytest.mark.parametrize("rows", [
    [[X, X, X], [O, O, _], [_, _, _]],  # row
    [[O, X, _], [O, X, _], [_, X, _]],  # column
    [[X, O, _], [O, X, _], [_, _, X]],  # diagonal
    [[O, O, X], [_, X, _], [X, _, _]],  # anti-diagonal
])
def test_completed_line_is_credited_to_current_side(rows):
    board = Board.from_rows(rows, current_side=Side.ENGINE)
    assert board.outcome() == Outcome.win(Side.ENGINE)

    board.toggle_turn()
    assert board.outcome() == Outcome.win(Side.HUMAN)


def test_full_board_without_line_is_draw():
    board = Board.from_rows([
        [X, O, X],
        [X, O, O],
        [O, X, X],
    ])
    assert not board.has_empty_cell()
    assert board.outcome() == Outcome.draw()
    assert board.outcome().is_draw


def test_win_on_last_cell_beats_draw():
    board = Board.from_rows([
        [X, O, X],
        [O, X, O],
        [O, X, X],
    ])
    assert board.outcome() == Outcome.win(Side.ENGINE)


def test_outcome_is_repeatable():
    board = Board.from_rows([[X, X, _], [O, O, _], [_, _, _]])
    before = board.copy()
    assert board.outcome() == board.outcome()
    assert board == before


def test_win_checker_status_and_line():
    checker = WinChecker()
    board = Board.from_rows([[O, X, _], [_, X, O], [_, X, _]])

    assert checker.get_status(board) == GameStatus.WON
    assert checker.get_winning_line(board) == ((0, 1), (1, 1), (2, 1))
    assert not checker.check_draw(board)

    assert checker.get_status(Board()) == GameStatus.IN_PROGRESS
    assert checker.get_winning_line(Board()) is None


def test_game_status_from_outcome():
    assert GameStatus.from_outcome(None) == GameStatus.IN_PROGRESS
    assert GameStatus.from_outcome(Outcome.draw()) == GameStatus.DRAW
    assert GameStatus.from_outcome(Outcome.win(Side.HUMAN)) == GameStatus.WON
    assert GameStatus.WON.is_terminal
    assert GameStatus.DRAW.is_terminal
    assert not GameStatus.IN_PROGRESS.is_terminal


def test_render_draws_grid():
    board = Board.from_rows([[X, O, _], [_, X, _], [_, _, O]])
    assert board.render() == (
        "-------------\n"
        "| X | O |   |\n"
        "-------------\n"
        "|   | X |   |\n"
        "-------------\n"
        "|   |   | O |\n"
        "-------------"
    )


def test_render_uses_custom_glyphs():
    board = Board.from_rows([[X, O, _], [_, _, _], [_, _, _]])
    glyphs = {X: "#", O: "@", _: "."}
    assert board.render(glyphs).splitlines()[1] == "| # | @ | . |"
