"""Tests for move parsing and validation."""

import pytest

from logic.game_state import Board
from logic.marks import Cell, Side, Outcome
from logic.move_validator import MoveValidator, MoveError

X, O, _ = Cell.MARK_A, Cell.MARK_B, Cell.EMPTY


@pytest.fixture
def validator():
    return MoveValidator()


@pytest.mark.parametrize("text, expected", [
    ("1,2", (1, 2)),
    (" 0 , 0 \n", (0, 0)),
    ("2,1", (2, 1)),
    ("7,-1", (7, -1)),
])
def test_parse_move_accepts_pairs(validator, text, expected):
    move, result = validator.parse_move(text)
    assert move == expected
    assert result.is_valid


@pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b", "1;2", "one,two", ","])
def test_parse_move_rejects_garbage(validator, text):
    move, result = validator.parse_move(text)
    assert move is None
    assert not result.is_valid
    assert result.error == MoveError.MALFORMED_INPUT
    assert result.error_message


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 1), (9, 9)])
def test_out_of_bounds_move(validator, row, col):
    result = validator.validate_move(Board(), row, col)
    assert not result.is_valid
    assert result.error == MoveError.INVALID_POSITION
    assert "in bounds" in result.error_message


def test_occupied_move(validator):
    board = Board()
    board.apply_move(1, 1, X)
    result = validator.validate_move(board, 1, 1)
    assert not result.is_valid
    assert result.error == MoveError.OCCUPIED_CELL
    assert result.error_message == "Choose a free cell!"


def test_valid_move(validator):
    result = validator.validate_move(Board(), 2, 2)
    assert result.is_valid
    assert result.error is None


def test_parse_and_validate(validator):
    board = Board()
    board.apply_move(0, 0, O)

    assert validator.parse_and_validate(board, "1,1")[0] == (1, 1)

    move, result = validator.parse_and_validate(board, "0,0")
    assert move is None and result.error == MoveError.OCCUPIED_CELL

    move, result = validator.parse_and_validate(board, "0,5")
    assert move is None and result.error == MoveError.INVALID_POSITION

    move, result = validator.parse_and_validate(board, "hello")
    assert move is None and result.error == MoveError.MALFORMED_INPUT


@pytest.mark.parametrize("text, side", [
    ("c", Side.ENGINE),
    ("C\n", Side.ENGINE),
    (" p ", Side.HUMAN),
    ("P", Side.HUMAN),
])
def test_parse_first_side(validator, text, side):
    parsed, result = validator.parse_first_side(text)
    assert parsed == side
    assert result.is_valid


def test_parse_first_side_rejects_other_input(validator):
    parsed, result = validator.parse_first_side("x")
    assert parsed is None
    assert result.error == MoveError.MALFORMED_INPUT


def test_valid_moves_empty_once_decided(validator):
    won = Board.from_rows([[X, X, X], [O, O, _], [_, _, _]])
    assert won.outcome() == Outcome.win(Side.ENGINE)
    assert validator.get_valid_moves(won) == []

    board = Board.from_rows([[X, O, _], [_, _, _], [_, _, _]])
    assert validator.get_valid_moves(board) == board.get_empty_cells()
    assert len(validator.get_valid_moves(board)) == 7
