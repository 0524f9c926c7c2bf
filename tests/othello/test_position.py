"""Unit tests for /src/othello/position.py"""

import pytest

from src.core.exceptions import InvalidPositionError
from src.othello.board import Board
from src.othello.pieces import Piece
from src.othello.position import STARTING_POSITION, PositionState, is_valid_position


def test_starting_position() -> None:
    state = PositionState.starting_position()
    assert state.board == Board.initial()
    assert state.color_to_move == Piece.BLACK


@pytest.mark.parametrize(
    "position",
    [STARTING_POSITION, "8/8/8/3wb3/3bb3/3b4/8/8 w", "b7/8/8/8/8/8/8/7w b"],
)
def test_roundtrip(position: str) -> None:
    assert PositionState.from_string(position).to_string() == position


def test_white_to_move() -> None:
    state = PositionState.from_string("8/8/8/3wb3/3bb3/3b4/8/8 w")
    assert state.color_to_move == Piece.WHITE


@pytest.mark.parametrize(
    "position",
    [
        "8/8/8/3wb3/3bw3/8/8/8",  # color to move missing
        "8/8/8/3wb3/3bw3/8/8/8 b extra",
        "8/8/8/3wb3/3bw3/8/8/8 x",
        "8/8/8/3wb3/3bw3/8/8 b",
        "8/8/8/3wq3/3bw3/8/8/8 b",
    ],
)
def test_invalid_position(position: str) -> None:
    with pytest.raises(InvalidPositionError):
        PositionState.from_string(position)
    assert not is_valid_position(position)


def test_valid_position() -> None:
    assert is_valid_position(STARTING_POSITION)
