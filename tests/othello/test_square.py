"""Unit tests for /src/othello/square.py"""

from string import ascii_lowercase

import pytest

from src.othello.square import BOARD_DIMENSIONS, CORNERS, Square, all_squares


@pytest.mark.parametrize(
    "row, col, notation",
    [
        (row, col, f"{ascii_lowercase[col]}{row + 1}")
        for row in range(8)
        for col in range(8)
    ],
)
def test_creating_from_algebraic(row: int, col: int, notation: str) -> None:
    """The letter picks the column, the digit the row: 'a1' is (0, 0), 'h1' is (0, 7)"""
    square = Square.from_algebraic(notation)
    assert square.row == row
    assert square.col == col


@pytest.mark.parametrize(
    "row, col, notation",
    [(0, 0, "a1"), (2, 3, "d3"), (7, 7, "h8"), (4, 2, "c5")],
)
def test_to_algebraic_notation(row: int, col: int, notation: str) -> None:
    assert Square(row, col).to_algebraic() == notation


def test_algebraic_is_case_insensitive() -> None:
    assert Square.from_algebraic("D3") == Square(2, 3)


def test_square_within_bounds() -> None:
    """happy case: every square of the 8x8 board"""
    for row in range(BOARD_DIMENSIONS[0]):
        for col in range(BOARD_DIMENSIONS[1]):
            assert Square(row, col).is_within_bounds()


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (8, 0), (0, 8), (8, 8)])
def test_square_out_of_bounds(row: int, col: int) -> None:
    assert not Square(row, col).is_within_bounds()


def test_shifted() -> None:
    """Walking along a direction may leave the board, the square itself does not complain"""
    assert Square(3, 3).shifted(-1, 1) == Square(2, 4)
    assert Square(3, 3).shifted(1, 1, distance=3) == Square(6, 6)
    assert not Square(0, 0).shifted(-1, 0).is_within_bounds()


def test_all_squares_is_row_major() -> None:
    squares = all_squares()
    assert len(squares) == 64
    assert squares[0] == Square(0, 0)
    assert squares[1] == Square(0, 1)
    assert squares[8] == Square(1, 0)
    assert squares == sorted(squares)


def test_corners() -> None:
    assert CORNERS == {Square(0, 0), Square(0, 7), Square(7, 0), Square(7, 7)}
