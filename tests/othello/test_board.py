"""Unit tests for /src/othello/board.py"""

import pytest

from src.core.exceptions import InvalidPositionError
from src.othello.board import INITIAL_PIECES, Board
from src.othello.pieces import Piece
from src.othello.square import Square

STARTING_LAYOUT = "8/8/8/3wb3/3bw3/8/8/8"
EMPTY_LAYOUT = "/".join(["8"] * 8)


# -- CREATION LOGIC --
def test_initial_layout() -> None:
    """white on (3,3) and (4,4), black on (3,4) and (4,3), everything else empty"""
    board = Board.initial()
    assert board.cell(Square(3, 3)) == Piece.WHITE
    assert board.cell(Square(4, 4)) == Piece.WHITE
    assert board.cell(Square(3, 4)) == Piece.BLACK
    assert board.cell(Square(4, 3)) == Piece.BLACK
    assert board.empty_count() == 60


def test_initial_layout_from_custom_pieces() -> None:
    pieces = ((Square(0, 0), Piece.BLACK), (Square(7, 7), Piece.WHITE))
    board = Board.initial(pieces)
    assert board.locate(Piece.BLACK) == [Square(0, 0)]
    assert board.locate(Piece.WHITE) == [Square(7, 7)]


def test_reset_is_idempotent() -> None:
    board = Board.initial()
    board.set_cell(Square(0, 0), Piece.BLACK)
    board.reset()
    first = board.snapshot()
    board.reset()
    assert board == first == Board.initial()


@pytest.mark.parametrize(
    "layout, black, white",
    [
        (STARTING_LAYOUT, [Square(3, 4), Square(4, 3)], [Square(3, 3), Square(4, 4)]),
        (EMPTY_LAYOUT, [], []),
        ("b7/8/8/8/8/8/8/7w", [Square(0, 0)], [Square(7, 7)]),
        ("bwbwbwbw/8/8/8/8/8/8/8", [Square(0, c) for c in (0, 2, 4, 6)], [Square(0, c) for c in (1, 3, 5, 7)]),
    ],
)
def test_from_position(layout: str, black: list[Square], white: list[Square]) -> None:
    board = Board.from_position(layout)
    assert board.locate(Piece.BLACK) == black
    assert board.locate(Piece.WHITE) == white


@pytest.mark.parametrize(
    "layout",
    [STARTING_LAYOUT, EMPTY_LAYOUT, "b7/8/8/8/8/8/8/7w", "bwbwbwbw/wbwbwbwb/8/2bb4/8/8/8/8"],
)
def test_position_roundtrip(layout: str) -> None:
    assert Board.from_position(layout).to_position() == layout


def test_initial_board_to_position() -> None:
    assert Board.initial().to_position() == STARTING_LAYOUT


@pytest.mark.parametrize(
    "layout",
    [
        "8/8/8/8/8/8/8",  # 7 rows
        "8/8/8/8/8/8/8/8/8",  # 9 rows
        "9/8/8/8/8/8/8/8",  # too many cells in a row
        "7/8/8/8/8/8/8/8",  # too few cells in a row
        "3wx3/8/8/8/8/8/8/8",  # unknown piece
    ],
)
def test_invalid_position(layout: str) -> None:
    with pytest.raises(InvalidPositionError):
        Board.from_position(layout)


# -- READ / WRITE --
def test_set_and_get_cell() -> None:
    board = Board()
    board.set_cell(Square(5, 6), Piece.WHITE)
    assert board.cell(Square(5, 6)) == Piece.WHITE
    board.set_cell(Square(5, 6), Piece.EMPTY)
    assert board.cell(Square(5, 6)) == Piece.EMPTY


@pytest.mark.parametrize("square", [Square(-1, 0), Square(0, 8), Square(8, 8)])
def test_out_of_range_cell(square: Square) -> None:
    """Negative indices would silently wrap around on a list of lists, so these must fail loudly"""
    board = Board.initial()
    with pytest.raises(IndexError):
        board.cell(square)
    with pytest.raises(IndexError):
        board.set_cell(square, Piece.BLACK)


def test_flip_cells() -> None:
    board = Board.initial()
    board.flip_cells([Square(3, 3), Square(4, 4)], Piece.BLACK)
    assert board.score() == {Piece.BLACK: 4, Piece.WHITE: 0}


def test_flip_no_cells() -> None:
    board = Board.initial()
    board.flip_cells([], Piece.BLACK)
    assert board == Board.initial()


# -- SNAPSHOTS --
def test_snapshot_is_independent() -> None:
    """Changing the live board must not change a snapshot taken earlier (or the other way around)"""
    board = Board.initial()
    snapshot = board.snapshot()
    assert snapshot == board

    board.set_cell(Square(0, 0), Piece.BLACK)
    assert snapshot.cell(Square(0, 0)) == Piece.EMPTY

    snapshot.set_cell(Square(7, 7), Piece.WHITE)
    assert board.cell(Square(7, 7)) == Piece.EMPTY

    assert all(
        live_row is not snap_row for live_row, snap_row in zip(board.grid, snapshot.grid)
    )


def test_load_copies_the_given_board() -> None:
    board = Board.initial()
    other = Board.from_position("b7/8/8/8/8/8/8/8")
    board.load(other)
    assert board == other

    other.set_cell(Square(1, 1), Piece.WHITE)
    assert board.cell(Square(1, 1)) == Piece.EMPTY


# -- SCORE --
def test_score_initial() -> None:
    assert Board.initial().score() == {Piece.BLACK: 2, Piece.WHITE: 2}


def test_score_ignores_empty_cells() -> None:
    board = Board.from_position("bbb5/w7/8/8/8/8/8/8")
    score = board.score()
    assert score == {Piece.BLACK: 3, Piece.WHITE: 1}
    assert score[Piece.BLACK] + score[Piece.WHITE] + board.empty_count() == 64


def test_initial_pieces_constant() -> None:
    assert len(INITIAL_PIECES) == 4


def test_pieces_rebuild_the_board() -> None:
    """pieces() lists every stone, so a board built from them is the same board"""
    board = Board.from_position("bw6/8/8/3wb3/3bww2/8/8/7b")
    pieces = board.pieces()
    assert len(pieces) == sum(board.score().values())
    assert Board.initial(pieces) == board
    assert Board().pieces() == ()
