"""
Placement and flipping rules

Key idea: raycasting. From the square where a stone would be placed, walk along each of the 8 compass directions.
Opponent stones are flipped along a direction only if they are closed off by one of your own stones.

All functions in here only READ the board, except `apply_move`, which is the single place a legal move gets written.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from src.core.exceptions import IllegalMoveError
from src.othello.pieces import Piece
from src.othello.square import Square, all_squares

Vector = tuple[int, int]

# N, NE, E, SE, S, SW, W, NW
DIRECTIONS: tuple[Vector, ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)


class Board(Protocol):
    """Just the parts the rules need"""

    def cell(self, square: Square) -> Piece: ...
    def set_cell(self, square: Square, piece: Piece) -> None: ...
    def flip_cells(self, squares: list[Square], piece: Piece) -> None: ...


@dataclass(frozen=True)
class Move:
    """A legal placement and the opponent stones it would turn over. Recomputed whenever needed, never stored."""

    square: Square
    flips: tuple[Square, ...]

    @property
    def flip_count(self) -> int:
        return len(self.flips)


def flips_in_direction(
    board: Board, square: Square, piece: Piece, direction: Vector
) -> list[Square]:
    """
    Raycasting along a single direction
    -----

    Collect the run of opponent stones directly next to `square`. The run only counts if it is closed off by one of `piece`'s stones.
    Running into an empty cell or off the board first means this direction flips nothing.
    """
    opponent = piece.opponent()
    d_row, d_col = direction

    run: list[Square] = []
    distance = 1
    while True:
        target_square = square.shifted(d_row, d_col, distance)
        if not target_square.is_within_bounds():
            return []

        occupant = board.cell(target_square)
        if occupant == opponent:
            run.append(target_square)
        elif occupant == piece:
            return run
        else:
            return []
        distance += 1


def flip_candidates(board: Board, square: Square, piece: Piece) -> Optional[list[Square]]:
    """
    All opponent stones that would be flipped by placing `piece` on `square`.
    ----

    Returns None (rather than an empty list) when `square` is taken or not a single stone would flip.
    So a non-None result always holds at least one square.
    """
    if board.cell(square) != Piece.EMPTY:
        return None

    flips: list[Square] = []
    for direction in DIRECTIONS:
        flips.extend(flips_in_direction(board, square, piece, direction))
    return flips or None


def valid_moves(board: Board, piece: Piece) -> list[Square]:
    """Every square `piece` may be placed on. Row-major order, so the result is deterministic."""
    return [
        square
        for square in all_squares()
        if flip_candidates(board, square, piece) is not None
    ]


def moves_and_flips(board: Board, piece: Piece) -> list[Move]:
    """Same traversal as `valid_moves`, keeping the flips of each move (the bots weigh their options with these)."""
    moves: list[Move] = []
    for square in all_squares():
        flips = flip_candidates(board, square, piece)
        if flips is not None:
            moves.append(Move(square=square, flips=tuple(flips)))
    return moves


def has_valid_move(board: Board, piece: Piece) -> bool:
    return any(
        flip_candidates(board, square, piece) is not None for square in all_squares()
    )


def is_game_over(board: Board) -> bool:
    """Neither player can place a stone anywhere (this includes the full board)."""
    return not (has_valid_move(board, Piece.BLACK) or has_valid_move(board, Piece.WHITE))


def apply_move(board: Board, square: Square, piece: Piece) -> Move:
    """
    Place `piece` on `square` and turn over the bracketed stones.

    ---
    Raises IllegalMoveError (and leaves the board untouched) when the move is not allowed.
    """
    if not square.is_within_bounds():
        raise IllegalMoveError(f"{square} is not on the board.")

    flips = flip_candidates(board, square, piece)
    if flips is None:
        raise IllegalMoveError(
            f"Move not allowed: {piece.name.lower()} on {square.to_algebraic()}"
        )

    board.set_cell(square, piece)
    board.flip_cells(flips, piece)
    return Move(square=square, flips=tuple(flips))
