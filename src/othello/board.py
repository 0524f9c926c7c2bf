"""The Game board owns the grid of cells (in othello: which stone, if any, lies on each square)"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Iterable, Self

from src.core.exceptions import InvalidPositionError
from src.othello.pieces import CHAR_TO_PIECE, PIECE_TO_CHAR, Piece
from src.othello.square import BOARD_DIMENSIONS, Square

Grid = list[list[Piece]]
InitialPieces = tuple[tuple[Square, Piece], ...]

# Standard othello start: white on the d4/e5 diagonal, black on the other one.
INITIAL_PIECES: InitialPieces = (
    (Square(3, 3), Piece.WHITE),
    (Square(3, 4), Piece.BLACK),
    (Square(4, 3), Piece.BLACK),
    (Square(4, 4), Piece.WHITE),
)


def empty_grid() -> Grid:
    return [[Piece.EMPTY] * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0])]


@dataclass
class Board:
    grid: Grid = field(default_factory=empty_grid)

    @classmethod
    def initial(cls, initial_pieces: Iterable[tuple[Square, Piece]] = INITIAL_PIECES) -> Self:
        board = cls()
        board.reset(initial_pieces)
        return board

    @classmethod
    def from_position(cls, position: str) -> Self:
        """Construct a board from the rows part of a position string.

        Works like the board part of a FEN string in chess:
        ex. standard starting position:
        8/8/8/3wb3/3bw3/8/8/8
        means:
        * rows are separated by slashes, and the first one written is row 0 (the top of the board)
        * a letter denotes a stone: 'b' for black, 'w' for white
        * a number denotes that amount of empty cells after each other
        """
        rows = position.split("/")
        if len(rows) != BOARD_DIMENSIONS[0]:
            raise InvalidPositionError(
                f"Expected {BOARD_DIMENSIONS[0]} rows in {position!r}, found {len(rows)}."
            )

        grid: Grid = []
        for row_str in rows:
            row: list[Piece] = []
            for character in row_str:
                if character in CHAR_TO_PIECE:
                    row.append(CHAR_TO_PIECE[character])
                elif character.isdigit():
                    row.extend([Piece.EMPTY] * int(character))
                else:
                    raise InvalidPositionError(
                        f"Unknown character {character!r} in position {position!r}."
                    )
            if len(row) != BOARD_DIMENSIONS[1]:
                raise InvalidPositionError(
                    f"Row {row_str!r} does not describe exactly {BOARD_DIMENSIONS[1]} cells."
                )
            grid.append(row)
        return cls(grid)

    def to_position(self) -> str:
        """Rows are separated by slashes in the position string."""
        return "/".join(self._row_to_position(row) for row in self.grid)

    def _row_to_position(self, row: list[Piece]) -> str:
        """Position string of a single row"""
        characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece != Piece.EMPTY:
                if empty_count > 0:
                    characters.append(str(empty_count))
                    empty_count = 0
                characters.append(PIECE_TO_CHAR[piece])
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def reset(self, initial_pieces: Iterable[tuple[Square, Piece]] = INITIAL_PIECES) -> None:
        """Back to the starting layout. Same initial pieces --> same board, however often it is called."""
        self.grid = empty_grid()
        for square, piece in initial_pieces:
            self.set_cell(square, piece)

    def cell(self, square: Square) -> Piece:
        # NOTE: python would happily wrap negative indices, so check explicitly
        if not square.is_within_bounds():
            raise IndexError(f"{square} is not on the board.")
        return self.grid[square.row][square.col]

    def set_cell(self, square: Square, piece: Piece) -> None:
        """Unconditional overwrite. Whether the placement is legal is for the rules module to decide."""
        if not square.is_within_bounds():
            raise IndexError(f"{square} is not on the board.")
        self.grid[square.row][square.col] = piece

    def flip_cells(self, squares: Iterable[Square], piece: Piece) -> None:
        for square in squares:
            self.set_cell(square, piece)

    def snapshot(self) -> "Board":
        """Independent copy: none of the rows are shared with the live grid (or with earlier snapshots)."""
        return Board(deepcopy(self.grid))

    def load(self, board: "Board") -> None:
        """Replace the live grid by a copy of the given board (used by undo/redo)."""
        self.grid = deepcopy(board.grid)

    def locate(self, piece: Piece) -> list[Square]:
        return [
            Square(row_idx, col_idx)
            for row_idx, row in enumerate(self.grid)
            for col_idx, cell in enumerate(row)
            if cell == piece
        ]

    def score(self) -> dict[Piece, int]:
        """Tally the stones each player has on the board"""
        return {
            piece: self._count(piece) for piece in Piece if piece != Piece.EMPTY
        }

    def pieces(self) -> InitialPieces:
        """The stones on the board as (square, piece) pairs, black ones first. Board.initial(board.pieces()) == board"""
        return tuple(
            (square, piece)
            for piece in (Piece.BLACK, Piece.WHITE)
            for square in self.locate(piece)
        )

    def empty_count(self) -> int:
        return self._count(Piece.EMPTY)

    def _count(self, piece: Piece) -> int:
        return sum(row.count(piece) for row in self.grid)
