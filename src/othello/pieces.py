"""Defines the contents of a cell and the two players"""

from enum import Enum, auto

from src.core.shared_types import Color


class Piece(Enum):
    EMPTY = auto()
    BLACK = auto()
    WHITE = auto()

    def opponent(self) -> "Piece":
        if self == Piece.EMPTY:
            raise ValueError("An empty cell has no opponent.")
        return Piece.WHITE if self == Piece.BLACK else Piece.BLACK


# Index of the player in the turn order: black always moves first
PLAYER_ORDER: tuple[Piece, Piece] = (Piece.BLACK, Piece.WHITE)

CHAR_TO_PIECE: dict[str, Piece] = {
    "b": Piece.BLACK,
    "w": Piece.WHITE,
}

PIECE_TO_CHAR: dict[Piece, str] = {value: key for key, value in CHAR_TO_PIECE.items()}


def to_color(piece: Piece) -> Color:
    """Domain piece --> shared type used by the outer layers"""
    return Color[piece.name]


def from_color(color: Color | str) -> Piece:
    """Shared type (or its string value) --> domain piece"""
    return Piece[Color(color).name]
