"""
Representation of a single position: the board plus whose turn it is. The part that gets stored for every ply.
"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidPositionError
from src.othello.board import Board
from src.othello.pieces import CHAR_TO_PIECE, PIECE_TO_CHAR, Piece

STARTING_POSITION = "8/8/8/3wb3/3bw3/8/8/8 b"


@dataclass
class PositionState:
    """
    Data that can be constructed from a position string.
    ----

    <board string> <active color>

    * The board string is described in the Board class
    * The active color is either "b" or "w"

    ex) The standard starting position reads
    8/8/8/3wb3/3bw3/8/8/8 b
    i.e. white stones on d4 and e5, black stones on e4 and d5, and black is to move.
    """

    board: Board
    color_to_move: Piece

    @classmethod
    def from_string(cls, position: str) -> Self:
        """Parse the position string into data"""
        parts = position.strip().split(" ")
        if len(parts) != 2:
            raise InvalidPositionError(
                f"Position must contain 2 space-separated parts, got {position!r}."
            )
        board_str, active_color = parts

        if active_color not in CHAR_TO_PIECE:
            raise InvalidPositionError(
                f"Active color must be one of {','.join(CHAR_TO_PIECE)}, got {active_color!r}."
            )
        return cls(Board.from_position(board_str), CHAR_TO_PIECE[active_color])

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_string(STARTING_POSITION)

    def to_string(self) -> str:
        """reverse operation: write a position string from the given data"""
        return f"{self.board.to_position()} {PIECE_TO_CHAR[self.color_to_move]}"


def is_valid_position(position: str) -> bool:
    """Check if given string follows the position notation."""
    try:
        PositionState.from_string(position)
    except InvalidPositionError:
        return False
    return True
