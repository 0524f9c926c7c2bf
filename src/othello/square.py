"""
A square (cell) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

# Othello board is always 8x8 (rows, columns)
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True, order=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7). The letter is the column, the digit the row."""
        col = ord(sq[0].lower()) - ord("a")
        row = int(sq[1:]) - 1
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{ascii_lowercase[self.col]}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def shifted(self, d_row: int, d_col: int, distance: int = 1) -> Square:
        """Square `distance` steps away along the direction (d_row, d_col). May be off the board."""
        return Square(self.row + d_row * distance, self.col + d_col * distance)


def all_squares() -> list[Square]:
    """Every square on the board in row-major order (row 0 first, column 0 first)."""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]


CORNERS: frozenset[Square] = frozenset(
    {
        Square(0, 0),
        Square(0, BOARD_DIMENSIONS[1] - 1),
        Square(BOARD_DIMENSIONS[0] - 1, 0),
        Square(BOARD_DIMENSIONS[0] - 1, BOARD_DIMENSIONS[1] - 1),
    }
)
