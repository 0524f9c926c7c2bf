"""
The shape an othello game takes when it crosses a layer boundary.

The service hands GameModels to the repository and rebuilds Games from them (Game.from_model, Game.to_model).
Only plain strings and ints, so the db layer never needs to know about Boards or Pieces.
"""

from dataclasses import dataclass, field
from typing import Optional

# aliases, for readability
PositionString = str
PieceColor = str


@dataclass
class GameModel:
    """Transport-safe representation of an othello game used between API, Service, DB, and Game layers."""

    current_position: PositionString
    history: list[PositionString]
    turn_count: int
    skip_offset: int
    status: str
    bot_color: Optional[PieceColor] = None
    bot_strategy: Optional[str] = None
    seed: Optional[int] = None
    passes: list[PieceColor] = field(default_factory=list)
