"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidPositionError, InvalidRequestError
from src.core.shared_types import BotStrategy, Color, Status
from src.othello.board import Board

PieceColor = str
SquareName = str


def _is_algebraic_notation(value: str) -> bool:
    """'a1' up to 'h8'"""
    if len(value) != 2:
        return False

    column, row = value[0].lower(), value[1]
    return column in "abcdefgh" and row in "12345678"


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    bot_color: Optional[Color] = None
    bot_strategy: Optional[BotStrategy] = None
    seed: Optional[int] = None
    starting_layout: Optional[str] = None

    @field_validator("starting_layout")
    @classmethod
    def validate_starting_layout(cls, value: Optional[str]) -> Optional[str]:
        """Rows part of a position string, e.g. 8/8/8/3wb3/3bw3/8/8/8. Black always moves first."""
        if value is None:
            return value

        try:
            Board.from_position(value.strip())
        except InvalidPositionError as error:
            raise InvalidRequestError(
                f"Cannot interpret starting_layout: {value!r}. {error}"
            ) from error
        return value.strip()


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value.lower()


class UndoRequest(BaseModel):
    game_id: UUID


class RedoRequest(BaseModel):
    game_id: UUID


class RestartRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- REQUEST BODIES (the game id comes from the URL path) ---
class MoveBody(BaseModel):
    square: SquareName


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    position: str
    starting_position: str
    color_to_move: Color
    turn: int
    status: Status
    score: dict[PieceColor, int]
    winner: Optional[Color]
    can_undo: bool
    can_redo: bool
    bot_color: Optional[Color]
    bot_strategy: Optional[BotStrategy]
    passes: list[Color]


class LegalMove(BaseModel):
    square: SquareName
    flips: list[SquareName]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    color: Color
    legal_moves: list[LegalMove]
