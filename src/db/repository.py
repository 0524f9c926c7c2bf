"""Where othello games live between requests. The service only talks to this Protocol (SQL implementation in sql_repository.py)."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Stores GameModels under a generated UUID"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """The stored position/history of a game, None for an unknown id."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Persist a freshly started game. Returns what was stored together with its new id."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the state of a game after a move/undo/redo. None for an unknown id."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Forget a game. Returns its last state, None for an unknown id."""
        ...
