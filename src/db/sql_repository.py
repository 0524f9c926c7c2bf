"""GameRepository on top of a SQLAlchemy session: one DBGame row per othello game"""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame

logger = logging.getLogger(__name__)


class SQLGameRepository:
    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        row = self._find_row(game_id)
        return self._to_model(row) if row else None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Insert a new row, the id is generated here (not by the database)."""
        row = DBGame(id=uuid4())
        self._copy_state(game, row)
        self.db.add(row)
        self._save(row)
        logger.debug("Inserted game %s at turn %d", row.id, row.turn_count)
        return self._to_model(row), row.id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        row = self._find_row(game_id)
        if row is None:
            return None
        self._copy_state(game, row)
        self._save(row)
        return self._to_model(row)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        row = self._find_row(game_id)
        if row is None:
            return None
        last_state = self._to_model(row)
        self.db.delete(row)
        self.db.commit()
        return last_state

    # -- PRIVATE HELPERS ---
    def _find_row(self, game_id: UUID) -> DBGame | None:
        return self.db.scalar(select(DBGame).where(DBGame.id == game_id))

    def _save(self, row: DBGame) -> None:
        self.db.commit()
        self.db.refresh(row)

    @staticmethod
    def _copy_state(game: GameModel, row: DBGame) -> None:
        """
        Write every field of the model onto the row.
        NOTE: the JSON columns get new list objects, SQLAlchemy does not track in-place changes of a list.
        """
        row.current_position = game.current_position
        row.history = list(game.history)
        row.turn_count = game.turn_count
        row.skip_offset = game.skip_offset
        row.status = game.status
        row.bot_color = game.bot_color
        row.bot_strategy = game.bot_strategy
        row.seed = game.seed
        row.passes = list(game.passes)

    @staticmethod
    def _to_model(row: DBGame) -> GameModel:
        return GameModel(
            current_position=row.current_position,
            history=list(row.history),
            turn_count=row.turn_count,
            skip_offset=row.skip_offset,
            status=row.status,
            bot_color=row.bot_color,
            bot_strategy=row.bot_strategy,
            seed=row.seed,
            passes=list(row.passes),
        )
