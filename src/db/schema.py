"""Table of stored othello games (one row per game, history as JSON)"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    current_position: Mapped[str]
    history: Mapped[list[str]] = mapped_column(JSON, default=list)
    turn_count: Mapped[int]
    skip_offset: Mapped[int]
    status: Mapped[str]
    bot_color: Mapped[Optional[str]]
    bot_strategy: Mapped[Optional[str]]
    seed: Mapped[Optional[int]]
    passes: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
