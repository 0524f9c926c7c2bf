"""
Application settings.

Values are read from environment variables prefixed with OTHELLO_ (e.g. OTHELLO_DATABASE_URL), falling back to the defaults below.
"""

import os
from functools import lru_cache

from pydantic import BaseModel

from src.core.shared_types import BotStrategy

ENV_PREFIX = "OTHELLO_"


class Settings(BaseModel):
    database_url: str = "sqlite:///./othello.db"
    database_echo: bool = False
    default_bot_strategy: BotStrategy = BotStrategy.GREEDY
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Pick up every field that has a matching OTHELLO_<FIELD> variable. pydantic takes care of the type conversion."""
        environ = dict(os.environ) if environ is None else environ
        values = {
            name: environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in environ
        }
        return cls(**values)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
