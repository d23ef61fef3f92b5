# config.py

"""
Application settings read from the environment (and a .env file, if present).

  NOTECARDS_DB_PATH        SQLite file for notes and collections (default ./notes.db)
  NOTECARDS_LOG_LEVEL      logging level name (default INFO)
  NOTECARDS_BOARD_COLUMNS  columns on the notes board, 1-6 (default 3)
"""

import logging
import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings; unset or empty variables keep their defaults."""

    model_config = SettingsConfigDict(
        env_prefix="NOTECARDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="forbid",
    )

    db_path: str = Field(default_factory=lambda: os.path.join(os.getcwd(), "notes.db"))
    log_level: str = "INFO"
    board_columns: int = Field(default=3, ge=1, le=6)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


settings = Settings()
