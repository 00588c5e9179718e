"""
Widget Configuration Module

Pydantic Settings for the task list widget. Values come from environment
variables prefixed with TODO_ (or a .env file).

Usage:
    from todo.config import get_settings

    settings = get_settings()
    print(settings.storage_path)
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TodoSettings(BaseSettings):
    """Widget settings loaded from TODO_* environment variables."""

    # -------------------------------------------------------------------------
    # Local Storage
    # -------------------------------------------------------------------------
    storage_path: Path = Field(
        default=Path.home() / ".todo-widget" / "local_storage.json",
        description="JSON file holding the widget's local storage"
    )
    storage_key: str = Field(
        default="todos",
        description="Storage key under which the task list is kept"
    )

    # -------------------------------------------------------------------------
    # Seed Feed
    # -------------------------------------------------------------------------
    seed_url: str = Field(
        default="https://jsonplaceholder.typicode.com/todos",
        description="Read-only feed used to populate an empty list"
    )
    seed_limit: int = Field(
        default=5,
        ge=0,
        description="Maximum number of seed tasks adopted on first run"
    )
    seed_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seed request timeout in seconds"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_prefix="TODO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log_level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()


@lru_cache
def get_settings() -> TodoSettings:
    """Get cached widget settings."""
    return TodoSettings()
