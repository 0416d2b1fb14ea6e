"""Centralized application configuration using Pydantic Settings (v2).

This module exposes `load_settings()`, a cached loader that reads from:
- Real environment variables (highest precedence)
- `.env` files at the repository root: .env, .env.local, .env.dev/.env.test/.env.prod

The readability calculator never reads these globals itself; callers hand it
a provider such as :func:`configured_reading_speed` at construction time.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `LEGIBLE_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    average_reading_speed : Optional[int]
        Words per minute used for reading-time estimates. Unset, zero or
        negative values mean "use the default". Maps from
        `LEGIBLE_AVERAGE_READING_SPEED`.
    normalise_scores : bool
        Clamp readability scores to their published ranges. Maps from
        `LEGIBLE_NORMALISE_SCORES`.
    score_precision : int
        Decimal places kept on readability scores. Maps from
        `LEGIBLE_SCORE_PRECISION`.
    url_timeout : float
        Seconds allowed for each remote request. Maps from `LEGIBLE_URL_TIMEOUT`.
    """

    environment: EnvName = Field(default="dev", alias="LEGIBLE_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    average_reading_speed: int | None = Field(
        default=None, alias="LEGIBLE_AVERAGE_READING_SPEED"
    )
    normalise_scores: bool = Field(default=True, alias="LEGIBLE_NORMALISE_SCORES")
    score_precision: int = Field(default=1, ge=0, le=6, alias="LEGIBLE_SCORE_PRECISION")
    url_timeout: float = Field(default=10.0, gt=0.0, alias="LEGIBLE_URL_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("average_reading_speed", mode="before")
    @classmethod
    def _unparseable_speed_is_unset(cls, v: object) -> object:
        """Treat blank or non-numeric reading speeds as absent rather than invalid."""
        if isinstance(v, str):
            stripped = v.strip()
            if not stripped:
                return None
            try:
                return int(stripped)
            except ValueError:
                return None
        return v

    @property
    def is_dev(self) -> bool:
        """Return True if running in the development environment."""
        return self.environment == "dev"

    @property
    def is_test(self) -> bool:
        """Return True if running in the test environment."""
        return self.environment == "test"

    @property
    def is_prod(self) -> bool:
        """Return True if running in the production environment."""
        return self.environment == "prod"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    We keep this behind an LRU cache so tests can force a rebuild via
    `load_settings.cache_clear()` after mutating `os.environ`.
    """
    os.environ.setdefault("LEGIBLE_ENV", "dev")
    return Settings()


def configured_reading_speed() -> int | None:
    """Reading-speed provider backed by the current (cached) settings."""
    return load_settings().average_reading_speed


def get_logger(name: str = "legible") -> logging.Logger:
    """Return a process-global logger configured to `settings.log_level`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
