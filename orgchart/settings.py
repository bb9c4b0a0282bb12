from __future__ import annotations

import codecs
import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv(override=False)


DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime configuration for org chart queries."""

    log_level: str = Field(default_factory=lambda: os.getenv("ORGCHART_LOG_LEVEL", "WARNING"))
    log_format: str = Field(default_factory=lambda: os.getenv("ORGCHART_LOG_FORMAT", DEFAULT_LOG_FORMAT))
    encoding: str = Field(default_factory=lambda: os.getenv("ORGCHART_ENCODING", "utf-8"))
    skip_malformed: bool = Field(default_factory=lambda: os.getenv("ORGCHART_SKIP_MALFORMED", "false"))

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "validate_default": True,
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        level = str(value or "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @field_validator("skip_malformed", mode="before")
    @classmethod
    def _parse_flag(cls, value: object) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_VALUES
        return bool(value)

    @field_validator("encoding")
    @classmethod
    def _require_encoding(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("encoding must not be empty")
        try:
            codecs.lookup(value.strip())
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{value}'") from exc
        return value.strip()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance built from the environment."""

    return Settings()


__all__ = ["Settings", "get_settings", "DEFAULT_LOG_FORMAT"]
