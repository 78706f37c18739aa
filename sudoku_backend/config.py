"""Environment-driven settings for the API process."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TypeVar

_T = TypeVar("_T", int, float)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


def _env_list(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("SUDOKU_LOG_LEVEL", "INFO").strip().upper(),
            cors_origins=_env_list("SUDOKU_CORS_ORIGINS", "*"),
            host=os.getenv("SUDOKU_HOST", "0.0.0.0"),
            port=_env("SUDOKU_PORT", 8000),
        )


def configure_logging(level: str | int) -> None:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
