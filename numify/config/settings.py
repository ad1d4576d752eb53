"""Application settings module.

Provides centralized configuration using environment variables with sane defaults.
Only the HTTP surface reads these; the library functions keep their own
defaults (``en``, short style) so results never depend on the environment.
"""
from __future__ import annotations

from functools import lru_cache
import os

from pydantic import BaseModel


class Settings(BaseModel):
    # Defaults applied when a request omits the option
    DEFAULT_FORMAT_TYPE: str = "en"
    DEFAULT_STYLE: str = "short"

    # Upper bound on values accepted by the batch endpoint
    MAX_BATCH_SIZE: int = 500

    LOG_LEVEL: str = "INFO"

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from environment with type coercion and defaults."""
        def _get_int(name: str, default: int) -> int:
            raw = os.getenv(name)
            if raw is None:
                return default
            try:
                return int(raw)
            except ValueError:
                return default

        return cls(
            DEFAULT_FORMAT_TYPE=os.getenv("NUMIFY_DEFAULT_FORMAT_TYPE", "en"),
            DEFAULT_STYLE=os.getenv("NUMIFY_DEFAULT_STYLE", "short"),
            MAX_BATCH_SIZE=_get_int("NUMIFY_MAX_BATCH_SIZE", 500),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (singleton pattern)."""
    return Settings.load()


__all__ = ["Settings", "get_settings"]
