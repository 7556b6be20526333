"""Settings read from ``YAMLJSON_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping


ENV_PREFIX = "YAMLJSON_"

_TRUE = {"1", "true", "yes", "on"}


def _flag(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUE


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    silent: bool = False
    strict: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", cls.log_level),
            silent=_flag(env.get(f"{ENV_PREFIX}SILENT")),
            strict=_flag(env.get(f"{ENV_PREFIX}STRICT")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings for the current process."""
    return Settings.from_env()


__all__ = ["Settings", "get_settings", "ENV_PREFIX"]
