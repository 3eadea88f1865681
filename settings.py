from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

_LOG_LEVEL_ENV = "LOG_LEVEL"
_OUTPUT_FORMAT_ENV = "READING_OUTPUT_FORMAT"

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class Settings:
    log_level: str
    output_format: str


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


def _read_output_format(default: str) -> str:
    value = os.getenv(_OUTPUT_FORMAT_ENV)
    if value is None:
        return default
    candidate = value.strip().lower()
    return candidate if candidate in OUTPUT_FORMATS else default


@lru_cache
def get_settings() -> Settings:
    return Settings(
        log_level=_read_log_level("WARNING"),
        output_format=_read_output_format("text"),
    )
