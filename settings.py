from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


_DATA_DIR_ENV = "PUMP_DATA_DIR"
_DATA_PATTERN_ENV = "PUMP_DATA_PATTERN"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    data_dir: str
    data_pattern: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def parse_log_level(value: str) -> str:
    """Return the canonical level name, or raise ``ValueError`` for an unknown one."""
    candidate = value.strip().upper()
    if candidate not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level {value!r}.")
    return candidate


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        return parse_log_level(candidate)
    except ValueError:
        return default


@lru_cache
def get_settings() -> Settings:
    return Settings(
        data_dir=_read_str_env(_DATA_DIR_ENV, "PumpData"),
        data_pattern=_read_str_env(_DATA_PATTERN_ENV, "pump_*.csv"),
        log_level=_read_log_level("INFO"),
    )
