# config.py
"""
Environment-driven settings.

- DNA_MATCH_HASH_MOD         modulus of the Karp-Rabin window hash (default 10**9 + 7)
- DNA_MATCH_MAX_TABLE_CELLS  largest LCSS table allocated before falling back (default 50M)
- DNA_MATCH_LOG_LEVEL        root log level for the CLI and the API (default WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_HASH_MOD = 10**9 + 7
DEFAULT_MAX_TABLE_CELLS = 50_000_000
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    hash_mod: int = DEFAULT_HASH_MOD
    max_table_cells: int = DEFAULT_MAX_TABLE_CELLS
    log_level: str = DEFAULT_LOG_LEVEL


def _int_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_settings() -> Settings:
    level = (os.getenv("DNA_MATCH_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"DNA_MATCH_LOG_LEVEL is not a logging level: {level!r}")
    return Settings(
        hash_mod=_int_env("DNA_MATCH_HASH_MOD", DEFAULT_HASH_MOD, 2),
        max_table_cells=_int_env("DNA_MATCH_MAX_TABLE_CELLS", DEFAULT_MAX_TABLE_CELLS, 1),
        log_level=level,
    )
