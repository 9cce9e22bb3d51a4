from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

DB_ENV = "ATAS_DB"
LOG_LEVEL_ENV = "ATAS_LOG_LEVEL"


def default_db_path() -> Path:
    """
    Per-user task database, ~/.atas/atas.db unless ATAS_DB points elsewhere.
    The --db option takes precedence over both.
    """
    env = os.getenv(DB_ENV)
    if env:
        return Path(env).expanduser().resolve()
    return (Path.home() / ".atas" / "atas.db").resolve()


def resolve_db_path(cli_value: Optional[str]) -> Path:
    if cli_value:
        return Path(cli_value).expanduser().resolve()
    return default_db_path()


def log_level(verbose: bool) -> int:
    """DEBUG with --verbose, else ATAS_LOG_LEVEL (a level name), else WARNING."""
    if verbose:
        return logging.DEBUG
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING
