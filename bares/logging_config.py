"""Centralized logging configuration for the bares command.

Single entry point: configure_logging() sets the root logger level, format
and an optional rotating file handler. BARES_LOG_LEVEL and BARES_LOG_FILE are
read from the environment when no explicit values are passed. Library modules
only create loggers; they never add handlers themselves.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

_DEFAULT_LEVEL = "WARNING"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 3

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(raw: Union[str, int, None]) -> int:
    """Turn 'debug', 'INFO', 10 ... into a logging level, defaulting to WARNING."""
    if isinstance(raw, int):
        return raw
    if raw is None:
        raw = os.environ.get("BARES_LOG_LEVEL", _DEFAULT_LEVEL)
    level = getattr(logging, raw.strip().upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(*, level: Union[str, int, None] = None, log_file: Optional[str] = None) -> None:
    """Configure process-wide logging.

    Call once at startup.

    Args:
        level: Level name or number. If None, taken from BARES_LOG_LEVEL.
        log_file: If set, also log to this file with rotation. If None, from BARES_LOG_FILE.
    """
    resolved = resolve_level(level)
    if log_file is None:
        log_file = os.environ.get("BARES_LOG_FILE", "").strip() or None

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(resolved)
    # Replace handlers installed by an earlier call
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(resolved)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=_MAX_BYTES,
                backupCount=_BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(resolved)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
        except OSError as e:
            root.warning("Could not open log file %s: %s; logging to stderr only", log_file, e)
