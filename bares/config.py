"""Runtime settings for BARES, read from the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .errors import ConfigError

LOGGER = logging.getLogger(__name__)

DEFAULT_OPERAND_BITS = 16   # width of accepted integer literals (short)
DEFAULT_RESULT_BITS = 64    # width of evaluation results (long long)
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

_MIN_BITS = 2
_MAX_BITS = 128


def signed_range(bits: int) -> Tuple[int, int]:
    """Return the (min, max) values of a two's complement integer of `bits` bits."""
    if not _MIN_BITS <= bits <= _MAX_BITS:
        raise ConfigError(
            f"Integer width must be between {_MIN_BITS} and {_MAX_BITS} bits, got {bits}",
            code="K001"
        )
    half = 1 << (bits - 1)
    return -half, half - 1


@dataclass(frozen=True)
class Settings:
    operand_bits: int = DEFAULT_OPERAND_BITS
    result_bits: int = DEFAULT_RESULT_BITS
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        # Both widths are checked here, before any parser is built
        signed_range(self.operand_bits)
        signed_range(self.result_bits)
        if self.operand_bits > self.result_bits:
            raise ConfigError(
                f"Operand width ({self.operand_bits}) cannot exceed result width ({self.result_bits})",
                code="K001"
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"Log level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}",
                code="K001"
            )

    @property
    def operand_range(self) -> Tuple[int, int]:
        return signed_range(self.operand_bits)

    @property
    def result_range(self) -> Tuple[int, int]:
        return signed_range(self.result_bits)


def _read_int(source: Mapping[str, str], key: str, default: int) -> int:
    raw = source.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}", code="K001") from exc


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from BARES_* environment variables."""
    source = env if env is not None else os.environ
    log_file = source.get("BARES_LOG_FILE", "").strip() or None
    settings = Settings(
        operand_bits=_read_int(source, "BARES_OPERAND_BITS", DEFAULT_OPERAND_BITS),
        result_bits=_read_int(source, "BARES_RESULT_BITS", DEFAULT_RESULT_BITS),
        log_level=source.get("BARES_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
        log_file=log_file,
    )
    LOGGER.debug("Loaded settings: %s", settings)
    return settings
