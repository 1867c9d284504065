"""fxsim — application configuration.

Loads .env variables into a typed config object.
Validates values on startup; nothing is required.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from fxsim.market.instruments import DEFAULT_SYMBOLS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SEED_MAX = 2**32 - 1


@dataclass(frozen=True)
class Config:
    """Typed configuration loaded from environment variables."""

    symbols: tuple[str, ...] = DEFAULT_SYMBOLS
    seed: Optional[int] = None  # None = OS entropy per request
    candle_count: int = 100
    max_signals: int = 8
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    def __post_init__(self) -> None:
        check_seed(self.seed)
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'"
            )

    @property
    def deterministic(self) -> bool:
        """True when every request replays the same random stream."""
        return self.seed is not None


def check_seed(seed: Optional[int], name: str = "seed") -> Optional[int]:
    """Return *seed* unchanged, or raise if numpy cannot seed from it."""
    if seed is not None and not 0 <= seed <= SEED_MAX:
        raise ValueError(f"{name} must be 0–{SEED_MAX}, got {seed}")
    return seed


def _parse_int(name: str, default: str, low: int, high: int) -> int:
    raw = os.environ.get(name, default)
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None
    if not low <= value <= high:
        raise ValueError(f"{name} must be {low}–{high}, got {value}")
    return value


def _parse_symbols(raw: Optional[str]) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_SYMBOLS
    symbols = tuple(s.strip().upper() for s in raw.split(",") if s.strip())
    if not symbols:
        raise ValueError("FXSIM_SYMBOLS must list at least one symbol")
    return symbols


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{raw}'")
    return level


def load_config(env_path: str | None = None) -> Config:
    """Load configuration from environment variables.

    Raises ``ValueError`` with a message naming the offending variable when
    a value is malformed or out of range.
    """
    load_dotenv(dotenv_path=env_path)

    seed_raw = os.environ.get("FXSIM_SEED")
    seed = _parse_int("FXSIM_SEED", seed_raw, 0, SEED_MAX) if seed_raw else None

    return Config(
        symbols=_parse_symbols(os.environ.get("FXSIM_SYMBOLS")),
        seed=seed,
        candle_count=_parse_int("FXSIM_CANDLE_COUNT", "100", 1, 1000),
        max_signals=_parse_int("FXSIM_MAX_SIGNALS", "8", 1, 50),
        log_level=_parse_log_level(os.environ.get("LOG_LEVEL", "INFO")),
        host=os.environ.get("HOST", "0.0.0.0"),
        port=_parse_int("PORT", "8080", 1, 65535),
    )
