"""Instrument metadata — base rates, institutional spreads, price precision.

All tables are module-level constants and are never mutated.
"""

from dataclasses import dataclass
from types import MappingProxyType


DEFAULT_SYMBOLS: tuple[str, ...] = (
    "EURUSD", "GBPUSD", "USDJPY", "USDCHF", "AUDUSD",
    "USDCAD", "NZDUSD", "EURGBP", "EURJPY", "GBPJPY",
    "EURCHF", "AUDCAD", "AUDCHF", "AUDJPY", "CADCHF", "CADJPY",
)

BASE_RATES = MappingProxyType({
    "EURUSD": 1.08472,
    "GBPUSD": 1.27483,
    "USDJPY": 149.245,
    "USDCHF": 0.89467,
    "AUDUSD": 0.64482,
    "USDCAD": 1.36458,
    "NZDUSD": 0.59437,
    "EURGBP": 0.86459,
    "EURJPY": 161.847,
    "GBPJPY": 190.234,
    "EURCHF": 0.97089,
    "AUDCAD": 0.88034,
    "AUDCHF": 0.57693,
    "AUDJPY": 96.234,
    "CADCHF": 0.65569,
    "CADJPY": 109.345,
})

# Tighter than typical retail spreads.
SPREADS = MappingProxyType({
    "EURUSD": 0.00002, "GBPUSD": 0.00003, "USDJPY": 0.2,
    "USDCHF": 0.00003, "AUDUSD": 0.00004, "USDCAD": 0.00003,
    "NZDUSD": 0.00005, "EURGBP": 0.00004, "EURJPY": 0.5,
    "GBPJPY": 0.8, "EURCHF": 0.00004, "AUDCAD": 0.00005,
    "AUDCHF": 0.00006, "AUDJPY": 0.6, "CADCHF": 0.00007, "CADJPY": 0.7,
})

DEFAULT_BASE_RATE = 1.0

# Quote currencies conventionally priced to 2–3 decimal places.
COARSE_QUOTE_CURRENCIES = frozenset({"JPY", "HUF"})


@dataclass(frozen=True)
class Precision:
    """Price increments and rounding conventions for one precision class."""

    pip: float
    tick: float
    rate_decimals: int
    signal_decimals: int
    default_spread: float


FINE = Precision(pip=0.0001, tick=0.00001, rate_decimals=5,
                 signal_decimals=4, default_spread=0.00004)
COARSE = Precision(pip=0.01, tick=0.001, rate_decimals=3,
                   signal_decimals=2, default_spread=0.04)


def quote_currency(symbol: str) -> str:
    """Return the quote currency of a six-letter symbol, else ``""``."""
    cleaned = symbol.replace("_", "").replace("/", "").upper()
    if len(cleaned) != 6:
        return ""
    return cleaned[3:]


def is_coarse(symbol: str) -> bool:
    return quote_currency(symbol) in COARSE_QUOTE_CURRENCIES


def precision_for(symbol: str) -> Precision:
    """Return the precision class for *symbol* (unknown symbols are fine)."""
    return COARSE if is_coarse(symbol) else FINE


def base_rate(symbol: str) -> float:
    """Configured base rate, or ``DEFAULT_BASE_RATE`` for unknown symbols."""
    return BASE_RATES.get(symbol, DEFAULT_BASE_RATE)


def spread_for(symbol: str) -> float:
    """Configured spread, falling back to the precision class default."""
    if symbol in SPREADS:
        return SPREADS[symbol]
    return precision_for(symbol).default_spread
