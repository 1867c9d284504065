"""Candle series generator — fixed-length OHLCV sequences for one symbol.

A trend state (direction + strength) is threaded through the bar loop as a
local value and may flip on any bar.  Bars that open near a big-figure
price level tend to bounce, wicks scale with session volatility, and
volume grows with the size of the body.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

import numpy as np

from fxsim.market.instruments import base_rate, precision_for
from fxsim.market.models import Candle
from fxsim.market.rng import chance, uniform
from fxsim.market.sessions import candle_volatility


TIMEFRAME_DURATIONS: dict[str, timedelta] = {
    "1M": timedelta(minutes=1),
    "5M": timedelta(minutes=5),
    "15M": timedelta(minutes=15),
    "1H": timedelta(hours=1),
    "4H": timedelta(hours=4),
    "1D": timedelta(days=1),
    "1W": timedelta(weeks=1),
}
DEFAULT_TIMEFRAME = "1H"
DEFAULT_CANDLE_COUNT = 100

TREND_FLIP_PROBABILITY = 0.03
ROUND_LEVEL_PIPS = 100  # big figure
ROUND_TOLERANCE_PIPS = 5.0
ROUND_REACTION_PROBABILITY = 0.8
ROUND_REACTION_FACTOR = -0.4

BASE_VOLUME = 1000
BODY_VOLUME_FACTOR = 200_000
VOLUME_NOISE = 2000


@dataclass(frozen=True)
class TrendState:
    """Direction (+1 / -1) and strength (0–1) carried bar to bar."""

    direction: int
    strength: float


def timeframe_duration(timeframe: str) -> timedelta:
    """Bar duration for *timeframe*; unknown values fall back to 1H."""
    return TIMEFRAME_DURATIONS.get(timeframe, TIMEFRAME_DURATIONS[DEFAULT_TIMEFRAME])


def format_time(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def initial_trend(rng: np.random.Generator) -> TrendState:
    direction = 1 if chance(rng, 0.5) else -1
    return TrendState(direction=direction, strength=uniform(rng, 0.4, 0.9))


def advance_trend(state: TrendState, rng: np.random.Generator) -> TrendState:
    """Occasionally reverse the trend and redraw its strength."""
    if chance(rng, TREND_FLIP_PROBABILITY):
        return TrendState(direction=-state.direction, strength=uniform(rng, 0.3, 0.9))
    return state


def near_round_level(price: float, pip: float) -> bool:
    """True if *price* is within a few pips of a big-figure level."""
    step = pip * ROUND_LEVEL_PIPS
    nearest = round(price / step) * step
    return abs(price - nearest) < ROUND_TOLERANCE_PIPS * pip


def generate_candles(
    symbol: str,
    timeframe: str,
    rng: np.random.Generator,
    now: datetime,
    count: int = DEFAULT_CANDLE_COUNT,
) -> list[Candle]:
    """Generate *count* consecutive candles ending one bar before *now*.

    Args:
        symbol: Instrument symbol; unknown symbols start at 1.0.
        timeframe: One of ``TIMEFRAME_DURATIONS`` (unknown → 1H).
        rng: Call-local random generator.
        now: Reference instant (timezone-aware UTC).
        count: Number of bars to produce.

    Returns:
        Candles in ascending time order, each opening at the previous close.
    """
    prec = precision_for(symbol)
    pip = prec.pip
    decimals = prec.rate_decimals
    duration = timeframe_duration(timeframe)

    trend = initial_trend(rng)
    price = round(base_rate(symbol), decimals)
    candles: list[Candle] = []

    for i in range(count):
        bar_time = now - (count - i) * duration
        trend = advance_trend(trend, rng)
        volatility = candle_volatility(bar_time.hour)

        open_ = price
        trend_move = (
            trend.direction * trend.strength * pip * volatility
            * uniform(rng, 0.8, 1.2)
        )
        noise = uniform(rng, -1.0, 1.0) * pip * volatility
        bias = math.sin(i / 20) * pip * 0.3
        move = trend_move + noise + bias

        at_round_level = near_round_level(open_, pip)
        if at_round_level and chance(rng, ROUND_REACTION_PROBABILITY):
            move *= ROUND_REACTION_FACTOR

        close = round(open_ + move, decimals)

        body = abs(close - open_)
        upper_max = body * volatility * uniform(rng, 0.7, 1.3) + pip * uniform(rng, 0.5, 2.5)
        lower_max = body * volatility * uniform(rng, 0.7, 1.3) + pip * uniform(rng, 0.5, 2.5)
        # Rounding is monotone, so these stay outside the body once rounded.
        high = round(max(open_, close) + uniform(rng, 0.0, 1.0) * upper_max, decimals)
        low = round(min(open_, close) - uniform(rng, 0.0, 1.0) * lower_max, decimals)

        flow = 1.8 if at_round_level else 1.0
        volume = math.floor(
            BASE_VOLUME
            + body * BODY_VOLUME_FACTOR * volatility * 1.5 * flow
            + uniform(rng, 0.0, VOLUME_NOISE)
        )

        candles.append(
            Candle(
                time=format_time(bar_time),
                open=open_,
                high=high,
                low=low,
                close=close,
                volume=int(volume),
            )
        )
        price = close

    return candles
