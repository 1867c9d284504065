"""Rate generator — synthesises one bid/ask quote per symbol per call.

The mid price moves by the sum of six independent terms:

* a bounded random walk scaled by session volatility × liquidity × tick;
* a slow sinusoidal trend bias keyed to the time of day;
* an occasional (10%) volatility spike;
* a high-frequency sinusoidal micro-tick;
* a rare (5%) news jump;
* a slow institutional-flow oscillation.

Pip-denominated terms scale with the symbol's pip so coarse (JPY-style)
pairs move proportionally to fine ones.
"""

import math
from datetime import datetime
from typing import Optional

import numpy as np

from fxsim.market.instruments import base_rate, precision_for, spread_for
from fxsim.market.models import Rate
from fxsim.market.rng import chance, uniform
from fxsim.market.sessions import session_weight


MAX_TICKS_PER_UNIT = 25
TREND_BIAS_PIPS = 8.0
SPIKE_PROBABILITY = 0.10
SPIKE_PIPS = 20.0
MICRO_TICK_PIPS = 0.3
NEWS_PROBABILITY = 0.05
NEWS_PIPS = 50.0
FLOW_PIPS = 2.0


def _epoch_ms(now: datetime) -> int:
    return int(now.timestamp() * 1000)


def calculate_movement(symbol: str, rng: np.random.Generator, now: datetime) -> float:
    """Return the total price movement for one tick of *symbol* at *now*."""
    prec = precision_for(symbol)
    weight = session_weight(now.hour)
    epoch_ms = _epoch_ms(now)
    seconds_of_day = now.hour * 3600 + now.minute * 60 + now.second

    max_ticks = math.floor(weight.volatility * weight.liquidity * MAX_TICKS_PER_UNIT)
    random_walk = uniform(rng, -0.5, 0.5) * max_ticks * prec.tick
    trend_bias = math.sin(seconds_of_day / 7200) * TREND_BIAS_PIPS * prec.pip

    spike = 0.0
    if chance(rng, SPIKE_PROBABILITY):
        spike = uniform(rng, -0.5, 0.5) * SPIKE_PIPS * prec.pip

    micro_tick = (
        math.sin((now.microsecond // 1000) * 0.01 + epoch_ms / 100)
        * MICRO_TICK_PIPS * prec.pip
    )

    news = 0.0
    if chance(rng, NEWS_PROBABILITY):
        news = uniform(rng, -0.5, 0.5) * NEWS_PIPS * prec.pip

    flow = math.sin(epoch_ms / 30000) * FLOW_PIPS * prec.pip

    return random_walk + trend_bias + spike + micro_tick + news + flow


def generate_rate(
    symbol: str,
    rng: np.random.Generator,
    now: datetime,
    previous_mid: Optional[float] = None,
) -> Rate:
    """Generate a quote for *symbol*.

    Args:
        symbol: Instrument symbol, e.g. ``"EURUSD"``. Unknown symbols use a
            reference rate of 1.0.
        rng: Call-local random generator.
        now: Capture instant (timezone-aware UTC).
        previous_mid: Midpoint from a previous call, used as the reference
            rate when supplied.

    Returns:
        A ``Rate`` whose bid/ask straddle the new mid by the configured spread.
    """
    prec = precision_for(symbol)
    decimals = prec.rate_decimals
    reference = previous_mid if previous_mid is not None else base_rate(symbol)
    spread = spread_for(symbol)

    movement = calculate_movement(symbol, rng, now)
    mid = reference + movement

    bid = round(mid - spread / 2, decimals)
    ask = round(mid + spread / 2, decimals)
    if ask <= bid:
        ask = round(bid + 10 ** -decimals, decimals)

    change = round(movement, decimals)
    change_percent = round(change / reference * 100, 4) if reference else 0.0

    return Rate(
        symbol=symbol,
        bid=bid,
        ask=ask,
        spread=spread,
        change=change,
        change_percent=change_percent,
        timestamp=_epoch_ms(now),
    )


def generate_rates(
    symbols: list[str],
    rng: np.random.Generator,
    now: datetime,
) -> list[Rate]:
    """Generate one rate per symbol, preserving symbol order."""
    return [generate_rate(symbol, rng, now) for symbol in symbols]
