"""Momentum & oscillator strategy.

Samples RSI- and MACD-like readings and fires only on an extreme reading
that the other indicator confirms:

* oversold RSI with a rising MACD, or overbought RSI with strong positive
  momentum → **BUY**
* overbought RSI with a falling MACD, or oversold RSI with strong negative
  momentum → **SELL**
"""

from dataclasses import dataclass
from typing import Optional

from fxsim.market.rng import randint, uniform
from fxsim.strategy.base import (
    StrategyContext,
    build_signal,
    calculate_momentum,
    calculate_support_resistance,
)
from fxsim.strategy.models import MOMENTUM, Signal


RSI_OVERSOLD = 30.0
RSI_OVERBOUGHT = 70.0
MOMENTUM_THRESHOLD = 0.7


@dataclass(frozen=True)
class OscillatorReading:
    rsi: float  # 20–80
    macd: float  # histogram, -0.5–0.5
    momentum: float  # -1–1


def sample_oscillators(ctx: StrategyContext) -> OscillatorReading:
    rng = ctx.rng
    return OscillatorReading(
        rsi=uniform(rng, 20.0, 80.0),
        macd=uniform(rng, -0.5, 0.5),
        momentum=calculate_momentum(ctx.rate, rng),
    )


def momentum_direction(reading: OscillatorReading) -> Optional[str]:
    """Return ``"BUY"``, ``"SELL"`` or None when nothing is confirmed."""
    oversold = reading.rsi < RSI_OVERSOLD
    overbought = reading.rsi > RSI_OVERBOUGHT

    if (oversold and reading.macd > 0) or (
        overbought and reading.momentum > MOMENTUM_THRESHOLD
    ):
        return "BUY"
    if (overbought and reading.macd < 0) or (
        oversold and reading.momentum < -MOMENTUM_THRESHOLD
    ):
        return "SELL"
    return None


class MomentumStrategy:
    """Oscillator-extreme signals confirmed by MACD or momentum."""

    name = MOMENTUM
    fire_probability = 0.5

    def evaluate(self, ctx: StrategyContext) -> Optional[Signal]:
        reading = sample_oscillators(ctx)
        direction = momentum_direction(reading)
        if direction is None:
            return None

        rng = ctx.rng
        magnitude = abs(reading.momentum)
        risk_pips = uniform(rng, 15.0, 30.0)

        return build_signal(
            ctx,
            direction=direction,
            strategy=self.name,
            strength="STRONG" if magnitude > 0.6 else "MEDIUM",
            risk_pips=risk_pips,
            reward_multiple=1.8 + magnitude,
            probability=round(55 + magnitude * 35),
            time_frame="15M",
            reason=(
                f"Momentum divergence detected: RSI {reading.rsi:.1f}, "
                f"MACD {'bullish' if reading.macd > 0 else 'bearish'}"
            ),
            binary_expiry=randint(rng, 8, 20),
            confidence="HIGH" if magnitude > 0.6 else "MEDIUM",
            momentum=reading.momentum,
            trend_strength=magnitude,
            support_resistance=calculate_support_resistance(ctx),
        )
