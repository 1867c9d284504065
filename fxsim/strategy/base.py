"""Strategy protocol and shared evaluation context.

Defines the interface that all strategies must implement, plus the helpers
every strategy uses to turn a direction and risk distances into a
``Signal``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

import numpy as np

from fxsim.market.instruments import Precision, is_coarse, precision_for
from fxsim.market.models import Rate
from fxsim.market.rng import token, uniform
from fxsim.risk.sl_tp import calculate_levels
from fxsim.strategy.models import Signal, SupportResistance


@dataclass(frozen=True)
class StrategyContext:
    """Per-symbol inputs shared by every strategy in one evaluation."""

    rate: Rate
    price: float  # mid
    precision: Precision
    coarse: bool
    rng: np.random.Generator

    @classmethod
    def from_rate(cls, rate: Rate, rng: np.random.Generator) -> StrategyContext:
        return cls(
            rate=rate,
            price=rate.mid,
            precision=precision_for(rate.symbol),
            coarse=is_coarse(rate.symbol),
            rng=rng,
        )

    @property
    def pip(self) -> float:
        return self.precision.pip

    @property
    def decimals(self) -> int:
        return self.precision.signal_decimals

    def fmt(self, price: float) -> str:
        """Format *price* at signal precision."""
        return f"{price:.{self.decimals}f}"


@runtime_checkable
class StrategyProtocol(Protocol):
    """Interface that all signal strategies must satisfy."""

    name: str
    fire_probability: float

    def evaluate(self, ctx: StrategyContext) -> Optional[Signal]:
        """Return a candidate signal for ``ctx.rate`` or None to abstain."""
        ...


def calculate_momentum(rate: Rate, rng: np.random.Generator) -> float:
    """Momentum score in [-1, 1] from the rate's change plus noise."""
    base_change = rate.change_percent / 100
    noise = uniform(rng, -0.25, 0.25)
    return max(-1.0, min(1.0, base_change * 10 + noise))


def calculate_support_resistance(ctx: StrategyContext) -> SupportResistance:
    """Synthetic support/resistance band around the current price.

    Each level sits up to half the range (100 pips) away from the price.
    A level that rounds onto or past the price is pushed out by one unit
    of signal precision, so support < price < resistance always holds.
    """
    span = (1.0 if ctx.coarse else 0.01) * 0.5
    step = 10 ** -ctx.decimals
    support = round(ctx.price - uniform(ctx.rng, 0.0, span), ctx.decimals)
    resistance = round(ctx.price + uniform(ctx.rng, 0.0, span), ctx.decimals)
    if support >= ctx.price:
        support = round(support - step, ctx.decimals)
    if resistance <= ctx.price:
        resistance = round(resistance + step, ctx.decimals)
    return SupportResistance(
        support=support,
        resistance=resistance,
        strength=uniform(ctx.rng, 0.6, 1.0),
    )


def build_signal(
    ctx: StrategyContext,
    *,
    direction: str,
    strategy: str,
    strength: str,
    risk_pips: float,
    reward_multiple: float,
    probability: int,
    time_frame: str,
    reason: str,
    binary_expiry: int,
    confidence: str,
    momentum: float,
    trend_strength: float,
    support_resistance: SupportResistance,
) -> Signal:
    """Assemble a ``Signal`` with SL/TP derived from the rounded entry."""
    entry = round(ctx.price, ctx.decimals)
    levels = calculate_levels(
        entry_price=entry,
        direction=direction,
        risk_pips=risk_pips,
        reward_multiple=reward_multiple,
        pip_value=ctx.pip,
        decimals=ctx.decimals,
    )
    return Signal(
        id=token(ctx.rng),
        pair=ctx.rate.symbol,
        type=direction,
        strategy=strategy,
        strength=strength,
        entry=entry,
        stop_loss=levels.sl,
        take_profit=levels.tp,
        probability=max(0, min(100, probability)),
        time_frame=time_frame,
        reason=reason,
        binary_expiry=binary_expiry,
        confidence=confidence,
        momentum=momentum,
        trend_strength=trend_strength,
        support_resistance=support_resistance,
    )
