"""Support/resistance proximity strategy — pure functions plus the strategy.

A synthetic support/resistance band is drawn around the current price.
When the price sits within ``tolerance_pips`` of either level the strategy
trades the expected bounce: BUY off support, SELL off resistance.  Support
is checked first.  Confidence rises as the price gets closer to the level.
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
from fxsim.strategy.models import SUPPORT_RESISTANCE, Signal, SupportResistance


DEFAULT_TOLERANCE_PIPS = 10.0


@dataclass(frozen=True)
class ZoneTouch:
    """The level a price is touching and how close it is."""

    zone_type: str  # "support" or "resistance"
    price_level: float
    proximity: float  # 0..1, 1 = exactly at the level


def find_zone_touch(
    price: float,
    sr: SupportResistance,
    pip_value: float = 0.0001,
    tolerance_pips: float = DEFAULT_TOLERANCE_PIPS,
) -> Optional[ZoneTouch]:
    """Check whether *price* is within tolerance of support or resistance.

    Args:
        price: Current mid price.
        sr: Support/resistance band around the price.
        pip_value: Value of 1 pip for the instrument.
        tolerance_pips: Maximum distance in pips to count as a touch.

    Returns:
        ``ZoneTouch`` for the touched level (support preferred), else None.
    """
    tolerance = tolerance_pips * pip_value
    for zone_type, level in (("support", sr.support), ("resistance", sr.resistance)):
        distance = abs(price - level)
        if distance < tolerance:
            return ZoneTouch(
                zone_type=zone_type,
                price_level=level,
                proximity=1 - distance / tolerance,
            )
    return None


class SupportResistanceStrategy:
    """Bounce signals at nearby support or resistance."""

    name = SUPPORT_RESISTANCE
    fire_probability = 0.4

    def __init__(self, tolerance_pips: float = DEFAULT_TOLERANCE_PIPS) -> None:
        self._tolerance_pips = tolerance_pips

    def evaluate(self, ctx: StrategyContext) -> Optional[Signal]:
        sr = calculate_support_resistance(ctx)
        touch = find_zone_touch(ctx.price, sr, ctx.pip, self._tolerance_pips)
        if touch is None:
            return None

        rng = ctx.rng
        proximity = touch.proximity
        direction = "BUY" if touch.zone_type == "support" else "SELL"
        risk_pips = uniform(rng, 8.0, 20.0)

        return build_signal(
            ctx,
            direction=direction,
            strategy=self.name,
            strength="STRONG" if proximity > 0.7 else "MEDIUM",
            risk_pips=risk_pips,
            reward_multiple=3 + proximity,
            probability=round(65 + proximity * 25),
            time_frame="5M",
            reason=f"Price at key {touch.zone_type} level: {ctx.fmt(touch.price_level)}",
            binary_expiry=randint(rng, 3, 11),
            confidence="HIGH" if proximity > 0.7 else "MEDIUM",
            momentum=calculate_momentum(ctx.rate, rng),
            trend_strength=proximity,
            support_resistance=sr,
        )
