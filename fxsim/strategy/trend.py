"""Trend-alignment strategy — multi-timeframe directional vote.

Samples a bullish/bearish label for each of five nominal timeframes and
trades with the majority.  An even split (possible only when a vote is
neutral) is treated as sideways and abstains.
"""

from dataclasses import dataclass
from typing import Literal, Optional

import numpy as np

from fxsim.market.rng import chance, randint, uniform
from fxsim.strategy.base import (
    StrategyContext,
    build_signal,
    calculate_momentum,
    calculate_support_resistance,
)
from fxsim.strategy.models import TREND_FOLLOWING, Signal


VOTE_TIMEFRAMES: tuple[str, ...] = ("1M", "5M", "15M", "1H", "4H")
MAJORITY = 3


@dataclass(frozen=True)
class TrendAlignment:
    """Outcome of the multi-timeframe vote."""

    direction: Literal["bullish", "bearish", "sideways"]
    bullish_count: int
    bearish_count: int
    strength: float  # 0..1, distance of the vote from an even split


def sample_trends(rng: np.random.Generator) -> dict[str, str]:
    """Draw an independent BULLISH/BEARISH label per vote timeframe."""
    return {
        tf: "BULLISH" if chance(rng, 0.5) else "BEARISH"
        for tf in VOTE_TIMEFRAMES
    }


def detect_alignment(trends: dict[str, str]) -> TrendAlignment:
    """Classify a set of timeframe labels.

    Rules:
        - **Bullish**: at least ``MAJORITY`` bullish votes.
        - **Bearish**: at least ``MAJORITY`` bearish votes.
        - **Sideways**: neither side reaches the majority.
    """
    bullish = sum(1 for t in trends.values() if t == "BULLISH")
    bearish = sum(1 for t in trends.values() if t == "BEARISH")
    half = len(VOTE_TIMEFRAMES) / 2
    strength = abs(bullish - half) / half

    if bullish >= MAJORITY and bullish > bearish:
        direction = "bullish"
    elif bearish >= MAJORITY and bearish > bullish:
        direction = "bearish"
    else:
        direction = "sideways"

    return TrendAlignment(
        direction=direction,
        bullish_count=bullish,
        bearish_count=bearish,
        strength=round(strength, 4),
    )


class TrendAlignmentStrategy:
    """Trend-following signals from multi-timeframe agreement."""

    name = TREND_FOLLOWING
    fire_probability = 0.6

    def evaluate(self, ctx: StrategyContext) -> Optional[Signal]:
        rng = ctx.rng
        alignment = detect_alignment(sample_trends(rng))
        if alignment.direction == "sideways":
            return None

        strength = alignment.strength
        if alignment.direction == "bullish":
            direction, agreeing = "BUY", alignment.bullish_count
        else:
            direction, agreeing = "SELL", alignment.bearish_count
        risk_pips = uniform(rng, 20.0, 40.0)

        if strength > 0.7:
            label = "STRONG"
        elif strength > 0.4:
            label = "MEDIUM"
        else:
            label = "WEAK"

        return build_signal(
            ctx,
            direction=direction,
            strategy=self.name,
            strength=label,
            risk_pips=risk_pips,
            reward_multiple=2 + strength,
            probability=round(60 + strength * 30),
            time_frame="1H",
            reason=(
                f"Multi-timeframe trend alignment: "
                f"{agreeing}/{len(VOTE_TIMEFRAMES)} timeframes "
                f"{alignment.direction}"
            ),
            binary_expiry=randint(rng, 15, 35),
            confidence="HIGH" if strength > 0.7 else "MEDIUM",
            momentum=calculate_momentum(ctx.rate, rng),
            trend_strength=strength,
            support_resistance=calculate_support_resistance(ctx),
        )
