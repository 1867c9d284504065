"""Market-cycle strategy — the maximum-confidence generator.

Picks one of four Wyckoff-style cycle phases and issues a high-probability
signal in that phase's direction with a tight stop and a wide target.
It never abstains once its fire gate has passed.
"""

from dataclasses import dataclass
from typing import Optional

from fxsim.market.rng import pick, randint, uniform
from fxsim.strategy.base import (
    StrategyContext,
    build_signal,
    calculate_momentum,
    calculate_support_resistance,
)
from fxsim.strategy.models import EXTREME_AI, Signal


@dataclass(frozen=True)
class CyclePhase:
    """A market-cycle phase with a fixed bias and base strength."""

    name: str
    direction: int
    strength: float


CYCLE_PHASES: tuple[CyclePhase, ...] = (
    CyclePhase("accumulation", 1, 0.85),
    CyclePhase("markup", 1, 0.92),
    CyclePhase("distribution", -1, 0.78),
    CyclePhase("markdown", -1, 0.89),
)

PATTERN_REASONS: tuple[str, ...] = (
    "AI-detected institutional accumulation pattern",
    "Neural network confirms breakout imminent",
    "Machine learning algorithm detects reversal signals",
    "Deep learning model shows 89% probability setup",
    "AI sentiment analysis indicates strong momentum",
    "Quantum computing prediction model activated",
)

TIME_FRAMES: tuple[str, ...] = ("5M", "15M", "1H")


class MarketCycleStrategy:
    """Maximum-confidence signals keyed to a sampled market-cycle phase."""

    name = EXTREME_AI
    fire_probability = 0.7

    def evaluate(self, ctx: StrategyContext) -> Optional[Signal]:
        rng = ctx.rng
        phase = pick(rng, CYCLE_PHASES)
        probability = round(uniform(rng, 75.0, 95.0))
        direction = "BUY" if phase.direction > 0 else "SELL"
        risk_pips = uniform(rng, 12.0, 30.0)
        reward_multiple = uniform(rng, 2.5, 4.0)

        return build_signal(
            ctx,
            direction=direction,
            strategy=self.name,
            strength="MAXIMUM",
            risk_pips=risk_pips,
            reward_multiple=reward_multiple,
            probability=probability,
            time_frame=pick(rng, TIME_FRAMES),
            reason=pick(rng, PATTERN_REASONS),
            binary_expiry=randint(rng, 3, 15),
            confidence="EXTREME",
            momentum=calculate_momentum(ctx.rate, rng),
            trend_strength=phase.strength,
            support_resistance=calculate_support_resistance(ctx),
        )
