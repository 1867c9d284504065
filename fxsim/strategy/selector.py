"""Signal selection — per-symbol best candidate and the global top-N cut.

Scoring: ``probability × selection_weight(hour) × trend_strength``.  The
highest positive score wins; on equal scores the first candidate in
strategy order is kept.  A symbol whose candidates all score zero gets
no signal.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from fxsim.market.models import Rate
from fxsim.market.rng import chance
from fxsim.market.sessions import selection_weight
from fxsim.strategy.base import StrategyContext, StrategyProtocol
from fxsim.strategy.models import Signal

logger = logging.getLogger("fxsim.strategy")

DEFAULT_MAX_SIGNALS = 8


def score_signal(signal: Signal, utc_hour: int) -> float:
    return signal.probability * selection_weight(utc_hour) * signal.trend_strength


def collect_candidates(
    rate: Rate,
    strategies: Sequence[StrategyProtocol],
    rng: np.random.Generator,
) -> list[Signal]:
    """Run every strategy whose fire gate passes and keep non-abstentions."""
    ctx = StrategyContext.from_rate(rate, rng)
    candidates: list[Signal] = []
    for strategy in strategies:
        if not chance(rng, strategy.fire_probability):
            continue
        signal = strategy.evaluate(ctx)
        if signal is not None:
            candidates.append(signal)
    return candidates


def select_best(candidates: Sequence[Signal], utc_hour: int) -> Optional[Signal]:
    """Return the highest-scoring candidate, first-seen on ties."""
    best: Optional[Signal] = None
    best_score = 0.0
    for candidate in candidates:
        score = score_signal(candidate, utc_hour)
        if score > best_score:
            best, best_score = candidate, score
    return best


def generate_signals(
    rates: Sequence[Rate],
    strategies: Sequence[StrategyProtocol],
    rng: np.random.Generator,
    utc_hour: int,
    max_signals: int = DEFAULT_MAX_SIGNALS,
) -> list[Signal]:
    """Pick at most one signal per rate, then keep the first *max_signals*.

    Symbol order is preserved; no re-sort happens across symbols.
    """
    signals: list[Signal] = []
    for rate in rates:
        candidates = collect_candidates(rate, strategies, rng)
        best = select_best(candidates, utc_hour)
        logger.debug(
            "%s: %d candidate(s), selected %s",
            rate.symbol,
            len(candidates),
            best.strategy if best else None,
        )
        if best is not None:
            signals.append(best)
    return signals[:max_signals]
