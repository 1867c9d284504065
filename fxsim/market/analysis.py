"""Market analysis aggregator — reduces a rate set to a sentiment summary."""

import numpy as np

from fxsim.market.models import KeyLevels, MarketAnalysis, Rate
from fxsim.market.rng import chance, uniform


KEY_LEVELS = KeyLevels(
    support="Strong support at previous session lows",
    resistance="Major resistance at session highs",
    pivot="Daily pivot levels holding as key zones",
)


def analyze(rates: list[Rate], rng: np.random.Generator) -> MarketAnalysis:
    """Majority-vote sentiment over *rates* plus cosmetic market colour.

    Sentiment is BULLISH only when strictly more rates rose than did not;
    an empty rate set is therefore BEARISH.
    """
    bullish = sum(1 for r in rates if r.change_percent > 0)
    bearish = len(rates) - bullish
    sentiment = "BULLISH" if bullish > bearish else "BEARISH"

    return MarketAnalysis(
        sentiment=sentiment,
        bullish_pairs=bullish,
        bearish_pairs=bearish,
        volatility="HIGH" if chance(rng, 0.5) else "MEDIUM",
        volume=f"{uniform(rng, 5.0, 7.0):.1f}T",
        vix=f"{uniform(rng, 15.0, 25.0):.1f}",
        market_trend="Risk-On" if sentiment == "BULLISH" else "Risk-Off",
        key_levels=KEY_LEVELS,
    )
