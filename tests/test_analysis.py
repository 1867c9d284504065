"""Tests for the market analysis aggregator."""

import numpy as np

from fxsim.market.analysis import analyze
from fxsim.market.models import Rate


def _make_rates(*change_percents: float) -> list[Rate]:
    return [
        Rate(
            symbol=f"PAIR{i:02d}",
            bid=1.0,
            ask=1.0001,
            spread=0.0001,
            change=cp / 100,
            change_percent=cp,
            timestamp=0,
        )
        for i, cp in enumerate(change_percents)
    ]


class TestSentiment:
    def test_bullish_majority(self):
        result = analyze(_make_rates(0.1, 0.2, 0.05, -0.1), np.random.default_rng(0))
        assert result.sentiment == "BULLISH"
        assert result.bullish_pairs == 3
        assert result.bearish_pairs == 1
        assert result.market_trend == "Risk-On"

    def test_even_split_is_bearish(self):
        result = analyze(_make_rates(0.1, 0.2, -0.1, -0.2), np.random.default_rng(0))
        assert result.sentiment == "BEARISH"
        assert result.market_trend == "Risk-Off"

    def test_unchanged_counts_as_bearish(self):
        result = analyze(_make_rates(0.0, 0.0, 0.1), np.random.default_rng(0))
        assert result.bullish_pairs == 1
        assert result.bearish_pairs == 2
        assert result.sentiment == "BEARISH"

    def test_empty_rates(self):
        result = analyze([], np.random.default_rng(0))
        assert result.sentiment == "BEARISH"
        assert result.bullish_pairs == 0
        assert result.bearish_pairs == 0


class TestCosmeticFields:
    def test_shape_stable_across_draws(self):
        rates = _make_rates(0.1, -0.1)
        for seed in range(50):
            result = analyze(rates, np.random.default_rng(seed))
            assert result.volatility in ("HIGH", "MEDIUM")
            assert result.volume.endswith("T")
            assert 5.0 <= float(result.volume[:-1]) <= 7.0
            assert 15.0 <= float(result.vix) <= 25.0

    def test_to_dict_wire_names(self):
        data = analyze(_make_rates(0.1), np.random.default_rng(1)).to_dict()
        assert set(data) == {
            "sentiment", "bullishPairs", "bearishPairs", "volatility",
            "volume", "vix", "marketTrend", "keyLevels",
        }
        assert set(data["keyLevels"]) == {"support", "resistance", "pivot"}
