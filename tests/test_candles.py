"""Tests for the candle series generator.

Seeded generators make every run reproducible; invariants are checked
across many seeds rather than against hand-computed values.
"""

from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from fxsim.market.candles import (
    TIMEFRAME_DURATIONS,
    TrendState,
    advance_trend,
    format_time,
    generate_candles,
    near_round_level,
    timeframe_duration,
)


_NOW = datetime(2025, 1, 15, 14, 30, 5, 123000, tzinfo=timezone.utc)


class _FixedRng:
    """Stand-in generator returning fixed draws."""

    def __init__(self, draw: float) -> None:
        self._draw = draw

    def random(self) -> float:
        return self._draw

    def uniform(self, low: float, high: float) -> float:
        return low


def _parse(time: str) -> datetime:
    return datetime.fromisoformat(time.replace("Z", "+00:00"))


def _candles(symbol="EURUSD", timeframe="1H", seed=0, count=100):
    return generate_candles(symbol, timeframe, np.random.default_rng(seed), _NOW, count=count)


# ── Series shape ─────────────────────────────────────────────────────────


class TestSeriesShape:
    def test_exactly_one_hundred_candles(self):
        assert len(_candles()) == 100

    def test_custom_count(self):
        assert len(_candles(count=10)) == 10

    @pytest.mark.parametrize("timeframe", list(TIMEFRAME_DURATIONS))
    def test_times_spaced_by_timeframe(self, timeframe):
        candles = _candles(timeframe=timeframe)
        times = [_parse(c.time) for c in candles]
        step = TIMEFRAME_DURATIONS[timeframe]
        for prev, cur in zip(times, times[1:]):
            assert cur - prev == step

    def test_last_bar_one_duration_before_now(self):
        candles = _candles(timeframe="15M")
        assert _parse(candles[-1].time) == _NOW - timedelta(minutes=15)
        assert _parse(candles[0].time) == _NOW - 100 * timedelta(minutes=15)

    def test_unknown_timeframe_falls_back_to_hourly(self):
        assert timeframe_duration("3H") == timedelta(hours=1)
        times = [_parse(c.time) for c in _candles(timeframe="3H")]
        assert times[1] - times[0] == timedelta(hours=1)

    def test_time_format(self):
        assert format_time(_NOW) == "2025-01-15T14:30:05.123Z"


# ── OHLCV invariants ─────────────────────────────────────────────────────


class TestCandleInvariants:
    @pytest.mark.parametrize("symbol", ["EURUSD", "USDJPY", "GBPJPY", "XYZABC"])
    def test_high_low_bracket_body(self, symbol):
        for seed in range(20):
            for c in _candles(symbol=symbol, seed=seed):
                assert c.high >= max(c.open, c.close)
                assert c.low <= min(c.open, c.close)

    def test_volume_positive_integer(self):
        for seed in range(10):
            for c in _candles(seed=seed):
                assert isinstance(c.volume, int)
                assert c.volume > 0

    @pytest.mark.parametrize("symbol", ["EURUSD", "USDJPY"])
    def test_chain_continuity(self, symbol):
        for seed in range(10):
            candles = _candles(symbol=symbol, seed=seed)
            for prev, cur in zip(candles, candles[1:]):
                assert cur.open == prev.close

    def test_first_open_is_base_rate(self):
        assert _candles(symbol="EURUSD")[0].open == 1.08472
        assert _candles(symbol="XYZABC")[0].open == 1.0

    def test_independent_calls_differ(self):
        a = generate_candles("EURUSD", "1H", np.random.default_rng(), _NOW)
        b = generate_candles("EURUSD", "1H", np.random.default_rng(), _NOW)
        assert len(a) == len(b) == 100
        assert [c.close for c in a] != [c.close for c in b]

    def test_same_seed_same_series(self):
        assert _candles(seed=11) == _candles(seed=11)


# ── Trend state and round levels ─────────────────────────────────────────


class TestTrendState:
    def test_flip_reverses_and_redraws(self):
        state = advance_trend(TrendState(direction=1, strength=0.8), _FixedRng(0.0))
        assert state.direction == -1
        assert state.strength == 0.3

    def test_no_flip_keeps_state(self):
        original = TrendState(direction=-1, strength=0.6)
        assert advance_trend(original, _FixedRng(0.99)) is original


class TestRoundLevels:
    def test_near_big_figure(self):
        assert near_round_level(1.1002, 0.0001) is True
        assert near_round_level(1.0997, 0.0001) is True

    def test_away_from_big_figure(self):
        assert near_round_level(1.1050, 0.0001) is False

    def test_coarse_pair(self):
        assert near_round_level(150.02, 0.01) is True
        assert near_round_level(150.40, 0.01) is False
