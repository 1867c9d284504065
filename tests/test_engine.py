"""Tests for the MarketEngine facade — wiring, determinism, configuration."""

from datetime import datetime, timedelta, timezone

import numpy as np

from fxsim.config import Config
from fxsim.engine import MarketEngine
from fxsim.market.instruments import DEFAULT_SYMBOLS
from fxsim.market.rng import rng_factory


_NOW = datetime(2025, 1, 15, 14, 30, tzinfo=timezone.utc)


def _fixed_clock():
    return _NOW


def _make_engine(**overrides) -> MarketEngine:
    defaults = dict(seed=1234)
    defaults.update(overrides)
    return MarketEngine(Config(**defaults), clock=_fixed_clock)


class TestRates:
    def test_one_rate_per_configured_symbol(self):
        rates = _make_engine().rates()
        assert [r.symbol for r in rates] == list(DEFAULT_SYMBOLS)

    def test_unknown_symbol_configured(self):
        rates = _make_engine(symbols=("EURUSD", "XYZABC")).rates()
        unknown = rates[1]
        assert unknown.symbol == "XYZABC"
        assert unknown.bid < unknown.ask
        assert abs(unknown.mid - 1.0) < 0.01

    def test_seeded_engine_repeats(self):
        engine = _make_engine()
        assert engine.rates() == engine.rates()

    def test_unseeded_engine_varies(self):
        engine = MarketEngine(Config(), clock=_fixed_clock)
        assert engine.rates() != engine.rates()


class TestSignals:
    def test_never_more_than_eight(self):
        for seed in range(20):
            assert len(_make_engine(seed=seed).signals()) <= 8

    def test_max_signals_respected(self):
        for seed in range(20):
            assert len(_make_engine(seed=seed, max_signals=2).signals()) <= 2

    def test_seeded_engine_repeats(self):
        engine = _make_engine()
        assert engine.signals() == engine.signals()

    def test_injected_rng_factory(self):
        engine = MarketEngine(Config(), rng_factory=rng_factory(7), clock=_fixed_clock)
        assert engine.signals() == engine.signals()

    def test_custom_strategy_list(self):
        engine = MarketEngine(Config(seed=1), clock=_fixed_clock, strategies=[])
        assert engine.signals() == []


class TestAnalysis:
    def test_pair_counts_cover_symbols(self):
        analysis = _make_engine().analysis()
        assert analysis.bullish_pairs + analysis.bearish_pairs == len(DEFAULT_SYMBOLS)


class TestChartData:
    def test_default_count(self):
        assert len(_make_engine().chart_data()) == 100

    def test_configured_count(self):
        assert len(_make_engine(candle_count=25).chart_data("GBPUSD", "5M")) == 25

    def test_ends_one_bar_before_clock(self):
        candles = _make_engine().chart_data("EURUSD", "4H")
        last = datetime.fromisoformat(candles[-1].time.replace("Z", "+00:00"))
        assert last == _NOW - timedelta(hours=4)

    def test_each_call_gets_fresh_generator(self):
        calls = []

        def factory():
            calls.append(1)
            return np.random.default_rng(len(calls))

        engine = MarketEngine(Config(), rng_factory=factory, clock=_fixed_clock)
        first = engine.chart_data()
        second = engine.chart_data()
        assert len(calls) == 2
        assert first != second
