"""Tests for the rate generator and instrument tables."""

from datetime import datetime, timezone

import numpy as np
import pytest

from fxsim.market.instruments import (
    BASE_RATES,
    DEFAULT_SYMBOLS,
    SPREADS,
    base_rate,
    is_coarse,
    precision_for,
    quote_currency,
    spread_for,
)
from fxsim.market.rates import generate_rate, generate_rates


_NOW = datetime(2025, 1, 15, 14, 30, 5, 123000, tzinfo=timezone.utc)
_QUIET = datetime(2025, 1, 15, 3, 0, 0, tzinfo=timezone.utc)


def _decimals(value: float) -> int:
    text = f"{value:.10f}".rstrip("0")
    return len(text.split(".")[1]) if "." in text else 0


# ── Instrument tables ────────────────────────────────────────────────────


class TestInstruments:
    def test_every_default_symbol_configured(self):
        for symbol in DEFAULT_SYMBOLS:
            assert symbol in BASE_RATES
            assert symbol in SPREADS

    def test_quote_currency(self):
        assert quote_currency("EURUSD") == "USD"
        assert quote_currency("USD_JPY") == "JPY"
        assert quote_currency("XAU") == ""

    def test_coarse_detection_is_structural(self):
        assert is_coarse("USDJPY") is True
        assert is_coarse("CADJPY") is True
        assert is_coarse("EURHUF") is True
        assert is_coarse("EURUSD") is False
        # JPY as base currency does not make a pair coarse
        assert is_coarse("JPYUSD") is False

    def test_precision_classes(self):
        assert precision_for("USDJPY").pip == 0.01
        assert precision_for("USDJPY").rate_decimals == 3
        assert precision_for("EURUSD").pip == 0.0001
        assert precision_for("EURUSD").rate_decimals == 5

    def test_unknown_symbol_defaults(self):
        assert base_rate("XYZABC") == 1.0
        assert spread_for("XYZABC") == 0.00004


# ── generate_rate ────────────────────────────────────────────────────────


class TestGenerateRate:
    @pytest.mark.parametrize("symbol", DEFAULT_SYMBOLS)
    def test_bid_below_ask(self, symbol):
        for seed in range(25):
            rate = generate_rate(symbol, np.random.default_rng(seed), _NOW)
            assert rate.bid < rate.ask

    @pytest.mark.parametrize("symbol", ["EURUSD", "USDJPY", "AUDCHF"])
    def test_change_percent_matches_change(self, symbol):
        reference = BASE_RATES[symbol]
        for seed in range(25):
            rate = generate_rate(symbol, np.random.default_rng(seed), _NOW)
            expected = rate.change / reference * 100
            assert rate.change_percent == pytest.approx(expected, abs=1e-4)

    def test_spread_taken_from_table(self):
        rate = generate_rate("GBPJPY", np.random.default_rng(1), _NOW)
        assert rate.spread == SPREADS["GBPJPY"]

    def test_mid_stays_near_base(self):
        for seed in range(50):
            rate = generate_rate("EURUSD", np.random.default_rng(seed), _NOW)
            assert abs(rate.mid - BASE_RATES["EURUSD"]) < 0.01

    def test_rounded_to_pair_convention(self):
        jpy = generate_rate("USDJPY", np.random.default_rng(3), _NOW)
        eur = generate_rate("EURUSD", np.random.default_rng(3), _NOW)
        assert _decimals(jpy.bid) <= 3 and _decimals(jpy.ask) <= 3
        assert _decimals(eur.bid) <= 5 and _decimals(eur.ask) <= 5

    def test_unknown_symbol_uses_default_reference(self):
        for seed in range(25):
            rate = generate_rate("XYZABC", np.random.default_rng(seed), _NOW)
            assert rate.symbol == "XYZABC"
            assert rate.bid < rate.ask
            assert abs(rate.mid - 1.0) < 0.01
            assert rate.change_percent == pytest.approx(rate.change * 100, abs=1e-4)

    def test_unknown_coarse_symbol_keeps_spread_open(self):
        rate = generate_rate("EURHUF", np.random.default_rng(0), _NOW)
        assert rate.bid < rate.ask

    def test_previous_mid_is_continuation_seed(self):
        rate = generate_rate("EURUSD", np.random.default_rng(5), _NOW, previous_mid=1.2)
        assert abs(rate.mid - 1.2) < 0.01
        assert rate.change_percent == pytest.approx(rate.change / 1.2 * 100, abs=1e-4)

    def test_timestamp_is_capture_instant(self):
        rate = generate_rate("EURUSD", np.random.default_rng(0), _NOW)
        assert rate.timestamp == int(_NOW.timestamp() * 1000)

    def test_same_seed_same_rate(self):
        a = generate_rate("EURUSD", np.random.default_rng(99), _NOW)
        b = generate_rate("EURUSD", np.random.default_rng(99), _NOW)
        assert a == b

    def test_quiet_hours_still_valid(self):
        rate = generate_rate("NZDUSD", np.random.default_rng(2), _QUIET)
        assert rate.bid < rate.ask


class TestGenerateRates:
    def test_one_rate_per_symbol_in_order(self):
        rates = generate_rates(list(DEFAULT_SYMBOLS), np.random.default_rng(0), _NOW)
        assert [r.symbol for r in rates] == list(DEFAULT_SYMBOLS)

    def test_to_dict_uses_wire_names(self):
        rate = generate_rate("EURUSD", np.random.default_rng(0), _NOW)
        data = rate.to_dict()
        assert set(data) == {
            "symbol", "bid", "ask", "spread", "change", "changePercent", "timestamp",
        }
        assert isinstance(data["timestamp"], int)
