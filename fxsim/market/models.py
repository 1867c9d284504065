"""Market data models — typed representations of generated quotes and bars."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rate:
    """One instrument's current quote."""

    symbol: str
    bid: float
    ask: float
    spread: float
    change: float
    change_percent: float
    timestamp: int  # epoch milliseconds

    @property
    def mid(self) -> float:
        return (self.bid + self.ask) / 2

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "bid": self.bid,
            "ask": self.ask,
            "spread": self.spread,
            "change": self.change,
            "changePercent": self.change_percent,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class Candle:
    """A single candlestick bar."""

    time: str
    open: float
    high: float
    low: float
    close: float
    volume: int

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


@dataclass(frozen=True)
class KeyLevels:
    """Descriptive key-level commentary attached to a market analysis."""

    support: str
    resistance: str
    pivot: str


@dataclass(frozen=True)
class MarketAnalysis:
    """Aggregate sentiment snapshot over a set of rates."""

    sentiment: str  # "BULLISH" or "BEARISH"
    bullish_pairs: int
    bearish_pairs: int
    volatility: str  # "HIGH" or "MEDIUM"
    volume: str
    vix: str
    market_trend: str  # "Risk-On" or "Risk-Off"
    key_levels: KeyLevels

    def to_dict(self) -> dict:
        return {
            "sentiment": self.sentiment,
            "bullishPairs": self.bullish_pairs,
            "bearishPairs": self.bearish_pairs,
            "volatility": self.volatility,
            "volume": self.volume,
            "vix": self.vix,
            "marketTrend": self.market_trend,
            "keyLevels": {
                "support": self.key_levels.support,
                "resistance": self.key_levels.resistance,
                "pivot": self.key_levels.pivot,
            },
        }
