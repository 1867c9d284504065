"""Strategy data models — typed representations for strategy outputs."""

from dataclasses import dataclass


# Strategy tags
EXTREME_AI = "EXTREME_AI"
TREND_FOLLOWING = "TREND_FOLLOWING"
MOMENTUM = "MOMENTUM"
SUPPORT_RESISTANCE = "SUPPORT_RESISTANCE"


@dataclass(frozen=True)
class SupportResistance:
    """A support/resistance band bracketing a reference price."""

    support: float
    resistance: float
    strength: float  # 0.6–1.0

    def to_dict(self) -> dict:
        return {
            "support": self.support,
            "resistance": self.resistance,
            "strength": self.strength,
        }


@dataclass(frozen=True)
class Signal:
    """A trading recommendation produced by one strategy."""

    id: str
    pair: str
    type: str  # "BUY" or "SELL"
    strategy: str
    strength: str  # "MAXIMUM", "STRONG", "MEDIUM" or "WEAK"
    entry: float
    stop_loss: float
    take_profit: float
    probability: int  # 0–100
    time_frame: str
    reason: str
    binary_expiry: int  # minutes
    confidence: str  # "EXTREME", "HIGH" or "MEDIUM"
    momentum: float  # -1..1
    trend_strength: float  # 0..1
    support_resistance: SupportResistance

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "pair": self.pair,
            "type": self.type,
            "strategy": self.strategy,
            "strength": self.strength,
            "entry": self.entry,
            "stopLoss": self.stop_loss,
            "takeProfit": self.take_profit,
            "probability": self.probability,
            "timeFrame": self.time_frame,
            "reason": self.reason,
            "binaryExpiry": self.binary_expiry,
            "confidence": self.confidence,
            "momentum": self.momentum,
            "trendStrength": self.trend_strength,
            "supportResistance": self.support_resistance.to_dict(),
        }
