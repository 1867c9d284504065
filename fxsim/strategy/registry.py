"""Strategy registry — maps strategy tags to classes.

``DEFAULT_STRATEGY_ORDER`` is the stable evaluation order used by the
selector; ties between equal scores go to the earlier strategy.
"""

from fxsim.strategy.base import StrategyProtocol
from fxsim.strategy.market_cycle import MarketCycleStrategy
from fxsim.strategy.momentum import MomentumStrategy
from fxsim.strategy.models import EXTREME_AI, MOMENTUM, SUPPORT_RESISTANCE, TREND_FOLLOWING
from fxsim.strategy.sr_zones import SupportResistanceStrategy
from fxsim.strategy.trend import TrendAlignmentStrategy


STRATEGY_REGISTRY: dict[str, type] = {
    EXTREME_AI: MarketCycleStrategy,
    TREND_FOLLOWING: TrendAlignmentStrategy,
    MOMENTUM: MomentumStrategy,
    SUPPORT_RESISTANCE: SupportResistanceStrategy,
}

DEFAULT_STRATEGY_ORDER: tuple[str, ...] = (
    EXTREME_AI,
    TREND_FOLLOWING,
    MOMENTUM,
    SUPPORT_RESISTANCE,
)


def get_strategy(name: str) -> StrategyProtocol:
    """Look up and instantiate a strategy by registry key.

    Raises ``KeyError`` if the strategy name is not registered.
    """
    if name not in STRATEGY_REGISTRY:
        raise KeyError(
            f"Unknown strategy '{name}'. "
            f"Available: {', '.join(STRATEGY_REGISTRY.keys())}"
        )
    return STRATEGY_REGISTRY[name]()


def default_strategies() -> list[StrategyProtocol]:
    """Instantiate every registered strategy in evaluation order."""
    return [get_strategy(name) for name in DEFAULT_STRATEGY_ORDER]
