"""fxsim — Market engine (request orchestration).

Connects configuration, the random source and the clock to the rate,
candle, strategy and analysis generators.  Every public method is one
self-contained request: it takes a fresh generator from the factory and
reads the clock exactly once.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from fxsim.config import Config
from fxsim.market.analysis import analyze
from fxsim.market.candles import DEFAULT_TIMEFRAME, generate_candles
from fxsim.market.models import Candle, MarketAnalysis, Rate
from fxsim.market.rates import generate_rates
from fxsim.market.rng import RngFactory, rng_factory as make_rng_factory
from fxsim.strategy.base import StrategyProtocol
from fxsim.strategy.models import Signal
from fxsim.strategy.registry import default_strategies
from fxsim.strategy.selector import generate_signals

logger = logging.getLogger("fxsim.engine")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MarketEngine:
    """Produces rates, signals, analysis and chart data per call.

    Args:
        config: Application configuration.
        rng_factory: Returns a new ``numpy.random.Generator`` per call.
            Defaults to one seeded from ``config.seed``.
        clock: Returns the current UTC instant. Defaults to the wall clock.
        strategies: Strategies in selection order. Defaults to the registry.
    """

    def __init__(
        self,
        config: Config,
        rng_factory: Optional[RngFactory] = None,
        clock: Optional[Clock] = None,
        strategies: Optional[Sequence[StrategyProtocol]] = None,
    ) -> None:
        self._config = config
        self._rng_factory = rng_factory or make_rng_factory(config.seed)
        self._clock = clock or utc_now
        self._strategies = list(strategies) if strategies is not None else default_strategies()

    @property
    def symbols(self) -> list[str]:
        return list(self._config.symbols)

    def rates(self) -> list[Rate]:
        """One fresh quote per configured symbol."""
        return generate_rates(self.symbols, self._rng_factory(), self._clock())

    def signals(self) -> list[Signal]:
        """Best signal per symbol, truncated to ``config.max_signals``."""
        rng = self._rng_factory()
        now = self._clock()
        rates = generate_rates(self.symbols, rng, now)
        signals = generate_signals(
            rates,
            self._strategies,
            rng,
            utc_hour=now.hour,
            max_signals=self._config.max_signals,
        )
        logger.debug("Generated %d signal(s) across %d symbol(s)", len(signals), len(rates))
        return signals

    def analysis(self) -> MarketAnalysis:
        rng = self._rng_factory()
        rates = generate_rates(self.symbols, rng, self._clock())
        return analyze(rates, rng)

    def chart_data(self, pair: str = "EURUSD", timeframe: str = DEFAULT_TIMEFRAME) -> list[Candle]:
        """``config.candle_count`` candles for *pair* at *timeframe*."""
        return generate_candles(
            pair,
            timeframe,
            self._rng_factory(),
            self._clock(),
            count=self._config.candle_count,
        )
