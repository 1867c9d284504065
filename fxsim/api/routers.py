"""Market data routers — /rates, /signals, /analysis, /chart-data endpoints.

No generation logic here. Delegates to the shared ``MarketEngine``.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query

from fxsim.config import Config, load_config
from fxsim.engine import MarketEngine

logger = logging.getLogger("fxsim.api")
router = APIRouter()

# ── Shared state (set during app startup) ────────────────────────────────

_engine: Optional[MarketEngine] = None  # Set via configure_routers()


def configure_routers(engine: Optional[MarketEngine] = None, config: Optional[Config] = None) -> None:
    """Inject the engine from application startup.

    Args:
        engine: A ``MarketEngine`` (or duck-type for tests).
        config: Used to build a default engine when *engine* is omitted.
            Read from the environment when both are omitted.
    """
    global _engine  # noqa: PLW0603
    if engine is None:
        engine = MarketEngine(config or load_config())
        logger.debug("Built default market engine.")
    _engine = engine


def get_engine() -> MarketEngine:
    """Return the configured engine, building a default one on first use."""
    if _engine is None:
        configure_routers()
    return _engine


# ── Endpoints ────────────────────────────────────────────────────────────


@router.get("/rates")
async def get_rates():
    """Return one quote per configured symbol."""
    return [r.to_dict() for r in get_engine().rates()]


@router.get("/signals")
async def get_signals():
    """Return the top-ranked trading signals (at most 8 by default)."""
    return [s.to_dict() for s in get_engine().signals()]


@router.get("/analysis")
async def get_analysis():
    """Return the market sentiment summary."""
    return get_engine().analysis().to_dict()


@router.get("/chart-data")
async def get_chart_data(
    pair: str = Query(default="EURUSD"),
    timeframe: str = Query(default="1H"),
):
    """Return a candle series for *pair*, oldest first."""
    candles = get_engine().chart_data(pair=pair, timeframe=timeframe)
    return [c.to_dict() for c in candles]
