"""Session model — pure functions mapping a UTC hour to trading sessions.

Session windows are inclusive on both ends and may wrap midnight
(Sydney runs 22:00 through 07:00 UTC).
"""

from dataclasses import dataclass
from enum import IntEnum


SYDNEY = "sydney"
TOKYO = "tokyo"
LONDON = "london"
NEW_YORK = "new_york"

# name → (start hour, end hour), both inclusive
SESSION_WINDOWS: dict[str, tuple[int, int]] = {
    SYDNEY: (22, 7),
    TOKYO: (0, 9),
    LONDON: (8, 17),
    NEW_YORK: (13, 22),
}


class SessionTier(IntEnum):
    """Activity tiers, ordered from quietest to busiest."""

    CLOSED = 0
    ASIAN = 1
    MAJOR = 2
    OVERLAP = 3


@dataclass(frozen=True)
class SessionWeight:
    """Movement multipliers for a session tier."""

    volatility: float
    liquidity: float


RATE_WEIGHTS: dict[SessionTier, SessionWeight] = {
    SessionTier.OVERLAP: SessionWeight(volatility=2.5, liquidity=1.8),
    SessionTier.MAJOR: SessionWeight(volatility=1.8, liquidity=1.4),
    SessionTier.ASIAN: SessionWeight(volatility=1.2, liquidity=1.1),
    SessionTier.CLOSED: SessionWeight(volatility=0.4, liquidity=0.6),
}

# Coarser table used when synthesising candle bodies and wicks.
CANDLE_VOLATILITY: dict[SessionTier, float] = {
    SessionTier.OVERLAP: 2.2,
    SessionTier.MAJOR: 1.6,
    SessionTier.ASIAN: 1.1,
    SessionTier.CLOSED: 0.3,
}


def is_in_session(utc_hour: int, session_start: int, session_end: int) -> bool:
    """Return True if *utc_hour* falls within an inclusive session window.

    A window whose start is after its end wraps past midnight.

    Args:
        utc_hour: The hour in UTC (0–23).
        session_start: Session start hour (inclusive).
        session_end: Session end hour (inclusive).
    """
    if session_start <= session_end:
        return session_start <= utc_hour <= session_end
    return utc_hour >= session_start or utc_hour <= session_end


def active_sessions(utc_hour: int) -> list[str]:
    """Names of the sessions open at *utc_hour*, in window order."""
    return [
        name
        for name, (start, end) in SESSION_WINDOWS.items()
        if is_in_session(utc_hour, start, end)
    ]


def session_tier(utc_hour: int) -> SessionTier:
    """Classify *utc_hour* by session overlap.

    London∩New York or Tokyo∩London is an overlap; London or New York
    alone is a major session; Tokyo or Sydney alone is Asian.
    """
    active = set(active_sessions(utc_hour))
    if {LONDON, NEW_YORK} <= active or {TOKYO, LONDON} <= active:
        return SessionTier.OVERLAP
    if LONDON in active or NEW_YORK in active:
        return SessionTier.MAJOR
    if TOKYO in active or SYDNEY in active:
        return SessionTier.ASIAN
    return SessionTier.CLOSED


def session_weight(utc_hour: int) -> SessionWeight:
    """Return the rate-generation multipliers for *utc_hour*."""
    return RATE_WEIGHTS[session_tier(utc_hour)]


def candle_volatility(utc_hour: int) -> float:
    return CANDLE_VOLATILITY[session_tier(utc_hour)]


def selection_weight(utc_hour: int) -> float:
    """Weight applied to strategy scores: 1.2 while London or New York trade."""
    london_start, london_end = SESSION_WINDOWS[LONDON]
    ny_start, ny_end = SESSION_WINDOWS[NEW_YORK]
    if is_in_session(utc_hour, london_start, london_end) or is_in_session(
        utc_hour, ny_start, ny_end
    ):
        return 1.2
    return 0.8
