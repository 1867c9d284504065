"""Stop-loss and take-profit calculation — pure math, no I/O.

Levels are measured in pips from the entry price:

- **BUY**:  SL = entry − risk,  TP = entry + risk × reward multiple
- **SELL**: SL = entry + risk,  TP = entry − risk × reward multiple

Both levels are rounded to the instrument's signal precision.  The entry
must already sit on that precision grid, and *risk_pips* must be at least
one pip, so the ordering survives rounding.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RiskLevels:
    """Computed stop-loss and take-profit for a signal."""

    sl: float
    tp: float


def calculate_levels(
    entry_price: float,
    direction: str,
    risk_pips: float,
    reward_multiple: float,
    pip_value: float = 0.0001,
    decimals: int = 4,
) -> RiskLevels:
    """Calculate SL and TP for a signal.

    Args:
        entry_price: Signal entry price (already rounded to *decimals*).
        direction: ``"BUY"`` or ``"SELL"``.
        risk_pips: Stop distance in pips (≥ 1).
        reward_multiple: TP distance as a multiple of the stop distance (> 0).
        pip_value: Value of 1 pip for the instrument.
        decimals: Rounding precision for the returned levels.

    Raises:
        ValueError: If *direction* is not ``"BUY"`` or ``"SELL"``, or the
            distances would not separate the levels from the entry.
    """
    if risk_pips < 1 or reward_multiple <= 0:
        raise ValueError(
            f"risk_pips must be >= 1 and reward_multiple > 0, "
            f"got {risk_pips} and {reward_multiple}"
        )

    risk = risk_pips * pip_value
    reward = risk * reward_multiple
    # Keep TP at least one pip away even for small multiples.
    reward = max(reward, pip_value)

    if direction == "BUY":
        sl = entry_price - risk
        tp = entry_price + reward
    elif direction == "SELL":
        sl = entry_price + risk
        tp = entry_price - reward
    else:
        raise ValueError(f"direction must be 'BUY' or 'SELL', got '{direction}'")

    return RiskLevels(sl=round(sl, decimals), tp=round(tp, decimals))

