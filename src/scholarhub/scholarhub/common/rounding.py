from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int) -> float:
    """Round to ``places`` decimals with ties going away from zero.

    Works on the exact binary value of ``value``, so 0.125 -> 0.13 while
    1.005 (stored as 1.00499...) -> 1.0.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
