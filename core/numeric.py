"""Numeric helpers shared by the scorer and the analysis parser."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int) -> float:
    """Round half away from zero: 7.25 -> 7.3 where ``round`` gives 7.2."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
