"""Math helpers — rounding and clamping. No engine imports."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Nearest integer, ties toward +inf (2.5 → 3, -2.5 → -2)."""
    return math.floor(value + 0.5)


def round_fixed(value: float, digits: int = 0) -> float:
    """Round to `digits` decimals with ties away from zero.

    Works on the exact binary value of the float, so 1.005 stays 1.0 at two
    digits exactly like fixed-point display formatting does.
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0  # normalise -0.0


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
