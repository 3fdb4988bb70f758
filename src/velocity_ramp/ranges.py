"""Pure numeric helpers used by the ramp limiters.

This module contains stateless operations for:
- Range clamping and membership tests
- Deadband zeroing
- Sign extraction
- Decimal rounding (half-to-even)

All functions operate on plain floats, making them easy to test and reuse
independently of the limiters.
"""

from decimal import ROUND_HALF_EVEN, Decimal


def in_range(value: float, lower: float, upper: float) -> float:
    """Clamp a value into the closed interval [lower, upper].

    Args:
        value: Value to clamp.
        lower: Lower bound.
        upper: Upper bound.

    Returns:
        ``value`` modified to stay within the range.

    Raises:
        ValueError: If ``lower > upper``.
    """
    if lower > upper:
        raise ValueError(f"lower must be <= upper (got lower={lower}, upper={upper})")

    if value > upper:
        return upper
    if value < lower:
        return lower
    return value


def clamp_symmetric(value: float, limit: float) -> float:
    """Clamp a value into [-limit, limit]."""
    if limit < 0:
        raise ValueError(f"limit must be >= 0 (got {limit})")
    return in_range(value, -limit, limit)


def deadband(value: float, band: float, inclusive: bool = True) -> float:
    """Zero a value that falls inside the deadband around 0.

    With ``inclusive=True`` a value whose magnitude equals ``band`` is also
    zeroed.
    """
    if band < 0:
        raise ValueError(f"deadband must be >= 0 (got {band})")

    if inclusive:
        return 0.0 if abs(value) <= band else value
    return 0.0 if abs(value) < band else value


def is_within_range(value: float, lower: float, upper: float, inclusive: bool = True) -> bool:
    """Check whether a value lies within [lower, upper] (or (lower, upper))."""
    if lower > upper:
        raise ValueError(f"lower must be <= upper (got lower={lower}, upper={upper})")

    if inclusive:
        return lower <= value <= upper
    return lower < value < upper


def sign(value: float) -> int:
    """Return 1, 0 or -1 according to the sign of the value."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def round_half_even(value: float, places: int) -> float:
    """Round to a number of decimal places, halves going to the nearest even digit.

    Rounding is done on the shortest decimal representation of ``value`` so
    that e.g. ``2.675`` rounds like the literal it was written as.
    """
    if places < 0:
        raise ValueError(f"places must be >= 0 (got {places})")

    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_EVEN))
