"""
Fixed-point helpers used to make grid arithmetic reproducible.

Real values are scaled by PRECISION and floored to integers. All floor and
ceiling decisions are then taken on those integers, so the result does not
depend on representation error picked up by ordinary float arithmetic
(0.2 + 0.4 = 0.6000000000000001). Values are converted back to floats only
when they are handed to the caller.
"""

import math

from .errors import InternalPrecisionError


PRECISION = 10 ** 10
"""Scale factor: ten decimal digits of a degree."""

# Largest integer a float holds exactly.
MAX_EXACT_INTEGER = 2 ** 53


def check_precision(precision: int) -> None:
    """
    Make sure a full turn of longitude fits in exact float integers.

    Args:
        precision: Fixed-point scale factor

    Raises:
        InternalPrecisionError: If 360 * precision is not exactly representable
    """
    if precision < 1:
        raise InternalPrecisionError(f"Precision must be positive, got {precision}")
    if 360 * precision > MAX_EXACT_INTEGER:
        raise InternalPrecisionError(
            f"Cannot handle precision {precision}: 360 * precision exceeds {MAX_EXACT_INTEGER}"
        )


check_precision(PRECISION)


def to_fixed(value: float) -> int:
    """Convert degrees to a fixed-point integer (floored)."""
    fixed = math.floor(value * PRECISION)
    # value * PRECISION can land just below an integer whose float is value
    if from_fixed(fixed + 1) <= value:
        fixed += 1
    return fixed


def from_fixed(value: int) -> float:
    """Convert a fixed-point integer back to degrees."""
    return value / PRECISION


def from_fixed_half(value: int) -> float:
    """Convert a fixed-point integer counted in half units back to degrees."""
    return value / (2 * PRECISION)


def round_fixed(value: float) -> float:
    """
    Round a value down to the fixed-point precision.

    Idempotent: round_fixed(round_fixed(x)) == round_fixed(x).
    """
    return from_fixed(to_fixed(value))
