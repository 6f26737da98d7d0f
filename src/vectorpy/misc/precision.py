"""
Single-precision helpers for the vector types.

Components are stored as Python floats holding exact ``float32`` values. Sums,
differences and products of two such values are exact in double precision up
to the final rounding, so rounding the double result once gives the same
answer as native ``float32`` arithmetic. Everything that Python's own float
operations would raise on (division by zero, ``acos`` outside of [-1, 1],
trigonometry of infinities) is delegated to NumPy, which follows IEEE-754 and
returns Infinity or NaN instead.
"""

from __future__ import annotations

import math
from numbers import Integral, Real

import numpy as np

_F32 = np.float32


def is_scalar(value) -> bool:
    """
    Checks whether a value can be used as a scalar operand.

    Args:
        value: The candidate value.

    Returns:
        True for real numbers (including NumPy scalars), False otherwise.
        Booleans are not scalars.
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def f32(value: float) -> float:
    """
    Rounds a real number to the nearest single-precision value.

    Args:
        value: The number to round. Out-of-range magnitudes become infinite.

    Returns:
        The rounded value as a Python float.
    """
    if not is_scalar(value):
        raise TypeError(f"Expected a real number, got {type(value).__name__}.")
    if isinstance(value, Integral):
        try:
            value = float(value)
        except OverflowError:
            # ints beyond the double range
            return math.inf if value > 0 else -math.inf
    with np.errstate(all="ignore"):
        return float(_F32(value))


def is_f32_exact(value: float) -> bool:
    """
    Returns True if the value survives rounding to single precision unchanged.
    NaN counts as exact.
    """
    if value != value:
        return True
    return f32(value) == value


def div(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(_F32(a) / _F32(b))


def sqrt(a: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.sqrt(_F32(a)))


def sin(a: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.sin(_F32(a)))


def cos(a: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.cos(_F32(a)))


def acos(a: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.arccos(_F32(a)))


def atan2(y: float, x: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.arctan2(_F32(y), _F32(x)))


PI = f32(math.pi)
"""``pi`` rounded to single precision."""
