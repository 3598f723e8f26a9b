"""Scalar math helpers shared by the vector, matrix and bounds types."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import TypeVar

T = TypeVar("T")

PI = math.pi
TWO_PI = 2.0 * PI
HALF_PI = PI / 2.0
INV_PI = 1.0 / PI
SMALL_NUMBER = 1.0e-8

INVALID_HASH_NAME = "!@CK_INVALIDHASH#$"
INVALID_HASH = hash(INVALID_HASH_NAME)


class BoundCheckResult(IntEnum):
    """Outcome of testing a point or volume against a bounding region."""

    OUTSIDE = 0
    INTERSECT = 1
    INSIDE = 2


def trunc_to_int(value: float) -> int:
    """Drop the fractional part, rounding toward zero."""
    return int(value)


def round_to_int(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return trunc_to_int(rounded if value >= 0 else -rounded)


def floor_to_int(value: float) -> int:
    """Largest integer not greater than ``value``."""
    return trunc_to_int(math.floor(value))


def ceil_to_int(value: float) -> int:
    """Smallest integer not less than ``value``."""
    return trunc_to_int(math.ceil(value))


def equals_in_tolerance(a: float, b: float, tolerance: float = SMALL_NUMBER) -> bool:
    """True when ``a`` and ``b`` differ by at most ``tolerance``."""
    return abs(a - b) <= tolerance


def lerp(src: T, dest: T, alpha: float) -> T:
    """Linear interpolation from ``src`` to ``dest``."""
    return src + (dest - src) * alpha


def square(value: T) -> T:
    """Value multiplied by itself."""
    return value * value


def deg2rad(degree: float) -> float:
    """Convert degrees to radians."""
    return degree * PI / 180.0


def rad2deg(radian: float) -> float:
    """Convert radians to degrees."""
    return radian * 180.0 * INV_PI


def clamp(value: T, low: T, high: T) -> T:
    """Restrict ``value`` to the range ``[low, high]``."""
    if value < low:
        return low
    return value if value < high else high


def get_sin_cos_rad(radian: float) -> tuple[float, float]:
    """Sine and cosine of an angle in radians by minimax polynomial approximation."""
    quotient = (INV_PI * 0.5) * radian
    if radian >= 0.0:
        quotient = float(int(quotient + 0.5))
    else:
        quotient = float(int(quotient - 0.5))
    y = radian - TWO_PI * quotient

    if y > HALF_PI:
        y = PI - y
        sign = -1.0
    elif y < -HALF_PI:
        y = -PI - y
        sign = -1.0
    else:
        sign = 1.0

    y2 = y * y
    sin = (
        ((((-2.3889859e-08 * y2 + 2.7525562e-06) * y2 - 0.00019840874) * y2 + 0.0083333310) * y2
         - 0.16666667) * y2 + 1.0
    ) * y
    p = (
        (((-2.6051615e-07 * y2 + 2.4760495e-05) * y2 - 0.0013888378) * y2 + 0.041666638) * y2
        - 0.5
    ) * y2 + 1.0
    return sin, sign * p


_EXACT_SIN_COS = {
    0.0: (0.0, 1.0),
    90.0: (1.0, 0.0),
    180.0: (0.0, -1.0),
    270.0: (-1.0, 0.0),
}


def get_sin_cos(degree: float) -> tuple[float, float]:
    """Sine and cosine of an angle in degrees, exact on the four axis angles."""
    exact = _EXACT_SIN_COS.get(degree)
    if exact is not None:
        return exact
    return get_sin_cos_rad(deg2rad(degree))


def fmod(x: float, y: float) -> float:
    """Floating remainder of ``x / y``; zero when ``y`` is nearly zero."""
    if abs(y) <= SMALL_NUMBER:
        return 0.0
    quotient = float(trunc_to_int(x / y))
    int_portion = y * quotient
    if abs(int_portion) > abs(x):
        int_portion = x
    return x - int_portion


def inv_sqrt(value: float) -> float:
    """Reciprocal square root of a positive value."""
    if value <= 0.0:
        raise ValueError(f"inv_sqrt needs a positive value, got {value!r}")
    return 1.0 / math.sqrt(value)