"""Packed 8-bit colours, floating-point linear colours and HSV colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from .mathutil import SMALL_NUMBER, clamp, floor_to_int

_BYTE_MAX = 255
_UINT32_MAX = 0xFFFFFFFF


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= _BYTE_MAX:
        raise ValueError(f"colour channel {name} must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True, slots=True)
class Color32:
    """A colour with four 8-bit channels, packed as BGRA in a 32-bit value."""

    r: int
    g: int
    b: int
    a: int = _BYTE_MAX

    ERROR: ClassVar[Color32]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_byte(name, getattr(self, name))

    @classmethod
    def from_value(cls, value: int) -> Color32:
        """Unpack a 32-bit value laid out as B (lowest byte), G, R, A (highest byte)."""
        if not isinstance(value, int) or not 0 <= value <= _UINT32_MAX:
            raise ValueError(f"colour value must fit in 32 unsigned bits, got {value!r}")
        return cls(
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
            (value >> 24) & 0xFF,
        )

    def color_value(self) -> int:
        """The packed 32-bit value."""
        return self.b | (self.g << 8) | (self.r << 16) | (self.a << 24)

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def __add__(self, other: Color32) -> Color32:
        if not isinstance(other, Color32):
            return NotImplemented
        return Color32(
            *(clamp(mine + theirs, 0, _BYTE_MAX) for mine, theirs in zip(self, other))
        )


Color32.ERROR = Color32(255, 0, 255, 255)


@dataclass(frozen=True, slots=True)
class LinearColor:
    """A colour with floating-point channels, nominally in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    ONE_OVER_255: ClassVar[float] = 1.0 / 255.0
    ERROR: ClassVar[LinearColor]
    WHITE: ClassVar[LinearColor]
    BLACK: ClassVar[LinearColor]
    GRAY: ClassVar[LinearColor]
    SILVER: ClassVar[LinearColor]
    WHITE_SMOKE: ClassVar[LinearColor]
    LIGHT_GRAY: ClassVar[LinearColor]
    DIM_GRAY: ClassVar[LinearColor]
    RED: ClassVar[LinearColor]
    GREEN: ClassVar[LinearColor]
    BLUE: ClassVar[LinearColor]
    YELLOW: ClassVar[LinearColor]
    CYAN: ClassVar[LinearColor]
    MAGENTA: ClassVar[LinearColor]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def from_color32(cls, color: Color32) -> LinearColor:
        """Scale 8-bit channels into [0, 1]."""
        return cls(*(channel * cls.ONE_OVER_255 for channel in color))

    def to_color32(self, srgb: bool = False) -> Color32:
        """Clamp to [0, 1] and quantise each channel to 8 bits."""
        return Color32(*(int(clamp(channel, 0.0, 1.0) * 255.999) for channel in self))

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def __add__(self, other: LinearColor) -> LinearColor:
        if not isinstance(other, LinearColor):
            return NotImplemented
        return LinearColor(*(x + y for x, y in zip(self, other)))

    def __sub__(self, other: LinearColor) -> LinearColor:
        if not isinstance(other, LinearColor):
            return NotImplemented
        return LinearColor(*(x - y for x, y in zip(self, other)))

    def __mul__(self, other: LinearColor | float) -> LinearColor:
        if isinstance(other, LinearColor):
            return LinearColor(*(x * y for x, y in zip(self, other)))
        if isinstance(other, (int, float)):
            return LinearColor(*(x * other for x in self))
        return NotImplemented

    def __rmul__(self, other: float) -> LinearColor:
        if isinstance(other, (int, float)):
            return LinearColor(*(x * other for x in self))
        return NotImplemented

    def __truediv__(self, scalar: float) -> LinearColor:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return LinearColor(*(x / scalar for x in self))

    def equals_in_range(self, other: LinearColor, tolerance: float = SMALL_NUMBER) -> bool:
        """True when every channel differs by less than ``tolerance``."""
        return all(abs(x - y) < tolerance for x, y in zip(self, other))


LinearColor.ERROR = LinearColor(1.0, 0.0, 1.0, 1.0)
LinearColor.WHITE = LinearColor(1.0, 1.0, 1.0, 1.0)
LinearColor.BLACK = LinearColor(0.0, 0.0, 0.0, 1.0)
LinearColor.GRAY = LinearColor(0.5, 0.5, 0.5, 1.0)
LinearColor.SILVER = LinearColor(0.4, 0.4, 0.4, 1.0)
LinearColor.WHITE_SMOKE = LinearColor(0.96, 0.96, 0.96, 1.0)
LinearColor.LIGHT_GRAY = LinearColor(0.83, 0.83, 0.83, 1.0)
LinearColor.DIM_GRAY = LinearColor(0.41, 0.41, 0.41, 1.0)
LinearColor.RED = LinearColor(1.0, 0.0, 0.0, 1.0)
LinearColor.GREEN = LinearColor(0.0, 1.0, 0.0, 1.0)
LinearColor.BLUE = LinearColor(0.0, 0.0, 1.0, 1.0)
LinearColor.YELLOW = LinearColor(1.0, 1.0, 0.0, 1.0)
LinearColor.CYAN = LinearColor(0.0, 1.0, 1.0, 1.0)
LinearColor.MAGENTA = LinearColor(1.0, 0.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class HSVColor:
    """A colour as hue, saturation and value, each in [0, 1]."""

    h: float = 0.0
    s: float = 1.0
    v: float = 1.0

    def to_linear_color(self) -> LinearColor:
        """Equivalent opaque linear colour; a negative sector gives black."""
        h, s, v = self.h, self.s, self.v
        i = floor_to_int(h * 6.0)
        f = h * 6.0 - i
        p = v * (1.0 - s)
        q = v * (1.0 - f * s)
        t = v * (1.0 - (1.0 - f) * s)

        sector = int(math.fmod(i, 6))
        channels = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
            5: (v, p, q),
        }.get(sector, (0.0, 0.0, 0.0))
        return LinearColor(*channels)