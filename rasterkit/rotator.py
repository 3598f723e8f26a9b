"""Euler-angle rotation in degrees (yaw, roll, pitch)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .mathutil import fmod, get_sin_cos
from .vector3 import Vector3


@dataclass(frozen=True, slots=True)
class Rotator:
    """Rotation as yaw (about Y), roll (about Z) and pitch (about X), in degrees."""

    yaw: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0

    IDENTITY: ClassVar[Rotator]

    def __post_init__(self) -> None:
        object.__setattr__(self, "yaw", float(self.yaw))
        object.__setattr__(self, "roll", float(self.roll))
        object.__setattr__(self, "pitch", float(self.pitch))

    @staticmethod
    def get_axis_clamped_value(value: float) -> float:
        """Wrap an angle into the range [0, 360)."""
        angle = fmod(value, 360.0)
        if angle < 0.0:
            angle += 360.0
        return angle

    def clamped(self) -> Rotator:
        """Copy with every angle wrapped into [0, 360)."""
        return Rotator(
            self.get_axis_clamped_value(self.yaw),
            self.get_axis_clamped_value(self.roll),
            self.get_axis_clamped_value(self.pitch),
        )

    def get_local_axes(self) -> tuple[Vector3, Vector3, Vector3]:
        """The rotated (right, up, forward) axes."""
        sy, cy = get_sin_cos(self.yaw)
        sp, cp = get_sin_cos(self.pitch)
        sr, cr = get_sin_cos(self.roll)

        right = Vector3(cy * cr + sy * sp * sr, cp * sr, -sy * cr + cy * sp * sr)
        up = Vector3(-cy * sr + sy * sp * cr, cp * cr, sy * sr + cy * sp * cr)
        forward = Vector3(sy * cp, -sp, cy * cp)
        return right, up, forward

    def __str__(self) -> str:
        return f"(Y : {self.yaw:.1f}, R: {self.roll:.1f}, P : {self.pitch:.1f})"


Rotator.IDENTITY = Rotator(0.0, 0.0, 0.0)