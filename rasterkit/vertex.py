"""Vertices carrying position, colour and texture coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from .color import LinearColor
from .vector2 import Vector2
from .vector4 import Vector4


@dataclass(frozen=True, slots=True)
class Vertex2D:
    """A 2D vertex: position, colour and UV."""

    position: Vector2 = Vector2.ZERO
    color: LinearColor = LinearColor()
    uv: Vector2 = Vector2.ZERO

    def __mul__(self, scalar: float) -> Vertex2D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vertex2D(self.position * scalar, self.color * scalar, self.uv * scalar)

    def __rmul__(self, scalar: float) -> Vertex2D:
        return self.__mul__(scalar)

    def __add__(self, other: Vertex2D) -> Vertex2D:
        if not isinstance(other, Vertex2D):
            return NotImplemented
        return Vertex2D(
            self.position + other.position,
            self.color + other.color,
            self.uv + other.uv,
        )


@dataclass(frozen=True, slots=True)
class Vertex3D:
    """A 3D vertex: homogeneous position, colour and UV."""

    position: Vector4 = Vector4.ZERO
    color: LinearColor = LinearColor()
    uv: Vector2 = Vector2.ZERO

    def __mul__(self, scalar: float) -> Vertex3D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vertex3D(self.position * scalar, self.color * scalar, self.uv * scalar)

    def __rmul__(self, scalar: float) -> Vertex3D:
        return self.__mul__(scalar)

    def __add__(self, other: Vertex3D) -> Vertex3D:
        if not isinstance(other, Vertex3D):
            return NotImplemented
        return Vertex3D(
            self.position + other.position,
            self.color + other.color,
            self.uv + other.uv,
        )