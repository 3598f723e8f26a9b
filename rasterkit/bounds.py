"""Planes and bounding volumes: circle, rectangle, sphere, box and frustum."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from operator import add
from typing import Iterable, Sequence

from .mathutil import BoundCheckResult, equals_in_tolerance, inv_sqrt
from .vector2 import Vector2
from .vector3 import Vector3
from .vector4 import Vector4

_UNIT_TOLERANCE = 1e-5


@dataclass(frozen=True, slots=True)
class Plane:
    """A plane ``normal . p + d = 0`` with a unit normal; positive side is outside."""

    normal: Vector3 = Vector3.UNIT_Y
    d: float = 0.0

    def __post_init__(self) -> None:
        if not equals_in_tolerance(self.normal.size_squared(), 1.0, _UNIT_TOLERANCE):
            raise ValueError(f"plane normal must have unit length, got {self.normal}")
        object.__setattr__(self, "d", float(self.d))

    @classmethod
    def from_normal_point(cls, normal: Vector3, point: Vector3) -> Plane:
        """Plane with a unit ``normal`` through ``point``."""
        return cls(normal, -normal.dot(point))

    @classmethod
    def from_points(cls, point1: Vector3, point2: Vector3, point3: Vector3) -> Plane:
        """Plane through three points, normal by the right-hand rule."""
        normal = (point2 - point1).cross(point3 - point1).normalized()
        if normal.size_squared() == 0.0:
            raise ValueError("points are collinear and do not define a plane")
        return cls(normal, -normal.dot(point1))

    @classmethod
    def from_vector4(cls, vector: Vector4) -> Plane:
        """Plane from unnormalised coefficients (a, b, c, d)."""
        normal = vector.to_vector3()
        d = vector.w
        square_size = normal.size_squared()
        if not equals_in_tolerance(square_size, 1.0):
            inv_length = inv_sqrt(square_size)
            normal = normal * inv_length
            d *= inv_length
        return cls(normal, d)

    def distance(self, point: Vector3) -> float:
        """Signed distance from the plane to ``point``."""
        return self.normal.dot(point) + self.d

    def is_outside(self, point: Vector3) -> bool:
        """True when ``point`` lies strictly on the positive side."""
        return self.distance(point) > 0.0


def _centroid(vertices: Sequence, zero):
    return reduce(add, vertices, zero) / float(len(vertices))


@dataclass(frozen=True, slots=True)
class Circle:
    """A circle in the plane."""

    center: Vector2 = Vector2.ZERO
    radius: float = 0.0

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vector2]) -> Circle:
        """Circle centred on the centroid; radius is the farthest vertex's length."""
        points = list(vertices)
        if not points:
            return cls()
        center = _centroid(points, Vector2.ZERO)
        farthest = max(points, key=lambda p: (center - p).size_squared())
        return cls(center, farthest.size())

    def is_inside(self, point: Vector2) -> bool:
        """True when ``point`` lies in the circle or on its edge."""
        return (self.center - point).size_squared() <= self.radius * self.radius

    def intersect(self, other: Circle) -> bool:
        """True when the two circles overlap (touching does not count)."""
        radius_sum = self.radius + other.radius
        return (self.center - other.center).size_squared() < radius_sum * radius_sum


@dataclass(frozen=True, slots=True)
class Rectangle:
    """An axis-aligned rectangle."""

    min: Vector2 = Vector2.ZERO
    max: Vector2 = Vector2.ZERO

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vector2]) -> Rectangle:
        """Default rectangle grown to contain every vertex."""
        return reduce(add, vertices, cls())

    def __add__(self, other: Vector2 | Rectangle) -> Rectangle:
        if isinstance(other, Vector2):
            low = high = other
        elif isinstance(other, Rectangle):
            low, high = other.min, other.max
        else:
            return NotImplemented
        return Rectangle(
            Vector2(min(self.min.x, low.x), min(self.min.y, low.y)),
            Vector2(max(self.max.x, high.x), max(self.max.y, high.y)),
        )

    def intersect(self, other: Rectangle) -> bool:
        """True when the rectangles overlap or touch."""
        if self.min.x > other.max.x or other.min.x > self.max.x:
            return False
        return not (self.min.y > other.max.y or other.min.y > self.max.y)

    def is_inside(self, other: Vector2 | Rectangle) -> bool:
        """True when a point, or both corners of a rectangle, lie within."""
        if isinstance(other, Rectangle):
            return self.is_inside(other.min) and self.is_inside(other.max)
        return self.min.x <= other.x <= self.max.x and self.min.y <= other.y <= self.max.y

    def get_size(self) -> Vector2:
        """Width and height."""
        return self.max - self.min

    def get_extent(self) -> Vector2:
        """Half the size."""
        return self.get_size() * 0.5

    def get_center_and_extent(self) -> tuple[Vector2, Vector2]:
        """The centre and the half size."""
        extent = self.get_extent()
        return self.min + extent, extent


@dataclass(frozen=True, slots=True)
class Sphere:
    """A sphere in space."""

    center: Vector3 = Vector3.ZERO
    radius: float = 0.0

    @classmethod
    def from_circle(cls, circle: Circle) -> Sphere:
        """Sphere from a circle, its centre taken as a homogeneous point (z = 1)."""
        return cls(Vector3.from_vector2(circle.center), circle.radius)

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vector3]) -> Sphere:
        """Sphere centred on the centroid reaching the farthest vertex."""
        points = list(vertices)
        if not points:
            return cls()
        center = _centroid(points, Vector3.ZERO)
        farthest = max(points, key=lambda p: (center - p).size_squared())
        return cls(center, (farthest - center).size())

    def is_inside(self, point: Vector3) -> bool:
        """True when ``point`` lies in the sphere or on its surface."""
        return (self.center - point).size_squared() <= self.radius * self.radius

    def intersect(self, other: Sphere) -> bool:
        """True when the two spheres overlap (touching does not count)."""
        radius_sum = self.radius + other.radius
        return (self.center - other.center).size_squared() < radius_sum * radius_sum


@dataclass(frozen=True, slots=True)
class Box:
    """An axis-aligned box."""

    min: Vector3 = Vector3.ZERO
    max: Vector3 = Vector3.ZERO

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vector3]) -> Box:
        """Default box grown to contain every vertex."""
        return reduce(add, vertices, cls())

    def __add__(self, other: Vector3 | Box) -> Box:
        if isinstance(other, Vector3):
            low = high = other
        elif isinstance(other, Box):
            low, high = other.min, other.max
        else:
            return NotImplemented
        return Box(
            Vector3(min(self.min.x, low.x), min(self.min.y, low.y), min(self.min.z, low.z)),
            Vector3(max(self.max.x, high.x), max(self.max.y, high.y), max(self.max.z, high.z)),
        )

    def intersect(self, other: Box) -> bool:
        """True when the boxes overlap or touch."""
        return all(
            not (mine_low > their_high or their_low > mine_high)
            for mine_low, mine_high, their_low, their_high in zip(
                self.min, self.max, other.min, other.max
            )
        )

    def is_inside(self, other: Vector3 | Box) -> bool:
        """True when a point, or both corners of a box, lie within."""
        if isinstance(other, Box):
            return self.is_inside(other.min) and self.is_inside(other.max)
        return all(low <= value <= high for low, value, high in zip(self.min, other, self.max))

    def get_size(self) -> Vector3:
        """Extent along each axis."""
        return self.max - self.min

    def get_extent(self) -> Vector3:
        """Half the size."""
        return self.get_size() * 0.5

    def get_center_and_extent(self) -> tuple[Vector3, Vector3]:
        """The centre and the half size."""
        extent = self.get_extent()
        return self.min + extent, extent


def _box_extreme_points(plane: Plane, box: Box) -> tuple[Vector3, Vector3]:
    """The box corners farthest along and against the plane normal."""
    positive = []
    negative = []
    for n, low, high in zip(plane.normal, box.min, box.max):
        if n >= 0.0:
            positive.append(high)
            negative.append(low)
        else:
            positive.append(low)
            negative.append(high)
    return Vector3(*positive), Vector3(*negative)


@dataclass(frozen=True, slots=True)
class Frustum:
    """Six planes with outward normals, stored Y+, Y-, X+, X-, Z+, Z-."""

    planes: tuple[Plane, ...] = field(default_factory=lambda: (Plane(),) * 6)

    def __post_init__(self) -> None:
        planes = tuple(self.planes)
        if len(planes) != 6:
            raise ValueError(f"a frustum needs exactly 6 planes, got {len(planes)}")
        object.__setattr__(self, "planes", planes)

    def check_bound(self, bound: Vector3 | Sphere | Box) -> BoundCheckResult:
        """Classify a point, sphere or box against the frustum."""
        if isinstance(bound, Vector3):
            return self._check_point(bound)
        if isinstance(bound, Sphere):
            return self._check_sphere(bound)
        if isinstance(bound, Box):
            return self._check_box(bound)
        raise TypeError(f"cannot check bounds of {type(bound).__name__}")

    def _check_point(self, point: Vector3) -> BoundCheckResult:
        for plane in self.planes:
            if plane.is_outside(point):
                return BoundCheckResult.OUTSIDE
            if equals_in_tolerance(plane.distance(point), 0.0):
                return BoundCheckResult.INTERSECT
        return BoundCheckResult.INSIDE

    def _check_sphere(self, sphere: Sphere) -> BoundCheckResult:
        for plane in self.planes:
            distance = plane.distance(sphere.center)
            if distance > sphere.radius:
                return BoundCheckResult.OUTSIDE
            if abs(distance) <= sphere.radius:
                return BoundCheckResult.INTERSECT
        return BoundCheckResult.INSIDE

    def _check_box(self, box: Box) -> BoundCheckResult:
        for plane in self.planes:
            p_point, n_point = _box_extreme_points(plane, box)
            if plane.distance(n_point) > 0.0:
                return BoundCheckResult.OUTSIDE
            if plane.distance(n_point) <= 0.0 and plane.distance(p_point) >= 0.0:
                return BoundCheckResult.INTERSECT
        return BoundCheckResult.INSIDE

    def is_intersect(self, box: Box) -> bool:
        """True when some plane passes through the box."""
        for plane in self.planes:
            p_vertex, n_vertex = _box_extreme_points(plane, box)
            if plane.distance(n_vertex) <= 0.0 and plane.distance(p_vertex) >= 0.0:
                return True
        return False