"""Clipping of triangles in homogeneous clip space against single planes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from .vertex import Vertex3D

ClipTest = Callable[[Vertex3D], bool]
EdgeFunc = Callable[[Vertex3D, Vertex3D], Vertex3D]


@dataclass(frozen=True)
class PerspectiveTest:
    """A clipping plane: a test that is true for vertices to clip, and an edge intersector."""

    clipping_test: ClipTest
    get_edge_vertex: EdgeFunc

    def clip_triangles(self, vertices: Sequence[Vertex3D]) -> list[Vertex3D]:
        """Clip a triangle list against this plane.

        Clipped triangles keep their place, fully clipped ones are dropped, and
        triangles added by splitting follow all the original ones.
        """
        vertices = list(vertices)
        whole = len(vertices) // 3 * 3
        kept: list[Vertex3D] = []
        added: list[Vertex3D] = []
        for start in range(0, whole, 3):
            triangle = vertices[start:start + 3]
            results = tuple(self.clipping_test(v) for v in triangle)
            clipped = self.get_new_vertices(triangle, results)
            kept.extend(clipped[:3])
            added.extend(clipped[3:])
        return kept + vertices[whole:] + added

    def get_new_vertices(
        self, vertices: Sequence[Vertex3D], test_results: Sequence[bool]
    ) -> list[Vertex3D]:
        """Clip one triangle given which of its vertices failed the test.

        Returns the triangle unchanged, one shrunk triangle, two triangles
        (six vertices), or an empty list when every vertex failed.
        """
        if len(vertices) != 3 or len(test_results) != 3:
            raise ValueError("a triangle needs exactly three vertices and three test results")
        failed = sum(1 for result in test_results if result)

        if failed == 0:
            return list(vertices)
        if failed == 3:
            return []

        if failed == 1:
            index = test_results.index(True)
        else:
            index = test_results.index(False)

        v0 = vertices[index]
        v1 = vertices[(index + 1) % 3]
        v2 = vertices[(index + 2) % 3]
        clipped1 = self.get_edge_vertex(v0, v1)
        clipped2 = self.get_edge_vertex(v0, v2)

        if failed == 1:
            return [clipped1, v1, v2, clipped1, v2, clipped2]
        return [v0, clipped1, clipped2]


def _interpolate(start: Vertex3D, end: Vertex3D, p1: float, p2: float) -> Vertex3D:
    t = p1 / (p1 - p2)
    return start * (1.0 - t) + end * t


def test_w0(vertex: Vertex3D) -> bool:
    """True behind the camera (w < 0)."""
    return vertex.position.w < 0.0


def edge_w0(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    """Point on the edge where w = 0."""
    return _interpolate(start, end, start.position.w, end.position.w)


def test_ny(vertex: Vertex3D) -> bool:
    """True below the bottom plane (y < -w)."""
    return vertex.position.y < -vertex.position.w


def edge_ny(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    """Point on the edge where y = -w."""
    return _interpolate(
        start, end,
        start.position.w + start.position.y,
        end.position.w + end.position.y,
    )


def test_py(vertex: Vertex3D) -> bool:
    """True above the top plane (y > w)."""
    return vertex.position.y > vertex.position.w


def edge_py(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    """Point on the edge where y = w."""
    return _interpolate(
        start, end,
        start.position.w - start.position.y,
        end.position.w - end.position.y,
    )


def test_nx(vertex: Vertex3D) -> bool:
    """True left of the left plane (x < -w)."""
    return vertex.position.x < -vertex.position.w


def edge_nx(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    """Point on the edge where x = -w."""
    return _interpolate(
        start, end,
        start.position.w + start.position.x,
        end.position.w + end.position.x,
    )


def test_px(vertex: Vertex3D) -> bool:
    """True right of the right plane (x > w)."""
    return vertex.position.x > vertex.position.w


def edge_px(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    """Point on the edge where x = w."""
    return _interpolate(
        start, end,
        start.position.w - start.position.x,
        end.position.w - end.position.x,
    )


def test_far(vertex: Vertex3D) -> bool:
    """True beyond the far plane (z > w)."""
    return vertex.position.z > vertex.position.w


def edge_far(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    """Point on the edge where z = w."""
    return _interpolate(
        start, end,
        start.position.w - start.position.z,
        end.position.w - end.position.z,
    )


def test_near(vertex: Vertex3D) -> bool:
    """True in front of the near plane (z < -w)."""
    return vertex.position.z < -vertex.position.w


def edge_near(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    """Point on the edge where z = -w."""
    return _interpolate(
        start, end,
        start.position.w + start.position.z,
        end.position.w + end.position.z,
    )