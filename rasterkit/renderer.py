"""Software rasteriser drawing into an in-memory colour and depth buffer."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable

from .color import Color32, LinearColor
from .mathutil import equals_in_tolerance
from .screenpoint import ScreenPoint
from .vector2 import Vector2
from .vector4 import Vector4

_LEFT = 0b0001
_RIGHT = 0b0010
_BOTTOM = 0b0100
_TOP = 0b1000

_BLANK = Color32(0, 0, 0, 0)


def test_region(point: Vector2, min_pos: Vector2, max_pos: Vector2) -> int:
    """Cohen-Sutherland outcode of ``point`` against the rectangle [min_pos, max_pos]."""
    code = 0
    if point.x < min_pos.x:
        code |= _LEFT
    elif point.x > max_pos.x:
        code |= _RIGHT
    if point.y < min_pos.y:
        code |= _BOTTOM
    elif point.y > max_pos.y:
        code |= _TOP
    return code


def cohen_sutherland_line_clip(
    start: Vector2, end: Vector2, min_pos: Vector2, max_pos: Vector2
) -> tuple[Vector2, Vector2] | None:
    """Clip a segment to a rectangle; ``None`` when nothing of it is visible."""
    start_test = test_region(start, min_pos, max_pos)
    end_test = test_region(end, min_pos, max_pos)

    width = end.x - start.x
    height = end.y - start.y

    while True:
        if start_test == 0 and end_test == 0:
            return start, end
        if start_test & end_test:
            return None

        is_start = start_test != 0
        current = start_test if is_start else end_test

        if current < _BOTTOM:
            clipped_x = min_pos.x if current & _LEFT else max_pos.x
            if equals_in_tolerance(height, 0.0):
                clipped_y = start.y
            else:
                clipped_y = start.y + height * (clipped_x - start.x) / width
        else:
            clipped_y = min_pos.y if current & _BOTTOM else max_pos.y
            if equals_in_tolerance(width, 0.0):
                clipped_x = start.x
            else:
                clipped_x = start.x + width * (clipped_y - start.y) / height

        clipped = Vector2(clipped_x, clipped_y)
        if is_start:
            start = clipped
            start_test = test_region(start, min_pos, max_pos)
        else:
            end = clipped
            end_test = test_region(end, min_pos, max_pos)


class RendererInterface(ABC):
    """Operations every renderer offers to the drawing code."""

    @abstractmethod
    def init(self, size: ScreenPoint) -> bool:
        """Prepare buffers for a screen of ``size`` pixels."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release the buffers."""

    @abstractmethod
    def is_initialized(self) -> bool:
        """True between a successful init and shutdown."""

    @abstractmethod
    def clear(self, color: LinearColor) -> None:
        """Fill the screen with ``color`` and reset the depth buffer."""

    @abstractmethod
    def begin_frame(self) -> None:
        """Start drawing a frame."""

    @abstractmethod
    def end_frame(self) -> None:
        """Finish drawing a frame and present it."""

    @abstractmethod
    def draw_point(self, position: Vector2 | ScreenPoint, color: LinearColor) -> None:
        """Set one pixel."""

    @abstractmethod
    def draw_line(
        self, start: Vector2 | Vector4, end: Vector2 | Vector4, color: LinearColor
    ) -> None:
        """Draw a clipped line between two Cartesian points."""

    @abstractmethod
    def get_depth_buffer_value(self, position: ScreenPoint) -> float:
        """Depth stored at a pixel."""

    @abstractmethod
    def set_depth_buffer_value(self, position: ScreenPoint, depth: float) -> None:
        """Store a depth at a pixel."""

    @abstractmethod
    def draw_full_vertical_line(self, x: int, color: LinearColor) -> None:
        """Colour a whole pixel column."""

    @abstractmethod
    def draw_full_horizontal_line(self, y: int, color: LinearColor) -> None:
        """Colour a whole pixel row."""

    @abstractmethod
    def push_statistic_text(self, text: str) -> None:
        """Queue a line of overlay text for the current frame."""

    @abstractmethod
    def push_statistic_texts(self, texts: Iterable[str]) -> None:
        """Queue several lines of overlay text for the current frame."""


class FrameBufferRenderer(RendererInterface):
    """A renderer whose screen is a list of packed colours with a depth buffer beside it."""

    def __init__(self) -> None:
        self._initialized = False
        self._size = ScreenPoint()
        self._pixels: list[Color32] = []
        self._depth: list[float] | None = None
        self._texts: list[str] = []

    @property
    def screen_size(self) -> ScreenPoint:
        """Width and height of the screen in pixels."""
        return self._size

    @property
    def statistic_texts(self) -> tuple[str, ...]:
        """Overlay lines queued for the current frame."""
        return tuple(self._texts)

    def init(self, size: ScreenPoint) -> bool:
        if size.x < 0 or size.y < 0:
            raise ValueError(f"screen size must not be negative, got {size}")
        self.shutdown()
        self._size = size
        count = size.x * size.y
        self._pixels = [_BLANK] * count
        self._depth = [math.inf] * count
        self._initialized = True
        return True

    def shutdown(self) -> None:
        self._pixels = []
        self._depth = None
        self._initialized = False

    def is_initialized(self) -> bool:
        return self._initialized

    def clear(self, color: LinearColor) -> None:
        self.fill_buffer(color.to_color32())
        self.clear_depth_buffer()

    def begin_frame(self) -> None:
        pass

    def end_frame(self) -> None:
        if not self._initialized:
            return
        self._texts.clear()

    def fill_buffer(self, color: Color32) -> None:
        """Set every pixel to ``color``."""
        if not self._initialized:
            return
        self._pixels = [color] * (self._size.x * self._size.y)

    def clear_depth_buffer(self) -> None:
        """Reset every depth to infinity."""
        if self._depth is not None:
            self._depth = [math.inf] * (self._size.x * self._size.y)

    def _is_in_screen(self, position: ScreenPoint) -> bool:
        return (
            self._initialized
            and 0 <= position.x < self._size.x
            and 0 <= position.y < self._size.y
        )

    def _index(self, position: ScreenPoint) -> int:
        return position.y * self._size.x + position.x

    def get_pixel(self, position: ScreenPoint) -> LinearColor:
        """Colour at a pixel; the error colour outside the screen."""
        if not self._is_in_screen(position):
            return LinearColor.ERROR
        return LinearColor.from_color32(self._pixels[self._index(position)])

    def set_pixel_opaque(self, position: ScreenPoint, color: LinearColor) -> None:
        """Overwrite a pixel; positions outside the screen are ignored."""
        if not self._is_in_screen(position):
            return
        self._pixels[self._index(position)] = color.to_color32()

    def set_pixel_alpha_blending(self, position: ScreenPoint, color: LinearColor) -> None:
        """Blend ``color`` over a pixel using its alpha."""
        buffer_color = self.get_pixel(position)
        if not self._is_in_screen(position):
            return
        blended = color * color.a + buffer_color * (1.0 - color.a)
        self._pixels[self._index(position)] = blended.to_color32()

    def _set_pixel(self, position: ScreenPoint, color: LinearColor) -> None:
        self.set_pixel_opaque(position, color)

    def draw_point(self, position: Vector2 | ScreenPoint, color: LinearColor) -> None:
        if isinstance(position, ScreenPoint):
            self._set_pixel(position, color)
        elif isinstance(position, Vector2):
            self._set_pixel(ScreenPoint.to_screen_coordinate(self._size, position), color)
        else:
            raise TypeError(f"cannot draw a point at {type(position).__name__}")

    @staticmethod
    def _as_vector2(point: Vector2 | Vector4) -> Vector2:
        if isinstance(point, Vector4):
            return point.to_vector2()
        if isinstance(point, Vector2):
            return point
        raise TypeError(f"cannot draw a line through {type(point).__name__}")

    def draw_line(
        self, start: Vector2 | Vector4, end: Vector2 | Vector4, color: LinearColor
    ) -> None:
        extent = Vector2(self._size.x, self._size.y) * 0.5
        clipped = cohen_sutherland_line_clip(
            self._as_vector2(start), self._as_vector2(end), -extent, extent
        )
        if clipped is None:
            return

        first = ScreenPoint.to_screen_coordinate(self._size, clipped[0])
        last = ScreenPoint.to_screen_coordinate(self._size, clipped[1])

        width = last.x - first.x
        height = last.y - first.y
        gradual = abs(width) >= abs(height)
        dx = 1 if width >= 0 else -1
        dy = 1 if height > 0 else -1
        fw = dx * width
        fh = dy * height

        if gradual:
            f = fh * 2 - fw
            f1 = 2 * fh
            f2 = 2 * (fh - fw)
        else:
            f = 2 * fw - fh
            f1 = 2 * fw
            f2 = 2 * (fw - fh)

        x, y = first.x, first.y
        if gradual:
            while x != last.x:
                self._set_pixel(ScreenPoint(x, y), color)
                if f < 0:
                    f += f1
                else:
                    f += f2
                    y += dy
                x += dx
        else:
            while y != last.y:
                self._set_pixel(ScreenPoint(x, y), color)
                if f < 0:
                    f += f1
                else:
                    f += f2
                    x += dx
                y += dy

    def get_depth_buffer_value(self, position: ScreenPoint) -> float:
        if self._depth is None or not self._is_in_screen(position):
            return math.inf
        return self._depth[self._index(position)]

    def set_depth_buffer_value(self, position: ScreenPoint, depth: float) -> None:
        if self._depth is None or not self._is_in_screen(position):
            return
        self._depth[self._index(position)] = depth

    def draw_full_vertical_line(self, x: int, color: LinearColor) -> None:
        if x < 0 or x >= self._size.x:
            return
        for y in range(self._size.y):
            self._set_pixel(ScreenPoint(x, y), color)

    def draw_full_horizontal_line(self, y: int, color: LinearColor) -> None:
        if y < 0 or y >= self._size.y:
            return
        for x in range(self._size.x):
            self._set_pixel(ScreenPoint(x, y), color)

    def push_statistic_text(self, text: str) -> None:
        self._texts.append(text)

    def push_statistic_texts(self, texts: Iterable[str]) -> None:
        self._texts.extend(texts)