import math

import pytest

from rasterkit import renderer
from rasterkit.color import Color32, LinearColor
from rasterkit.screenpoint import ScreenPoint
from rasterkit.vector2 import Vector2
from rasterkit.vector4 import Vector4

LOW = Vector2(-10.0, -10.0)
HIGH = Vector2(10.0, 10.0)


def make_renderer(width=8, height=8):
    r = renderer.FrameBufferRenderer()
    r.init(ScreenPoint(width, height))
    r.clear(LinearColor.BLACK)
    return r


def colored(r, color):
    size = r.screen_size
    target = LinearColor.from_color32(color.to_color32())
    found = set()
    for y in range(size.y):
        for x in range(size.x):
            if r.get_pixel(ScreenPoint(x, y)) == target:
                found.add((x, y))
    return found


@pytest.mark.parametrize(
    "point, code",
    [
        (Vector2(0.0, 0.0), 0),
        (Vector2(-20.0, 0.0), 1),
        (Vector2(20.0, 0.0), 2),
        (Vector2(0.0, -20.0), 4),
        (Vector2(0.0, 20.0), 8),
        (Vector2(-20.0, -20.0), 5),
    ],
)
def test_region_codes(point, code):
    assert renderer.test_region(point, LOW, HIGH) == code


def test_clip_inside_keeps_points():
    start = Vector2(-1.0, 2.0)
    end = Vector2(3.0, -4.0)
    assert renderer.cohen_sutherland_line_clip(start, end, LOW, HIGH) == (start, end)


def test_clip_outside_same_side_is_none():
    start = Vector2(-30.0, 0.0)
    end = Vector2(-20.0, 5.0)
    assert renderer.cohen_sutherland_line_clip(start, end, LOW, HIGH) is None


def test_clip_horizontal_crossing():
    result = renderer.cohen_sutherland_line_clip(
        Vector2(-20.0, 0.0), Vector2(20.0, 0.0), LOW, HIGH
    )
    assert result == (Vector2(LOW.x, 0.0), Vector2(HIGH.x, 0.0))


def test_clip_diagonal_result_lies_inside_and_on_line():
    result = renderer.cohen_sutherland_line_clip(
        Vector2(-30.0, -30.0), Vector2(30.0, 30.0), LOW, HIGH
    )
    assert len(result) == 2
    for p in result:
        assert renderer.test_region(p, LOW, HIGH) == 0
        assert p.x == pytest.approx(p.y)


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        renderer.RendererInterface()


def test_init_and_shutdown():
    r = renderer.FrameBufferRenderer()
    assert r.is_initialized() is False
    assert r.init(ScreenPoint(4, 3)) is True
    assert r.is_initialized() is True
    assert r.screen_size == ScreenPoint(4, 3)
    r.shutdown()
    assert r.is_initialized() is False


def test_init_negative_size_raises():
    r = renderer.FrameBufferRenderer()
    with pytest.raises(ValueError):
        r.init(ScreenPoint(-1, 4))


def test_clear_fills_every_pixel_and_resets_depth():
    r = make_renderer(5, 4)
    r.set_depth_buffer_value(ScreenPoint(1, 1), 0.25)
    r.clear(LinearColor.BLUE)
    assert len(colored(r, LinearColor.BLUE)) == 5 * 4
    assert r.get_depth_buffer_value(ScreenPoint(1, 1)) == math.inf


def test_fill_buffer_roundtrip():
    r = make_renderer(3, 3)
    r.fill_buffer(Color32(10, 20, 30, 255))
    assert r.get_pixel(ScreenPoint(2, 2)).to_color32() == Color32(10, 20, 30, 255)


def test_get_pixel_outside_is_error_color():
    r = make_renderer(4, 4)
    assert r.get_pixel(ScreenPoint(4, 0)) == LinearColor.ERROR
    assert r.get_pixel(ScreenPoint(-1, 2)) == LinearColor.ERROR


def test_uninitialized_renderer_ignores_drawing():
    r = renderer.FrameBufferRenderer()
    r.fill_buffer(Color32(1, 2, 3, 4))
    r.set_pixel_opaque(ScreenPoint(0, 0), LinearColor.RED)
    assert r.get_pixel(ScreenPoint(0, 0)) == LinearColor.ERROR
    assert r.get_depth_buffer_value(ScreenPoint(0, 0)) == math.inf


def test_depth_buffer_set_and_get():
    r = make_renderer(4, 4)
    r.set_depth_buffer_value(ScreenPoint(2, 3), 0.5)
    assert r.get_depth_buffer_value(ScreenPoint(2, 3)) == 0.5
    assert r.get_depth_buffer_value(ScreenPoint(3, 2)) == math.inf
    r.set_depth_buffer_value(ScreenPoint(9, 9), 0.1)
    assert r.get_depth_buffer_value(ScreenPoint(9, 9)) == math.inf


def test_set_pixel_opaque():
    r = make_renderer(4, 4)
    r.set_pixel_opaque(ScreenPoint(1, 2), LinearColor.GREEN)
    assert colored(r, LinearColor.GREEN) == {(1, 2)}


def test_alpha_blending_mixes_with_buffer():
    r = make_renderer(2, 2)
    r.set_pixel_alpha_blending(ScreenPoint(0, 0), LinearColor(1.0, 1.0, 1.0, 0.5))
    result = r.get_pixel(ScreenPoint(0, 0))
    assert result.r == pytest.approx(0.5, abs=0.01)
    assert result.g == pytest.approx(0.5, abs=0.01)
    assert result.b == pytest.approx(0.5, abs=0.01)
    assert r.get_pixel(ScreenPoint(1, 1)).equals_in_range(LinearColor.BLACK, 1e-6)


def test_full_vertical_line():
    r = make_renderer(5, 3)
    r.draw_full_vertical_line(2, LinearColor.RED)
    assert colored(r, LinearColor.RED) == {(2, 0), (2, 1), (2, 2)}


def test_full_horizontal_line():
    r = make_renderer(5, 3)
    r.draw_full_horizontal_line(1, LinearColor.RED)
    assert colored(r, LinearColor.RED) == {(0, 1), (1, 1), (2, 1), (3, 1), (4, 1)}


def test_full_lines_out_of_range_draw_nothing():
    r = make_renderer(5, 3)
    r.draw_full_vertical_line(5, LinearColor.RED)
    r.draw_full_horizontal_line(-1, LinearColor.RED)
    assert colored(r, LinearColor.RED) == set()


def test_draw_point_vector_matches_screen_coordinate():
    r = make_renderer(4, 4)
    position = Vector2(0.0, 0.0)
    r.draw_point(position, LinearColor.YELLOW)
    p = ScreenPoint.to_screen_coordinate(r.screen_size, position)
    assert colored(r, LinearColor.YELLOW) == {(p.x, p.y)}


def test_draw_point_screen_point():
    r = make_renderer(4, 4)
    r.draw_point(ScreenPoint(3, 0), LinearColor.CYAN)
    assert colored(r, LinearColor.CYAN) == {(3, 0)}


def test_draw_horizontal_line_excludes_end_pixel():
    r = make_renderer(8, 8)
    start = Vector2(-3.0, 0.5)
    end = Vector2(3.0, 0.5)
    r.draw_line(start, end, LinearColor.WHITE)
    s = ScreenPoint.to_screen_coordinate(r.screen_size, start)
    e = ScreenPoint.to_screen_coordinate(r.screen_size, end)
    expected = {(x, s.y) for x in range(s.x, e.x)}
    assert colored(r, LinearColor.WHITE) == expected


def test_draw_diagonal_line_pixel_count():
    r = make_renderer(8, 8)
    start = Vector2(-3.0, -3.0)
    end = Vector2(3.0, 3.0)
    r.draw_line(start, end, LinearColor.WHITE)
    s = ScreenPoint.to_screen_coordinate(r.screen_size, start)
    e = ScreenPoint.to_screen_coordinate(r.screen_size, end)
    pixels = colored(r, LinearColor.WHITE)
    assert len(pixels) == abs(e.x - s.x)
    assert (s.x, s.y) in pixels


def test_draw_line_vector4_matches_vector2():
    first = make_renderer(8, 8)
    second = make_renderer(8, 8)
    first.draw_line(Vector2(-3.0, -1.0), Vector2(2.0, 3.0), LinearColor.RED)
    start4 = Vector4(-3.0, -1.0, 5.0, 1.0)
    end4 = Vector4(2.0, 3.0, -2.0, 1.0)
    second.draw_line(start4, end4, LinearColor.RED)
    first_pixels = colored(first, LinearColor.RED)
    second_pixels = colored(second, LinearColor.RED)
    assert first_pixels == second_pixels
    assert len(first_pixels) > 0


def test_draw_line_fully_outside_draws_nothing():
    r = make_renderer(8, 8)
    r.draw_line(Vector2(-50.0, 20.0), Vector2(50.0, 20.0), LinearColor.RED)
    assert colored(r, LinearColor.RED) == set()


def test_statistic_texts_queue_and_clear_on_end_frame():
    r = make_renderer(2, 2)
    r.push_statistic_text("fps")
    r.push_statistic_texts(["a", "b"])
    assert r.statistic_texts == ("fps", "a", "b")
    r.begin_frame()
    r.end_frame()
    assert r.statistic_texts == ()