import pytest

from rasterkit.color import Color32, HSVColor, LinearColor


def test_color32_error_constant():
    assert Color32.from_value(0xFFFF00FF) == Color32.ERROR
    assert Color32(255, 0, 255, 255) == Color32.ERROR


def test_color32_packed_layout_of_error():
    assert Color32.ERROR.color_value() == 0xFFFF00FF


def test_color32_default_alpha_is_opaque():
    assert Color32(1, 2, 3).a == 255


@pytest.mark.parametrize(
    "color", [Color32(0, 0, 0, 0), Color32(12, 34, 56, 78), Color32(255, 255, 255, 255)]
)
def test_color32_value_round_trip(color):
    assert Color32.from_value(color.color_value()) == color


def test_color32_from_value_puts_blue_in_low_byte():
    color = Color32.from_value(0x000000FF)
    assert (color.r, color.g, color.b, color.a) == (0, 0, 255, 0)


@pytest.mark.parametrize("bad", [-1, 256])
def test_color32_rejects_out_of_range_channel(bad):
    with pytest.raises(ValueError):
        Color32(bad, 0, 0)


def test_color32_from_value_rejects_too_large():
    with pytest.raises(ValueError):
        Color32.from_value(1 << 32)


def test_color32_add_saturates():
    first = Color32(200, 10, 0, 255)
    second = Color32(100, 10, 0, 10)
    total = first + second
    assert total.r == 255
    assert total.g == first.g + second.g
    assert total.a == 255


def test_color32_equality_uses_value():
    assert Color32(1, 2, 3, 4) == Color32.from_value(Color32(1, 2, 3, 4).color_value())
    assert Color32(1, 2, 3, 4) != Color32(1, 2, 3, 5)


@pytest.mark.parametrize(
    "color", [Color32(0, 0, 0, 0), Color32(1, 128, 254, 255), Color32(255, 255, 255, 255)]
)
def test_linear_color32_round_trip(color):
    assert LinearColor.from_color32(color).to_color32() == color


def test_linear_from_white_color32_is_white():
    white = LinearColor.from_color32(Color32(255, 255, 255, 255))
    assert white.equals_in_range(LinearColor.WHITE, 1e-6)


def test_linear_to_color32_clamps():
    color = LinearColor(2.0, -1.0, 0.0, 1.0).to_color32()
    assert color.r == 255
    assert color.g == 0
    assert color.a == 255


def test_linear_error_maps_to_color32_error():
    assert LinearColor.ERROR.to_color32() == Color32.ERROR


def test_linear_default_is_opaque_black():
    assert LinearColor() == LinearColor.BLACK


def test_linear_arithmetic_invariants():
    first = LinearColor(0.1, 0.2, 0.3, 0.4)
    second = LinearColor(0.5, 0.25, 0.125, 1.0)
    assert ((first + second) - second).equals_in_range(first, 1e-9)
    assert (first * 2.0).equals_in_range(first + first, 1e-12)
    assert (2.0 * first) == first * 2.0
    assert ((first / 4.0) * 4.0).equals_in_range(first, 1e-12)
    assert first * LinearColor.WHITE == first


def test_equals_in_range_is_strict():
    first = LinearColor(0.0, 0.0, 0.0, 1.0)
    second = LinearColor(0.5, 0.0, 0.0, 1.0)
    assert not first.equals_in_range(second, 0.5)
    assert first.equals_in_range(second, 0.6)


def test_hsv_primaries():
    assert HSVColor(0.0, 1.0, 1.0).to_linear_color() == LinearColor.RED
    assert HSVColor(1.0 / 3.0, 1.0, 1.0).to_linear_color().equals_in_range(
        LinearColor.GREEN, 1e-6
    )
    assert HSVColor(2.0 / 3.0, 1.0, 1.0).to_linear_color().equals_in_range(
        LinearColor.BLUE, 1e-6
    )


def test_hsv_zero_saturation_is_gray():
    assert HSVColor(0.5, 0.0, 0.5).to_linear_color() == LinearColor.GRAY


def test_hsv_negative_hue_is_black():
    assert HSVColor(-0.1, 1.0, 1.0).to_linear_color() == LinearColor.BLACK


def test_hsv_default_is_red():
    assert HSVColor().to_linear_color() == LinearColor.RED