"""Tests for the RGB/HSL/XYZ/LAB/LCH conversion layer."""

import pytest

from contrastlab.core.conversions import (
    darken,
    desaturate,
    hsl_to_rgb,
    lab_to_lch,
    lab_to_rgb,
    lch_to_lab,
    lch_to_rgb,
    lighten,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_xyz,
    rotate_hue,
    saturate,
    to_rgb,
    xyz_to_rgb,
)
from contrastlab.core.errors import ColorFormatError, InvalidColorError
from contrastlab.core.types import HSL, LAB, LCH, RGB

GRID = [RGB(r, g, b) for r in range(0, 256, 51) for g in range(0, 256, 51) for b in range(0, 256, 51)]


def _close(a, b, tol=1):
    return all(abs(x - y) <= tol for x, y in zip(a[:3], b[:3]))


def test_rgb_to_hsl_primaries():
    assert rgb_to_hsl(RGB(255, 0, 0)) == pytest.approx((0, 100, 50))
    assert rgb_to_hsl(RGB(0, 255, 0)) == pytest.approx((120, 100, 50))
    assert rgb_to_hsl(RGB(0, 0, 255)) == pytest.approx((240, 100, 50))
    assert rgb_to_hsl(RGB(128, 128, 128))[1] == 0


def test_hsl_to_rgb_known_values():
    assert hsl_to_rgb(HSL(120, 100, 25)) == RGB(0, 128, 0)
    assert hsl_to_rgb(HSL(0, 0, 100)) == RGB(255, 255, 255)
    assert hsl_to_rgb(HSL(480, 100, 50)) == RGB(0, 255, 0)


def test_hsl_round_trip_within_one():
    for color in GRID:
        assert _close(hsl_to_rgb(rgb_to_hsl(color)), color)


def test_lab_round_trip_within_one():
    for color in GRID:
        assert _close(lab_to_rgb(rgb_to_lab(color)), color)


def test_xyz_white_point_and_round_trip():
    assert rgb_to_xyz(RGB(255, 255, 255)) == pytest.approx((95.047, 100.0, 108.883), abs=0.01)
    for color in GRID[::7]:
        assert _close(xyz_to_rgb(rgb_to_xyz(color)), color)


def test_lab_of_white_and_black():
    assert rgb_to_lab(RGB(255, 255, 255)) == pytest.approx((100, 0, 0), abs=0.01)
    assert rgb_to_lab(RGB(0, 0, 0)) == pytest.approx((0, 0, 0), abs=1e-9)


def test_lch_is_polar_lab():
    lch = lab_to_lch(LAB(50, 0, 10))
    assert lch.c == pytest.approx(10)
    assert lch.h == pytest.approx(90)
    assert lab_to_lch(LAB(50, 0, -10)).h == pytest.approx(270)

    lab = lch_to_lab(LCH(50, 10, 180))
    assert lab.a == pytest.approx(-10)
    assert lab.b == pytest.approx(0, abs=1e-9)


def test_lch_round_trip_within_one():
    for color in GRID[::5]:
        assert _close(lch_to_rgb(rgb_to_lch(color)), color)


def test_lighten_and_darken_use_percentage_points():
    assert lighten(RGB(0, 0, 0), 50) == RGB(128, 128, 128)
    assert lighten(RGB(200, 200, 200), 100) == RGB(255, 255, 255)
    assert darken(RGB(255, 255, 255), 100) == RGB(0, 0, 0)


def test_saturation_helpers():
    assert desaturate(RGB(255, 0, 0), 100) == RGB(128, 128, 128)
    assert saturate(RGB(128, 128, 128), 0) == RGB(128, 128, 128)
    red = saturate(RGB(191, 64, 64), 50)
    assert red[0] > 191 and red[1] < 64


def test_rotate_hue_wraps():
    assert rotate_hue(RGB(255, 0, 0), 120) == RGB(0, 255, 0)
    assert rotate_hue(RGB(255, 0, 0), -120) == RGB(0, 0, 255)
    assert rotate_hue(RGB(255, 0, 0), 360) == RGB(255, 0, 0)


def test_adjustments_carry_alpha():
    assert lighten(RGB(0, 0, 0, 0.5), 10).alpha == 0.5
    assert rotate_hue(RGB(255, 0, 0, 0.25), 30).alpha == 0.25


@pytest.mark.parametrize(
    "value,expected",
    [
        ("#fff", RGB(255, 255, 255)),
        ("000000", RGB(0, 0, 0)),
        (RGB(1, 2, 3), RGB(1, 2, 3)),
        ({"r": 1, "g": 2, "b": 3}, RGB(1, 2, 3)),
        ({"r": 1, "g": 2, "b": 3, "alpha": 0.5}, RGB(1, 2, 3, 0.5)),
        ({"h": 0, "s": 100, "l": 50}, RGB(255, 0, 0)),
        (HSL(240, 100, 50), RGB(0, 0, 255)),
    ],
)
def test_to_rgb_dispatches_on_shape(value, expected):
    assert to_rgb(value) == expected


def test_to_rgb_mapping_channels_are_rounded_and_clamped():
    assert to_rgb({"r": 10.5, "g": 1, "b": 2}) == RGB(11, 1, 2)
    assert to_rgb({"r": 300, "g": -4, "b": 127.4, "alpha": 0.25}) == RGB(255, 0, 127, 0.25)
    assert all(isinstance(ch, int) for ch in to_rgb({"r": 0.2, "g": 99.9, "b": 254.5})[:3])


def test_to_rgb_lab_and_lch_shapes():
    assert _close(to_rgb({"l": 100, "a": 0, "b": 0}), RGB(255, 255, 255))
    assert _close(to_rgb({"l": 0, "c": 0, "h": 0}), RGB(0, 0, 0))
    assert _close(to_rgb(LAB(100, 0, 0)), RGB(255, 255, 255))
    assert _close(to_rgb(LCH(0, 0, 0)), RGB(0, 0, 0))


@pytest.mark.parametrize("value", [42, None, {"x": 1}, {"r": 1, "g": 2}, {"r": 1, "g": 2, "b": 3, "a": 4}, [1, 2, 3]])
def test_to_rgb_rejects_unknown_shapes(value):
    with pytest.raises(ColorFormatError):
        to_rgb(value)


def test_to_rgb_bad_hex_raises_invalid_color():
    with pytest.raises(InvalidColorError):
        to_rgb("zzz")
