"""Tests for WCAG/APCA luminance and CIE lightness helpers."""

import pytest

from contrastlab.core.luminance import (
    calculate_apca_luminance,
    calculate_relative_luminance,
    lightness_to_luminance,
    luminance_to_lightness,
)
from contrastlab.core.types import RGB


def test_relative_luminance_extremes():
    assert calculate_relative_luminance(RGB(0, 0, 0)) == 0
    assert calculate_relative_luminance(RGB(255, 255, 255)) == pytest.approx(1.0)


def test_relative_luminance_monotonic():
    white = calculate_relative_luminance(RGB(255, 255, 255))
    gray = calculate_relative_luminance(RGB(119, 119, 119))
    black = calculate_relative_luminance(RGB(0, 0, 0))
    assert white > gray > black
    assert gray == pytest.approx(0.1845, abs=1e-4)


def test_apca_luminance_uses_its_own_coefficients():
    red = RGB(255, 0, 0)
    assert calculate_relative_luminance(red) == pytest.approx(0.2126)
    assert calculate_apca_luminance(red) == pytest.approx(0.2126729)
    assert calculate_apca_luminance(RGB(255, 255, 255)) == pytest.approx(1.0, abs=1e-6)


def test_lightness_of_reference_luminances():
    assert luminance_to_lightness(0.0) == 0
    assert luminance_to_lightness(1.0) == pytest.approx(100)
    assert luminance_to_lightness(0.18) == pytest.approx(49.5, abs=0.1)
    # Linear segment below the 216/24389 breakpoint
    assert luminance_to_lightness(0.001) == pytest.approx(0.001 * 24389 / 27)


@pytest.mark.parametrize("y", [0.001, 0.005, 216 / 24389, 0.2, 0.5, 0.9])
def test_lightness_luminance_inverse(y):
    assert lightness_to_luminance(luminance_to_lightness(y)) == pytest.approx(y)


def test_lightness_curve_is_continuous_at_breakpoint():
    assert luminance_to_lightness(216 / 24389) == pytest.approx(8.0)
    assert lightness_to_luminance(8.0) == pytest.approx(216 / 24389)
