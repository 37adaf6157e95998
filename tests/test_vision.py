"""Tests for color vision deficiency simulation."""

import itertools

import pytest

from contrastlab.core.types import ColorBlindnessType, RGB
from contrastlab.core.vision import (
    are_colors_distinguishable,
    get_type_description,
    get_type_name,
    simulate_achromatopsia,
    simulate_all_types,
    simulate_color_blindness,
    simulate_protanomaly,
    simulate_protanopia,
)

RED = RGB(255, 0, 0)
GREEN = RGB(0, 128, 0)
WHITE = RGB(255, 255, 255)
BLACK = RGB(0, 0, 0)


def test_achromatopsia_is_always_gray():
    for r, g, b in itertools.product((0, 37, 128, 200, 255), repeat=3):
        out = simulate_achromatopsia(RGB(r, g, b))
        assert out.r == out.g == out.b


def test_neutrals_survive_dichromat_simulation():
    for cb_type in (ColorBlindnessType.PROTANOPIA, ColorBlindnessType.DEUTERANOPIA,
                    ColorBlindnessType.TRITANOPIA, ColorBlindnessType.ACHROMATOPSIA):
        assert simulate_color_blindness(WHITE, cb_type) == WHITE
        assert simulate_color_blindness(BLACK, cb_type) == BLACK


def test_protanopia_collapses_red_and_green_axis():
    out = simulate_protanopia(RED)
    assert out.b == 0
    assert abs(out.r - out.g) <= 2


def test_severity_endpoints():
    assert simulate_protanomaly(RED, 0.0) == RED
    assert simulate_protanomaly(RED, 1.0) == simulate_protanopia(RED)


def test_severity_is_clamped():
    assert simulate_color_blindness(RED, ColorBlindnessType.PROTANOMALY, 2.0) == simulate_protanopia(RED)
    assert simulate_color_blindness(RED, ColorBlindnessType.PROTANOMALY, -1.0) == RED


def test_partial_severity_lies_between():
    full = simulate_protanopia(RED)
    half = simulate_color_blindness(RED, ColorBlindnessType.PROTANOPIA, 0.5)
    assert min(full.r, RED.r) <= half.r <= max(full.r, RED.r)
    assert min(full.g, RED.g) <= half.g <= max(full.g, RED.g)


def test_alpha_is_preserved():
    color = RGB(10, 200, 30, 0.5)
    for cb_type in ColorBlindnessType:
        assert simulate_color_blindness(color, cb_type, 0.7).alpha == 0.5


def test_simulate_all_types_order_and_severities():
    results = simulate_all_types(GREEN)
    assert [r.type for r in results] == list(ColorBlindnessType)
    assert [r.severity for r in results] == [1.0, 1.0, 1.0, 1.0, 0.6, 0.6, 0.6, 0.8]
    assert all(r.original == GREEN for r in results)
    assert results[0].simulated == simulate_protanopia(GREEN)


def test_distinguishable_pairs():
    assert are_colors_distinguishable(RED, RED, ColorBlindnessType.DEUTERANOPIA) is False
    assert are_colors_distinguishable(BLACK, WHITE, ColorBlindnessType.ACHROMATOPSIA) is True
    assert are_colors_distinguishable(RED, RGB(250, 10, 0), ColorBlindnessType.PROTANOPIA) is False


def test_threshold_controls_distinguishability():
    assert are_colors_distinguishable(BLACK, RGB(10, 10, 10), ColorBlindnessType.PROTANOPIA) is False
    assert are_colors_distinguishable(BLACK, RGB(10, 10, 10), ColorBlindnessType.PROTANOPIA, threshold=5) is True


@pytest.mark.parametrize("cb_type", list(ColorBlindnessType))
def test_every_type_has_name_and_description(cb_type):
    assert get_type_name(cb_type).lower() == cb_type.value
    assert get_type_description(cb_type)


def test_simulation_result_to_dict():
    data = simulate_all_types(RGB(1, 2, 3, 0.25))[3].to_dict()
    assert data["type"] == "achromatopsia"
    assert data["original"] == {"r": 1, "g": 2, "b": 3, "alpha": 0.25}
    assert data["severity"] == 1.0
