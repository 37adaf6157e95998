"""Tests for the CIE color difference formulas."""

import pytest

from contrastlab.core.difference import delta_e_2000, delta_e_76, delta_e_94, delta_e_euclidean_rgb
from contrastlab.core.types import LAB, RGB


@pytest.mark.parametrize(
    "lab",
    [LAB(0, 0, 0), LAB(50, 0, 0), LAB(50, 2.6772, -79.7751), LAB(100, -20, 30), LAB(35, 60, 0)],
)
def test_delta_e_2000_identity_is_zero(lab):
    assert delta_e_2000(lab, lab) == 0


def test_delta_e_2000_reference_pairs():
    # Sharma, Wu & Dalal (2005) test data
    assert delta_e_2000(LAB(50, 2.6772, -79.7751), LAB(50, 0, -82.7485)) == pytest.approx(2.0425, abs=1e-4)
    assert delta_e_2000(LAB(50, 0, 0), LAB(50, -1, 2)) == pytest.approx(2.3669, abs=1e-4)


def test_delta_e_2000_hue_wraparound_pairs():
    # Hue angles on either side of 0/360 degrees (Sharma pairs 8 and 10)
    assert delta_e_2000(LAB(50, 2.49, -0.001), LAB(50, -2.49, 0.0009)) == pytest.approx(7.1792, abs=1e-4)
    assert delta_e_2000(LAB(50, 2.49, -0.001), LAB(50, -2.49, 0.0011)) == pytest.approx(7.2195, abs=1e-4)


def test_delta_e_2000_is_symmetric():
    a = LAB(60, 30, -10)
    b = LAB(55, -5, 25)
    assert delta_e_2000(a, b) == pytest.approx(delta_e_2000(b, a))


def test_delta_e_2000_gray_pair_has_no_hue_term():
    # Both colors achromatic: only lightness contributes
    d = delta_e_2000(LAB(40, 0, 0), LAB(60, 0, 0))
    assert d > 0
    assert delta_e_2000(LAB(40, 0, 0), LAB(40, 0, 0)) == 0


def test_delta_e_76_is_euclidean():
    assert delta_e_76(LAB(50, 0, 0), LAB(53, 4, 0)) == pytest.approx(5.0)


def test_delta_e_94_lightness_only():
    assert delta_e_94(LAB(50, 0, 0), LAB(60, 0, 0)) == pytest.approx(10.0)
    assert delta_e_94(LAB(50, 20, 20), LAB(50, 20, 20)) == 0


def test_delta_e_94_weights_chroma_below_cie76():
    a = LAB(50, 40, 0)
    b = LAB(50, 50, 0)
    assert delta_e_94(a, b) < delta_e_76(a, b)


def test_euclidean_rgb_distance():
    assert delta_e_euclidean_rgb(RGB(0, 0, 0), RGB(3, 4, 0)) == pytest.approx(5.0)
    assert delta_e_euclidean_rgb(RGB(10, 20, 30), RGB(10, 20, 30)) == 0
