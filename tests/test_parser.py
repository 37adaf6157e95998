"""Tests for color string parsing."""

import pytest

from contrastlab.core.errors import ColorFormatError
from contrastlab.core.types import HSL, LAB, LCH, RGB, XYZ
from contrastlab.shared.parser import (
    STRING_PARSERS,
    parse_hsl_string,
    parse_lab_string,
    parse_lch_string,
    parse_rgb_string,
    parse_xyz_string,
)


@pytest.mark.parametrize(
    "raw",
    ["rgb(255, 0, 0)", "255 0 0", "'255,0,0'", "RGB(100%, 0%, 0%)", "rgb(255 0 0 / 0.5)"],
)
def test_parse_rgb_variants(raw):
    assert parse_rgb_string(raw) == RGB(255, 0, 0)


def test_parse_rgb_fraction_channels_scale():
    assert parse_rgb_string("0.5 0.5 0.5") == RGB(128, 128, 128)


def test_parse_rgb_clamps():
    assert parse_rgb_string("300 -20 12.6") == RGB(255, 0, 13)


def test_parse_hsl():
    assert parse_hsl_string("hsl(120deg, 100%, 25%)") == HSL(120.0, 100.0, 25.0)
    assert parse_hsl_string("480 0.5 0.5") == HSL(120.0, 50.0, 50.0)


def test_parse_lab_lch_xyz():
    assert parse_lab_string("lab(53.24 80.09 67.2)") == LAB(53.24, 80.09, 67.2)
    assert parse_lch_string("lch(50 30 270deg)") == LCH(50.0, 30.0, 270.0)
    assert parse_xyz_string("0.95 1.0 1.09") == XYZ(0.95, 1.0, 1.09)


@pytest.mark.parametrize("name", ["rgb", "hsl", "xyz", "lab", "lch"])
def test_parsers_reject_short_input(name):
    with pytest.raises(ColorFormatError):
        STRING_PARSERS[name]("1 2")


def test_parser_rejects_empty_and_infinite():
    with pytest.raises(ColorFormatError):
        parse_rgb_string("")
    with pytest.raises(ColorFormatError):
        parse_lab_string("1e999 0 0")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_hsl_string("hsl(nope)")
