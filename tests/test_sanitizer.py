"""Tests for CLI argument validators."""

import argparse

import pytest

from contrastlab.core.errors import InvalidColorError
from contrastlab.shared.sanitizer import INPUT_HANDLERS, normalize_hex


@pytest.mark.parametrize(
    "raw,expected",
    [("#abc", "AABBCC"), ("abc", "AABBCC"), ("#0a0B0c", "0A0B0C"), ("FFFFFF", "FFFFFF")],
)
def test_normalize_hex(raw, expected):
    assert normalize_hex(raw) == expected


@pytest.mark.parametrize("raw", ["", "#", "#abcd", "#ggg", "12345", "#1234567", None])
def test_normalize_hex_rejects(raw):
    with pytest.raises(InvalidColorError):
        normalize_hex(raw)


def test_hex_handler_strips_whitespace():
    assert INPUT_HANDLERS["hex"]("  #fff ") == "FFFFFF"


def test_hex_handler_reports_argparse_error():
    with pytest.raises(argparse.ArgumentTypeError, match="invalid hex value"):
        INPUT_HANDLERS["hex"]("not-a-color")


def test_string_handler_keeps_letters_and_dashes():
    assert INPUT_HANDLERS["target"]("Normal Text-AA") == "normaltext-aa"
    assert INPUT_HANDLERS["to_format"]("RGB") == "rgb"
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["to_format"]("123")


def test_ratio_handler_clamps():
    assert INPUT_HANDLERS["ratio"]("4.5") == 4.5
    assert INPUT_HANDLERS["ratio"]("50") == 21.0
    assert INPUT_HANDLERS["ratio"]("0.2") == 1.0
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["ratio"]("abc")


def test_count_and_intensity_handlers_clamp():
    assert INPUT_HANDLERS["suggestion_count"]("0") == 1
    assert INPUT_HANDLERS["suggestion_count"]("9999") == 250
    assert INPUT_HANDLERS["intensity"]("150") == 100
    assert INPUT_HANDLERS["intensity"]("40") == 40


def test_seed_handler_keeps_sign_then_clamps():
    assert INPUT_HANDLERS["seed"]("42") == 42
    assert INPUT_HANDLERS["seed"]("-7") == 0
