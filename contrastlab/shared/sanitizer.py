#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/sanitizer.py

import argparse
import re

from contrastlab.core import config as c
from contrastlab.core.errors import InvalidColorError

HEX_PATTERN = re.compile(r"#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes a 3- or 6-digit hex string (optional '#') into 6 uppercase digits.
    Anything else raises InvalidColorError; nothing is silently repaired.
    """
    if not isinstance(value, str):
        raise InvalidColorError(value)
    match = HEX_PATTERN.fullmatch(value)
    if not match:
        raise InvalidColorError(value)

    digits = match.group(1).upper()
    if len(digits) == 3:
        # e.g., 'ABC' becomes 'AABBCC'
        return "".join(ch * 2 for ch in digits)
    return digits


def _extract_positive_only_int(value: str) -> int:
    """
    Extracts a strictly positive integer from a string by stripping out
    all non-numeric characters (including minus signs).
    """
    if value is None:
        return None
    digits_only = re.sub(r"[^0-9]", "", str(value))
    if not digits_only:
        return None
    return int(digits_only)


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its sign.
    """
    if value is None:
        return None
    s = str(value)
    is_negative = s.strip().startswith("-")
    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None
    val = int(digits_only)
    return -val if is_negative else val


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    keeping only the first decimal point encountered.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    clean_str = ""
    dot_seen = False
    for char in re.findall(r"[0-9\.]", s):
        if char == ".":
            if dot_seen:
                continue
            dot_seen = True
        clean_str += char

    if not clean_str or clean_str == ".":
        return None

    val = float(clean_str)
    return -val if is_negative else val


def _extract_alpha_only(value: str) -> str:
    """Extracts lowercase alphabetical characters and dashes from a string."""
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z\-]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    try:
        return normalize_hex(str(v).strip())
    except InvalidColorError:
        raise argparse.ArgumentTypeError(f"invalid hex value: '{_sanitize_for_log(v)}'")


def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., format names)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid string value: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid float value: '{_sanitize_for_log(v)}'")
        return max(min_v, min(max_v, val))
    return validator


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid integer value: '{_sanitize_for_log(v)}'")
        return max(min_v, min(max_v, val))
    return validator


def handle_positive_int(min_v: int, max_v: int):
    """
    Factory function returning a validator that specifically handles
    positive integers clamped within a given range.
    """
    def validator(v: str) -> int:
        val = _extract_positive_only_int(v)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid numeric value: '{_sanitize_for_log(v)}'")
        return max(min_v, min(max_v, val))
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "to_format": handle_string_clean,
    "target": handle_string_clean,

    "ratio": handle_float_range(c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO),
    "distance": handle_float_range(0.0, 200.0),

    "suggestion_count": handle_positive_int(1, c.MAX_SUGGESTIONS),
    "seed": handle_int_range(0, 999_999_999_999_999_999),
    "intensity": handle_positive_int(0, 100),
}
