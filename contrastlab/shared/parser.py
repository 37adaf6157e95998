#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/parser.py

import math
import re
from typing import List

from contrastlab.core import config as c
from contrastlab.core.errors import ColorFormatError
from contrastlab.core.types import HSL, LAB, LCH, RGB, XYZ
from contrastlab.shared.clamping import _clamp01, _to_channel

NUMBER_PATTERN = r"[-+]?\d*\.?\d+(?:[eE][-+]?\d+)?"


def _normalize_value_string(s: str) -> str:
    """
    Normalizes a color string for numeric extraction: strips quotes and degree
    marks, unwraps CSS-like functions ('rgb(255, 0, 0)' -> '255 0 0') and
    turns commas and slashes into spaces.
    """
    if not s:
        return ""
    s = s.strip()

    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()

    s = s.replace('°', ' ')
    s = re.sub(r'deg', ' ', s, flags=re.IGNORECASE)

    s = re.sub(r'^[a-zA-Z]+\s*\(', '', s)
    s = s.rstrip(')')

    s = s.replace(',', ' ').replace('/', ' ')
    s = re.sub(r'\s+', ' ', s)
    return s.strip()


def _parse_tokens(s: str, model_name: str, count: int = 3) -> List[str]:
    tokens = re.findall(NUMBER_PATTERN + "%?", _normalize_value_string(s))
    if len(tokens) < count:
        raise ColorFormatError(f"invalid {model_name} string: {s!r}")
    return tokens[:count]


def _safe_float(token: str, model_name: str) -> float:
    v = float(token.rstrip('%'))
    if not math.isfinite(v):
        raise ColorFormatError(f"non-finite {model_name} value: {token!r}")
    return v


def parse_rgb_string(s: str) -> RGB:
    """Parses RGB strings; 0.0-1.0 float channels are scaled to 8-bit."""
    channels = []
    for token in _parse_tokens(s, "rgb"):
        v = _safe_float(token, "rgb")
        if token.endswith('%'):
            v = v / c.PERCENT * c.RGB_MAX
        elif 0.0 < v < 1.0:
            v = v * c.RGB_MAX
        channels.append(_to_channel(v))
    return RGB(*channels)


def parse_hsl_string(s: str) -> HSL:
    """Hue in degrees; saturation and lightness as percentages or 0-1 fractions."""
    h_tok, s_tok, l_tok = _parse_tokens(s, "hsl")
    h = _safe_float(h_tok, "hsl") % c.HUE_MAX

    def _percent(token: str) -> float:
        v = _safe_float(token, "hsl")
        if not token.endswith('%') and v <= 1.0:
            v = v * c.PERCENT
        return _clamp01(v / c.PERCENT) * c.PERCENT

    return HSL(h, _percent(s_tok), _percent(l_tok))


def parse_xyz_string(s: str) -> XYZ:
    return XYZ(*(_safe_float(t, "xyz") for t in _parse_tokens(s, "xyz")))


def parse_lab_string(s: str) -> LAB:
    return LAB(*(_safe_float(t, "lab") for t in _parse_tokens(s, "lab")))


def parse_lch_string(s: str) -> LCH:
    return LCH(*(_safe_float(t, "lch") for t in _parse_tokens(s, "lch")))


STRING_PARSERS = {
    'rgb': parse_rgb_string,
    'hsl': parse_hsl_string,
    'xyz': parse_xyz_string,
    'lab': parse_lab_string,
    'lch': parse_lch_string,
}
