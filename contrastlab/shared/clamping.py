#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/clamping.py

import math


def clamp(v: float, lo: float, hi: float) -> float:
    if v != v:
        return lo
    return max(lo, min(hi, v))


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(255.0, v))


def round_half_away(v: float, decimals: int = 0) -> float:
    """
    Round to a number of decimals, halves away from zero.
    The builtin round() rounds halves to even, which makes 0.5 -> 0 and 2.5 -> 2.
    """
    factor = 10 ** decimals
    scaled = abs(v) * factor
    return math.copysign(math.floor(scaled + 0.5), v) / factor


def _to_channel(v: float) -> int:
    """Round and clamp a float channel into an 8-bit integer."""
    return int(round_half_away(_clamp255(v)))
