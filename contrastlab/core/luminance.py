#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/luminance.py

from . import config as c
from .conversions import _channel_to_linear
from .types import RGB


def calculate_relative_luminance(rgb: RGB) -> float:
    """
    WCAG 2.1 relative luminance of an sRGB color, in [0, 1].

    Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    """
    return (
        c.LUMA_R * _channel_to_linear(rgb[0]) +
        c.LUMA_G * _channel_to_linear(rgb[1]) +
        c.LUMA_B * _channel_to_linear(rgb[2])
    )


def calculate_apca_luminance(rgb: RGB) -> float:
    """
    Screen luminance with the APCA coefficients.

    Same transfer curve as the WCAG luminance but different weights;
    do not use it in WCAG ratios.
    """
    return (
        c.APCA_LUMA_R * _channel_to_linear(rgb[0]) +
        c.APCA_LUMA_G * _channel_to_linear(rgb[1]) +
        c.APCA_LUMA_B * _channel_to_linear(rgb[2])
    )


def luminance_to_lightness(y: float) -> float:
    """Convert relative luminance Y in [0, 1] to CIE L* in [0, 100]."""
    if y <= c.LSTAR_EPSILON:
        return y * c.LSTAR_KAPPA
    return c.LAB_L_MULT * (y ** c.LAB_POW) - c.LAB_L_SUB


def lightness_to_luminance(lightness: float) -> float:
    """Convert CIE L* in [0, 100] to relative luminance Y in [0, 1]."""
    if lightness <= c.LSTAR_BREAK:
        return lightness / c.LSTAR_KAPPA
    return ((lightness + c.LAB_L_SUB) / c.LAB_L_MULT) ** 3
