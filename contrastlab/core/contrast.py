#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/contrast.py

from typing import Optional

from . import config as c
from .luminance import calculate_apca_luminance, calculate_relative_luminance
from .types import (
    APCAResult,
    ContrastResult,
    LuminancePair,
    RGB,
    WCAGCompliance,
    WCAGConformance,
    WCAGLevel,
)
from contrastlab.shared.clamping import clamp, round_half_away


TARGET_RATIOS = {
    WCAGConformance.NORMAL_TEXT_AA: c.WCAG_AA_NORMAL,
    WCAGConformance.NORMAL_TEXT_AAA: c.WCAG_AAA_NORMAL,
    WCAGConformance.LARGE_TEXT_AA: c.WCAG_AA_LARGE,
    WCAGConformance.LARGE_TEXT_AAA: c.WCAG_AAA_LARGE,
    WCAGConformance.UI_COMPONENTS: c.WCAG_UI_COMPONENTS,
}

# (normal text, large text) minimum ratio per level
LEVEL_RATIOS = {
    WCAGLevel.AA: (c.WCAG_AA_NORMAL, c.WCAG_AA_LARGE),
    WCAGLevel.AAA: (c.WCAG_AAA_NORMAL, c.WCAG_AAA_LARGE),
}


def _wcag_ratio(lum1: float, lum2: float) -> float:
    lighter, darker = (lum1, lum2) if lum1 > lum2 else (lum2, lum1)
    return (lighter + c.WCAG_LUMINANCE_OFFSET) / (darker + c.WCAG_LUMINANCE_OFFSET)


def calculate_wcag_contrast(fg: RGB, bg: RGB) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two RGB colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    Formula: (L1 + 0.05) / (L2 + 0.05), L1 being the lighter luminance.
    The result is rounded to 2 decimals and does not depend on operand order.
    """
    ratio = _wcag_ratio(calculate_relative_luminance(fg), calculate_relative_luminance(bg))
    return round_half_away(ratio, c.WCAG_RATIO_DECIMALS)


def _soft_clamp_black(y: float) -> float:
    if y < c.APCA_BLK_THRS:
        return y + (c.APCA_BLK_THRS - y) ** c.APCA_BLK_CLMP
    return y


def calculate_apca_contrast(text: RGB, bg: RGB) -> float:
    """
    Calculate the APCA lightness contrast (Lc) of text over a background.

    Source: APCA-W3 0.0.98G-4g constants.
    Positive Lc means dark text on a light background, negative means light
    text on a dark background. Swapping the operands changes the value.
    """
    y_txt = _soft_clamp_black(calculate_apca_luminance(text))
    y_bg = _soft_clamp_black(calculate_apca_luminance(bg))

    if abs(y_bg - y_txt) < c.APCA_DELTA_Y_MIN:
        return 0.0

    if y_bg > y_txt:
        sapc = (y_bg ** c.APCA_NORM_BG - y_txt ** c.APCA_NORM_TXT) * c.APCA_SCALE
        if sapc < c.APCA_LO_CLIP:
            return 0.0
        lc = sapc - c.APCA_LO_OFFSET
    else:
        sapc = (y_bg ** c.APCA_REV_BG - y_txt ** c.APCA_REV_TXT) * c.APCA_SCALE
        if sapc > -c.APCA_LO_CLIP:
            return 0.0
        lc = sapc + c.APCA_LO_OFFSET

    return round_half_away(lc * c.APCA_OUTPUT_SCALE, c.APCA_DECIMALS)


def get_apca_min_font_size(lc: float) -> Optional[int]:
    """Smallest font size in px readable at this Lc, or None below 45."""
    magnitude = abs(lc)
    for threshold, size in c.APCA_FONT_SIZES:
        if magnitude >= threshold:
            return size
    return None


def check_wcag_compliance(ratio: float) -> WCAGCompliance:
    return WCAGCompliance(
        normal_text_aa=ratio >= c.WCAG_AA_NORMAL,
        normal_text_aaa=ratio >= c.WCAG_AAA_NORMAL,
        large_text_aa=ratio >= c.WCAG_AA_LARGE,
        large_text_aaa=ratio >= c.WCAG_AAA_LARGE,
        ui_components=ratio >= c.WCAG_UI_COMPONENTS,
    )


def check_apca_compliance(lc: float) -> bool:
    """Body text needs |Lc| of at least 75."""
    return abs(lc) >= c.APCA_BODY_TEXT_LC


def calculate_required_luminance(bg_luminance: float, target_ratio: float, lighter: bool) -> float:
    """
    Invert the WCAG ratio: foreground luminance that reaches `target_ratio`
    against `bg_luminance`, on the lighter or darker side.

    A result outside [0, 1] means the target cannot be met in that direction.
    """
    if lighter:
        return target_ratio * (bg_luminance + c.WCAG_LUMINANCE_OFFSET) - c.WCAG_LUMINANCE_OFFSET
    return (bg_luminance + c.WCAG_LUMINANCE_OFFSET) / target_ratio - c.WCAG_LUMINANCE_OFFSET


def get_contrast_grade(ratio: float) -> str:
    for threshold, grade in c.GRADE_BUCKETS:
        if ratio >= threshold:
            return grade
    return c.GRADE_FAIL


def get_contrast_score(ratio: float) -> int:
    """Linear 0-100 score of the ratio over the 21:1 maximum."""
    return int(clamp(round_half_away(ratio / c.WCAG_MAX_RATIO * c.PERCENT), 0, c.PERCENT))


def get_minimum_contrast_ratio(level: WCAGLevel = WCAGLevel.AA, is_large_text: bool = False) -> float:
    normal, large = LEVEL_RATIOS[level]
    return large if is_large_text else normal


def get_target_ratio(conformance: WCAGConformance) -> float:
    return TARGET_RATIOS[conformance]


def calculate_contrast(fg: RGB, bg: RGB) -> ContrastResult:
    """
    Full contrast report for a foreground/background pair: WCAG ratio and
    compliance flags, APCA Lc with its minimum font size, and both luminances.
    """
    fg_lum = calculate_relative_luminance(fg)
    bg_lum = calculate_relative_luminance(bg)
    ratio = round_half_away(_wcag_ratio(fg_lum, bg_lum), c.WCAG_RATIO_DECIMALS)
    lc = calculate_apca_contrast(fg, bg)

    return ContrastResult(
        ratio=ratio,
        wcag=check_wcag_compliance(ratio),
        apca=APCAResult(
            score=lc,
            compliant=check_apca_compliance(lc),
            min_font_size=get_apca_min_font_size(lc),
        ),
        luminance=LuminancePair(
            foreground=round_half_away(fg_lum, c.LUMINANCE_DECIMALS),
            background=round_half_away(bg_lum, c.LUMINANCE_DECIMALS),
        ),
    )
