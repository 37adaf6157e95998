#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/optimizer.py

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from . import config as c
from .contrast import (
    calculate_contrast,
    calculate_required_luminance,
    calculate_wcag_contrast,
    get_minimum_contrast_ratio,
    get_target_ratio,
)
from .conversions import darken, lch_to_rgb, lighten, normalize_hue, rgb_to_hex, rgb_to_lab, rgb_to_lch
from .difference import delta_e_2000
from .luminance import calculate_relative_luminance
from .types import (
    ColorSuggestion,
    LCH,
    Modification,
    OptimizationOptions,
    RGB,
    WCAGLevel,
)


def _inclusive_range(bounds: Tuple[int, int, int]) -> range:
    start, stop, step = bounds
    return range(start, stop + 1, step)


# ==========================================
# Lightness Search
# ==========================================


def _search_lightness(lch: LCH, target_y: float, lighter: bool) -> RGB:
    """
    Binary search over LCH lightness for the color whose relative luminance
    reaches `target_y`. Returns the bracket side that satisfies the target.
    """
    low, high = 0.0, c.PERCENT
    for _ in range(c.LIGHTNESS_SEARCH_ITERATIONS):
        if high - low <= c.LIGHTNESS_SEARCH_WIDTH:
            break
        mid = (low + high) / c.DIV_2
        y = calculate_relative_luminance(lch_to_rgb(LCH(mid, lch.c, lch.h)))
        if lighter:
            if y < target_y:
                low = mid
            else:
                high = mid
        else:
            if y > target_y:
                high = mid
            else:
                low = mid
    return lch_to_rgb(LCH(high if lighter else low, lch.c, lch.h))


def find_accessible_by_lightness(
    fg: RGB,
    bg: RGB,
    target_ratio: float,
    preserve_hue: bool = True,
) -> Optional[RGB]:
    """
    Shift the lightness of `fg` until it reaches `target_ratio` against `bg`.

    The direction follows the current luminance ordering: a foreground darker
    than the background is first tried on the lighter side and vice versa;
    if the required luminance is unreachable that way the opposite direction
    is tried. With preserve_hue the LCH hue and chroma of `fg` are kept,
    otherwise the result is gray. Returns None when neither direction can
    meet the target.
    """
    bg_y = calculate_relative_luminance(bg)
    fg_y = calculate_relative_luminance(fg)
    lighter_first = fg_y < bg_y

    lch = rgb_to_lch(fg)
    if not preserve_hue:
        lch = LCH(lch.l, 0.0, 0.0)

    for lighter in (lighter_first, not lighter_first):
        required = calculate_required_luminance(bg_y, target_ratio, lighter)
        # Open interval: the endpoints are pure black and pure white
        if not 0.0 < required < c.UNIT:
            continue
        candidate = _search_lightness(lch, required, lighter)
        if calculate_wcag_contrast(candidate, bg) >= target_ratio:
            return candidate
    return None


# ==========================================
# Suggestion Sweep
# ==========================================


def _candidates(fg: RGB, preserve_hue: bool) -> Iterator[Tuple[RGB, Modification]]:
    for amount in _inclusive_range(c.HSL_STEP_RANGE):
        yield lighten(fg, amount), Modification.LIGHTENED
    for amount in _inclusive_range(c.HSL_STEP_RANGE):
        yield darken(fg, amount), Modification.DARKENED

    if not preserve_hue:
        return

    lch = rgb_to_lch(fg)
    for lightness in _inclusive_range(c.LCH_LIGHTNESS_RANGE):
        mod = Modification.LIGHTENED if lightness > lch.l else Modification.DARKENED
        yield lch_to_rgb(LCH(float(lightness), lch.c, lch.h)), mod

    for degrees in _inclusive_range(c.HUE_ROTATION_RANGE):
        if degrees == 0:
            continue
        yield lch_to_rgb(LCH(lch.l, lch.c, normalize_hue(lch.h + degrees))), Modification.HUE_SHIFTED

    for chroma in _inclusive_range(c.CHROMA_RANGE):
        mod = Modification.SATURATED if chroma > lch.c else Modification.DESATURATED
        yield lch_to_rgb(LCH(lch.l, float(chroma), lch.h)), mod


def _collect_suggestions(
    fg: RGB,
    bg: RGB,
    target_ratio: float,
    max_distance: Optional[float],
    preserve_hue: bool,
) -> List[ColorSuggestion]:
    original_lab = rgb_to_lab(fg)
    seen = set()
    suggestions = []

    for color, modification in _candidates(fg, preserve_hue):
        key = (color.r, color.g, color.b)
        if key in seen:
            continue
        contrast = calculate_contrast(color, bg)
        if contrast.ratio < target_ratio:
            continue
        distance = delta_e_2000(original_lab, rgb_to_lab(color))
        if max_distance is not None and distance > max_distance:
            continue
        seen.add(key)
        suggestions.append(ColorSuggestion(
            color=color,
            hex=rgb_to_hex(color),
            contrast=contrast,
            distance=distance,
            modification=modification,
        ))

    # sorted() is stable: equal distances keep sweep order
    return sorted(suggestions, key=lambda s: s.distance)


def generate_color_suggestions(
    fg: RGB,
    bg: RGB,
    options: Optional[OptimizationOptions] = None,
) -> List[ColorSuggestion]:
    """
    Sweep lightness, hue and chroma variants of `fg` and keep those that meet
    the conformance target against `bg`, closest (ΔE2000) first.

    An empty list means no variant within the search space qualifies.
    """
    if options is None:
        options = OptimizationOptions()
    suggestions = _collect_suggestions(
        fg,
        bg,
        get_target_ratio(options.target),
        options.max_distance,
        options.preserve_hue,
    )
    return suggestions[:options.suggestion_count]


def find_best_accessible_color(
    fg: RGB,
    bg: RGB,
    options: Optional[OptimizationOptions] = None,
) -> Optional[RGB]:
    suggestions = generate_color_suggestions(fg, bg, options)
    return suggestions[0].color if suggestions else None


def can_be_accessible(
    fg: RGB,
    bg: RGB,
    target_ratio: float,
    max_distance: float = c.CAN_BE_ACCESSIBLE_MAX_DISTANCE,
) -> bool:
    """True when some swept variant within `max_distance` meets `target_ratio`."""
    return bool(_collect_suggestions(fg, bg, target_ratio, max_distance, True))


# ==========================================
# Palette & Scoring
# ==========================================


def optimize_palette(
    colors: Iterable[RGB],
    bg: RGB,
    target_ratio: float = c.DEFAULT_TARGET_RATIO,
) -> Dict[RGB, RGB]:
    """
    Map every color to itself when it already meets `target_ratio` against
    `bg`, otherwise to its lightness-adjusted variant. Colors with no
    accessible variant map to themselves.
    """
    optimized = {}
    for color in colors:
        if calculate_wcag_contrast(color, bg) >= target_ratio:
            optimized[color] = color
            continue
        accessible = find_accessible_by_lightness(color, bg, target_ratio, True)
        optimized[color] = accessible if accessible is not None else color
    return optimized


def calculate_accessibility_score(
    fg: RGB,
    bg: RGB,
    target_level: WCAGLevel = WCAGLevel.AA,
    is_large_text: bool = False,
) -> float:
    """
    0-100 score against the level's minimum ratio.

    Below the minimum the score grows linearly up to 80; meeting it scores 80
    plus up to 20 for exceeding it (full bonus at twice the minimum).
    """
    ratio = calculate_wcag_contrast(fg, bg)
    target = get_minimum_contrast_ratio(target_level, is_large_text)

    if ratio >= target:
        bonus = min((ratio - target) / target, c.UNIT) * c.SCORE_BONUS_MAX
        return min(c.SCORE_PASS_BASE + bonus, c.SCORE_MAX)
    return float(round(ratio / target * c.SCORE_PASS_BASE))


def find_complementary_accessible_color(
    color1: RGB,
    color2: RGB,
    target_ratio: float = c.DEFAULT_TARGET_RATIO,
) -> Optional[RGB]:
    """
    A neutral color reaching `target_ratio` against both inputs.

    White, black and mid gray are tried first, then grays along the LCH
    lightness axis.
    """
    gray = c.COMPLEMENT_GRAY_LEVEL
    fixed = [RGB(255, 255, 255), RGB(0, 0, 0), RGB(gray, gray, gray)]
    sweep = (lch_to_rgb(LCH(float(lightness), 0.0, 0.0)) for lightness in _inclusive_range(c.COMPLEMENT_LIGHTNESS_RANGE))

    for candidate in fixed + list(sweep):
        if (calculate_wcag_contrast(candidate, color1) >= target_ratio and
                calculate_wcag_contrast(candidate, color2) >= target_ratio):
            return candidate
    return None
