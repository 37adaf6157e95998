"""Tests for the accessible color search."""

import pytest

from contrastlab.core.contrast import calculate_wcag_contrast
from contrastlab.core.luminance import calculate_relative_luminance
from contrastlab.core.optimizer import (
    calculate_accessibility_score,
    can_be_accessible,
    find_accessible_by_lightness,
    find_best_accessible_color,
    find_complementary_accessible_color,
    generate_color_suggestions,
    optimize_palette,
)
from contrastlab.core.types import Modification, OptimizationOptions, RGB, WCAGConformance, WCAGLevel
from contrastlab.core.conversions import rgb_to_hex

BLACK = RGB(0, 0, 0)
WHITE = RGB(255, 255, 255)
GRAY_77 = RGB(119, 119, 119)


def _y(color):
    return calculate_relative_luminance(color)


# ==========================================
# Lightness search
# ==========================================

def test_unreachable_target_returns_none():
    assert find_accessible_by_lightness(BLACK, BLACK, 21) is None
    assert find_accessible_by_lightness(WHITE, GRAY_77, 7) is None


def test_darker_foreground_is_first_tried_above_background():
    bg = RGB(128, 128, 128)
    result = find_accessible_by_lightness(RGB(100, 100, 100), bg, 3.0)
    assert result is not None
    assert _y(result) > _y(bg)
    assert calculate_wcag_contrast(result, bg) >= 3.0


def test_lighter_foreground_is_first_tried_below_background():
    bg = RGB(180, 180, 180)
    result = find_accessible_by_lightness(RGB(200, 200, 200), bg, 4.5)
    assert result is not None
    assert _y(result) < _y(bg)
    assert calculate_wcag_contrast(result, bg) >= 4.5


def test_unreachable_side_falls_back_to_the_other():
    # Nothing is lighter than white, so the gray can only darken
    result = find_accessible_by_lightness(GRAY_77, WHITE, 4.5)
    assert result is not None
    assert _y(result) < _y(GRAY_77)
    assert calculate_wcag_contrast(result, WHITE) >= 4.5

    fg = RGB(60, 60, 60)
    result = find_accessible_by_lightness(fg, BLACK, 7)
    assert result is not None
    assert _y(result) > _y(fg)
    assert calculate_wcag_contrast(result, BLACK) >= 7


def test_hue_free_search_returns_gray():
    result = find_accessible_by_lightness(RGB(255, 0, 0), WHITE, 4.5, preserve_hue=False)
    assert result is not None
    assert abs(result.r - result.g) <= 1 and abs(result.g - result.b) <= 1


def test_preserved_hue_keeps_red_dominant():
    result = find_accessible_by_lightness(RGB(255, 0, 0), WHITE, 4.5)
    assert result is not None
    assert result.r > result.g and result.r > result.b


# ==========================================
# Suggestions
# ==========================================

def test_suggestions_are_sorted_unique_and_passing():
    suggestions = generate_color_suggestions(GRAY_77, WHITE)
    assert 0 < len(suggestions) <= 10
    distances = [s.distance for s in suggestions]
    assert distances == sorted(distances)
    keys = [(s.color.r, s.color.g, s.color.b) for s in suggestions]
    assert len(keys) == len(set(keys))
    for s in suggestions:
        assert s.contrast.ratio >= 4.5
        assert s.hex == rgb_to_hex(s.color)


def test_suggestion_count_limits_output():
    suggestions = generate_color_suggestions(GRAY_77, WHITE, OptimizationOptions(suggestion_count=3))
    assert len(suggestions) <= 3


def test_zero_distance_allows_only_the_original():
    options = OptimizationOptions(max_distance=0)
    assert generate_color_suggestions(GRAY_77, WHITE, options) == []


def test_impossible_target_yields_nothing():
    options = OptimizationOptions(target=WCAGConformance.NORMAL_TEXT_AAA)
    assert generate_color_suggestions(RGB(100, 100, 100), GRAY_77, options) == []


def test_hue_free_sweep_only_changes_lightness():
    options = OptimizationOptions(preserve_hue=False, suggestion_count=50)
    suggestions = generate_color_suggestions(RGB(200, 60, 60), WHITE, options)
    assert suggestions
    assert {s.modification for s in suggestions} <= {Modification.LIGHTENED, Modification.DARKENED}


def test_options_are_validated():
    with pytest.raises(ValueError):
        OptimizationOptions(suggestion_count=0)
    with pytest.raises(ValueError):
        OptimizationOptions(max_distance=-1)
    with pytest.raises(ValueError):
        OptimizationOptions(target="aa")


def test_best_accessible_color_is_first_suggestion():
    best = find_best_accessible_color(GRAY_77, WHITE)
    assert best == generate_color_suggestions(GRAY_77, WHITE)[0].color
    assert find_best_accessible_color(BLACK, BLACK, OptimizationOptions(max_distance=0)) is None


def test_can_be_accessible():
    assert can_be_accessible(GRAY_77, WHITE, 4.5) is True
    assert can_be_accessible(RGB(100, 100, 100), GRAY_77, 7) is False


def test_suggestion_to_dict():
    data = generate_color_suggestions(GRAY_77, WHITE)[0].to_dict()
    assert data["hex"].startswith("#")
    assert data["modification"] in {m.value for m in Modification}
    assert data["contrast"]["ratio"] >= 4.5


# ==========================================
# Palette, scoring, complementary
# ==========================================

def test_optimize_palette_keeps_passing_colors():
    palette = optimize_palette([BLACK, GRAY_77], WHITE)
    assert palette[BLACK] == BLACK
    assert palette[GRAY_77] != GRAY_77
    assert calculate_wcag_contrast(palette[GRAY_77], WHITE) >= 4.5


def test_optimize_palette_keeps_hopeless_colors():
    palette = optimize_palette([WHITE], GRAY_77, 7)
    assert palette[WHITE] == WHITE


def test_accessibility_score():
    assert calculate_accessibility_score(BLACK, WHITE) == 100
    assert calculate_accessibility_score(WHITE, WHITE) == 18.0
    assert calculate_accessibility_score(GRAY_77, WHITE, WCAGLevel.AA, True) == pytest.approx(89.8667, abs=1e-3)


def test_complementary_color():
    assert find_complementary_accessible_color(BLACK, BLACK) == WHITE
    assert find_complementary_accessible_color(WHITE, BLACK, 4.5) is None
    assert find_complementary_accessible_color(WHITE, BLACK, 3) == RGB(128, 128, 128)
