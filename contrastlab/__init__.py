#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/__init__.py

__version__ = "0.1.0"

from contrastlab.core.contrast import (
    calculate_apca_contrast,
    calculate_contrast,
    calculate_required_luminance,
    calculate_wcag_contrast,
    check_apca_compliance,
    check_wcag_compliance,
    get_apca_min_font_size,
    get_contrast_grade,
    get_contrast_score,
    get_minimum_contrast_ratio,
    get_target_ratio,
)
from contrastlab.core.conversions import (
    darken,
    deg_to_rad,
    desaturate,
    hex_to_rgb,
    hsl_to_rgb,
    lab_to_lch,
    lab_to_rgb,
    lab_to_xyz,
    lch_to_lab,
    lch_to_rgb,
    lighten,
    linear_to_srgb,
    normalize_hue,
    rad_to_deg,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_xyz,
    rotate_hue,
    saturate,
    srgb_to_linear,
    to_rgb,
    xyz_to_lab,
    xyz_to_rgb,
)
from contrastlab.core.difference import delta_e_2000, delta_e_76, delta_e_94, delta_e_euclidean_rgb
from contrastlab.core.errors import ColorFormatError, ContrastlabError, InvalidColorError
from contrastlab.core.luminance import (
    calculate_apca_luminance,
    calculate_relative_luminance,
    lightness_to_luminance,
    luminance_to_lightness,
)
from contrastlab.core.optimizer import (
    calculate_accessibility_score,
    can_be_accessible,
    find_accessible_by_lightness,
    find_best_accessible_color,
    find_complementary_accessible_color,
    generate_color_suggestions,
    optimize_palette,
)
from contrastlab.core.types import (
    APCAResult,
    ColorBlindnessType,
    ColorSuggestion,
    ContrastResult,
    HSL,
    LAB,
    LCH,
    LuminancePair,
    Modification,
    OptimizationOptions,
    RGB,
    SimulationResult,
    WCAGCompliance,
    WCAGConformance,
    WCAGLevel,
    XYZ,
)
from contrastlab.core.vision import (
    are_colors_distinguishable,
    get_type_description,
    get_type_name,
    simulate_achromatomaly,
    simulate_achromatopsia,
    simulate_all_types,
    simulate_color_blindness,
    simulate_deuteranomaly,
    simulate_deuteranopia,
    simulate_protanomaly,
    simulate_protanopia,
    simulate_tritanomaly,
    simulate_tritanopia,
)
from contrastlab.shared.clamping import clamp, round_half_away
