#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/vision.py

from typing import List

from . import config as c
from .conversions import _channel_to_linear, _linear_to_channel
from .difference import delta_e_euclidean_rgb
from .types import ColorBlindnessType, RGB, SimulationResult
from contrastlab.shared.clamping import _to_channel, clamp


TYPE_NAMES = {
    ColorBlindnessType.PROTANOPIA: "Protanopia",
    ColorBlindnessType.DEUTERANOPIA: "Deuteranopia",
    ColorBlindnessType.TRITANOPIA: "Tritanopia",
    ColorBlindnessType.ACHROMATOPSIA: "Achromatopsia",
    ColorBlindnessType.PROTANOMALY: "Protanomaly",
    ColorBlindnessType.DEUTERANOMALY: "Deuteranomaly",
    ColorBlindnessType.TRITANOMALY: "Tritanomaly",
    ColorBlindnessType.ACHROMATOMALY: "Achromatomaly",
}

TYPE_DESCRIPTIONS = {
    ColorBlindnessType.PROTANOPIA: "Red-blind: no functioning long-wavelength cones",
    ColorBlindnessType.DEUTERANOPIA: "Green-blind: no functioning medium-wavelength cones",
    ColorBlindnessType.TRITANOPIA: "Blue-blind: no functioning short-wavelength cones",
    ColorBlindnessType.ACHROMATOPSIA: "Total color blindness: only brightness is perceived",
    ColorBlindnessType.PROTANOMALY: "Red-weak: reduced sensitivity to red light",
    ColorBlindnessType.DEUTERANOMALY: "Green-weak: reduced sensitivity to green light",
    ColorBlindnessType.TRITANOMALY: "Blue-weak: reduced sensitivity to blue light",
    ColorBlindnessType.ACHROMATOMALY: "Partial color blindness: strongly muted colors",
}

# Anomaly -> (dichromacy it weakens toward, default severity)
ANOMALIES = {
    ColorBlindnessType.PROTANOMALY: (ColorBlindnessType.PROTANOPIA, c.SEVERITY_RED_GREEN_WEAK),
    ColorBlindnessType.DEUTERANOMALY: (ColorBlindnessType.DEUTERANOPIA, c.SEVERITY_RED_GREEN_WEAK),
    ColorBlindnessType.TRITANOMALY: (ColorBlindnessType.TRITANOPIA, c.SEVERITY_BLUE_WEAK),
    ColorBlindnessType.ACHROMATOMALY: (ColorBlindnessType.ACHROMATOPSIA, c.SEVERITY_BLUE_CONE),
}


def _apply_matrix(rgb: RGB, matrix) -> RGB:
    """Apply a 3x3 matrix to the linearized channels and re-encode to sRGB."""
    r_lin = _channel_to_linear(rgb[0])
    g_lin = _channel_to_linear(rgb[1])
    b_lin = _channel_to_linear(rgb[2])

    rr = r_lin * matrix[0][0] + g_lin * matrix[0][1] + b_lin * matrix[0][2]
    gg = r_lin * matrix[1][0] + g_lin * matrix[1][1] + b_lin * matrix[1][2]
    bb = r_lin * matrix[2][0] + g_lin * matrix[2][1] + b_lin * matrix[2][2]

    return RGB(_linear_to_channel(rr), _linear_to_channel(gg), _linear_to_channel(bb), getattr(rgb, "alpha", None))


def _blend(original: RGB, simulated: RGB, severity: float) -> RGB:
    """Per-channel linear interpolation; 0 keeps the original, 1 the simulation."""
    f = clamp(severity, c.SEVERITY_MIN, c.SEVERITY_MAX)
    if f == c.SEVERITY_MAX:
        return simulated
    return RGB(
        _to_channel(original[0] + (simulated[0] - original[0]) * f),
        _to_channel(original[1] + (simulated[1] - original[1]) * f),
        _to_channel(original[2] + (simulated[2] - original[2]) * f),
        simulated.alpha,
    )


def simulate_protanopia(rgb: RGB) -> RGB:
    return _apply_matrix(rgb, c.CB_MATRICES["protanopia"])


def simulate_deuteranopia(rgb: RGB) -> RGB:
    return _apply_matrix(rgb, c.CB_MATRICES["deuteranopia"])


def simulate_tritanopia(rgb: RGB) -> RGB:
    return _apply_matrix(rgb, c.CB_MATRICES["tritanopia"])


def simulate_achromatopsia(rgb: RGB) -> RGB:
    """Rec.601 luma on every channel, so the result is always gray."""
    return _apply_matrix(rgb, c.CB_MATRICES["achromatopsia"])


def simulate_protanomaly(rgb: RGB, severity: float = c.SEVERITY_RED_GREEN_WEAK) -> RGB:
    return _blend(rgb, simulate_protanopia(rgb), severity)


def simulate_deuteranomaly(rgb: RGB, severity: float = c.SEVERITY_RED_GREEN_WEAK) -> RGB:
    return _blend(rgb, simulate_deuteranopia(rgb), severity)


def simulate_tritanomaly(rgb: RGB, severity: float = c.SEVERITY_BLUE_WEAK) -> RGB:
    return _blend(rgb, simulate_tritanopia(rgb), severity)


def simulate_achromatomaly(rgb: RGB, severity: float = c.SEVERITY_BLUE_CONE) -> RGB:
    return _blend(rgb, simulate_achromatopsia(rgb), severity)


DICHROMATS = {
    ColorBlindnessType.PROTANOPIA: simulate_protanopia,
    ColorBlindnessType.DEUTERANOPIA: simulate_deuteranopia,
    ColorBlindnessType.TRITANOPIA: simulate_tritanopia,
    ColorBlindnessType.ACHROMATOPSIA: simulate_achromatopsia,
}


def simulate_color_blindness(rgb: RGB, cb_type: ColorBlindnessType, severity: float = 1.0) -> RGB:
    """
    Simulate how `rgb` appears under a color vision deficiency.

    For every type, `severity` blends between the original (0) and the full
    dichromat simulation (1); anomalies share the matrix of the dichromacy
    they weaken toward. Out-of-range severities are clamped to [0, 1].
    """
    if cb_type in DICHROMATS:
        full = DICHROMATS[cb_type](rgb)
    else:
        full = DICHROMATS[ANOMALIES[cb_type][0]](rgb)
    return _blend(rgb, full, severity)


def default_severity(cb_type: ColorBlindnessType) -> float:
    if cb_type in ANOMALIES:
        return ANOMALIES[cb_type][1]
    return c.SEVERITY_MAX


def simulate_all_types(rgb: RGB) -> List[SimulationResult]:
    """
    Every deficiency in enumeration order: dichromacies at full severity,
    anomalies at their typical severity.
    """
    results = []
    for cb_type in ColorBlindnessType:
        severity = default_severity(cb_type)
        results.append(SimulationResult(
            type=cb_type,
            original=rgb,
            simulated=simulate_color_blindness(rgb, cb_type, severity),
            severity=severity,
        ))
    return results


def are_colors_distinguishable(
    color1: RGB,
    color2: RGB,
    cb_type: ColorBlindnessType,
    threshold: float = c.DISTINGUISHABLE_RGB_THRESHOLD,
) -> bool:
    """Euclidean RGB distance of both simulations (typical severity) against `threshold`."""
    severity = default_severity(cb_type)
    sim1 = simulate_color_blindness(color1, cb_type, severity)
    sim2 = simulate_color_blindness(color2, cb_type, severity)
    return delta_e_euclidean_rgb(sim1, sim2) >= threshold


def get_type_name(cb_type: ColorBlindnessType) -> str:
    return TYPE_NAMES[cb_type]


def get_type_description(cb_type: ColorBlindnessType) -> str:
    return TYPE_DESCRIPTIONS[cb_type]
