#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/types.py

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional

from . import config as c


class RGB(NamedTuple):
    """8-bit sRGB color. Channels are integers in [0, 255]."""
    r: int
    g: int
    b: int
    alpha: Optional[float] = None


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent."""
    h: float
    s: float
    l: float


class LAB(NamedTuple):
    l: float
    a: float
    b: float


class LCH(NamedTuple):
    l: float
    c: float
    h: float


class XYZ(NamedTuple):
    """CIE XYZ referenced to D65 on a 0-100 scale."""
    x: float
    y: float
    z: float


class WCAGConformance(Enum):
    NORMAL_TEXT_AA = "normal-text-aa"
    NORMAL_TEXT_AAA = "normal-text-aaa"
    LARGE_TEXT_AA = "large-text-aa"
    LARGE_TEXT_AAA = "large-text-aaa"
    UI_COMPONENTS = "ui-components"


class WCAGLevel(Enum):
    AA = "AA"
    AAA = "AAA"


class ColorBlindnessType(Enum):
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"
    PROTANOMALY = "protanomaly"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOMALY = "tritanomaly"
    ACHROMATOMALY = "achromatomaly"


class Modification(Enum):
    LIGHTENED = "lightened"
    DARKENED = "darkened"
    HUE_SHIFTED = "hue-shifted"
    SATURATED = "saturated"
    DESATURATED = "desaturated"


def _rgb_dict(color: RGB) -> Dict[str, Any]:
    data = {"r": color.r, "g": color.g, "b": color.b}
    if color.alpha is not None:
        data["alpha"] = color.alpha
    return data


@dataclass(frozen=True)
class WCAGCompliance:
    normal_text_aa: bool
    normal_text_aaa: bool
    large_text_aa: bool
    large_text_aaa: bool
    ui_components: bool


@dataclass(frozen=True)
class APCAResult:
    score: float
    compliant: bool
    min_font_size: Optional[int] = None


@dataclass(frozen=True)
class LuminancePair:
    foreground: float
    background: float


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    wcag: WCAGCompliance
    apca: APCAResult
    luminance: LuminancePair

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ratio": self.ratio,
            "wcag": {
                "normalTextAA": self.wcag.normal_text_aa,
                "normalTextAAA": self.wcag.normal_text_aaa,
                "largeTextAA": self.wcag.large_text_aa,
                "largeTextAAA": self.wcag.large_text_aaa,
                "uiComponents": self.wcag.ui_components,
            },
            "apca": {
                "score": self.apca.score,
                "compliant": self.apca.compliant,
                "minFontSize": self.apca.min_font_size,
            },
            "luminance": {
                "foreground": self.luminance.foreground,
                "background": self.luminance.background,
            },
        }


@dataclass(frozen=True)
class ColorSuggestion:
    color: RGB
    hex: str
    contrast: ContrastResult
    distance: float
    modification: Modification

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": _rgb_dict(self.color),
            "hex": self.hex,
            "contrast": self.contrast.to_dict(),
            "distance": self.distance,
            "modification": self.modification.value,
        }


@dataclass(frozen=True)
class SimulationResult:
    type: ColorBlindnessType
    original: RGB
    simulated: RGB
    severity: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "original": _rgb_dict(self.original),
            "simulated": _rgb_dict(self.simulated),
            "severity": self.severity,
        }


@dataclass(frozen=True)
class OptimizationOptions:
    """
    Settings of the accessible color search.

    target           conformance level whose minimum ratio must be met
    max_distance     largest ΔE2000 from the original color, None for unbounded
    preserve_hue     also sweep LCH lightness, hue and chroma
    suggestion_count maximum number of suggestions returned
    """
    target: WCAGConformance = WCAGConformance.NORMAL_TEXT_AA
    max_distance: Optional[float] = None
    preserve_hue: bool = True
    suggestion_count: int = c.DEFAULT_SUGGESTION_COUNT

    def __post_init__(self):
        if not isinstance(self.target, WCAGConformance):
            raise ValueError(f"unknown conformance target: {self.target!r}")
        if self.max_distance is not None and self.max_distance < 0:
            raise ValueError("max_distance must be non-negative")
        if self.suggestion_count < 1:
            raise ValueError("suggestion_count must be at least 1")
