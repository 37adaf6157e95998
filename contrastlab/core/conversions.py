#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/conversions.py

import functools
import math
from collections.abc import Mapping

from . import config as c
from .errors import ColorFormatError
from .types import HSL, LAB, LCH, RGB, XYZ
from contrastlab.shared.clamping import _clamp01, _to_channel, clamp
from contrastlab.shared.sanitizer import normalize_hex


# ==========================================
# Primitives
# ==========================================


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / c.DEG_180


def rad_to_deg(rad: float) -> float:
    return rad * c.DEG_180 / math.pi


def normalize_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = h % c.HUE_MAX
    # -1e-15 % 360 gives 360.0 in floating point
    return 0.0 if h >= c.HUE_MAX else h


def hex_to_rgb(hex_code: str) -> RGB:
    """Convert '#RGB' or '#RRGGBB' (hash optional) to RGB. Raises InvalidColorError."""
    h = normalize_hex(hex_code)
    return RGB(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    """Convert RGB to an uppercase '#RRGGBB' string."""
    return f"#{_to_channel(rgb[0]):02X}{_to_channel(rgb[1]):02X}{_to_channel(rgb[2]):02X}"


def srgb_to_linear(value: float) -> float:
    """Linearize a normalized sRGB component."""
    value = _clamp01(value)
    if value <= c.SRGB_TO_LINEAR_TH:
        return value / c.SRGB_SLOPE
    return ((value + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def linear_to_srgb(value: float) -> float:
    """Apply sRGB gamma to a linear component."""
    value = max(value, 0.0)
    if value <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * value
    return c.SRGB_DIVISOR * (value ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def _channel_to_linear(channel: int) -> float:
    return srgb_to_linear(channel / c.RGB_MAX)


def _linear_to_channel(value: float) -> int:
    return _to_channel(_clamp01(linear_to_srgb(value)) * c.RGB_MAX)


# ==========================================
# RGB <-> HSL
# ==========================================


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB to HSL (hue in degrees, saturation and lightness in percent)."""
    r_f, g_f, b_f = rgb[0] / c.RGB_MAX, rgb[1] / c.RGB_MAX, rgb[2] / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
        s = 0.0 if abs(denom) < c.EPS else delta / denom
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + c.DIV_2)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
        h = normalize_hue(h)
    return HSL(h, s * c.PERCENT, L * c.PERCENT)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL to RGB."""
    h = normalize_hue(hsl[0]) / c.HUE_MAX
    s = _clamp01(hsl[1] / c.PERCENT)
    L = _clamp01(hsl[2] / c.PERCENT)
    if s == 0:
        r = g = b = L
    else:
        q = L * (1 + s) if L < 0.5 else L + s - L * s
        p = 2 * L - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)
    return RGB(_to_channel(r * c.RGB_MAX), _to_channel(g * c.RGB_MAX), _to_channel(b * c.RGB_MAX))


# ==========================================
# RGB <-> XYZ <-> LAB <-> LCH
# ==========================================


def rgb_to_xyz(rgb: RGB) -> XYZ:
    """Convert RGB to CIE XYZ (D65, 0-100)."""
    r_lin = _channel_to_linear(rgb[0])
    g_lin = _channel_to_linear(rgb[1])
    b_lin = _channel_to_linear(rgb[2])
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return XYZ(x * c.XYZ_SCALING, y * c.XYZ_SCALING, z * c.XYZ_SCALING)


def xyz_to_rgb(xyz: XYZ) -> RGB:
    """Convert CIE XYZ to RGB, clipping out-of-gamut channels."""
    x_n, y_n, z_n = xyz[0] / c.XYZ_SCALING, xyz[1] / c.XYZ_SCALING, xyz[2] / c.XYZ_SCALING
    r_lin = x_n * c.M_XYZ_SRGB_R[0] + y_n * c.M_XYZ_SRGB_R[1] + z_n * c.M_XYZ_SRGB_R[2]
    g_lin = x_n * c.M_XYZ_SRGB_G[0] + y_n * c.M_XYZ_SRGB_G[1] + z_n * c.M_XYZ_SRGB_G[2]
    b_lin = x_n * c.M_XYZ_SRGB_B[0] + y_n * c.M_XYZ_SRGB_B[1] + z_n * c.M_XYZ_SRGB_B[2]
    return RGB(_linear_to_channel(r_lin), _linear_to_channel(g_lin), _linear_to_channel(b_lin))


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t ** c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    return t ** 3 if t > c.LAB_INV_THR else (t - c.LAB_OFFSET) / c.LAB_K


def xyz_to_lab(xyz: XYZ) -> LAB:
    """Convert XYZ to CIE LAB."""
    x_r = _xyz_f(xyz[0] / c.D65_X)
    y_r = _xyz_f(xyz[1] / c.D65_Y)
    z_r = _xyz_f(xyz[2] / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return LAB(L, a, b)


def lab_to_xyz(lab: LAB) -> XYZ:
    """Convert LAB to CIE XYZ."""
    L, a, b = lab
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    return XYZ(_xyz_f_inv(x_r) * c.D65_X, _xyz_f_inv(y_r) * c.D65_Y, _xyz_f_inv(z_r) * c.D65_Z)


def lab_to_lch(lab: LAB) -> LCH:
    """Convert LAB to LCH."""
    L, a, b = lab
    chroma = math.hypot(a, b)
    hue = normalize_hue(rad_to_deg(math.atan2(b, a)))
    return LCH(L, chroma, hue)


def lch_to_lab(lch: LCH) -> LAB:
    """Convert LCH to LAB."""
    L, chroma, hue = lch
    return LAB(L, chroma * math.cos(deg_to_rad(hue)), chroma * math.sin(deg_to_rad(hue)))


def rgb_to_lab(rgb: RGB) -> LAB:
    """Direct RGB to LAB conversion."""
    return xyz_to_lab(rgb_to_xyz(rgb))


def lab_to_rgb(lab: LAB) -> RGB:
    """Direct LAB to RGB conversion."""
    return xyz_to_rgb(lab_to_xyz(lab))


def rgb_to_lch(rgb: RGB) -> LCH:
    """Direct RGB to LCH conversion."""
    return lab_to_lch(rgb_to_lab(rgb))


def lch_to_rgb(lch: LCH) -> RGB:
    """Direct LCH to RGB conversion."""
    return lab_to_rgb(lch_to_lab(lch))


# ==========================================
# HSL Adjustments
# ==========================================


def _adjust_hsl(rgb: RGB, dh: float = 0.0, ds: float = 0.0, dl: float = 0.0) -> RGB:
    h, s, L = rgb_to_hsl(rgb)
    out = hsl_to_rgb(HSL(
        normalize_hue(h + dh),
        clamp(s + ds, 0.0, c.PERCENT),
        clamp(L + dl, 0.0, c.PERCENT),
    ))
    return out._replace(alpha=rgb.alpha) if isinstance(rgb, RGB) else out


def lighten(rgb: RGB, amount: float) -> RGB:
    """Raise HSL lightness by `amount` percentage points."""
    return _adjust_hsl(rgb, dl=amount)


def darken(rgb: RGB, amount: float) -> RGB:
    """Lower HSL lightness by `amount` percentage points."""
    return _adjust_hsl(rgb, dl=-amount)


def saturate(rgb: RGB, amount: float) -> RGB:
    """Raise HSL saturation by `amount` percentage points."""
    return _adjust_hsl(rgb, ds=amount)


def desaturate(rgb: RGB, amount: float) -> RGB:
    """Lower HSL saturation by `amount` percentage points."""
    return _adjust_hsl(rgb, ds=-amount)


def rotate_hue(rgb: RGB, degrees: float) -> RGB:
    """Rotate the HSL hue by `degrees`."""
    return _adjust_hsl(rgb, dh=degrees)


# ==========================================
# Shape Dispatch
# ==========================================

_SHAPES = {
    frozenset("rgb"): lambda m: RGB(_to_channel(m["r"]), _to_channel(m["g"]), _to_channel(m["b"])),
    frozenset(("r", "g", "b", "alpha")): lambda m: RGB(
        _to_channel(m["r"]), _to_channel(m["g"]), _to_channel(m["b"]), m["alpha"]
    ),
    frozenset("hsl"): lambda m: hsl_to_rgb(HSL(m["h"], m["s"], m["l"])),
    frozenset("lab"): lambda m: lab_to_rgb(LAB(m["l"], m["a"], m["b"])),
    frozenset("lch"): lambda m: lch_to_rgb(LCH(m["l"], m["c"], m["h"])),
}


def to_rgb(color) -> RGB:
    """
    Resolve any supported color value into RGB.

    Accepts RGB/HSL/LAB/LCH records, hex strings, and mappings whose keys are
    exactly one of {r,g,b}, {r,g,b,alpha}, {h,s,l}, {l,a,b} or {l,c,h}.
    """
    if isinstance(color, RGB):
        return color
    if isinstance(color, HSL):
        return hsl_to_rgb(color)
    if isinstance(color, LAB):
        return lab_to_rgb(color)
    if isinstance(color, LCH):
        return lch_to_rgb(color)
    if isinstance(color, str):
        return hex_to_rgb(color)
    if isinstance(color, Mapping):
        build = _SHAPES.get(frozenset(color.keys()))
        if build is not None:
            return build(color)
    raise ColorFormatError(f"unrecognized color format: {color!r}")


# Apply LRU caching to the pure conversion functions in this module.
# to_rgb accepts unhashable mappings and stays uncached.
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__ and _name != "to_rgb":
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
