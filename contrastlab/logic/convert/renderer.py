#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/renderer.py

from contrastlab.core import config as c
from contrastlab.core import conversions as conv
from contrastlab.core.types import RGB
from contrastlab.shared.formatting import format_colorspace

FROM_RGB = {
    "rgb": lambda rgb: (rgb.r, rgb.g, rgb.b),
    "hsl": conv.rgb_to_hsl,
    "xyz": conv.rgb_to_xyz,
    "lab": conv.rgb_to_lab,
    "lch": conv.rgb_to_lch,
}


def render_convert_info(rgb: RGB, fmt: str) -> str:
    """Composes RGB into a formatted output string."""
    def bold(t): return f"{c.BOLD_WHITE}{t}{c.RESET}"

    if fmt == "hex":
        return bold(conv.rgb_to_hex(rgb))
    return bold(format_colorspace(fmt, *FROM_RGB[fmt](rgb))) if fmt in FROM_RGB else ""
