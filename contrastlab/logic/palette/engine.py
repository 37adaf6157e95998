#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/palette/engine.py

import argparse
import sys

from contrastlab.core.contrast import calculate_wcag_contrast
from contrastlab.core.conversions import hex_to_rgb, rgb_to_hex
from contrastlab.core.optimizer import find_complementary_accessible_color, optimize_palette
from contrastlab.shared.logger import log
from .renderer import render_palette


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the palette command"""
    if not args.hex:
        log("error", "at least one -H/--hex color is required")
        sys.exit(2)

    colors = [hex_to_rgb(h) for h in args.hex]
    bg = hex_to_rgb(args.background)
    ratio = args.ratio

    optimized = optimize_palette(colors, bg, ratio)

    rows = []
    for original, adjusted in optimized.items():
        new_ratio = calculate_wcag_contrast(adjusted, bg)
        if new_ratio < ratio:
            log("warning", f"{rgb_to_hex(original)} has no accessible variant against {rgb_to_hex(bg)}")
        rows.append((original, adjusted, calculate_wcag_contrast(original, bg), new_ratio))

    complement = None
    if len(colors) >= 2:
        complement = find_complementary_accessible_color(colors[0], colors[1], ratio)
        if complement is None:
            log("warning", f"no neutral color reaches {ratio:.2f}:1 against both "
                           f"{rgb_to_hex(colors[0])} and {rgb_to_hex(colors[1])}")

    render_palette(bg, rows, complement)
