#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/suggest/engine.py

import argparse
import json
import sys

from contrastlab.core.contrast import calculate_contrast
from contrastlab.core.conversions import hex_to_rgb
from contrastlab.core.optimizer import generate_color_suggestions
from contrastlab.core.types import OptimizationOptions, WCAGConformance
from contrastlab.shared.logger import log
from .renderer import render_suggestions


def resolve_target(value: str) -> WCAGConformance:
    """Map a CLI target name such as 'normal-text-aa' to its conformance level."""
    try:
        return WCAGConformance(value)
    except ValueError:
        valid = ", ".join(t.value for t in WCAGConformance)
        log("error", f"unknown target '{value}' (choose from: {valid})")
        sys.exit(2)


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the suggest command"""
    fg = hex_to_rgb(args.foreground)
    bg = hex_to_rgb(args.background)

    options = OptimizationOptions(
        target=resolve_target(args.target),
        max_distance=args.max_distance,
        preserve_hue=not args.hue_free,
        suggestion_count=args.count,
    )
    suggestions = generate_color_suggestions(fg, bg, options)

    if args.json:
        print(json.dumps([s.to_dict() for s in suggestions], indent=2))
        return

    if not suggestions:
        log("warning", f"no accessible variant found for target '{options.target.value}'")
        return

    render_suggestions(fg, bg, calculate_contrast(fg, bg).ratio, suggestions)
