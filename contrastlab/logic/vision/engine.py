#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/vision/engine.py

import argparse
import random
from typing import List

from contrastlab.core import config as c
from contrastlab.core.conversions import hex_to_rgb
from contrastlab.core.types import ColorBlindnessType, SimulationResult
from contrastlab.core.vision import default_severity, simulate_color_blindness
from .renderer import render_vision_info


def get_simulations(rgb, keys: List[str], intensity=None) -> List[SimulationResult]:
    """Simulate the requested deficiencies; no intensity means typical severity."""
    results = []
    for cb_type in ColorBlindnessType:
        if cb_type.value not in keys:
            continue
        severity = default_severity(cb_type) if intensity is None else intensity / c.PERCENT
        results.append(SimulationResult(
            type=cb_type,
            original=rgb,
            simulated=simulate_color_blindness(rgb, cb_type, severity),
            severity=severity,
        ))
    return results


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the vision command"""
    if args.all_simulates:
        for key in c.SIMULATE_KEYS:
            setattr(args, key, True)
    if args.seed is not None:
        random.seed(args.seed)

    if args.random:
        base = hex_to_rgb(f"{random.randint(0, c.MAX_DEC):06X}")
        title = "random"
    else:
        base = hex_to_rgb(args.hex)
        title = "base color"

    keys = [key for key in c.SIMULATE_KEYS if getattr(args, key, False)]
    render_vision_info(base, title, get_simulations(base, keys, args.intensity))
