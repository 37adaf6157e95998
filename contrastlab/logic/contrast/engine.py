#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/engine.py

import argparse
import json

from contrastlab.core.contrast import calculate_contrast, get_contrast_grade, get_contrast_score
from contrastlab.core.conversions import rgb_to_hex
from .resolver import resolve_pair_input
from .renderer import render_contrast_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the contrast command"""
    fg, bg = resolve_pair_input(args)
    result = calculate_contrast(fg, bg)
    grade = get_contrast_grade(result.ratio)
    score = get_contrast_score(result.ratio)

    if getattr(args, "json", False):
        data = {
            "foreground": rgb_to_hex(fg),
            "background": rgb_to_hex(bg),
            "grade": grade,
            "score": score,
        }
        data.update(result.to_dict())
        print(json.dumps(data, indent=2))
        return

    render_contrast_info(fg, bg, result, grade, score)
