#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/suggest/renderer.py

from typing import List

from contrastlab.core import config as c
from contrastlab.core.types import ColorSuggestion, RGB
from contrastlab.shared.formatting import format_ratio
from contrastlab.shared.preview import print_color_block


def render_suggestions(fg: RGB, bg: RGB, ratio: float, suggestions: List[ColorSuggestion]) -> None:
    print()
    print_color_block(fg, f"{c.BOLD_WHITE}foreground{c.RESET}", end="")
    print(f"  {c.MSG_BOLD_COLORS['dim']}{format_ratio(ratio)}{c.RESET}")
    print_color_block(bg, f"{c.BOLD_WHITE}background{c.RESET}")
    print()

    for i, suggestion in enumerate(suggestions, start=1):
        label = f"{c.MSG_BOLD_COLORS['info']}{i:>2}. {suggestion.modification.value}{c.RESET}"
        print_color_block(suggestion.color, label, end="")
        print(
            f"  {c.BOLD_WHITE}{format_ratio(suggestion.contrast.ratio)}{c.RESET}"
            f"  {c.MSG_BOLD_COLORS['dim']}ΔE {suggestion.distance:.2f}{c.RESET}"
        )

    print()
