#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/palette/renderer.py

from typing import List, Optional, Tuple

from contrastlab.core import config as c
from contrastlab.core.types import RGB
from contrastlab.shared.formatting import format_ratio
from contrastlab.shared.preview import print_color_block


def render_palette(
    bg: RGB,
    rows: List[Tuple[RGB, RGB, float, float]],
    complement: Optional[RGB] = None,
) -> None:
    """Prints each palette color next to its optimized counterpart."""
    arrow = f"{c.MSG_BOLD_COLORS['info']}->{c.RESET}"

    print()
    print_color_block(bg, f"{c.BOLD_WHITE}background{c.RESET}")
    print()

    for original, adjusted, old_ratio, new_ratio in rows:
        print_color_block(original, f"{c.MSG_BOLD_COLORS['dim']}{format_ratio(old_ratio)}{c.RESET}", end="")
        print(f"  {arrow}")
        status = "kept" if original == adjusted else "adjusted"
        print_color_block(adjusted, f"{c.MSG_BOLD_COLORS['info']}{status}{c.RESET}", end="")
        print(f"  {c.BOLD_WHITE}{format_ratio(new_ratio)}{c.RESET}")

    if complement is not None:
        print()
        print_color_block(complement, f"{c.MSG_BOLD_COLORS['success']}complementary{c.RESET}")

    print()
