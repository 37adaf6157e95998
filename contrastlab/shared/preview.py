#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/preview.py

import re

from contrastlab.core import config as c
from contrastlab.core.types import RGB

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')

LABEL_WIDTH = 18


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def print_color_block(rgb: RGB, title: str = "color", end: str = "\n") -> None:
    """Print a titled 24-bit swatch followed by the color's hex code."""
    r, g, b = rgb[0], rgb[1], rgb[2]
    padding = " " * max(0, LABEL_WIDTH - get_visible_len(title))

    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{r};{g};{b}m                {c.RESET}  "
        f"{c.BOLD_WHITE}#{r:02X}{g:02X}{b:02X}{c.RESET}",
        end=end,
    )


def print_pair_block(fg: RGB, bg: RGB, title: str = "sample", end: str = "\n") -> None:
    """Print sample text in the foreground color over the background color."""
    padding = " " * max(0, LABEL_WIDTH - get_visible_len(title))

    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{bg[0]};{bg[1]};{bg[2]}m\033[38;2;{fg[0]};{fg[1]};{fg[2]}m  Sample Text   {c.RESET}",
        end=end,
    )
