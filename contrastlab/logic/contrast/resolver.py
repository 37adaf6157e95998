#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/resolver.py

import argparse
import random
import sys
from typing import Tuple

from contrastlab.core import config as c
from contrastlab.core.conversions import hex_to_rgb
from contrastlab.core.types import RGB
from contrastlab.shared.logger import log


def _random_rgb() -> RGB:
    return hex_to_rgb(f"{random.randint(0, c.MAX_DEC):06X}")


def resolve_pair_input(args: argparse.Namespace) -> Tuple[RGB, RGB]:
    """Resolve raw CLI input into a foreground/background pair."""
    if args.seed is not None:
        random.seed(args.seed)

    if args.random:
        fg = hex_to_rgb(args.foreground) if args.foreground else _random_rgb()
        bg = hex_to_rgb(args.background) if args.background else _random_rgb()
        return fg, bg

    if not args.foreground or not args.background:
        log("error", "both -f/--foreground and -b/--background are required (or use -r/--random)")
        log("info", "use 'contrastlab --help' for more information")
        sys.exit(2)

    return hex_to_rgb(args.foreground), hex_to_rgb(args.background)
