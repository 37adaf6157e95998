#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/engine.py

import argparse
import random
import sys

from contrastlab.core import config as c
from contrastlab.core import conversions as conv
from contrastlab.shared.logger import log
from .resolver import resolve_convert_input
from .renderer import render_convert_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color conversion"""
    for fmt in (args.from_format, args.to_format):
        if fmt not in c.FORMAT_KEYS:
            log("error", f"invalid format specified: '{fmt}'")
            log("info", "use 'contrastlab convert -h' to see all formats")
            sys.exit(2)

    if args.seed is not None:
        random.seed(args.seed)

    if args.random:
        rgb = conv.hex_to_rgb(f"{random.randint(0, c.MAX_DEC):06X}")
    else:
        rgb = resolve_convert_input(args.value, args.from_format)

    out = render_convert_info(rgb, args.to_format)

    if args.verbose:
        src = render_convert_info(rgb, args.from_format)
        print(f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}")
    else:
        print(out)
