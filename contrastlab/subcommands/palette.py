#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/palette.py

import argparse
import sys

from contrastlab.core import config as c
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS
from contrastlab.shared.truecolor import ensure_truecolor
from contrastlab.logic.palette import engine


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for palette command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab palette",
        description="contrastlab palette: make a palette readable on one background",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["hex"],
        help=f"use -H HEX multiple times for palette colors (max: {c.MAX_COUNT})",
    )
    parser.add_argument(
        "-b",
        "--background",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="background hex code",
    )
    parser.add_argument(
        "-R",
        "--ratio",
        type=INPUT_HANDLERS["ratio"],
        default=c.DEFAULT_TARGET_RATIO,
        help=f"target contrast ratio (default: {c.DEFAULT_TARGET_RATIO}, range: 1 to 21)",
    )
    return parser


def main() -> None:
    """Main entry point for palette command."""
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:])
    if args.hex and len(args.hex) > c.MAX_COUNT:
        parser.error(f"at most {c.MAX_COUNT} colors are allowed")
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
