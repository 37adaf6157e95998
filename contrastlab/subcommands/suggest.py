#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/suggest.py

import argparse
import sys

from contrastlab.core import config as c
from contrastlab.core.types import WCAGConformance
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS
from contrastlab.shared.truecolor import ensure_truecolor
from contrastlab.logic.suggest import engine


def get_suggest_parser() -> argparse.ArgumentParser:
    """Create argument parser for suggest command."""
    targets = " ".join(t.value for t in WCAGConformance)
    parser = ContrastlabArgumentParser(
        prog="contrastlab suggest",
        description="contrastlab suggest: find accessible variants of a foreground color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--foreground",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="foreground hex code to adjust",
    )
    parser.add_argument(
        "-b",
        "--background",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="background hex code",
    )
    parser.add_argument(
        "-t",
        "--target",
        type=INPUT_HANDLERS["target"],
        default=WCAGConformance.NORMAL_TEXT_AA.value,
        help=f"conformance target (default: {WCAGConformance.NORMAL_TEXT_AA.value})\n"
             f"all targets: {targets}",
    )
    parser.add_argument(
        "-md",
        "--max-distance",
        type=INPUT_HANDLERS["distance"],
        default=None,
        help="largest CIEDE2000 distance from the original (default: unbounded)",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=INPUT_HANDLERS["suggestion_count"],
        default=c.DEFAULT_SUGGESTION_COUNT,
        help=f"number of suggestions (default: {c.DEFAULT_SUGGESTION_COUNT}, max: {c.MAX_SUGGESTIONS})",
    )
    parser.add_argument(
        "--hue-free",
        action="store_true",
        help="only sweep HSL lightness, skip the LCH lightness/hue/chroma sweeps",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print suggestions as JSON",
    )
    return parser


def main() -> None:
    """Main entry point for suggest command."""
    parser = get_suggest_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
