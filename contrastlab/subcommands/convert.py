#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/convert.py

import argparse
import sys

from contrastlab.core import config as c
from contrastlab.shared.formatting import format_colorspace
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS
from contrastlab.shared.truecolor import ensure_truecolor
from contrastlab.logic.convert import engine


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab convert",
        description="contrastlab convert: convert a color value from one format to another",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    formats_list = " ".join(c.FORMAT_KEYS)
    parser.add_argument(
        "-f",
        "--from-format",
        default="hex",
        type=INPUT_HANDLERS["to_format"],
        help="the format to convert from (default: hex)\n" f"all formats: {formats_list}",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        required=True,
        type=INPUT_HANDLERS["to_format"],
        help="the format to convert to\n" f"all formats: {formats_list}",
    )

    ex_rgb = format_colorspace("rgb", 0, 0, 0)
    ex_hsl = format_colorspace("hsl", 0, 0, 0).replace("%", "%%")
    ex_xyz = format_colorspace("xyz", 0, 0, 0)
    ex_lab = format_colorspace("lab", 0, 0, 0)
    ex_lch = format_colorspace("lch", 0, 0, 0)

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-v",
        "--value",
        type=str,
        help=(
            "color value to convert must be in quotes\n"
            "examples:\n"
            '  -v "000000"\n'
            f'  -v "{ex_rgb}"\n'
            f'  -v "{ex_hsl}"\n'
            f'  -v "{ex_xyz}"\n'
            f'  -v "{ex_lab}"\n'
            f'  -v "{ex_lch}"'
        ),
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="convert a random color",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the conversion verbosely",
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
