#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/main.py

import argparse
import sys

from contrastlab import __version__
from contrastlab.logic.contrast import engine
from contrastlab.subcommands.command_registry import SUBCOMMANDS
from contrastlab.shared.logger import log, ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS
from contrastlab.shared.truecolor import ensure_truecolor


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main contrast command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab",
        description="contrastlab: color contrast and accessibility toolkit",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"contrastlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    pair_group = parser.add_argument_group("color pair")
    pair_group.add_argument(
        "-f",
        "--foreground",
        type=INPUT_HANDLERS["hex"],
        help="foreground (text) hex code, 3 or 6 digits",
    )
    pair_group.add_argument(
        "-b",
        "--background",
        type=INPUT_HANDLERS["hex"],
        help="background hex code, 3 or 6 digits",
    )
    pair_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="use random colors for any missing side of the pair",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the contrast report as JSON",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_contrast_command(args: argparse.Namespace) -> None:
    """Entry point for the core contrast command."""
    parser = get_contrast_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser")
            getter().print_help()
        sys.exit(0)

    # Routing validation (a command passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    engine.run(args, parser)


def main() -> None:
    """Main entry point for contrastlab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_contrast_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_contrast_command(args)


if __name__ == "__main__":
    main()
