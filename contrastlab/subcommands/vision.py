#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/vision.py

import argparse
import sys

from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS
from contrastlab.shared.truecolor import ensure_truecolor
from contrastlab.logic.vision import engine


def get_vision_parser() -> argparse.ArgumentParser:
    parser = ContrastlabArgumentParser(
        prog="contrastlab vision",
        description="contrastlab vision: simulate color vision deficiencies",
        formatter_class=argparse.RawTextHelpFormatter
    )
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-H", "--hex",
        type=INPUT_HANDLERS["hex"],
        help="base hex code"
    )
    input_group.add_argument(
        "-r", "--random",
        action="store_true",
        help="use a random base"
    )
    parser.add_argument(
        "-s", "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )
    parser.add_argument(
        "-i", "--intensity",
        type=INPUT_HANDLERS["intensity"],
        default=None,
        help="simulation severity: 0 to 100\n"
             "(default: 100 for dichromacies, typical severity for anomalies)"
    )
    simulate_group = parser.add_argument_group("simulation types")
    simulate_group.add_argument(
        '-all', '--all-simulates',
        action="store_true",
        help="show all simulation types"
    )
    simulate_group.add_argument(
        '-p', '--protanopia',
        action="store_true",
        help="simulate protanopia red-blind"
    )
    simulate_group.add_argument(
        '-d', '--deuteranopia',
        action="store_true",
        help="simulate deuteranopia green-blind"
    )
    simulate_group.add_argument(
        '-t', '--tritanopia',
        action="store_true",
        help="simulate tritanopia blue-blind"
    )
    simulate_group.add_argument(
        '-a', '--achromatopsia',
        action="store_true",
        help="simulate achromatopsia total-blind"
    )
    simulate_group.add_argument(
        '-pa', '--protanomaly',
        action="store_true",
        help="simulate protanomaly red-weak"
    )
    simulate_group.add_argument(
        '-da', '--deuteranomaly',
        action="store_true",
        help="simulate deuteranomaly green-weak"
    )
    simulate_group.add_argument(
        '-ta', '--tritanomaly',
        action="store_true",
        help="simulate tritanomaly blue-weak"
    )
    simulate_group.add_argument(
        '-aa', '--achromatomaly',
        action="store_true",
        help="simulate achromatomaly partial color blindness"
    )
    return parser


def main() -> None:
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
