#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/resolver.py

import sys

from contrastlab.core import conversions as conv
from contrastlab.core.errors import ColorFormatError
from contrastlab.core.types import RGB
from contrastlab.shared.logger import log
from contrastlab.shared.parser import STRING_PARSERS

TO_RGB = {
    "rgb": lambda v: v,
    "hsl": conv.hsl_to_rgb,
    "xyz": conv.xyz_to_rgb,
    "lab": conv.lab_to_rgb,
    "lch": conv.lch_to_rgb,
}


def parse_value(val: str, fmt: str) -> RGB:
    """Resolves an input string of the given format into RGB. Raises ColorFormatError."""
    if fmt == "hex":
        return conv.hex_to_rgb(val.strip())
    if fmt not in STRING_PARSERS:
        raise ColorFormatError(f"unsupported format '{fmt}'")
    return TO_RGB[fmt](STRING_PARSERS[fmt](val))


def resolve_convert_input(val: str, fmt: str) -> RGB:
    try:
        return parse_value(val, fmt)
    except ColorFormatError as e:
        log("error", str(e))
        sys.exit(2)
