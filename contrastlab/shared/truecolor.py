#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> None:
    """Advertise 24-bit color support so swatches render as exact RGB."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"
