#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/command_registry.py

from . import (
    vision,
    suggest,
    palette,
    convert,
)

SUBCOMMANDS = {
    'vision': vision,
    'suggest': suggest,
    'palette': palette,
    'convert': convert,
}
