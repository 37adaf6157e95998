#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/errors.py


class ContrastlabError(Exception):
    """Base class for every error raised by contrastlab."""


class ColorFormatError(ContrastlabError, ValueError):
    """Raised when a value cannot be interpreted as any supported color."""


class InvalidColorError(ColorFormatError):
    """Raised when a hex string is not a 3- or 6-digit hex color."""

    def __init__(self, value, message: str = None):
        self.value = value
        super().__init__(message or f"invalid hex color: {value!r}")
