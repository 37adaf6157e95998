#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/formatting.py


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h:.2f}deg, {s:.2f}%, {l:.2f}%)"
    elif fmt == 'xyz':
        return f"xyz({args[0]:.4f}, {args[1]:.4f}, {args[2]:.4f})"
    elif fmt == 'lab':
        return f"lab({args[0]:.4f} {args[1]:.4f} {args[2]:.4f})"
    elif fmt == 'lch':
        return f"lch({args[0]:.4f} {args[1]:.4f} {args[2]:.4f}deg)"

    return ""


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"


def format_flag(passed: bool) -> str:
    return "Pass" if passed else "Fail"
