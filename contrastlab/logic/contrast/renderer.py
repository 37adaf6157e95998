#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/renderer.py

from contrastlab.core import config as c
from contrastlab.core.types import ContrastResult, RGB
from contrastlab.shared.formatting import format_flag, format_ratio
from contrastlab.shared.preview import print_color_block, print_pair_block


def _label(text: str) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{text}{c.RESET}"


def _row(label: str, value: str) -> None:
    print(f"{_label(label)}{' ' * max(0, 18 - len(label))}{c.BOLD_WHITE}: {value}{c.RESET}")


def _flag(passed: bool) -> str:
    color = c.MSG_BOLD_COLORS['success'] if passed else c.MSG_BOLD_COLORS['error']
    return f"{color}{format_flag(passed)}{c.RESET}"


def render_contrast_info(fg: RGB, bg: RGB, result: ContrastResult, grade: str, score: int) -> None:
    """Strictly prints the contrast report. Data must be pre-calculated by the engine."""
    print()
    print_color_block(fg, f"{c.BOLD_WHITE}foreground{c.RESET}")
    print_color_block(bg, f"{c.BOLD_WHITE}background{c.RESET}")
    print_pair_block(fg, bg, f"{c.BOLD_WHITE}preview{c.RESET}")

    print()
    _row("ratio", format_ratio(result.ratio))
    _row("grade", grade)
    _row("score", f"{score} / 100")
    _row("luminance", f"{result.luminance.foreground:.4f} / {result.luminance.background:.4f}")

    print()
    wcag = result.wcag
    print(f"{_label('wcag')}")
    print(f"  AA normal text  : {_flag(wcag.normal_text_aa)}")
    print(f"  AAA normal text : {_flag(wcag.normal_text_aaa)}")
    print(f"  AA large text   : {_flag(wcag.large_text_aa)}")
    print(f"  AAA large text  : {_flag(wcag.large_text_aaa)}")
    print(f"  UI components   : {_flag(wcag.ui_components)}")

    print()
    apca = result.apca
    font = f"{apca.min_font_size}px" if apca.min_font_size is not None else "not readable"
    print(f"{_label('apca')}")
    print(f"  Lc              : {apca.score:.1f}")
    print(f"  body text       : {_flag(apca.compliant)}")
    print(f"  min font size   : {font}")
    print()
