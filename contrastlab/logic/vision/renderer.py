#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/vision/renderer.py

from typing import List

from contrastlab.core import config as c
from contrastlab.core.types import RGB, SimulationResult
from contrastlab.core.vision import get_type_name
from contrastlab.shared.preview import print_color_block


def render_vision_info(base: RGB, title: str, simulations: List[SimulationResult]) -> None:
    print()
    print_color_block(base, f"{c.BOLD_WHITE}{title}{c.RESET}")

    if simulations:
        print()

    for sim in simulations:
        perc_str = f"{round(sim.severity * 100)}%"
        name = get_type_name(sim.type).lower()
        label = f"{c.MSG_BOLD_COLORS['info']}{name:<13}{perc_str:>5}{c.RESET}"
        print_color_block(sim.simulated, label)

    print()
