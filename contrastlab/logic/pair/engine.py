#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/pair/engine.py

import argparse

from contrastlab.core.contrast import analyze_contrast
from contrastlab.core.parsing import parse_color
from contrastlab.shared.logger import log
from .renderer import render_pair_result


def run(args: argparse.Namespace) -> int:
    """Main execution engine for the pair command"""
    label = args.label or "background / foreground"
    result = analyze_contrast(args.background, args.foreground, label)
    if result is None:
        log("error", "could not parse one of the colors")
        return 2

    print(render_pair_result(result, parse_color(args.background), parse_color(args.foreground)))
    return 0
