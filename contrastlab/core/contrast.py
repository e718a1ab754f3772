#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/contrast.py

from typing import Optional, Tuple

from . import config as c
from .luminance import get_luminance
from .models import ContrastResult, WcagAA, WcagAAA
from .parsing import parse_color


def get_contrast_ratio_rgb(c1: tuple, c2: tuple) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two specific RGB colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = get_luminance(*c1)
    y2 = get_luminance(*c2)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def get_wcag_levels(ratio: float) -> Tuple[WcagAA, WcagAAA]:
    """Classify a contrast ratio against the AA and AAA thresholds."""
    aa = WcagAA(
        normal_text=ratio >= c.WCAG_AA_NORMAL,
        large_text=ratio >= c.WCAG_AA_LARGE,
        ui_components=ratio >= c.WCAG_AA_UI,
    )
    aaa = WcagAAA(
        normal_text=ratio >= c.WCAG_AAA_NORMAL,
        large_text=ratio >= c.WCAG_AAA_LARGE,
    )
    return aa, aaa


def analyze_contrast(bg_color: str, fg_color: str, pair: str) -> Optional[ContrastResult]:
    """
    Evaluate one background/foreground pair.

    Returns None when either color cannot be parsed: the pair is not
    evaluated rather than counted as a failure. Pass/fail flags use the
    unrounded ratio; only the reported ratio is rounded.
    """
    bg = parse_color(bg_color)
    fg = parse_color(fg_color)
    if bg is None or fg is None:
        return None

    ratio = get_contrast_ratio_rgb(bg, fg)
    aa, aaa = get_wcag_levels(ratio)

    return ContrastResult(
        pair=pair,
        bg_color=bg_color,
        fg_color=fg_color,
        ratio=round(ratio, c.RATIO_PRECISION),
        wcag_aa=aa,
        wcag_aaa=aaa,
    )
