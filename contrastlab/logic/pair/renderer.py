#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/pair/renderer.py

from typing import List

from contrastlab.core import config as c
from contrastlab.core.models import ContrastResult, RGB
from contrastlab.shared.formatting import format_pass_fail, format_ratio

LABEL_WIDTH = 18


def _label(text: str) -> str:
    padding = " " * max(0, LABEL_WIDTH - len(text))
    return f"{c.MSG_BOLD_COLORS['info']}{text}{c.RESET}{padding}{c.BOLD_WHITE}:{c.RESET}"


def _verdict(passed: bool) -> str:
    color = c.MSG_BOLD_COLORS["success"] if passed else c.MSG_BOLD_COLORS["error"]
    return f"{color}{format_pass_fail(passed)}{c.RESET}"


def _bytes(rgb: RGB) -> tuple:
    return tuple(int(round(v)) for v in rgb)


def render_sample(bg: RGB, fg: RGB, text: str = " Aa  The quick brown fox ") -> str:
    """Truecolor preview of the foreground over the background."""
    br, bg_, bb = _bytes(bg)
    fr, fg_, fb = _bytes(fg)
    return f"\033[48;2;{br};{bg_};{bb}m\033[38;2;{fr};{fg_};{fb}m{text}{c.RESET}"


def render_pair_result(result: ContrastResult, bg: RGB = None, fg: RGB = None) -> str:
    """Compose the single-pair verdict block."""
    lines: List[str] = [
        "",
        f"{c.BOLD_WHITE}{result.pair}{c.RESET}",
        "",
        f"{_label('background')}   {result.bg_color}",
        f"{_label('foreground')}   {result.fg_color}",
    ]
    if bg is not None and fg is not None:
        lines.append(f"{_label('sample')}   {render_sample(bg, fg)}")

    lines += [
        "",
        f"{_label('contrast ratio')}   {c.BOLD_WHITE}{format_ratio(result.ratio)}:1{c.RESET}",
        "",
        f"{_label('AA normal text')}   {_verdict(result.wcag_aa.normal_text)}",
        f"{_label('AA large text')}   {_verdict(result.wcag_aa.large_text)}",
        f"{_label('AA ui components')}   {_verdict(result.wcag_aa.ui_components)}",
        f"{_label('AAA normal text')}   {_verdict(result.wcag_aaa.normal_text)}",
        f"{_label('AAA large text')}   {_verdict(result.wcag_aaa.large_text)}",
        "",
    ]
    return "\n".join(lines)
