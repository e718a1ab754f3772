#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/parsing.py

import math
import re
from typing import Optional

from .conversions import oklch_to_rgb
from .models import RGB

# oklch(L C H) with an optional "/ alpha" tail; alpha is ignored
OKLCH_REGEX = re.compile(
    r"oklch\(\s*([\d.]+)\s+([\d.]+)\s+([\d.]+)(?:\s*/\s*[\d.%]+)?\s*\)"
)
HEX_DIGITS_REGEX = re.compile(r"[0-9A-Fa-f]+")


def parse_oklch(value: str) -> Optional[RGB]:
    """Parse an ``oklch(L C H[ / A])`` string into 0-255 channels."""
    match = OKLCH_REGEX.search(value)
    if not match:
        return None
    try:
        L, chroma, hue = (float(g) for g in match.groups())
    except ValueError:
        # e.g. "0.5.1" satisfies [\d.]+ but is not a number
        return None
    if not all(math.isfinite(v) for v in (L, chroma, hue)):
        # overlong digit runs overflow to inf
        return None
    return oklch_to_rgb(L, chroma, hue)


def parse_hex(value: str) -> Optional[RGB]:
    """Parse ``#RGB`` / ``#RRGGBB`` (hash optional) into integer channels."""
    h = value.replace("#", "", 1)
    if len(h) not in (3, 6) or not HEX_DIGITS_REGEX.fullmatch(h):
        return None
    if len(h) == 3:
        # e.g., 'abc' becomes 'aabbcc'
        h = "".join(ch * 2 for ch in h)
    return RGB(*(int(h[i : i + 2], 16) for i in (0, 2, 4)))


def parse_color(value) -> Optional[RGB]:
    """
    Single entry point for theme color strings.

    Dispatches on prefix: ``oklch`` -> :func:`parse_oklch`, ``#`` ->
    :func:`parse_hex`. Anything else, including non-string values, is
    unparseable and yields ``None``.
    """
    if not isinstance(value, str):
        return None
    if value.startswith("oklch"):
        return parse_oklch(value)
    if value.startswith("#"):
        return parse_hex(value)
    return None
