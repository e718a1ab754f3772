#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/sanitizer.py

import argparse
import re

from contrastlab.core import config as c
from contrastlab.core.parsing import parse_color


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_positive_only_int(value: str) -> int:
    """
    Extracts a strictly positive integer from a string by stripping out
    all non-numeric characters (including minus signs).
    """
    if value is None:
        return None
    digits_only = re.sub(r"[^0-9]", "", str(value))
    if not digits_only:
        return None
    return int(digits_only)


def _extract_category(value: str) -> str:
    """Trim and collapse inner whitespace, keeping case."""
    if value is None:
        return ""
    return " ".join(str(value).split())


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color(v: str) -> str:
    """Validator for theme color strings (oklch(...) or #hex)."""
    cleaned = str(v).strip()
    if parse_color(cleaned) is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid color value: '{raw}' (expected oklch(L C H) or #RGB/#RRGGBB)"
        )
    return cleaned


def handle_category_order(v: str) -> tuple:
    """Validator for a comma-separated category priority list."""
    cats = [_extract_category(part) for part in str(v).split(",")]
    cats = [cat for cat in cats if cat]
    if not cats:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid category list: '{raw}'")
    return tuple(dict.fromkeys(cats))


def handle_report_format(v: str) -> str:
    cleaned = "".join(re.findall(r"[a-z]", str(v).lower()))
    if cleaned not in c.REPORT_FORMATS:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid report format: '{raw}' (choose from {', '.join(c.REPORT_FORMATS)})"
        )
    return cleaned


def handle_positive_int(min_v: int, max_v: int):
    """
    Factory function returning a validator that specifically handles
    positive integers clamped within a given range.
    """
    def validator(v: str) -> int:
        val = _extract_positive_only_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid numeric value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "color": handle_color,
    "category_order": handle_category_order,
    "format": handle_report_format,
    "workers": handle_positive_int(1, c.MAX_WORKERS),
}
