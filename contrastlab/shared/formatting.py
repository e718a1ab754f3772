#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/formatting.py

from typing import Optional


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}"


def format_percent(value: Optional[float]) -> str:
    if value is None:
        return "n/a"
    return f"{value:.1f}%"


def format_pass_fail(passed: bool) -> str:
    return "Pass" if passed else "Fail"
