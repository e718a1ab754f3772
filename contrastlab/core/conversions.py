#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/conversions.py

import math
from typing import Tuple

from . import config as c
from .models import RGB
from contrastlab.shared.clamping import _clamp01


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize an 8-bit sRGB component (WCAG 2.1 transfer function)."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH to OKLab."""
    a = chroma * math.cos(hue * math.pi / 180.0)
    b = chroma * math.sin(hue * math.pi / 180.0)
    return L, a, b


def oklab_to_linear_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to linear-light sRGB components (unclamped)."""
    l_ = L + c.OKLAB_TO_LMS_PRIME_LA * a + c.OKLAB_TO_LMS_PRIME_LB * b
    m_ = L + c.OKLAB_TO_LMS_PRIME_MA * a + c.OKLAB_TO_LMS_PRIME_MB * b
    s_ = L + c.OKLAB_TO_LMS_PRIME_SA * a + c.OKLAB_TO_LMS_PRIME_SB * b

    l_lin = l_ * l_ * l_
    m_lin = m_ * m_ * m_
    s_lin = s_ * s_ * s_

    r = c.OKLAB_LMS_TO_LINEAR_RL * l_lin + c.OKLAB_LMS_TO_LINEAR_RM * m_lin + c.OKLAB_LMS_TO_LINEAR_RS * s_lin
    g = c.OKLAB_LMS_TO_LINEAR_GL * l_lin + c.OKLAB_LMS_TO_LINEAR_GM * m_lin + c.OKLAB_LMS_TO_LINEAR_GS * s_lin
    bl = c.OKLAB_LMS_TO_LINEAR_BL * l_lin + c.OKLAB_LMS_TO_LINEAR_BM * m_lin + c.OKLAB_LMS_TO_LINEAR_BS * s_lin
    return r, g, bl


def oklch_to_rgb(L: float, chroma: float, hue: float) -> RGB:
    """
    OKLCH to 0-255 channels.

    The linear components are scaled to bytes directly; no sRGB gamma
    encoding is applied at this stage.
    """
    r, g, b = oklab_to_linear_rgb(*oklch_to_oklab(L, chroma, hue))
    return RGB(_clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX)
