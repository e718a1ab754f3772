#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_UI = 3.0                   # Minimum contrast for UI components (Level AA, 1.4.11)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
RATIO_PRECISION = 2                # Decimal places kept on reported ratios

# Standard Scaling & Mathematical Constants
RGB_MAX = 255.0                    # 8-bit color depth limit
PERCENT = 100.0                    # Ratio to percentage factor

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB

# OKLab -> LMS' matrix (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_TO_LMS_PRIME_LA = 0.3963377774   # Contribution of a to l'
OKLAB_TO_LMS_PRIME_LB = 0.2158037573   # Contribution of b to l'
OKLAB_TO_LMS_PRIME_MA = -0.1055613458  # Contribution of a to m'
OKLAB_TO_LMS_PRIME_MB = -0.0638541728  # Contribution of b to m'
OKLAB_TO_LMS_PRIME_SA = -0.0894841775  # Contribution of a to s'
OKLAB_TO_LMS_PRIME_SB = -1.291485548   # Contribution of b to s'

# LMS -> linear sRGB matrix (Source: Björn Ottosson, 2020)
OKLAB_LMS_TO_LINEAR_RL = 4.0767416621   # Contribution of L to red
OKLAB_LMS_TO_LINEAR_RM = -3.3077115913  # Contribution of M to red
OKLAB_LMS_TO_LINEAR_RS = 0.2309699292   # Contribution of S to red
OKLAB_LMS_TO_LINEAR_GL = -1.2684380046  # Contribution of L to green
OKLAB_LMS_TO_LINEAR_GM = 2.6097574011   # Contribution of M to green
OKLAB_LMS_TO_LINEAR_GS = -0.3413193965  # Contribution of S to green
OKLAB_LMS_TO_LINEAR_BL = -0.0041960863  # Contribution of L to blue
OKLAB_LMS_TO_LINEAR_BM = -0.7034186147  # Contribution of M to blue
OKLAB_LMS_TO_LINEAR_BS = 1.707614701    # Contribution of S to blue

# ==========================================
# Audit Tables
# ==========================================

MODES = ("light", "dark")

# Semantic surface/content pairs, in report order
SEMANTIC_PAIRS = (
    ("background", "foreground"),
    ("card", "card-foreground"),
    ("popover", "popover-foreground"),
    ("primary", "primary-foreground"),
    ("secondary", "secondary-foreground"),
    ("muted", "muted-foreground"),
    ("accent", "accent-foreground"),
    ("destructive", "destructive-foreground"),
    ("sidebar", "sidebar-foreground"),
    ("sidebar-primary", "sidebar-primary-foreground"),
    ("sidebar-accent", "sidebar-accent-foreground"),
)

# Signal palette checked against the two main surfaces
SIGNAL_ROLES = (
    "cyber-cyan",
    "cyber-emerald",
    "cyber-magenta",
    "cyber-amber",
    "cyber-red",
)
SIGNAL_SURFACES = ("background", "card")

DEFAULT_COLOR_PAIRS = SEMANTIC_PAIRS + tuple(
    (surface, role) for surface in SIGNAL_SURFACES for role in SIGNAL_ROLES
)

CATEGORY_ORDER = ("default", "developer", "creative", "nature", "minimal", "brand")
FALLBACK_CATEGORY = "uncategorized"

# ==========================================
# CLI UI & Report Layout
# ==========================================

REPORT_TITLE = "WCAG CONTRAST AUDIT REPORT"
REPORT_SUBTITLE = "Theme Presets"
REPORT_FORMATS = ("text", "json")

RULE_WIDTH = 80                    # Width of full-width separators
SUB_RULE_WIDTH = 60                # Width of per-theme separators
COL_THEME = 25
COL_MODE = 8
COL_COUNT = 12
COL_PAIR = 40
COL_RATIO = 8

HEAVY_RULE = "═"
LIGHT_RULE = "─"

MAX_WORKERS = 64

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"
