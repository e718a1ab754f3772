#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/models.py

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple


class RGB(NamedTuple):
    """sRGB channels in [0, 255]; floats for OKLCH input, ints for hex."""
    r: float
    g: float
    b: float


@dataclass(frozen=True)
class WcagAA:
    normal_text: bool
    large_text: bool
    ui_components: bool


@dataclass(frozen=True)
class WcagAAA:
    normal_text: bool
    large_text: bool


@dataclass(frozen=True)
class ContrastResult:
    """Verdict for one background/foreground pair.

    Attributes:
        pair: Human-readable pair label, e.g. ``"card / card-foreground"``.
        bg_color: Raw background color string as found in the theme.
        fg_color: Raw foreground color string as found in the theme.
        ratio: WCAG 2.1 contrast ratio rounded to two decimals.
        wcag_aa: Level AA outcome for normal text, large text and UI.
        wcag_aaa: Level AAA outcome for normal and large text.
    """
    pair: str
    bg_color: str
    fg_color: str
    ratio: float
    wcag_aa: WcagAA
    wcag_aaa: WcagAAA

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AuditSummary:
    total_pairs: int
    pass_aa: int
    fail_aa: int
    pass_aaa: int
    fail_aaa: int


@dataclass(frozen=True)
class ThemePreset:
    id: str
    label: str
    category: str
    styles: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    def role_map(self, mode: str) -> Mapping[str, Any]:
        """Role -> color mapping for a mode; empty when absent or malformed."""
        roles = self.styles.get(mode) if isinstance(self.styles, Mapping) else None
        return roles if isinstance(roles, Mapping) else {}


@dataclass(frozen=True)
class ThemeAuditResult:
    scheme_id: str
    scheme_label: str
    category: str
    mode: str
    results: Tuple[ContrastResult, ...]
    summary: AuditSummary

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CategoryGroup:
    category: str
    audits: Tuple[ThemeAuditResult, ...]


@dataclass(frozen=True)
class FailureEntry:
    result: ContrastResult
    large_text_ok: bool


@dataclass(frozen=True)
class FailureGroup:
    audit: ThemeAuditResult
    entries: Tuple[FailureEntry, ...]


@dataclass(frozen=True)
class WarningGroup:
    audit: ThemeAuditResult
    results: Tuple[ContrastResult, ...]
    target_ratio: float


@dataclass(frozen=True)
class ReportTotals:
    pass_aa: int
    fail_aa: int
    pass_aaa: int
    fail_aaa: int
    aa_percent: Optional[float]
    aaa_percent: Optional[float]

    @property
    def pairs_tested(self) -> int:
        return self.pass_aa + self.fail_aa

    @property
    def compliant(self) -> bool:
        return self.fail_aa == 0


@dataclass(frozen=True)
class AuditReport:
    generated_at: str
    theme_count: int
    audit_count: int
    categories: Tuple[CategoryGroup, ...]
    totals: ReportTotals
    failures: Tuple[FailureGroup, ...]
    warnings: Tuple[WarningGroup, ...]

    @property
    def audits(self) -> Tuple[ThemeAuditResult, ...]:
        return tuple(a for group in self.categories for a in group.audits)

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-serialisable view of the whole report."""
        data = asdict(self)
        data["totals"]["pairs_tested"] = self.totals.pairs_tested
        data["totals"]["compliant"] = self.totals.compliant
        return data
