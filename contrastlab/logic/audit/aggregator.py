#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/audit/aggregator.py

from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from contrastlab.core import config as c
from contrastlab.core.models import (
    AuditReport,
    CategoryGroup,
    FailureEntry,
    FailureGroup,
    ReportTotals,
    ThemeAuditResult,
    WarningGroup,
)


def _percent(passed: int, failed: int) -> Optional[float]:
    total = passed + failed
    if total == 0:
        return None
    return passed / total * c.PERCENT


def group_by_category(
    audits: Sequence[ThemeAuditResult],
    category_order: Sequence[str] = c.CATEGORY_ORDER,
) -> Tuple[CategoryGroup, ...]:
    """
    Group audits by category.

    Known categories come first in ``category_order``; any other category
    follows in the order it was first seen. Audits keep their input order
    inside a group.
    """
    buckets: Dict[str, List[ThemeAuditResult]] = {}
    for audit in audits:
        buckets.setdefault(audit.category, []).append(audit)

    ordered = [cat for cat in category_order if cat in buckets]
    ordered += [cat for cat in buckets if cat not in category_order]

    return tuple(CategoryGroup(category=cat, audits=tuple(buckets[cat])) for cat in ordered)


def compute_totals(audits: Sequence[ThemeAuditResult]) -> ReportTotals:
    pass_aa = sum(a.summary.pass_aa for a in audits)
    fail_aa = sum(a.summary.fail_aa for a in audits)
    pass_aaa = sum(a.summary.pass_aaa for a in audits)
    fail_aaa = sum(a.summary.fail_aaa for a in audits)
    return ReportTotals(
        pass_aa=pass_aa,
        fail_aa=fail_aa,
        pass_aaa=pass_aaa,
        fail_aaa=fail_aaa,
        aa_percent=_percent(pass_aa, fail_aa),
        aaa_percent=_percent(pass_aaa, fail_aaa),
    )


def collect_failures(audits: Sequence[ThemeAuditResult]) -> Tuple[FailureGroup, ...]:
    """Pairs failing AA normal text, per theme/mode with at least one failure."""
    groups = []
    for audit in audits:
        if audit.summary.fail_aa == 0:
            continue
        entries = tuple(
            FailureEntry(result=r, large_text_ok=r.ratio >= c.WCAG_AA_LARGE)
            for r in audit.results
            if not r.wcag_aa.normal_text
        )
        if entries:
            groups.append(FailureGroup(audit=audit, entries=entries))
    return tuple(groups)


def collect_aaa_warnings(audits: Sequence[ThemeAuditResult]) -> Tuple[WarningGroup, ...]:
    """Pairs passing AA but not AAA, for theme/modes that are fully AA compliant."""
    groups = []
    for audit in audits:
        if audit.summary.fail_aa != 0 or audit.summary.fail_aaa == 0:
            continue
        results = tuple(
            r for r in audit.results
            if r.wcag_aa.normal_text and not r.wcag_aaa.normal_text
        )
        if results:
            groups.append(WarningGroup(audit=audit, results=results, target_ratio=c.WCAG_AAA_NORMAL))
    return tuple(groups)


def build_report(
    audits: Sequence[ThemeAuditResult],
    category_order: Sequence[str] = c.CATEGORY_ORDER,
    generated_at: Optional[str] = None,
    theme_count: Optional[int] = None,
) -> AuditReport:
    """
    Aggregate per-theme audits into a report structure.

    Failures and warnings follow the grouped (category) order, the same
    order the summary table is printed in. Pass ``theme_count`` when the
    preset count is known; otherwise distinct (id, label, category)
    triples are counted.
    """
    if generated_at is None:
        generated_at = datetime.now(timezone.utc).isoformat()

    categories = group_by_category(audits, category_order)
    ordered = [a for group in categories for a in group.audits]
    if theme_count is None:
        theme_count = len({(a.scheme_id, a.scheme_label, a.category) for a in audits})

    return AuditReport(
        generated_at=generated_at,
        theme_count=theme_count,
        audit_count=len(audits),
        categories=categories,
        totals=compute_totals(ordered),
        failures=collect_failures(ordered),
        warnings=collect_aaa_warnings(ordered),
    )
