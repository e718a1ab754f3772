#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/audit/auditor.py

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Sequence, Tuple

from contrastlab.core import config as c
from contrastlab.core.contrast import analyze_contrast
from contrastlab.core.models import AuditSummary, ThemeAuditResult, ThemePreset


def pair_label(entry: Sequence[str]) -> str:
    """Label for a pair table entry: explicit third element or 'bg / fg'."""
    if len(entry) > 2 and entry[2]:
        return entry[2]
    return f"{entry[0]} / {entry[1]}"


def summarize(results: Sequence) -> AuditSummary:
    total = len(results)
    pass_aa = sum(1 for r in results if r.wcag_aa.normal_text)
    pass_aaa = sum(1 for r in results if r.wcag_aaa.normal_text)
    return AuditSummary(
        total_pairs=total,
        pass_aa=pass_aa,
        fail_aa=total - pass_aa,
        pass_aaa=pass_aaa,
        fail_aaa=total - pass_aaa,
    )


def audit_theme(
    preset: ThemePreset,
    mode: str,
    pairs: Sequence[Sequence[str]] = c.DEFAULT_COLOR_PAIRS,
) -> ThemeAuditResult:
    """
    Evaluate every pair of ``pairs`` against one mode of a preset.

    Pairs whose roles are missing (or empty) in the role map, or whose
    colors do not parse, are left out of the results and of the summary.
    """
    roles = preset.role_map(mode)
    results = []

    for entry in pairs:
        bg_color = roles.get(entry[0])
        fg_color = roles.get(entry[1])
        if not bg_color or not fg_color:
            continue
        result = analyze_contrast(bg_color, fg_color, pair_label(entry))
        if result is not None:
            results.append(result)

    return ThemeAuditResult(
        scheme_id=preset.id,
        scheme_label=preset.label,
        category=preset.category,
        mode=mode,
        results=tuple(results),
        summary=summarize(results),
    )


def audit_catalog(
    presets: Iterable[ThemePreset],
    pairs: Sequence[Sequence[str]] = c.DEFAULT_COLOR_PAIRS,
    modes: Sequence[str] = c.MODES,
    workers: int = 1,
) -> List[ThemeAuditResult]:
    """
    Audit every (preset, mode) combination, preset-major.

    With ``workers > 1`` the audits run on a thread pool; ``map`` keeps
    the input order, so the output is identical to a sequential run.
    """
    jobs: List[Tuple[ThemePreset, str]] = [(p, m) for p in presets for m in modes]

    def _run(job: Tuple[ThemePreset, str]) -> ThemeAuditResult:
        return audit_theme(job[0], job[1], pairs)

    if workers <= 1 or len(jobs) <= 1:
        return [_run(job) for job in jobs]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(_run, jobs))
