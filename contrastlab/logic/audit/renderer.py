#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/audit/renderer.py

import json
from typing import List

from contrastlab.core import config as c
from contrastlab.core.models import AuditReport, ThemeAuditResult
from contrastlab.shared.formatting import format_percent, format_ratio


def _heavy() -> str:
    return c.HEAVY_RULE * c.RULE_WIDTH


def _light(width: int = c.RULE_WIDTH) -> str:
    return c.LIGHT_RULE * width


def _banner(*titles: str) -> List[str]:
    return [_heavy()] + [t.center(c.RULE_WIDTH).rstrip() for t in titles] + [_heavy()]


def _row(theme: str, mode: str, pass_aa, fail_aa, pass_aaa, status: str) -> str:
    return (
        theme.ljust(c.COL_THEME)
        + mode.ljust(c.COL_MODE)
        + str(pass_aa).ljust(c.COL_COUNT)
        + str(fail_aa).ljust(c.COL_COUNT)
        + str(pass_aaa).ljust(c.COL_COUNT)
        + status
    )


def status_marker(fail_aa: int, passed: str = "✅ PASS") -> str:
    return passed if fail_aa == 0 else f"❌ {fail_aa} issues"


def _theme_heading(audit: ThemeAuditResult) -> List[str]:
    return ["", f"[{audit.scheme_label}] ({audit.mode} mode)", _light(c.SUB_RULE_WIDTH)]


def render_text_report(report: AuditReport, subtitle: str = c.REPORT_SUBTITLE) -> str:
    """Render the fixed-format text report."""
    totals = report.totals
    mode_count = len({a.mode for a in report.audits})

    lines = [""]
    lines += _banner(c.REPORT_TITLE, subtitle)
    lines += [
        "",
        f"Audit Date: {report.generated_at}",
        f"Total Themes: {report.theme_count}",
        f"Total Audits: {report.audit_count} ({report.theme_count} themes × {mode_count} modes)",
        "",
    ]

    # Summary table
    lines += [_light(), "SUMMARY BY THEME", _light()]
    lines.append(_row("Theme", "Mode", "AA Pass", "AA Fail", "AAA Pass", "Status"))
    lines.append(_light())
    for group in report.categories:
        lines += ["", f"[{group.category.upper()}]"]
        for audit in group.audits:
            s = audit.summary
            lines.append(
                _row(audit.scheme_label, audit.mode, s.pass_aa, s.fail_aa, s.pass_aaa, status_marker(s.fail_aa))
            )
    lines.append(_light())
    lines.append(
        _row("TOTAL", "", totals.pass_aa, totals.fail_aa, totals.pass_aaa, status_marker(totals.fail_aa, "✅ ALL PASS"))
    )
    lines.append(_light())

    if report.failures:
        lines += ["", ""]
        lines += _banner("DETAILED FAILURES")
        for group in report.failures:
            lines += _theme_heading(group.audit)
            for entry in group.entries:
                r = entry.result
                marker = "⚠️  (Large text OK)" if entry.large_text_ok else "❌ (Fails all)"
                lines.append(f"  {r.pair.ljust(c.COL_PAIR)} Ratio: {format_ratio(r.ratio).ljust(c.COL_RATIO)} {marker}")
                lines.append(f"    BG: {r.bg_color}")
                lines.append(f"    FG: {r.fg_color}")

    if report.warnings:
        lines += ["", ""]
        lines += _banner("AAA COMPLIANCE WARNINGS", "(These pass AA but fail AAA - nice to improve)")
        for group in report.warnings:
            lines += _theme_heading(group.audit)
            target = f"{group.target_ratio:g}:1"
            for r in group.results:
                lines.append(f"  {r.pair.ljust(c.COL_PAIR)} Ratio: {format_ratio(r.ratio)} (needs {target} for AAA)")

    lines += ["", ""]
    lines += _banner("FINAL SUMMARY")
    lines += [
        "",
        f"Total Color Pairs Tested: {totals.pairs_tested}",
        f"WCAG AA Compliance: {format_percent(totals.aa_percent)}",
        f"WCAG AAA Compliance: {format_percent(totals.aaa_percent)}",
        "",
    ]
    if totals.compliant:
        lines.append("✅ ALL THEMES PASS WCAG 2.1 AA CONTRAST REQUIREMENTS!")
    else:
        lines.append(f"❌ {totals.fail_aa} contrast issues need to be fixed for WCAG AA compliance.")
    lines += ["", _heavy(), ""]

    return "\n".join(lines)


def render_json_report(report: AuditReport) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
