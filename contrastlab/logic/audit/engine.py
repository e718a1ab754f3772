#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/audit/engine.py

import argparse
from typing import Any, Iterable, Optional, Sequence

from contrastlab.core import config as c
from contrastlab.core.models import AuditReport
from contrastlab.shared.logger import log
from .aggregator import build_report
from .auditor import audit_catalog
from .renderer import render_json_report, render_text_report
from .resolver import coerce_catalog, load_catalog, load_pairs


def generate_report(
    catalog: Iterable[Any],
    pairs: Sequence[Sequence[str]] = c.DEFAULT_COLOR_PAIRS,
    category_order: Sequence[str] = c.CATEGORY_ORDER,
    modes: Sequence[str] = c.MODES,
    workers: int = 1,
    generated_at: Optional[str] = None,
) -> AuditReport:
    """Audit a whole theme catalog and aggregate the results."""
    presets, _ = coerce_catalog(catalog)
    audits = audit_catalog(presets, pairs=pairs, modes=modes, workers=workers)
    return build_report(
        audits,
        category_order=category_order,
        generated_at=generated_at,
        theme_count=len(presets),
    )


def run(args: argparse.Namespace) -> int:
    """Main execution engine for the audit command. Returns the exit status."""
    as_json = args.format == "json"

    presets = load_catalog(args.catalog)
    pairs = load_pairs(args.pairs) if args.pairs else c.DEFAULT_COLOR_PAIRS
    category_order = args.category_order or c.CATEGORY_ORDER

    if not as_json:
        log("info", "starting WCAG contrast audit")
        log("info", f"loaded {len(presets)} theme presets, {len(pairs)} color pairs each")

    report = generate_report(
        presets,
        pairs=pairs,
        category_order=category_order,
        workers=args.workers,
    )

    if as_json:
        out = render_json_report(report)
    else:
        out = render_text_report(report, subtitle=args.title)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as fh:
                fh.write(out)
                if not out.endswith("\n"):
                    fh.write("\n")
        except OSError as exc:
            log("error", f"cannot write report to '{args.output}': {exc}")
            return 2
        if not as_json:
            log("success", f"report written to {args.output}")
    else:
        print(out)

    if args.strict and not report.totals.compliant:
        log("error", f"{report.totals.fail_aa} pair(s) fail WCAG AA")
        return 1
    return 0
