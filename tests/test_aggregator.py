import pytest

from contrastlab.logic.audit.aggregator import (
    build_report,
    collect_aaa_warnings,
    collect_failures,
    compute_totals,
    group_by_category,
)
from contrastlab.logic.audit.auditor import audit_catalog

from conftest import all_roles, make_preset


def test_one_failure_report(compliant_preset, one_failure_preset):
    report = build_report(audit_catalog([compliant_preset, one_failure_preset]), generated_at="t0")

    assert report.theme_count == 2
    assert report.audit_count == 4
    assert report.totals.fail_aa == 1
    assert not report.totals.compliant

    assert len(report.failures) == 1
    group = report.failures[0]
    assert (group.audit.scheme_id, group.audit.mode) == ("soft-fog", "light")
    assert len(group.entries) == 1
    entry = group.entries[0]
    assert entry.result.pair == "muted / muted-foreground"
    assert entry.large_text_ok
    assert report.warnings == ()


def test_category_priority_then_encounter_order():
    presets = [
        make_preset("p1", "zeta"),
        make_preset("p2", "brand"),
        make_preset("p3", "default"),
        make_preset("p4", "alpha"),
        make_preset("p5", "brand"),
    ]
    groups = group_by_category(audit_catalog(presets))
    assert [g.category for g in groups] == ["default", "brand", "zeta", "alpha"]
    assert [(a.scheme_id, a.mode) for a in groups[1].audits] == [
        ("p2", "light"), ("p2", "dark"), ("p5", "light"), ("p5", "dark"),
    ]


def test_custom_category_order():
    presets = [make_preset("p1", "default"), make_preset("p2", "brand")]
    groups = group_by_category(audit_catalog(presets), category_order=("brand", "default"))
    assert [g.category for g in groups] == ["brand", "default"]


def test_totals_and_percentages(compliant_preset, one_failure_preset):
    totals = compute_totals(audit_catalog([compliant_preset, one_failure_preset]))
    assert totals.pass_aa == 83
    assert totals.fail_aa == 1
    assert totals.pass_aaa == 83
    assert totals.fail_aaa == 1
    assert totals.pairs_tested == 84
    assert totals.aa_percent == pytest.approx(83 / 84 * 100)


def test_empty_catalog_still_reports():
    report = build_report([], generated_at="t0")
    assert report.theme_count == 0
    assert report.categories == ()
    assert report.totals.aa_percent is None
    assert report.totals.aaa_percent is None
    assert report.totals.compliant


def test_fails_entirely_is_classified():
    light = all_roles()
    light["muted"] = "#777777"
    light["muted-foreground"] = "#888888"
    failures = collect_failures(audit_catalog([make_preset("fog", light=light)]))
    assert [e.large_text_ok for e in failures[0].entries] == [False]


def test_aaa_warnings_only_for_aa_clean_audits():
    aaa_only = all_roles()
    aaa_only["secondary-foreground"] = "#666666"
    both = all_roles()
    both["secondary-foreground"] = "#666666"
    both["muted-foreground"] = "#777777"

    audits = audit_catalog([make_preset("a", light=aaa_only), make_preset("b", light=both)])
    warnings = collect_aaa_warnings(audits)

    assert [(w.audit.scheme_id, w.audit.mode) for w in warnings] == [("a", "light")]
    assert [r.pair for r in warnings[0].results] == ["secondary / secondary-foreground"]
    assert warnings[0].target_ratio == 7.0
    assert 4.5 <= warnings[0].results[0].ratio < 7.0


def test_report_exposes_structured_audits(compliant_preset):
    report = build_report(audit_catalog([compliant_preset]), generated_at="t0")
    assert [a.mode for a in report.audits] == ["light", "dark"]
    data = report.to_dict()
    assert data["totals"]["pairs_tested"] == 42
    assert data["totals"]["compliant"] is True
    assert data["generated_at"] == "t0"


def test_generate_report_accepts_plain_records():
    from contrastlab.logic.audit.engine import generate_report

    catalog = [
        {"id": "plain", "label": "Plain", "category": "brand",
         "styles": {"light": {"background": "#FFFFFF", "foreground": "#000000"}, "dark": {}}},
        "not a preset",
    ]
    report = generate_report(catalog, generated_at="t0")
    assert report.theme_count == 1
    assert report.audit_count == 2
    assert report.totals.pairs_tested == 1
    assert report.totals.compliant


def test_theme_count_includes_presets_sharing_an_id():
    from contrastlab.logic.audit.engine import generate_report
    from contrastlab.logic.audit.renderer import render_text_report

    twins = [
        make_preset("twin", category="brand", label="Twin A"),
        make_preset("twin", category="brand", label="Twin B"),
    ]
    report = generate_report(twins, generated_at="t0")
    assert report.theme_count == 2
    assert report.audit_count == 4
    assert "Total Audits: 4 (2 themes × 2 modes)" in render_text_report(report)

    # without an explicit count, id/label/category triples are distinct
    assert build_report(audit_catalog(twins), generated_at="t0").theme_count == 2
