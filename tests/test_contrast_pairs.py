import pytest

from contrastlab.core.contrast import analyze_contrast, get_wcag_levels


def test_black_on_white_passes_everything():
    result = analyze_contrast("#FFFFFF", "#000000", "background / foreground")
    assert result.pair == "background / foreground"
    assert result.bg_color == "#FFFFFF"
    assert result.fg_color == "#000000"
    assert result.ratio == pytest.approx(21.0)
    assert result.wcag_aa.normal_text and result.wcag_aa.large_text and result.wcag_aa.ui_components
    assert result.wcag_aaa.normal_text and result.wcag_aaa.large_text


def test_close_grays_fail_everything():
    result = analyze_contrast("#777777", "#888888", "muted / muted-foreground")
    assert result.ratio < 3.0
    assert not result.wcag_aa.normal_text
    assert not result.wcag_aa.large_text
    assert not result.wcag_aa.ui_components
    assert not result.wcag_aaa.normal_text
    assert not result.wcag_aaa.large_text


def test_mid_gray_on_white_is_large_text_only():
    result = analyze_contrast("#ffffff", "#777777", "x")
    assert result.ratio == 4.48
    assert not result.wcag_aa.normal_text
    assert result.wcag_aa.large_text
    assert result.wcag_aa.ui_components
    assert not result.wcag_aaa.large_text


def test_ratio_is_rounded_to_two_decimals():
    result = analyze_contrast("#ffffff", "#3366cc", "x")
    assert result.ratio == round(result.ratio, 2)


def test_mixed_formats_are_compared():
    result = analyze_contrast("oklch(1 0 0)", "#000", "x")
    assert result.ratio == pytest.approx(21.0, abs=0.05)


@pytest.mark.parametrize(
    "bg,fg",
    [("rgb(0,0,0)", "#fff"), ("#fff", "hsl(0 0% 0%)"), ("#ffff", "#000"), ("oklch(1 0)", "#000")],
)
def test_unparseable_pair_is_not_evaluated(bg, fg):
    assert analyze_contrast(bg, fg, "x") is None


@pytest.mark.parametrize("ratio", [1.0, 2.99, 3.0, 4.49, 4.5, 6.99, 7.0, 12.0, 21.0])
def test_threshold_monotonicity(ratio):
    aa, aaa = get_wcag_levels(ratio)
    if ratio >= 7:
        assert aaa.normal_text
    if aaa.normal_text:
        assert aa.normal_text
    if aa.normal_text:
        assert aa.large_text and aaa.large_text
    assert aa.large_text == aa.ui_components == (ratio >= 3.0)


def test_contrast_result_to_dict():
    data = analyze_contrast("#ffffff", "#000000", "background / foreground").to_dict()
    assert data["wcag_aa"] == {"normal_text": True, "large_text": True, "ui_components": True}
    assert data["wcag_aaa"] == {"normal_text": True, "large_text": True}
