import itertools

import pytest

from contrastlab.core.contrast import get_contrast_ratio_rgb
from contrastlab.core.luminance import get_luminance
from contrastlab.core.parsing import parse_color

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

SAMPLES = [
    parse_color(v)
    for v in ("#ffffff", "#000000", "#777777", "#3366cc", "#f0a", "oklch(0.7 0.15 200)", "oklch(0.3 0.05 320)")
]


def test_luminance_extremes():
    assert get_luminance(*WHITE) == pytest.approx(1.0)
    assert get_luminance(*BLACK) == 0.0


def test_luminance_uses_linear_segment_below_threshold():
    # 10/255 = 0.0392 is under the 0.04045 knee
    assert get_luminance(10, 10, 10) == pytest.approx((10 / 255) / 12.92)


def test_luminance_weights_green_most():
    assert get_luminance(0, 255, 0) == pytest.approx(0.7152)
    assert get_luminance(255, 0, 0) == pytest.approx(0.2126)
    assert get_luminance(0, 0, 255) == pytest.approx(0.0722)


def test_white_on_black_is_21():
    assert get_contrast_ratio_rgb(WHITE, BLACK) == pytest.approx(21.0, abs=0.05)


@pytest.mark.parametrize("color", SAMPLES)
def test_self_contrast_is_one(color):
    assert get_contrast_ratio_rgb(color, color) == pytest.approx(1.0)


@pytest.mark.parametrize("a,b", list(itertools.combinations(SAMPLES, 2)))
def test_contrast_is_symmetric_and_bounded(a, b):
    ratio = get_contrast_ratio_rgb(a, b)
    assert ratio == get_contrast_ratio_rgb(b, a)
    assert 1.0 <= ratio <= 21.0 + 1e-9
