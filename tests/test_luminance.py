import itertools

import pytest

from contrast_fixer.color.luminance import (
    color_contrast,
    contrast_ratio,
    luminance_of,
    relative_luminance,
)
from contrast_fixer.color.model import RGBColor


def test_luminance_endpoints():
    assert relative_luminance(0, 0, 0) == 0.0
    assert relative_luminance(255, 255, 255) == pytest.approx(1.0)


def test_luminance_stays_in_unit_interval():
    levels = range(0, 256, 51)
    for r, g, b in itertools.product(levels, repeat=3):
        lum = relative_luminance(r, g, b)
        assert 0.0 <= lum <= 1.0 + 1e-12


def test_luminance_channel_weights():
    assert relative_luminance(255, 0, 0) == pytest.approx(0.2126)
    assert relative_luminance(0, 255, 0) == pytest.approx(0.7152)
    assert relative_luminance(0, 0, 255) == pytest.approx(0.0722)


def test_luminance_uses_linear_segment_for_dark_channels():
    # 10/255 = 0.0392 <= 0.03928
    assert relative_luminance(10, 10, 10) == pytest.approx((10 / 255) / 12.92)


def test_luminance_mid_gray():
    assert relative_luminance(128, 128, 128) == pytest.approx(0.2159, abs=1e-4)


def test_luminance_of_ignores_alpha():
    assert luminance_of(RGBColor(r=40, g=80, b=120, a=0.2)) == relative_luminance(40, 80, 120)


def test_contrast_ratio_black_white():
    assert contrast_ratio(1.0, 0.0) == pytest.approx(21.0)


@pytest.mark.parametrize("a,b", [(0.0, 1.0), (0.2, 0.7), (0.05, 0.051), (0.9, 0.3)])
def test_contrast_ratio_is_symmetric(a, b):
    assert contrast_ratio(a, b) == contrast_ratio(b, a)
    assert contrast_ratio(a, b) >= 1.0


@pytest.mark.parametrize("x", [0.0, 0.18, 0.5, 1.0])
def test_contrast_ratio_identity(x):
    assert contrast_ratio(x, x) == 1.0


def test_color_contrast_white_on_black():
    white = RGBColor(r=255, g=255, b=255)
    black = RGBColor(r=0, g=0, b=0)
    assert color_contrast(white, black) == pytest.approx(21.0)
    assert color_contrast(black, white) == color_contrast(white, black)
