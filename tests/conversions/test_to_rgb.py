import pytest

from css_colors.conversions.to_rgb import hsl_to_rgb, hsl_to_unit_rgb
from css_colors.units import Angle, Ratio
from color_samples import assert_close, samples_rgb_hsl


@pytest.mark.parametrize("h, expected", [
    (0, (1.0, 0.0, 0.0)),
    (60, (1.0, 1.0, 0.0)),
    (120, (0.0, 1.0, 0.0)),
    (180, (0.0, 1.0, 1.0)),
    (240, (0.0, 0.0, 1.0)),
    (300, (1.0, 0.0, 1.0)),
])
def test_hsl_to_unit_rgb_sectors(h, expected):
    assert hsl_to_unit_rgb(h, 1.0, 0.5) == pytest.approx(expected)


def test_hsl_to_unit_rgb_grey():
    assert hsl_to_unit_rgb(200, 0.0, 0.25) == pytest.approx((0.25, 0.25, 0.25))


def test_hsl_to_rgb():
    for rgb, (h, s, l) in samples_rgb_hsl.items():
        out = hsl_to_rgb(Angle(h), Ratio.from_percentage(s), Ratio.from_percentage(l))
        assert all(isinstance(c, Ratio) for c in out)
        assert_close(tuple(c.as_u8() for c in out), rgb)


def test_hsl_to_rgb_exact():
    out = hsl_to_rgb(Angle(6), Ratio.from_percentage(93), Ratio.from_percentage(71))
    assert tuple(c.as_u8() for c in out) == (250, 126, 112)
