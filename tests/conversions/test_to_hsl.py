import pytest

from css_colors.conversions.to_hsl import rgb_to_hsl, unit_rgb_to_hsl
from css_colors.units import Angle, Ratio
from css_colors.utils.num_utils import round_half_away
from color_samples import achromatic_rgb, assert_close, samples_rgb_hsl


def test_unit_rgb_to_hsl_primaries():
    assert unit_rgb_to_hsl(1.0, 0.0, 0.0) == (0.0, 1.0, 0.5)
    h, s, l = unit_rgb_to_hsl(0.0, 0.0, 1.0)
    assert h == pytest.approx(240.0)
    h, s, l = unit_rgb_to_hsl(1.0, 0.0, 1.0)
    assert h == pytest.approx(300.0)
    assert unit_rgb_to_hsl(0.5, 0.5, 0.5) == (0.0, 0.0, 0.5)


def test_rgb_to_hsl():
    for (r, g, b), expected in samples_rgb_hsl.items():
        h, s, l = rgb_to_hsl(Ratio(r), Ratio(g), Ratio(b))
        assert isinstance(h, Angle)
        assert_close((h.degrees(), s.as_percentage(), l.as_percentage()), expected)


def test_rgb_to_hsl_exact_vectors():
    h, s, l = rgb_to_hsl(Ratio(255), Ratio(99), Ratio(71))
    assert (h.degrees(), s.as_percentage(), l.as_percentage()) == (9, 100, 64)
    h, s, l = rgb_to_hsl(Ratio(23), Ratio(98), Ratio(119))
    assert (h.degrees(), s.as_percentage(), l.as_percentage()) == (193, 67, 28)


@pytest.mark.parametrize("v", achromatic_rgb)
def test_achromatic(v):
    h, s, l = rgb_to_hsl(Ratio(v), Ratio(v), Ratio(v))
    assert h == Angle(0)
    assert s == Ratio(0)
    assert l == Ratio.from_percentage(round_half_away(100 * v / 255))
    assert l.as_percentage() == round_half_away(100 * v / 255)
