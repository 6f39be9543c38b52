import pytest

from css_colors import HSL, HSLA, RGB, RGBA, Ratio, hsl, hsla, rgb, rgba
from css_colors.colors.color import convert_color, get_color_class
from css_colors.conversions import OPAQUE
from color_samples import assert_close, samples_rgb_hsl

TOMATO = rgb(255, 99, 71)
OPAQUE_TOMATO = rgba(255, 99, 71, 0.5)


def test_to_rgb_and_rgba():
    assert TOMATO.to_rgb() is TOMATO
    assert OPAQUE_TOMATO.to_rgb() == TOMATO
    assert TOMATO.to_rgba() == rgba(255, 99, 71, 1.0)
    assert OPAQUE_TOMATO.to_rgba().to_rgb() == TOMATO


def test_to_hsl_and_hsla():
    assert TOMATO.to_hsl() == hsl(9, 100, 64)
    assert OPAQUE_TOMATO.to_hsl() == hsl(9, 100, 64)
    assert TOMATO.to_hsla() == hsla(9, 100, 64, 1.0)
    assert OPAQUE_TOMATO.to_hsla() == hsla(9, 100, 64, 0.5)
    h = hsl(6, 93, 71)
    assert h.to_hsl() is h
    assert h.to_hsla().to_hsl() == h


def test_class_conversion_rgb_to_hsl():
    for (r, g, b), expected in samples_rgb_hsl.items():
        out = rgb(r, g, b).to_hsl()
        assert isinstance(out, HSL)
        assert_close(out.values(), expected)


def test_class_conversion_hsl_to_rgb():
    for expected, (h, s, l) in samples_rgb_hsl.items():
        out = hsl(h, s, l).to_rgb()
        assert isinstance(out, RGB)
        assert_close(out.values(), expected)


@pytest.mark.parametrize("r, g, b", [(0, 0, 0), (255, 255, 255), (12, 200, 77), (1, 2, 3)])
def test_rgb_alpha_round_trips(r, g, b):
    assert rgb(r, g, b).to_rgba() == rgba(r, g, b, 1.0)
    assert rgba(r, g, b, 1.0).to_rgb() == rgb(r, g, b)
    assert rgba(r, g, b, 0.78).to_rgb() == rgb(r, g, b)
    assert rgba(r, g, b, 0.0).to_rgb() == rgb(r, g, b)


def test_alpha_survives_family_changes():
    c = rgba(12, 200, 77, 0.3)
    assert c.to_hsla().alpha == c.alpha
    assert c.to_hsla().to_rgba().alpha == c.alpha


def test_convert_by_name():
    assert TOMATO.convert("HSLA") == hsla(9, 100, 64, 1.0)
    assert TOMATO.convert() is TOMATO
    assert isinstance(hsl(1, 2, 3).convert("rgba"), RGBA)
    with pytest.raises(ValueError):
        TOMATO.convert("hsv")


def test_to_alpha():
    assert TOMATO.to_alpha() == rgba(255, 99, 71, 1.0)
    assert OPAQUE_TOMATO.to_alpha() is OPAQUE_TOMATO
    assert isinstance(hsl(1, 2, 3).to_alpha(), HSLA)


def test_with_alpha():
    assert rgb(1, 2, 3).with_alpha(0.5) == rgba(1, 2, 3, 0.5)
    assert rgb(1, 2, 3).with_alpha() == rgba(1, 2, 3, 1.0)
    assert rgba(1, 2, 3, 0.5).with_alpha(Ratio(10)).alpha == Ratio(10)
    assert hsl(6, 93, 71).with_alpha(Ratio(0)) == hsla(6, 93, 71, 0.0)
    assert hsla(6, 93, 71, 0.1).with_alpha() == hsla(6, 93, 71, 1.0)


def test_registry_helpers():
    assert get_color_class("RGBA") is RGBA
    assert get_color_class("hsl") is HSL
    with pytest.raises(ValueError):
        get_color_class("lab")
    assert convert_color(TOMATO, "hsl") == hsl(9, 100, 64)
    assert convert_color((1, 2, 3), "rgb") == rgb(1, 2, 3)


def test_default_alpha_is_opaque_for_both_with_alpha_paths():
    promoted = hsl(6, 93, 71).with_alpha()
    replaced = hsla(6, 93, 71, 0.1).with_alpha()
    assert promoted.alpha == replaced.alpha == OPAQUE
    assert OPAQUE == Ratio(255)


def test_pure_red_through_hsl():
    # the quantized 50% lightness lifts the zero channels by one byte
    assert rgb(255, 0, 0).to_hsl() == hsl(0, 100, 50)
    assert rgb(255, 0, 0).to_hsl().to_rgb() == rgb(255, 1, 1)
