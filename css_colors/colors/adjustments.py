"""
LESS-style color operations, attached to every color class.

Each operation converts to a working space (HSLA for the saturation,
lightness and hue operations, RGBA for blending), transforms the channels and
converts back. Operations that produce transparency return the alpha sibling
of the receiver; the others return the receiver's own class.
"""
from __future__ import annotations
from numbers import Real
from typing import Union

from boundednumbers.functions import clamp01

from ..types.color_types import alpha_space
from ..types.format_type import RAW_MAX
from ..units import Angle, Ratio, to_angle, to_ratio
from .color_base import ColorBase
from .hsl import HSLA
from .rgb import RGBA

Amount = Union[Ratio, Real]
FULL = Ratio.from_u8(RAW_MAX)


def _checked_amount(amount) -> Ratio:
    if isinstance(amount, bool) or not isinstance(amount, (Ratio, Real)):
        raise TypeError(f"Expected a Ratio or a percentage, got {type(amount).__name__}")
    return to_ratio(amount)


def _from_hsla(self: ColorBase, h: Angle, s: Ratio, l: Ratio, a: Ratio) -> ColorBase:  # noqa: E741
    return HSLA(h, s, l, a).convert(self.mode)


def saturate(self: ColorBase, amount: Amount) -> ColorBase:
    """Increase saturation in HSL space by an absolute amount, clamped at 100%."""
    h, s, l, a = self.to_hsla().value
    return _from_hsla(self, h, s + _checked_amount(amount), l, a)


def desaturate(self: ColorBase, amount: Amount) -> ColorBase:
    """Decrease saturation in HSL space by an absolute amount, clamped at 0%."""
    h, s, l, a = self.to_hsla().value
    return _from_hsla(self, h, s - _checked_amount(amount), l, a)


def lighten(self: ColorBase, amount: Amount) -> ColorBase:
    h, s, l, a = self.to_hsla().value
    return _from_hsla(self, h, s, l + _checked_amount(amount), a)


def darken(self: ColorBase, amount: Amount) -> ColorBase:
    h, s, l, a = self.to_hsla().value
    return _from_hsla(self, h, s, l - _checked_amount(amount), a)


def fadein(self: ColorBase, amount: Amount) -> ColorBase:
    """Decrease transparency (increase alpha); the result always carries alpha."""
    color = self.to_alpha()
    return color.with_alpha(color.value[-1] + _checked_amount(amount))


def fadeout(self: ColorBase, amount: Amount) -> ColorBase:
    color = self.to_alpha()
    return color.with_alpha(color.value[-1] - _checked_amount(amount))


def fade(self: ColorBase, amount: Amount) -> ColorBase:
    """Set alpha to exactly ``amount``."""
    return self.to_alpha().with_alpha(_checked_amount(amount))


def spin(self: ColorBase, amount: Union[Angle, Real]) -> ColorBase:
    """Rotate the hue by ``amount`` degrees in either direction.

    >>> from css_colors import hsl
    >>> hsl(10, 90, 50).spin(30)
    HSL(h=Angle(40), s=Ratio(230), l=Ratio(128))
    """
    if isinstance(amount, bool) or not isinstance(amount, (Angle, Real)):
        raise TypeError(f"Expected an Angle or degrees, got {type(amount).__name__}")
    h, s, l, a = self.to_hsla().value
    return _from_hsla(self, h + to_angle(amount), s, l, a)


def mix(self: ColorBase, other: ColorBase, weight: Amount) -> ColorBase:
    """
    Blend two colors in RGB space, weighting by both ``weight`` and the
    difference in their alphas (the LESS/SASS algorithm).

    ``weight`` is the share of ``self``: 100% returns ``self`` (as its alpha
    sibling), 0% returns ``other`` converted to ``self``'s alpha sibling.
    Channel products are quantized to whole bytes.
    """
    if not isinstance(other, ColorBase):
        raise TypeError(f"Can only mix with another color, got {type(other).__name__}")
    weight = _checked_amount(weight)

    lhs = self.to_rgba()
    rhs = other.to_rgba()
    lhs_alpha, rhs_alpha = lhs.value[3], rhs.value[3]

    w = 2 * weight.as_fraction() - 1
    alpha_delta = lhs_alpha.as_fraction() - rhs_alpha.as_fraction()
    if w * alpha_delta == -1:
        combined = w
    else:
        combined = (w + alpha_delta) / (1 + w * alpha_delta)

    lhs_weight = Ratio.from_fraction(clamp01((combined + 1) / 2))
    rhs_weight = FULL - lhs_weight

    channels = [
        c1 * lhs_weight + c2 * rhs_weight
        for c1, c2 in zip(lhs.value[:3], rhs.value[:3])
    ]
    alpha = lhs_alpha * weight + rhs_alpha * (FULL - weight)

    return RGBA(*channels, alpha).convert(alpha_space(self.mode))


def tint(self: ColorBase, weight: Amount) -> ColorBase:
    """Mix with white; ``weight`` is the share of ``self``."""
    from ..samples.colors import WHITE
    return self.mix(WHITE, weight).convert(self.mode)


def shade(self: ColorBase, weight: Amount) -> ColorBase:
    """Mix with black; ``weight`` is the share of ``self``."""
    from ..samples.colors import BLACK
    return self.mix(BLACK, weight).convert(self.mode)


def greyscale(self: ColorBase) -> ColorBase:
    return self.desaturate(FULL)


ColorBase.saturate = saturate
ColorBase.desaturate = desaturate
ColorBase.lighten = lighten
ColorBase.darken = darken
ColorBase.fadein = fadein
ColorBase.fadeout = fadeout
ColorBase.fade = fade
ColorBase.spin = spin
ColorBase.mix = mix
ColorBase.tint = tint
ColorBase.shade = shade
ColorBase.greyscale = greyscale
