"""
Color Space Conversions
=======================

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
        Analytic conversion on unit floats
    rgb_to_hsl(r, g, b)
        Channel conversion on Ratio values, rounded to Angle/Ratio

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
        Chroma/sector conversion on unit floats
    hsl_to_rgb(h, s, l)
        Channel conversion on Angle/Ratio values

High-Level API
--------------
    convert(channels, from_space, to_space)
        Converts channel tuples between "rgb", "rgba", "hsl" and "hsla",
        promoting or dropping alpha as needed.

Examples
--------
>>> from css_colors.conversions import rgb_to_hsl
>>> from css_colors.units import Ratio
>>> h, s, l = rgb_to_hsl(Ratio(255), Ratio(99), Ratio(71))
>>> h.degrees(), s.as_percentage(), l.as_percentage()
(9, 100, 64)
"""

from .to_hsl import unit_rgb_to_hsl, rgb_to_hsl
from .to_rgb import hsl_to_unit_rgb, hsl_to_rgb
from .wrapper import convert, split_alpha, OPAQUE

__all__ = [
    "unit_rgb_to_hsl",
    "rgb_to_hsl",
    "hsl_to_unit_rgb",
    "hsl_to_rgb",
    "convert",
    "split_alpha",
    "OPAQUE",
]
