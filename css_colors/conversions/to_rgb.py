import math
from typing import Tuple

from boundednumbers.functions import clamp01

from ..units import Angle, Ratio


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to RGB using the chroma/sector algorithm.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = h % 360
    chroma = (1 - abs(2 * l - 1)) * s
    h_prime = h / 60
    x = chroma * (1 - abs((h_prime % 2) - 1))
    m = l - chroma / 2

    hue_section = int(math.floor(h_prime))

    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def hsl_to_rgb(h: Angle, s: Ratio, l: Ratio) -> Tuple[Ratio, Ratio, Ratio]:
    """Convert HSL channels to RGB channels, rounding each to the nearest byte."""
    r, g, b = hsl_to_unit_rgb(h.degrees(), s.as_fraction(), l.as_fraction())
    return (
        Ratio.from_fraction(clamp01(r)),
        Ratio.from_fraction(clamp01(g)),
        Ratio.from_fraction(clamp01(b)),
    )
