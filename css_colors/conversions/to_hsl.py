from typing import Tuple

from boundednumbers.functions import clamp01

from ..units import Angle, Ratio
from ..utils.num_utils import round_half_away


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSL using the analytic (LESS/SASS) algorithm.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # achromatic: hue and saturation are undefined, report them as zero
    if delta == 0:
        return 0.0, 0.0, lightness

    if lightness < 0.5:
        saturation = delta / (max_c + min_c)
    else:
        saturation = delta / (2.0 - max_c - min_c)

    if max_c == r:
        hue = (g - b) / delta
    elif max_c == g:
        hue = 2.0 + (b - r) / delta
    else:
        hue = 4.0 + (r - g) / delta

    hue *= 60.0
    if hue < 0:
        hue += 360.0

    return hue, saturation, lightness


def rgb_to_hsl(r: Ratio, g: Ratio, b: Ratio) -> Tuple[Angle, Ratio, Ratio]:
    """
    Convert RGB channels to HSL channels.

    Grey input (all channels equal) short-circuits: hue 0, saturation 0% and
    lightness rounded to a whole percentage. Otherwise hue is rounded to whole
    degrees and saturation/lightness to the nearest byte.
    """
    if r == g == b:
        lightness = round_half_away(100 * r.as_fraction())
        return Angle(0), Ratio.from_percentage(0), Ratio.from_percentage(lightness)

    hue, saturation, lightness = unit_rgb_to_hsl(r.as_fraction(), g.as_fraction(), b.as_fraction())
    return (
        Angle(round_half_away(hue)),
        Ratio.from_fraction(clamp01(saturation)),
        Ratio.from_fraction(clamp01(lightness)),
    )
