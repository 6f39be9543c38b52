from typing import Sequence, Union

from ..types.color_types import ColorSpace
from ..units import Angle, Ratio


def format_alpha(alpha: Ratio) -> str:
    """Alpha as a fraction with exactly two decimals, e.g. ``0.50``."""
    return f"{alpha.as_fraction():.2f}"


def format_css(mode: ColorSpace, channels: Sequence[Union[Angle, Ratio]]) -> str:
    """
    Render channels in CSS functional notation.

    >>> from css_colors.units import Ratio
    >>> format_css("rgb", (Ratio(250), Ratio(128), Ratio(114)))
    'rgb(250, 128, 114)'
    """
    mode = mode.lower()  # type: ignore[assignment]
    if mode == "rgb":
        r, g, b = channels
        return f"rgb({r.as_u8()}, {g.as_u8()}, {b.as_u8()})"
    if mode == "rgba":
        r, g, b, a = channels
        return f"rgba({r.as_u8()}, {g.as_u8()}, {b.as_u8()}, {format_alpha(a)})"
    if mode == "hsl":
        h, s, l = channels
        return f"hsl({h.degrees()}, {s.as_percentage()}%, {l.as_percentage()}%)"
    if mode == "hsla":
        h, s, l, a = channels
        return f"hsla({h.degrees()}, {s.as_percentage()}%, {l.as_percentage()}%, {format_alpha(a)})"
    raise ValueError(f"Unknown color space: {mode!r}")
