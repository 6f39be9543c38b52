from typing import ClassVar, Optional, Tuple
from numbers import Real
from ..types.format_type import FormatType
from ..types.color_types import ColorFamily, ColorSpace
from ..units import Angle, Ratio
from .color_base import ColorBase, WithAlpha, _channel, build_registry


class HSL(ColorBase):
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "hsl"
    family:     ClassVar[ColorFamily] = "hsl"
    channel_names: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    channel_formats: ClassVar[Tuple[Optional[FormatType], ...]] = (
        None, FormatType.PERCENTAGE, FormatType.PERCENTAGE,
    )

    h = _channel(0, "Hue angle.")
    s = _channel(1, "Saturation.")
    l = _channel(2, "Lightness.")  # noqa: E741


class HSLA(WithAlpha, ColorBase):
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace] = "hsla"
    family:     ClassVar[ColorFamily] = "hsl"
    channel_names: ClassVar[Tuple[str, ...]] = ("h", "s", "l", "a")
    channel_formats: ClassVar[Tuple[Optional[FormatType], ...]] = (
        None, FormatType.PERCENTAGE, FormatType.PERCENTAGE, FormatType.FLOAT,
    )

    h = HSL.h
    s = HSL.s
    l = HSL.l  # noqa: E741


def hsl(h: Real, s: Real, l: Real) -> HSL:  # noqa: E741
    """HSL from degrees and two percentages.

    >>> hsl(6, 93, 71).to_css()
    'hsl(6, 93%, 71%)'
    """
    return HSL(Angle(h), Ratio.from_percentage(s), Ratio.from_percentage(l))


def hsla(h: Real, s: Real, l: Real, a: float) -> HSLA:  # noqa: E741
    return HSLA(Angle(h), Ratio.from_percentage(s), Ratio.from_percentage(l), Ratio.from_fraction(a))


hsl_tuple_to_class = build_registry(HSL, HSLA)
