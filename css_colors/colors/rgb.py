from typing import ClassVar, Optional, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorFamily, ColorSpace
from ..units import Ratio
from .color_base import ColorBase, WithAlpha, _channel, build_registry


class RGB(ColorBase):
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    family: ClassVar[ColorFamily] = "rgb"
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    channel_formats: ClassVar[Tuple[Optional[FormatType], ...]] = (
        FormatType.INT, FormatType.INT, FormatType.INT,
    )

    r = _channel(0, "Red channel.")
    g = _channel(1, "Green channel.")
    b = _channel(2, "Blue channel.")


class RGBA(WithAlpha, ColorBase):
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    family: ClassVar[ColorFamily] = "rgb"
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    channel_formats: ClassVar[Tuple[Optional[FormatType], ...]] = (
        FormatType.INT, FormatType.INT, FormatType.INT, FormatType.FLOAT,
    )

    r = RGB.r
    g = RGB.g
    b = RGB.b


def rgb(r: int, g: int, b: int) -> RGB:
    """RGB from three bytes.

    >>> rgb(250, 128, 114).to_css()
    'rgb(250, 128, 114)'
    """
    return RGB(Ratio.from_u8(r), Ratio.from_u8(g), Ratio.from_u8(b))


def rgba(r: int, g: int, b: int, a: float) -> RGBA:
    """RGBA from three bytes and an alpha fraction in [0, 1]."""
    return RGBA(Ratio.from_u8(r), Ratio.from_u8(g), Ratio.from_u8(b), Ratio.from_fraction(a))


rgb_tuple_to_class = build_registry(RGB, RGBA)
