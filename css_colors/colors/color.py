from __future__ import annotations
from typing import Optional

from ..conversions import OPAQUE, convert
from ..formatting.hex import decode_hex, format_hex
from ..types.color_types import ColorSpace, alpha_space
from ..units import Ratio
from .color_base import ChannelInput, ColorBase
from .hsl import hsl_tuple_to_class
from .rgb import RGB, RGBA, rgb_tuple_to_class

unified_tuple_to_class: dict[str, type[ColorBase]] = {**rgb_tuple_to_class, **hsl_tuple_to_class}


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: Optional[ColorSpace] = None) -> ColorBase:
    """
    Convert this color to another color space.

    Alpha is kept when both spaces carry it, dropped when only the source
    does, and set fully opaque when only the target does.

    Args:
        to_space: Target color space ("rgb", "rgba", "hsl", "hsla"). Defaults to the current one.

    Returns:
        New ColorBase instance in the target space
    """
    to_space = (to_space or self.mode).lower()  # type: ignore[assignment]
    cls = get_color_class(to_space)
    if cls is type(self):
        return self
    return cls(*convert(self.value, self.mode, to_space))


def to_rgb(self: ColorBase) -> ColorBase:
    return self.convert("rgb")


def to_rgba(self: ColorBase) -> ColorBase:
    return self.convert("rgba")


def to_hsl(self: ColorBase) -> ColorBase:
    return self.convert("hsl")


def to_hsla(self: ColorBase) -> ColorBase:
    return self.convert("hsla")


def to_alpha(self: ColorBase) -> ColorBase:
    """Alpha sibling of this color (the color itself for alpha types)."""
    return self.convert(alpha_space(self.mode))


def with_alpha(self: ColorBase, alpha: Optional[ChannelInput] = None) -> ColorBase:
    """
    Return the RGBA/HSLA sibling carrying the given alpha.

    Args:
        alpha: Alpha as a Ratio or a unit float. If None, the color is fully opaque.
    """
    if alpha is None:
        alpha = OPAQUE
    elif not isinstance(alpha, Ratio):
        alpha = Ratio.from_fraction(alpha)
    cls = get_color_class(alpha_space(self.mode))
    return cls(*self.value, alpha)


def to_hex(self: ColorBase) -> str:
    """
    ``#rrggbb`` for colors without alpha, ``#rrggbbaa`` for colors with it.
    HSL values are routed through RGB.
    """
    target = "rgba" if self.has_alpha else "rgb"
    return format_hex([channel.as_u8() for channel in self.convert(target).value])


def from_hex(cls: type[ColorBase], text: str) -> ColorBase:
    """
    Decode ``#rrggbb`` (``#rrggbbaa`` for alpha types) into this class.

    Raises:
        HexDecodeError: for anything that is not exactly that form.
    """
    with_alpha_channel = cls.mode.endswith("a")
    decoded = decode_hex(text, with_alpha_channel)
    source = RGBA if with_alpha_channel else RGB
    color = source(*(Ratio.from_u8(v) for v in decoded))
    return color.convert(cls.mode)


def parse_hex(text: str) -> ColorBase:
    """
    Decode a hex string into RGB (``#rrggbb``) or RGBA (``#rrggbbaa``).

    >>> parse_hex("#010203")
    RGB(r=Ratio(1), g=Ratio(2), b=Ratio(3))
    """
    with_alpha_channel = isinstance(text, str) and len(text) == 9
    cls = RGBA if with_alpha_channel else RGB
    return cls.from_hex(text)  # type: ignore[attr-defined]


def convert_color(value, color_space: str) -> ColorBase:
    """Coerce a ColorBase (or a tuple of channel values) into ``color_space``."""
    color_class = get_color_class(color_space)
    if isinstance(value, ColorBase):
        return value.convert(color_class.mode)
    return color_class(*value)


ColorBase.convert = color_convert
ColorBase.to_rgb = to_rgb
ColorBase.to_rgba = to_rgba
ColorBase.to_hsl = to_hsl
ColorBase.to_hsla = to_hsla
ColorBase.to_alpha = to_alpha
ColorBase.with_alpha = with_alpha
ColorBase.to_hex = to_hex
ColorBase.from_hex = classmethod(from_hex)  # type: ignore[attr-defined]
