"""css_colors: CSS color models (RGB, RGBA, HSL, HSLA) and LESS-style color operations."""

from .units import Angle, Ratio, deg, percent
from .colors.color_base import ColorBase
from .colors.rgb import RGB, RGBA, rgb, rgba
from .colors.hsl import HSL, HSLA, hsl, hsla
from .colors.color import color_convert, convert_color, get_color_class, parse_hex
from .colors import adjustments  # noqa: F401  attaches saturate … greyscale
from .errors import ColorClampWarning, CssColorError, HexDecodeError
from .types.format_type import FormatType

__version__ = "0.1.0"

__all__ = [
    "Angle",
    "Ratio",
    "deg",
    "percent",
    "ColorBase",
    "RGB",
    "RGBA",
    "HSL",
    "HSLA",
    "rgb",
    "rgba",
    "hsl",
    "hsla",
    "color_convert",
    "convert_color",
    "get_color_class",
    "parse_hex",
    "ColorClampWarning",
    "CssColorError",
    "HexDecodeError",
    "FormatType",
]
