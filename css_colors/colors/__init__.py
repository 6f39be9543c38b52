"""Color representations and the operations attached to them."""

from .color_base import ColorBase, WithAlpha
from .rgb import RGB, RGBA, rgb, rgba
from .hsl import HSL, HSLA, hsl, hsla
from .color import color_convert, convert_color, get_color_class, parse_hex, unified_tuple_to_class
from . import adjustments  # noqa: F401  attaches saturate … greyscale
