from .css import format_css, format_alpha
from .hex import format_hex, decode_hex, HEX_DIGITS

__all__ = ["format_css", "format_alpha", "format_hex", "decode_hex", "HEX_DIGITS"]
