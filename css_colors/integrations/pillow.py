from __future__ import annotations
from typing import Tuple

from ..colors.color_base import ColorBase


def to_pillow(color: ColorBase) -> Tuple[str, Tuple[int, ...]]:
    """
    Pillow image mode and fill value for ``color``.

    Colors with alpha map to ``"RGBA"``, the others to ``"RGB"``; HSL values
    are routed through RGB.

    >>> from css_colors import hsl
    >>> to_pillow(hsl(0, 100, 40))
    ('RGB', (204, 0, 0))
    """
    mode = "RGBA" if color.has_alpha else "RGB"
    rgb_color = color.convert(mode.lower())
    return mode, tuple(channel.as_u8() for channel in rgb_color.value)


def swatch(color: ColorBase, size: Tuple[int, int] = (64, 64)):
    """Solid ``PIL.Image.Image`` of ``size`` (width, height) filled with ``color``."""
    from PIL import Image

    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError(f"Swatch size must be positive, got {size}")
    mode, fill = to_pillow(color)
    return Image.new(mode, (width, height), fill)
