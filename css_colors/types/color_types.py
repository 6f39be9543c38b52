from __future__ import annotations
from typing import Literal, Tuple

ColorSpace = Literal["rgb", "rgba", "hsl", "hsla"]
ColorFamily = Literal["rgb", "hsl"]
COLOR_SPACES: Tuple[ColorSpace, ...] = ("rgb", "rgba", "hsl", "hsla")
HUE_SPACES = {"hsl", "hsla"}


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space is a hue-based space (HSL).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES


def family_of(color_space: str) -> ColorFamily:
    """Strip the alpha suffix: ``"hsla"`` -> ``"hsl"``."""
    space = color_space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown color space: {color_space!r}")
    return "hsl" if space in HUE_SPACES else "rgb"


def has_alpha(color_space: str) -> bool:
    return color_space.lower().endswith("a")


def alpha_space(color_space: str) -> ColorSpace:
    """Return the alpha-carrying sibling of a color space (idempotent)."""
    return f"{family_of(color_space)}a"  # type: ignore[return-value]
