from typing import Callable, Dict, Optional, Tuple, Union

from ..types.color_types import ColorSpace, family_of, has_alpha
from ..types.format_type import RAW_MAX
from ..units import Angle, Ratio
from .to_hsl import rgb_to_hsl
from .to_rgb import hsl_to_rgb

Channel = Union[Angle, Ratio]
Channels = Tuple[Channel, ...]

OPAQUE = Ratio.from_u8(RAW_MAX)

CONVERT_DIRECT: Dict[Tuple[str, str], Callable[..., Channels]] = {
    ("rgb", "hsl"): rgb_to_hsl,
    ("hsl", "rgb"): hsl_to_rgb,
}


def split_alpha(channels: Channels, space: ColorSpace) -> Tuple[Channels, Optional[Ratio]]:
    expected = 4 if has_alpha(space) else 3
    if len(channels) != expected:
        raise ValueError(f"{space} expects {expected} channels, got {len(channels)}")
    if expected == 4:
        return tuple(channels[:3]), channels[3]  # type: ignore[return-value]
    return tuple(channels), None


def convert(channels: Channels, from_space: ColorSpace, to_space: ColorSpace) -> Channels:
    """
    Convert channel tuples between the four color spaces.

    Alpha is carried through when both spaces have one, dropped when only the
    source has one, and set fully opaque when only the target has one.
    """
    from_space = from_space.lower()  # type: ignore[assignment]
    to_space = to_space.lower()  # type: ignore[assignment]
    fs, ts = family_of(from_space), family_of(to_space)

    base, alpha = split_alpha(channels, from_space)

    if fs == ts:
        converted = base
    else:
        converted = CONVERT_DIRECT[(fs, ts)](*base)

    if has_alpha(to_space):
        return tuple(converted) + (alpha if alpha is not None else OPAQUE,)
    return tuple(converted)
