from __future__ import annotations
from numbers import Real
from typing import Any, Callable, ClassVar, Optional, Tuple, Union

from ..formatting.css import format_css
from ..types.color_types import ColorFamily, ColorSpace, is_hue_space
from ..types.format_type import RAW_MAX, FormatType
from ..units import Angle, Ratio

Channel = Union[Angle, Ratio]
ChannelInput = Union[Angle, Ratio, Real]


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int]
    mode:         ClassVar[ColorSpace]
    family:       ClassVar[ColorFamily]
    channel_names: ClassVar[Tuple[str, ...]]
    # View used to read plain numbers for each channel; None marks the hue
    channel_formats: ClassVar[Tuple[Optional[FormatType], ...]]

    # Attached by color.py / adjustments.py
    convert: Callable[[ColorBase, ColorSpace], ColorBase]
    to_rgb: Callable[[ColorBase], ColorBase]
    to_rgba: Callable[[ColorBase], ColorBase]
    to_hsl: Callable[[ColorBase], ColorBase]
    to_hsla: Callable[[ColorBase], ColorBase]
    to_alpha: Callable[[ColorBase], ColorBase]
    to_hex: Callable[[ColorBase], str]
    with_alpha: Callable[[ColorBase, Optional[ChannelInput]], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *channels: ChannelInput) -> None:
        if len(channels) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels "
                f"({', '.join(self.channel_names)}), got {len(channels)}"
            )

        self._value = tuple(
            self._coerce_channel(fmt, name, channel)
            for fmt, name, channel in zip(self.channel_formats, self.channel_names, channels)
        )

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    @staticmethod
    def _coerce_channel(fmt: Optional[FormatType], name: str, channel: Any) -> Channel:
        if fmt is None:
            if isinstance(channel, Ratio):
                raise TypeError(f"Channel {name!r} is a hue and expects an Angle, got {channel!r}")
            return channel if isinstance(channel, Angle) else Angle(channel)

        if isinstance(channel, Angle):
            raise TypeError(f"Channel {name!r} expects a Ratio, got {channel!r}")
        return channel if isinstance(channel, Ratio) else Ratio.from_format(channel, fmt)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Channel, ...]:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    def values(self, format_type: Optional[FormatType] = None) -> Tuple[Union[int, float], ...]:
        """
        Plain channel numbers in the requested view.

        Hue is always whole degrees. Without ``format_type`` every channel
        uses its natural view (bytes for RGB, percentages for HSL, a unit
        float for alpha).
        """
        out = []
        for fmt, channel in zip(self.channel_formats, self._value):
            if isinstance(channel, Angle):
                out.append(channel.degrees())
            else:
                out.append(channel.as_format(format_type or fmt))
        return tuple(out)

    @classmethod
    def from_values(cls, values, format_type: Optional[FormatType] = None) -> ColorBase:
        """Build a color from plain numbers read in ``format_type`` (natural views by default)."""
        values = tuple(values)
        if format_type is None:
            return cls(*values)
        if len(values) != cls.num_channels:
            raise ValueError(f"{cls.mode} expects {cls.num_channels} values, got {len(values)}")
        return cls(*(
            v if fmt is None else Ratio.from_format(v, format_type)
            for fmt, v in zip(cls.channel_formats, values)
        ))

    # ------------------ TEXT ------------------
    def to_css(self) -> str:
        return format_css(self.mode, self._value)

    def __str__(self) -> str:
        return self.to_css()

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={channel!r}" for name, channel in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({fields})"

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __reduce__(self):
        return (self.__class__, self._value)


def _channel(index: int, doc: str) -> property:
    return property(lambda self: self._value[index], doc=doc)


class WithAlpha:
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    __slots__ = ()

    num_channels: ClassVar[int]
    mode: ClassVar[ColorSpace]
    _value: Tuple[Channel, ...]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Ratio:
        return self._value[self.alpha_index]  # type: ignore[return-value]

    a = alpha

    def with_alpha(self, alpha: Optional[ChannelInput] = None):
        """
        Return a new instance with the alpha channel replaced.

        Args:
            alpha: New alpha as a Ratio, or a plain unit float. Defaults to opaque.
        """
        if alpha is None:
            alpha = Ratio.from_u8(RAW_MAX)
        elif not isinstance(alpha, Ratio):
            alpha = Ratio.from_fraction(alpha)
        return self.__class__(*self._value[:-1], alpha)  # type: ignore[call-arg]


def build_registry(*classes: type[ColorBase]) -> dict[str, type[ColorBase]]:
    return {
        cls.mode: cls
        for cls in classes
    }
