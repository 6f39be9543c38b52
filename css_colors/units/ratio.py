from __future__ import annotations
import math
import warnings
from functools import total_ordering
from numbers import Integral, Real
from typing import Union

from boundednumbers.functions import clamp

from ..errors import ColorClampWarning
from ..types.format_type import FormatType, RAW_MAX, max_non_hue
from ..utils.num_utils import round_half_away


def _checked_number(value, what: str) -> Real:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{what} must be a real number, got {type(value).__name__}")
    if isinstance(value, float) and math.isnan(value):
        raise ValueError(f"{what} cannot be NaN")
    return value


def _clamp_with_warning(value: Real, max_value: Real, what: str) -> Real:
    bounded = clamp(value, 0, max_value)
    if bounded != value:
        warnings.warn(
            f"{what} {value!r} is outside [0, {max_value}], clamped to {bounded}",
            ColorClampWarning,
            stacklevel=3,
        )
    return bounded


@total_ordering
class Ratio:
    """
    A bounded fraction backed by a single byte.

    The raw byte (0-255) is the stored value; the percentage (0-100) and the
    unit float (0.0-1.0) are views computed from it. Out-of-range input is
    clamped (with a :class:`ColorClampWarning`) instead of raising, and
    ``+``/``-`` saturate at the bounds.

    >>> Ratio.from_percentage(50)
    Ratio(128)
    >>> Ratio.from_percentage(50).as_percentage()
    50
    >>> Ratio.from_u8(200) + Ratio.from_u8(200)
    Ratio(255)
    """

    __slots__ = ("_raw", "_is_frozen")

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, "_is_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, raw: int = 0) -> None:
        raw = _checked_number(raw, "Ratio raw value")
        if not isinstance(raw, Integral):
            raise TypeError(f"Ratio raw value must be an integer, got {raw!r}; use Ratio.from_fraction")
        self._raw = int(_clamp_with_warning(int(raw), RAW_MAX, "Ratio raw value"))
        super().__setattr__("_is_frozen", True)

    @classmethod
    def _bounded(cls, raw: int) -> Ratio:
        # saturating arithmetic clamps silently
        return cls(int(clamp(raw, 0, RAW_MAX)))

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_u8(cls, value: int) -> Ratio:
        return cls(value)

    @classmethod
    def from_percentage(cls, percentage: Real) -> Ratio:
        percentage = _checked_number(percentage, "Percentage")
        percentage = _clamp_with_warning(percentage, max_non_hue[FormatType.PERCENTAGE], "Percentage")
        return cls(round_half_away(percentage * RAW_MAX / 100))

    @classmethod
    def from_fraction(cls, fraction: Real) -> Ratio:
        fraction = _checked_number(fraction, "Fraction")
        fraction = _clamp_with_warning(fraction, max_non_hue[FormatType.FLOAT], "Fraction")
        return cls(round_half_away(fraction * RAW_MAX))

    @classmethod
    def from_format(cls, value: Real, format_type: FormatType) -> Ratio:
        format_type = FormatType(format_type)
        if format_type == FormatType.INT:
            return cls.from_u8(value)
        if format_type == FormatType.PERCENTAGE:
            return cls.from_percentage(value)
        return cls.from_fraction(value)

    # ------------------ VIEWS ------------------
    def as_u8(self) -> int:
        return self._raw

    def as_percentage(self) -> int:
        return round_half_away(self._raw * 100 / RAW_MAX)

    def as_fraction(self) -> float:
        return self._raw / RAW_MAX

    def as_format(self, format_type: FormatType) -> Union[int, float]:
        format_type = FormatType(format_type)
        if format_type == FormatType.INT:
            return self.as_u8()
        if format_type == FormatType.PERCENTAGE:
            return self.as_percentage()
        return self.as_fraction()

    # ------------------ ARITHMETIC ------------------
    def __add__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio._bounded(self._raw + other._raw)

    def __sub__(self, other: Ratio) -> Ratio:
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio._bounded(self._raw - other._raw)

    def __mul__(self, other: Ratio) -> Ratio:
        """Byte-quantized product of the two fractions."""
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(round_half_away(self.as_fraction() * other.as_fraction() * RAW_MAX))

    # ------------------ COMPARISON ------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self._raw < other._raw

    def __hash__(self) -> int:
        return hash((Ratio, self._raw))

    def __reduce__(self):
        return (Ratio, (self._raw,))

    def __repr__(self) -> str:
        return f"Ratio({self._raw})"

    def __str__(self) -> str:
        return f"{self.as_percentage()}%"


def percent(percentage: Real) -> Ratio:
    """Shorthand for :meth:`Ratio.from_percentage`."""
    return Ratio.from_percentage(percentage)


def to_ratio(value: Union[Ratio, Real]) -> Ratio:
    """Accept a :class:`Ratio` as-is, or read a plain number as a percentage."""
    if isinstance(value, Ratio):
        return value
    return Ratio.from_percentage(value)
