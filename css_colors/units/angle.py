from __future__ import annotations
from numbers import Integral, Real
from typing import Union

from boundednumbers.functions import cyclic_wrap

from ..types.format_type import HUE_360
from ..utils.num_utils import round_half_away


class Angle:
    """Whole degrees on a circle, always normalized into ``[0, 360)``.

    >>> Angle(-30).degrees()
    330
    >>> Angle(350) + Angle(20)
    Angle(10)
    """

    __slots__ = ("_degrees", "_is_frozen")

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, "_is_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, degrees: Real = 0) -> None:
        if isinstance(degrees, bool) or not isinstance(degrees, Real):
            raise TypeError(f"Angle must be a real number of degrees, got {type(degrees).__name__}")
        if not isinstance(degrees, Integral):
            degrees = round_half_away(degrees)
        self._degrees = int(cyclic_wrap(int(degrees), 0, HUE_360 - 1))
        super().__setattr__("_is_frozen", True)

    def degrees(self) -> int:
        return self._degrees

    def __add__(self, other: Union[Angle, int]) -> Angle:
        if isinstance(other, Angle):
            return Angle(self._degrees + other._degrees)
        if isinstance(other, Integral) and not isinstance(other, bool):
            return Angle(self._degrees + int(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Union[Angle, int]) -> Angle:
        if isinstance(other, Angle):
            return Angle(self._degrees - other._degrees)
        if isinstance(other, Integral) and not isinstance(other, bool):
            return Angle(self._degrees - int(other))
        return NotImplemented

    def __neg__(self) -> Angle:
        return Angle(-self._degrees)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._degrees == other._degrees

    def __hash__(self) -> int:
        return hash((Angle, self._degrees))

    def __reduce__(self):
        return (Angle, (self._degrees,))

    def __repr__(self) -> str:
        return f"Angle({self._degrees})"

    def __str__(self) -> str:
        return f"{self._degrees}deg"


def deg(degrees: Real) -> Angle:
    """Shorthand for :class:`Angle`."""
    return Angle(degrees)


def to_angle(value: Union[Angle, Real]) -> Angle:
    if isinstance(value, Angle):
        return value
    return Angle(value)
