"""
pydantic v2 field types that read and write colors as hex strings.

    >>> from pydantic import BaseModel
    >>> class Theme(BaseModel):
    ...     accent: RGBField
    >>> Theme(accent="#fa8072").model_dump()
    {'accent': '#fa8072'}
"""
from __future__ import annotations
from typing import Annotated, Any, Callable

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from ..colors.color_base import ColorBase
from ..colors.hsl import HSL, HSLA
from ..colors.rgb import RGB, RGBA


def _hex_validator(cls: type[ColorBase]) -> Callable[[Any], ColorBase]:
    def validate(value: Any) -> ColorBase:
        if isinstance(value, ColorBase):
            return value.convert(cls.mode)
        # HexDecodeError is a ValueError, so pydantic reports it as a ValidationError
        return cls.from_hex(value)  # type: ignore[attr-defined]
    return validate


_HEX_PATTERN = {
    False: "^#[0-9a-fA-F]{6}$",
    True: "^#[0-9a-fA-F]{8}$",
}


def _hex_serializer(color: ColorBase) -> str:
    return color.to_hex()


def hex_field(cls: type[ColorBase]):
    """Annotated pydantic type for ``cls`` stored as ``#rrggbb[aa]``."""
    return Annotated[
        cls,
        PlainValidator(_hex_validator(cls)),
        PlainSerializer(_hex_serializer, return_type=str),
        WithJsonSchema({"type": "string", "pattern": _HEX_PATTERN[cls.mode.endswith("a")]}),
    ]


RGBField = hex_field(RGB)
RGBAField = hex_field(RGBA)
HSLField = hex_field(HSL)
HSLAField = hex_field(HSLA)
