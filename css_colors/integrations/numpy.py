from __future__ import annotations
import numpy as np
from numpy.typing import NDArray

from ..colors.color import get_color_class
from ..colors.color_base import ColorBase
from ..types.format_type import FormatType, default_format_dtypes


def to_array(color: ColorBase, format_type: FormatType = FormatType.FLOAT, dtype=None) -> NDArray:
    """
    Channel values of ``color`` as a 1-D array.

    Hue stays in degrees; the other channels use the ``format_type`` view.
    The default dtype follows ``default_format_dtypes`` and is widened when
    a hue in degrees would not fit.

    Args:
        color: Any color instance
        format_type: View for the non-hue channels
        dtype: Explicit numpy dtype, overriding the default

    Returns:
        np.ndarray of shape (num_channels,)
    """
    format_type = FormatType(format_type)
    if dtype is None:
        dtype = default_format_dtypes[format_type]
        if color.has_hue and np.issubdtype(dtype, np.integer):
            dtype = np.uint16
    return np.asarray(color.values(format_type), dtype=dtype)


def from_array(values, mode: str, format_type: FormatType = FormatType.FLOAT) -> ColorBase:
    """Build a color of ``mode`` from a 1-D array read in the ``format_type`` view."""
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D array of channels, got shape {arr.shape}")
    cls = get_color_class(mode)
    format_type = FormatType(format_type)
    if format_type == FormatType.INT:
        items = [int(v) for v in arr]
    else:
        items = [v.item() for v in arr]
    return cls.from_values(items, format_type)
