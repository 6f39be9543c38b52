"""Exceptions and warnings raised by css_colors."""


class CssColorError(Exception):
    """Base exception for all css_colors errors."""

    pass


class HexDecodeError(CssColorError, ValueError):
    """Raised when a hex color string cannot be decoded.

    Attributes:
        value: The offending input, exactly as it was received.
        expected: Human readable description of the accepted form.
    """

    def __init__(self, value, expected: str):
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid hex color {value!r}: expected {expected}")


class ColorClampWarning(UserWarning):
    """Emitted when a channel value outside its range was clamped."""

    pass
