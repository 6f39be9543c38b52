from typing import Sequence, Tuple

from ..errors import HexDecodeError

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def format_hex(values: Sequence[int]) -> str:
    """Lowercase ``#`` + two hex digits per byte."""
    return "#" + "".join(f"{v:02x}" for v in values)


def decode_hex(text, with_alpha: bool) -> Tuple[int, ...]:
    """
    Decode ``#rrggbb`` (or ``#rrggbbaa`` when ``with_alpha``) into bytes.

    The whole string is validated before it is sliced; anything that is not
    exactly a ``#`` followed by 6 (or 8) hex digits raises
    :class:`HexDecodeError` carrying the offending input.
    """
    expected = "a string in the format of #rrggbbaa" if with_alpha else "a string in the format of #rrggbb"
    length = 9 if with_alpha else 7

    if not isinstance(text, str):
        raise HexDecodeError(text, expected)
    if len(text) != length or not text.startswith("#"):
        raise HexDecodeError(text, expected)

    digits = text[1:]
    if not all(c in HEX_DIGITS for c in digits):
        raise HexDecodeError(text, expected)

    return tuple(int(digits[i:i + 2], 16) for i in range(0, len(digits), 2))
