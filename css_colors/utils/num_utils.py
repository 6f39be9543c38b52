import math


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))
