from .ratio import Ratio, percent, to_ratio
from .angle import Angle, deg, to_angle

__all__ = ["Ratio", "percent", "to_ratio", "Angle", "deg", "to_angle"]
