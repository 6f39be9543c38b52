from enum import Enum
import numpy as np
class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"

RAW_MAX = 255

max_non_hue = {
    FormatType.INT: RAW_MAX,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

default_format_dtypes = {
    FormatType.INT: np.uint8,
    FormatType.FLOAT: np.float32,
    FormatType.PERCENTAGE: np.uint8,
}

HUE_360 = 360
