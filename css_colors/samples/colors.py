from ..colors.rgb import rgb, rgba
from ..colors.hsl import hsl

# NEUTRALS
WHITE = rgb(255, 255, 255)
BLACK = rgb(0, 0, 0)
GREY = rgb(230, 230, 230)
TRANSPARENT = rgba(0, 0, 0, 0.0)

# PRIMARIES
RED = rgb(255, 0, 0)
GREEN = rgb(0, 255, 0)
BLUE = rgb(0, 0, 255)

# NAMED CSS COLORS
TOMATO = rgb(255, 99, 71)
SALMON = rgb(250, 128, 114)
CORNFLOWER_BLUE = rgb(100, 149, 237)
DARK_ORANGE = rgb(255, 140, 0)
DEEP_PINK = rgb(255, 20, 147)
BLUE_VIOLET = rgb(138, 43, 226)
CHARTREUSE = rgb(127, 255, 0)
NAVY = rgb(0, 0, 128)

# HSL
HSL_SALMON = hsl(6, 93, 71)

named_colors = {
    "white": WHITE,
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "tomato": TOMATO,
    "salmon": SALMON,
    "cornflowerblue": CORNFLOWER_BLUE,
    "darkorange": DARK_ORANGE,
    "deeppink": DEEP_PINK,
    "blueviolet": BLUE_VIOLET,
    "chartreuse": CHARTREUSE,
    "navy": NAVY,
}
