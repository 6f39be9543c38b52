"""Shared sample tables: (r, g, b) bytes -> (h degrees, s %, l %)."""

samples_rgb_hsl = {
    (0, 0, 0): (0, 0, 0),             # black
    (230, 230, 230): (0, 0, 90),      # grey
    (255, 255, 255): (0, 0, 100),     # white
    (253, 216, 229): (339, 90, 92),   # pink
    (172, 96, 83): (9, 35, 50),       # brown
    (23, 98, 119): (193, 68, 28),     # teal
    (89, 161, 54): (100, 50, 42),     # green
    (148, 189, 209): (200, 40, 70),   # pale blue
    (136, 102, 153): (280, 20, 50),   # mauve
    (230, 25, 60): (350, 80, 50),     # cherry
    (255, 99, 71): (9, 100, 64),      # tomato
    (255, 160, 122): (17, 100, 74),   # light salmon
    (138, 43, 226): (271, 76, 53),    # blue violet
    (255, 140, 0): (33, 100, 50),     # dark orange
    (255, 20, 147): (328, 100, 54),   # deep pink
    (127, 255, 0): (90, 100, 50),     # chartreuse
}

achromatic_rgb = [0, 1, 25, 64, 127, 128, 200, 230, 254, 255]


def assert_close(actual, expected, tol=1):
    """Element-wise comparison of two integer tuples within ``tol``."""
    assert len(actual) == len(expected), (actual, expected)
    for a, e in zip(actual, expected):
        assert abs(a - e) <= tol, (actual, expected)
