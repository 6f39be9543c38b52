import copy
import pickle
import warnings

import pytest

from css_colors.errors import ColorClampWarning
from css_colors.types.format_type import FormatType
from css_colors.units import Ratio, percent, to_ratio


def test_percentage_constructor():
    assert Ratio.from_percentage(50) == Ratio(128)
    assert Ratio.from_percentage(0) == Ratio(0)
    assert Ratio.from_percentage(100) == Ratio(255)
    assert Ratio.from_percentage(50).as_percentage() == 50


@pytest.mark.parametrize("p", range(0, 101))
def test_percentage_round_trip_within_one(p):
    assert abs(Ratio.from_percentage(p).as_percentage() - p) <= 1


def test_fraction_views():
    assert Ratio.from_fraction(0.5) == Ratio(128)
    assert Ratio.from_fraction(1.0).as_u8() == 255
    assert Ratio(51).as_fraction() == pytest.approx(0.2)
    assert Ratio(128).as_format(FormatType.INT) == 128
    assert Ratio(128).as_format(FormatType.PERCENTAGE) == 50
    assert Ratio(255).as_format(FormatType.FLOAT) == 1.0
    assert Ratio.from_format(50, FormatType.PERCENTAGE) == Ratio(128)
    assert Ratio.from_format(0.5, "float") == Ratio(128)


def test_percent_helper():
    assert percent(25) == Ratio.from_percentage(25)
    r = Ratio(3)
    assert to_ratio(r) is r
    assert to_ratio(10) == percent(10)


def test_saturating_arithmetic():
    assert Ratio(200) + Ratio(200) == Ratio(255)
    assert Ratio(10) - Ratio(20) == Ratio(0)
    assert Ratio(10) + Ratio(20) == Ratio(30)


def test_saturating_arithmetic_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert Ratio(250) + Ratio(250) == Ratio(255)
        assert Ratio(0) - Ratio(250) == Ratio(0)


def test_quantized_product():
    assert Ratio(255) * Ratio(128) == Ratio(128)
    assert Ratio(128) * Ratio(128) == Ratio(64)
    assert Ratio(0) * Ratio(200) == Ratio(0)


@pytest.mark.parametrize("build, expected", [
    (lambda: Ratio(300), Ratio(255)),
    (lambda: Ratio(-4), Ratio(0)),
    (lambda: Ratio.from_percentage(150), Ratio(255)),
    (lambda: Ratio.from_fraction(-0.1), Ratio(0)),
    (lambda: Ratio.from_fraction(2.0), Ratio(255)),
])
def test_out_of_range_is_clamped_with_warning(build, expected):
    with pytest.warns(ColorClampWarning):
        assert build() == expected


@pytest.mark.parametrize("bad", ["50", None, True, 1.5])
def test_non_integer_raw_raises(bad):
    with pytest.raises(TypeError):
        Ratio(bad)


def test_nan_raises():
    with pytest.raises(ValueError):
        Ratio.from_fraction(float("nan"))


def test_text():
    assert repr(Ratio(128)) == "Ratio(128)"
    assert str(Ratio.from_percentage(50)) == "50%"


def test_ordering_and_hash():
    assert Ratio(1) < Ratio(2) <= Ratio(2)
    assert sorted([Ratio(9), Ratio(3)]) == [Ratio(3), Ratio(9)]
    assert len({Ratio(7), Ratio(7), Ratio(8)}) == 2
    assert Ratio(5) != 5


def test_immutable():
    r = Ratio(5)
    with pytest.raises(AttributeError):
        r._raw = 10
    with pytest.raises(AttributeError):
        r.other = 1


def test_copy_and_pickle():
    r = Ratio(42)
    assert copy.copy(r) == r
    assert copy.deepcopy(r) == r
    assert pickle.loads(pickle.dumps(r)) == r
