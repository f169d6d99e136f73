import math
import numpy as np
import pytest
from canvasgraphics.utils import (
    rationalize,
    rationalize_hue,
    rationalize_percentage,
    np_rationalize,
    validate_real,
)


@pytest.mark.parametrize("raw, expected", [
    (-10, 0.0),
    (-0.001, 0.0),
    (-720, 0.0),
    (0, 0),
    (180.5, 180.5),
    (360, 360),
    (361, 1),
    (400, 40),
    (720, 0),
    (725.5, 5.5),
])
def test_rationalize_hue(raw, expected):
    assert rationalize_hue(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw, expected", [
    (-5, 0.0),
    (0, 0),
    (42.25, 42.25),
    (100, 100),
    (150, 50),
    (200, 0),
    (100.5, 0.5),
])
def test_rationalize_percentage(raw, expected):
    assert rationalize_percentage(raw) == pytest.approx(expected)


def test_negative_values_clamp_instead_of_wrapping():
    # -10 degrees would be 350 on a circle; the rule deliberately gives 0.
    assert rationalize_hue(-10) == 0.0
    assert rationalize_percentage(-1) == 0.0


def test_rationalize_is_idempotent():
    for raw in (-50.0, 0.0, 12.5, 360.0, 400.0, 1234.5, 99999.0):
        once = rationalize(raw, 360.0)
        assert rationalize(once, 360.0) == once
    for raw in (-3.0, 0.0, 100.0, 250.0):
        once = rationalize(raw, 100.0)
        assert rationalize(once, 100.0) == once


def test_rationalize_output_always_in_range():
    for raw in np.linspace(-1000, 1000, 401):
        assert 0.0 <= rationalize(float(raw), 360.0) <= 360.0
        assert 0.0 <= rationalize(float(raw), 100.0) <= 100.0


def test_np_rationalize_matches_scalar():
    raw = np.array([-10.0, 0.0, 45.0, 360.0, 400.0, 720.0, 1000.5])
    expected = [rationalize_hue(float(v)) for v in raw]
    assert np.allclose(np_rationalize(raw, 360.0), expected)


def test_np_rationalize_per_column_periods():
    raw = np.array([
        [400.0, -5.0, 150.0, 50.0],
        [-10.0, 0.0, 0.0, 100.0],
    ])
    periods = np.array([360.0, 100.0, 100.0, 100.0])
    result = np_rationalize(raw, periods)
    assert np.allclose(result, [
        [40.0, 0.0, 50.0, 50.0],
        [0.0, 0.0, 0.0, 100.0],
    ])
    assert result.dtype == np.float64


def test_validate_real_accepts_numbers():
    assert validate_real(3) == 3
    assert isinstance(validate_real(3), int)
    assert isinstance(validate_real(2.5), float)
    assert validate_real(np.float32(1.5)) == 1.5
    assert validate_real(np.int64(7)) == 7.0


@pytest.mark.parametrize("bad", ["10", None, [1], 1 + 2j, True, False])
def test_validate_real_rejects_non_numbers(bad):
    with pytest.raises(TypeError, match="hue must be a real number"):
        validate_real(bad, "hue")


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_validate_real_rejects_non_finite(bad):
    with pytest.raises(ValueError, match="must be finite"):
        validate_real(bad)


def test_huge_ints_are_reduced_exactly():
    huge = 10**400
    assert validate_real(huge) == huge
    assert rationalize_hue(huge) == float(huge % 360)
    assert rationalize_percentage(huge + 42) == float((huge + 42) % 100)
    assert rationalize_hue(-huge) == 0.0


def test_rationalize_returns_floats():
    assert isinstance(rationalize_hue(40), float)
    assert isinstance(rationalize_hue(400), float)
    assert isinstance(rationalize_percentage(-3), float)


def test_negative_zero_becomes_positive_zero():
    assert math.copysign(1.0, rationalize_hue(-0.0)) == 1.0
    result = np_rationalize(np.array([-0.0, 0.0, 10.0]), 360.0)
    assert not np.signbit(result).any()
