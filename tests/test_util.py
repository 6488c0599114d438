import math

import numpy as np
import pytest

from kinematics2d.constants import TWO_PI
from kinematics2d.errors import InvalidArgumentError
from kinematics2d.util import default_min_step, f64, is_finite, normalize_heading


@pytest.mark.parametrize("angle,expected", [
    (0.0, 0.0),
    (1.0, 1.0),
    (-1.0, TWO_PI - 1.0),
    (TWO_PI, 0.0),
    (TWO_PI + 0.5, 0.5),
    (-3 * TWO_PI - 0.25, TWO_PI - 0.25),
    (50 * TWO_PI + 2.0, 2.0),
])
def test_normalize_heading(angle, expected):
    assert normalize_heading(angle) == pytest.approx(expected, abs=1e-9)


def test_normalize_heading_nan():
    assert math.isnan(normalize_heading(float("nan")))


def test_is_finite():
    assert is_finite(1.0)
    assert is_finite(0)
    assert not is_finite(float("inf"))
    assert not is_finite(float("nan"))
    assert not is_finite(None)
    assert not is_finite("1.0")


def test_f64():
    arr = f64((1, 2))
    assert arr.dtype == np.float64
    np.testing.assert_array_equal(arr, [1.0, 2.0])


@pytest.mark.parametrize("raw", ["0", "-1", "inf", "nan"])
def test_default_min_step_rejects_bad_env(monkeypatch, raw):
    monkeypatch.setenv("KINEMATICS2D_MIN_STEP", raw)
    with pytest.raises(InvalidArgumentError):
        default_min_step()


def test_default_min_step_blank_env(monkeypatch):
    monkeypatch.setenv("KINEMATICS2D_MIN_STEP", "  ")
    assert default_min_step() == 0.01
