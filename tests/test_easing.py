"""Tests for easing curves"""

import math

import pytest
import numpy as np

from src.trackanim.animation import easing
from src.trackanim.animation.easing import EaseFunction, calc


@pytest.mark.parametrize("ease", list(EaseFunction))
def test_curve_endpoints(ease):
    """Every curve maps 0 to 0 and 1 to 1"""
    assert np.isclose(calc(0.0, ease), 0.0, atol=1e-9)
    assert np.isclose(calc(1.0, ease), 1.0, atol=1e-9)


def test_no_curve_is_identity():
    """Without a curve progress is unchanged, even out of range"""
    for t in (-2.0, 0.0, 0.3, 1.0, 7.5):
        assert calc(t) == t


def test_known_values():
    """Spot-check curve formulas"""
    assert calc(0.5, EaseFunction.QUADRATIC_IN) == 0.25
    assert calc(0.5, EaseFunction.QUADRATIC_OUT) == 0.75
    assert calc(0.5, EaseFunction.CUBIC_IN) == 0.125
    assert calc(0.5, EaseFunction.CUBIC_OUT) == 0.875
    assert calc(0.5, EaseFunction.CUBIC_IN_OUT) == 0.5
    assert np.isclose(calc(0.5, EaseFunction.SINE_OUT), math.sin(math.pi / 4))
    assert np.isclose(calc(0.5, EaseFunction.SINE_IN_OUT), 0.5)
    assert np.isclose(calc(0.5, EaseFunction.EXPONENTIAL_IN_OUT), 0.5)
    assert np.isclose(calc(0.5, EaseFunction.BOUNCE_IN_OUT), 0.5)


def test_out_of_range_uses_formula():
    """Out-of-range progress is evaluated, not clamped"""
    assert calc(2.0, EaseFunction.CUBIC_IN) == 8.0
    assert calc(-1.0, EaseFunction.QUADRATIC_IN) == 1.0
    assert calc(1.5, EaseFunction.CUBIC_OUT) == 1.125
    assert np.isclose(calc(2.0, EaseFunction.EXPONENTIAL_IN), 2.0 ** 10)


def test_circular_outside_domain_is_nan():
    """Circular curves return nan where the square root is undefined"""
    assert math.isnan(calc(2.0, EaseFunction.CIRCULAR_IN))
    assert math.isnan(calc(-0.5, EaseFunction.CIRCULAR_OUT))


def test_exponential_overflow_is_inf():
    """Overflowing powers saturate instead of raising"""
    assert calc(500.0, EaseFunction.EXPONENTIAL_IN) == math.inf
    assert calc(-500.0, EaseFunction.EXPONENTIAL_OUT) == -math.inf


def test_curves_are_total_over_reals():
    """No curve raises for finite progress values"""
    for ease in EaseFunction:
        for t in np.linspace(-3.0, 3.0, 61):
            calc(float(t), ease)


def test_in_out_symmetry():
    """In/out pairs mirror each other"""
    for t in (0.1, 0.25, 0.6, 0.9):
        assert np.isclose(easing.cubic_out(t), 1.0 - easing.cubic_in(1.0 - t))
        assert np.isclose(easing.bounce_in(t), 1.0 - easing.bounce_out(1.0 - t))


def test_from_name():
    """Curves resolve from several spellings"""
    assert EaseFunction.from_name("CubicIn") is EaseFunction.CUBIC_IN
    assert EaseFunction.from_name("cubic_in") is EaseFunction.CUBIC_IN
    assert EaseFunction.from_name("cubic-in-out") is EaseFunction.CUBIC_IN_OUT
    assert EaseFunction.from_name("BOUNCE_OUT") is EaseFunction.BOUNCE_OUT

    with pytest.raises(ValueError):
        EaseFunction.from_name("wobbly")


def test_member_is_callable():
    """Enum members apply their curve directly"""
    assert EaseFunction.CUBIC_IN(0.5) == calc(0.5, EaseFunction.CUBIC_IN)


def test_every_member_has_a_function():
    assert set(easing.EASE_FUNCTIONS) == set(EaseFunction)
