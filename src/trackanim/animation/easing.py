"""
Easing

Named easing curves used to shape interpolation inside a track segment.

Every curve is evaluated by its formula, so progress values outside
[0, 1] pass straight through instead of being clamped. Domain notes:

- Circular curves take a square root and return nan where the radicand
  goes negative.
- Exponential and elastic curves return +/-inf where 2**x overflows.
- Bounce curves are piecewise; their outer pieces extend past [0, 1].
"""

import math
import re
from enum import Enum
from typing import Optional

HALF_PI = math.pi / 2.0


class EaseFunction(Enum):
    """Closed set of easing curves."""
    QUADRATIC_IN = "QuadraticIn"
    QUADRATIC_OUT = "QuadraticOut"
    QUADRATIC_IN_OUT = "QuadraticInOut"
    CUBIC_IN = "CubicIn"
    CUBIC_OUT = "CubicOut"
    CUBIC_IN_OUT = "CubicInOut"
    QUARTIC_IN = "QuarticIn"
    QUARTIC_OUT = "QuarticOut"
    QUARTIC_IN_OUT = "QuarticInOut"
    QUINTIC_IN = "QuinticIn"
    QUINTIC_OUT = "QuinticOut"
    QUINTIC_IN_OUT = "QuinticInOut"
    SINE_IN = "SineIn"
    SINE_OUT = "SineOut"
    SINE_IN_OUT = "SineInOut"
    CIRCULAR_IN = "CircularIn"
    CIRCULAR_OUT = "CircularOut"
    CIRCULAR_IN_OUT = "CircularInOut"
    EXPONENTIAL_IN = "ExponentialIn"
    EXPONENTIAL_OUT = "ExponentialOut"
    EXPONENTIAL_IN_OUT = "ExponentialInOut"
    ELASTIC_IN = "ElasticIn"
    ELASTIC_OUT = "ElasticOut"
    ELASTIC_IN_OUT = "ElasticInOut"
    BACK_IN = "BackIn"
    BACK_OUT = "BackOut"
    BACK_IN_OUT = "BackInOut"
    BOUNCE_IN = "BounceIn"
    BOUNCE_OUT = "BounceOut"
    BOUNCE_IN_OUT = "BounceInOut"

    @classmethod
    def from_name(cls, name: str) -> "EaseFunction":
        """
        Resolve a curve from its name.

        Accepts the CamelCase value ("CubicIn"), the member name
        ("CUBIC_IN") or snake case ("cubic_in", "cubic-in").

        Args:
            name: Curve name

        Returns:
            Matching EaseFunction

        Raises:
            ValueError: If no curve has that name
        """
        normalized = re.sub(r"[\s_\-]", "", name).lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown ease function: {name!r}")

    def __call__(self, t: float) -> float:
        return calc(t, self)


def _exp2(x: float) -> float:
    try:
        return 2.0 ** x
    except OverflowError:
        return math.inf


def _sqrt(x: float) -> float:
    if x < 0.0:
        return math.nan
    return math.sqrt(x)


# Polynomial ---------------------------------------------------------------

def quadratic_in(p: float) -> float:
    return p * p


def quadratic_out(p: float) -> float:
    return -(p * (p - 2.0))


def quadratic_in_out(p: float) -> float:
    if p < 0.5:
        return 2.0 * p * p
    return (-2.0 * p * p) + (4.0 * p) - 1.0


def cubic_in(p: float) -> float:
    return p * p * p


def cubic_out(p: float) -> float:
    f = p - 1.0
    return f * f * f + 1.0


def cubic_in_out(p: float) -> float:
    if p < 0.5:
        return 4.0 * p * p * p
    f = 2.0 * p - 2.0
    return 0.5 * f * f * f + 1.0


def quartic_in(p: float) -> float:
    return p * p * p * p


def quartic_out(p: float) -> float:
    f = p - 1.0
    return f * f * f * (1.0 - p) + 1.0


def quartic_in_out(p: float) -> float:
    if p < 0.5:
        return 8.0 * p * p * p * p
    f = p - 1.0
    return -8.0 * f * f * f * f + 1.0


def quintic_in(p: float) -> float:
    return p * p * p * p * p


def quintic_out(p: float) -> float:
    f = p - 1.0
    return f * f * f * f * f + 1.0


def quintic_in_out(p: float) -> float:
    if p < 0.5:
        return 16.0 * p * p * p * p * p
    f = 2.0 * p - 2.0
    return 0.5 * f * f * f * f * f + 1.0


# Trigonometric ------------------------------------------------------------

def sine_in(p: float) -> float:
    return math.sin((p - 1.0) * HALF_PI) + 1.0


def sine_out(p: float) -> float:
    return math.sin(p * HALF_PI)


def sine_in_out(p: float) -> float:
    return 0.5 * (1.0 - math.cos(p * math.pi))


def circular_in(p: float) -> float:
    return 1.0 - _sqrt(1.0 - p * p)


def circular_out(p: float) -> float:
    return _sqrt((2.0 - p) * p)


def circular_in_out(p: float) -> float:
    if p < 0.5:
        return 0.5 * (1.0 - _sqrt(1.0 - 4.0 * p * p))
    return 0.5 * (_sqrt(-((2.0 * p - 3.0) * (2.0 * p - 1.0))) + 1.0)


# Exponential --------------------------------------------------------------

def exponential_in(p: float) -> float:
    if p == 0.0:
        return p
    return _exp2(10.0 * (p - 1.0))


def exponential_out(p: float) -> float:
    if p == 1.0:
        return p
    return 1.0 - _exp2(-10.0 * p)


def exponential_in_out(p: float) -> float:
    if p == 0.0 or p == 1.0:
        return p
    if p < 0.5:
        return 0.5 * _exp2(20.0 * p - 10.0)
    return -0.5 * _exp2(-20.0 * p + 10.0) + 1.0


def elastic_in(p: float) -> float:
    return math.sin(13.0 * HALF_PI * p) * _exp2(10.0 * (p - 1.0))


def elastic_out(p: float) -> float:
    return math.sin(-13.0 * HALF_PI * (p + 1.0)) * _exp2(-10.0 * p) + 1.0


def elastic_in_out(p: float) -> float:
    if p < 0.5:
        return 0.5 * math.sin(13.0 * HALF_PI * (2.0 * p)) * _exp2(10.0 * (2.0 * p - 1.0))
    return 0.5 * (
        math.sin(-13.0 * HALF_PI * ((2.0 * p - 1.0) + 1.0)) * _exp2(-10.0 * (2.0 * p - 1.0))
        + 2.0
    )


# Overshoot ----------------------------------------------------------------

def back_in(p: float) -> float:
    return p * p * p - p * math.sin(p * math.pi)


def back_out(p: float) -> float:
    f = 1.0 - p
    return 1.0 - (f * f * f - f * math.sin(f * math.pi))


def back_in_out(p: float) -> float:
    if p < 0.5:
        f = 2.0 * p
        return 0.5 * (f * f * f - f * math.sin(f * math.pi))
    f = 1.0 - (2.0 * p - 1.0)
    return 0.5 * (1.0 - (f * f * f - f * math.sin(f * math.pi))) + 0.5


def bounce_out(p: float) -> float:
    if p < 4.0 / 11.0:
        return (121.0 * p * p) / 16.0
    if p < 8.0 / 11.0:
        return (363.0 / 40.0 * p * p) - (99.0 / 10.0 * p) + 17.0 / 5.0
    if p < 9.0 / 10.0:
        return (4356.0 / 361.0 * p * p) - (35442.0 / 1805.0 * p) + 16061.0 / 1805.0
    return (54.0 / 5.0 * p * p) - (513.0 / 25.0 * p) + 268.0 / 25.0


def bounce_in(p: float) -> float:
    return 1.0 - bounce_out(1.0 - p)


def bounce_in_out(p: float) -> float:
    if p < 0.5:
        return 0.5 * bounce_in(p * 2.0)
    return 0.5 * bounce_out(p * 2.0 - 1.0) + 0.5


EASE_FUNCTIONS = {
    EaseFunction.QUADRATIC_IN: quadratic_in,
    EaseFunction.QUADRATIC_OUT: quadratic_out,
    EaseFunction.QUADRATIC_IN_OUT: quadratic_in_out,
    EaseFunction.CUBIC_IN: cubic_in,
    EaseFunction.CUBIC_OUT: cubic_out,
    EaseFunction.CUBIC_IN_OUT: cubic_in_out,
    EaseFunction.QUARTIC_IN: quartic_in,
    EaseFunction.QUARTIC_OUT: quartic_out,
    EaseFunction.QUARTIC_IN_OUT: quartic_in_out,
    EaseFunction.QUINTIC_IN: quintic_in,
    EaseFunction.QUINTIC_OUT: quintic_out,
    EaseFunction.QUINTIC_IN_OUT: quintic_in_out,
    EaseFunction.SINE_IN: sine_in,
    EaseFunction.SINE_OUT: sine_out,
    EaseFunction.SINE_IN_OUT: sine_in_out,
    EaseFunction.CIRCULAR_IN: circular_in,
    EaseFunction.CIRCULAR_OUT: circular_out,
    EaseFunction.CIRCULAR_IN_OUT: circular_in_out,
    EaseFunction.EXPONENTIAL_IN: exponential_in,
    EaseFunction.EXPONENTIAL_OUT: exponential_out,
    EaseFunction.EXPONENTIAL_IN_OUT: exponential_in_out,
    EaseFunction.ELASTIC_IN: elastic_in,
    EaseFunction.ELASTIC_OUT: elastic_out,
    EaseFunction.ELASTIC_IN_OUT: elastic_in_out,
    EaseFunction.BACK_IN: back_in,
    EaseFunction.BACK_OUT: back_out,
    EaseFunction.BACK_IN_OUT: back_in_out,
    EaseFunction.BOUNCE_IN: bounce_in,
    EaseFunction.BOUNCE_OUT: bounce_out,
    EaseFunction.BOUNCE_IN_OUT: bounce_in_out,
}


def calc(t: float, ease: Optional[EaseFunction] = None) -> float:
    """
    Remap normalized progress through an easing curve.

    Args:
        t: Progress, nominally 0.0 to 1.0 (not clamped)
        ease: Curve to apply, or None for linear

    Returns:
        Eased progress
    """
    if ease is None:
        return t
    return EASE_FUNCTIONS[ease](t)
