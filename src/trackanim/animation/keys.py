"""
Keys

Control points for scalar and boolean tracks.
"""

import math
from dataclasses import dataclass
from typing import Optional

from .easing import EaseFunction, calc


class TrackConstructionError(ValueError):
    """Raised when a key or track is built from invalid data."""


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation from start to end by t."""
    return start + (end - start) * t


def _check_duration(duration: float) -> None:
    if not math.isfinite(duration) or duration < 0.0:
        raise TrackConstructionError(
            f"key duration must be a finite value >= 0, got {duration}"
        )


@dataclass(frozen=True)
class Key:
    """
    Scalar keyframe.

    ``duration`` is the length of the segment leading into this key,
    measured from the previous key. ``ease`` shapes the interpolation
    into this key; None means linear.
    """
    value: float
    duration: float
    ease: Optional[EaseFunction] = None

    def __post_init__(self):
        _check_duration(self.duration)

    def interpolate(self, previous: "Key", remaining: float) -> float:
        """
        Interpolate from the previous key towards this one.

        Args:
            previous: Key the segment starts at
            remaining: Time spent inside this segment

        Returns:
            Interpolated value
        """
        t = calc(remaining / self.duration, self.ease)
        return lerp(previous.value, self.value, t)


@dataclass(frozen=True)
class BoolKey:
    """Boolean keyframe. Stepped, so it carries no easing."""
    value: bool
    duration: float

    def __post_init__(self):
        _check_duration(self.duration)
