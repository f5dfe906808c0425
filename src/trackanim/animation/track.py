"""
Track

Keyframe timelines evaluated against elapsed time.

Both track kinds walk their keys segment by segment. Each key's
duration is the span leading up to it, so the first key only supplies
the starting value. Past the last key the final value is held.
"""

import logging
from typing import Generic, Iterable, Optional, Tuple, TypeVar

from .keys import BoolKey, Key, TrackConstructionError

logger = logging.getLogger(__name__)

K = TypeVar("K", Key, BoolKey)


class _KeyedTrack(Generic[K]):
    """Shared storage, validation and segment walk."""

    key_type: type = Key

    def __init__(self, keys: Iterable[K] = ()):
        self.keys: Tuple[K, ...] = tuple(keys)
        for index, key in enumerate(self.keys):
            if not isinstance(key, self.key_type):
                raise TrackConstructionError(
                    f"{type(self).__name__} expected {self.key_type.__name__} keys "
                    f"(key {index} is {type(key).__name__})"
                )
        for index, key in enumerate(self.keys[1:], start=1):
            if key.duration <= 0.0:
                logger.debug("Rejected key %d of %s: duration=%s", index, type(self).__name__, key.duration)
                raise TrackConstructionError(
                    f"key duration must be positive (key {index} has duration {key.duration})"
                )

    @property
    def duration(self) -> float:
        """Time at which the final value starts being held."""
        return sum(key.duration for key in self.keys[1:])

    def _walk(self, elapsed: float) -> Tuple[Optional[K], Optional[K], Optional[K], float]:
        """
        Locate the segment containing elapsed.

        Returns:
            (previous, current, held, remaining). ``current`` is the key
            whose segment contains elapsed, or None once the walk runs past
            the last key. ``held`` is the last key fully consumed.
        """
        if not self.keys:
            return None, None, None, elapsed

        remaining = elapsed
        previous = self.keys[0]
        held = None
        for key in self.keys[1:]:
            if remaining > key.duration:
                remaining -= key.duration
                held = key
                previous = key
                continue
            return previous, key, held, remaining

        return previous, None, held, remaining

    def __len__(self) -> int:
        return len(self.keys)

    def __repr__(self):
        return f"{type(self).__name__}(keys={len(self.keys)}, duration={self.duration:.2f}s)"


class Track(_KeyedTrack[Key]):
    """
    Scalar keyframe track.

    Interpolates linearly between keys, shaped by each key's easing
    curve. Tracks with fewer than two keys never produce a value.
    """

    def value(self, elapsed: float) -> Optional[float]:
        """
        Evaluate the track.

        Args:
            elapsed: Seconds since the animation started

        Returns:
            Current value, or None if the track produces nothing
        """
        previous, current, held, remaining = self._walk(elapsed)
        if current is not None:
            return current.interpolate(previous, remaining)
        return held.value if held is not None else None


class BoolTrack(_KeyedTrack[BoolKey]):
    """
    Stepped boolean keyframe track.

    Inside a segment the value of the key the segment starts at is
    reported, so a key's value only shows up once the walk has moved
    past its segment. Past the end, the last key's value is held.
    """

    key_type = BoolKey

    def value(self, elapsed: float) -> Optional[bool]:
        """
        Evaluate the track.

        Args:
            elapsed: Seconds since the animation started

        Returns:
            Current flag, or None if the track produces nothing
        """
        previous, current, held, _ = self._walk(elapsed)
        if current is not None:
            return previous.value
        return held.value if held is not None else None
