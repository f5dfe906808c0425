"""Animation clocks supplying elapsed time once per update cycle."""

from __future__ import annotations

import time
from typing import Callable, Optional


class AnimationClock:
    """
    Wall clock measuring seconds since the first tick.

    The start instant is captured on the first call to tick(), so a clock
    built long before the first update still starts at zero. There is no
    pause: elapsed always tracks real time from that instant.
    """

    def __init__(self, time_source: Callable[[], float] = time.perf_counter):
        """
        Initialize the clock.

        Args:
            time_source: Monotonic time function returning seconds
        """
        self._time_source = time_source
        self.start: Optional[float] = None
        self.elapsed: float = 0.0

    @property
    def started(self) -> bool:
        return self.start is not None

    def tick(self) -> float:
        """
        Advance to the current instant.

        Returns:
            Seconds since the first tick
        """
        now = self._time_source()
        if self.start is None:
            self.start = now
        self.elapsed = max(0.0, now - self.start)
        return self.elapsed

    def reset(self) -> None:
        """Forget the start instant; the next tick restarts from zero."""
        self.start = None
        self.elapsed = 0.0

    def __repr__(self):
        return f"AnimationClock(elapsed={self.elapsed:.3f}s, started={self.started})"


class FixedStepClock:
    """
    Deterministic clock advancing a fixed step per tick.

    The first tick yields 0.0, then step, 2 * step, and so on. Used for
    headless frame capture where output must not depend on wall time.
    """

    def __init__(self, step: float):
        if step <= 0.0:
            raise ValueError(f"Clock step must be positive, got {step}")
        self.step = step
        self.ticks = 0
        self.elapsed = 0.0

    def tick(self) -> float:
        self.elapsed = self.ticks * self.step
        self.ticks += 1
        return self.elapsed

    def reset(self) -> None:
        self.ticks = 0
        self.elapsed = 0.0

    def __repr__(self):
        return f"FixedStepClock(step={self.step}, elapsed={self.elapsed:.3f}s)"
