"""
Animation App

Runs update cycles over a scene: the clock ticks once, the track
systems write evaluated values onto their targets, and an optional
frame capture renders the result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Union

from ..animation.systems import sprite_track_system, transform_track_system
from .clock import AnimationClock, FixedStepClock
from .scene import Scene

if TYPE_CHECKING:
    from PIL import Image

    from ..rendering.frame_capture import FrameCapture

logger = logging.getLogger(__name__)


class AnimationApp:
    """
    Drives a scene's animation one cycle at a time.

    Cycle order is fixed: clock tick, transform tracks, sprite tracks,
    capture. Both track systems read the same elapsed value.
    """

    def __init__(self, scene: Optional[Scene] = None,
                 clock: Optional[Union[AnimationClock, FixedStepClock]] = None,
                 capture: Optional[FrameCapture] = None):
        """
        Initialize the app.

        Args:
            scene: Scene to animate (default: empty scene)
            clock: Elapsed time source (default: wall clock)
            capture: Frame capture run after each cycle, if any
        """
        self.scene = scene if scene is not None else Scene()
        self.clock = clock if clock is not None else AnimationClock()
        self.capture = capture
        self.frame_count = 0
        self.last_frame: Optional[Image.Image] = None

    @property
    def elapsed(self) -> float:
        return self.clock.elapsed

    def update(self) -> float:
        """
        Run a single update cycle.

        Returns:
            Elapsed seconds used for this cycle
        """
        elapsed = self.clock.tick()

        transform_track_system(elapsed, self.scene.transform_pairs())
        sprite_track_system(elapsed, self.scene.sprite_pairs())

        self.last_frame = None
        if self.capture is not None:
            self.last_frame = self.capture.capture(self.scene)

        self.frame_count += 1
        return elapsed

    def run(self, frames: int) -> List[Image.Image]:
        """
        Run several update cycles.

        Args:
            frames: Number of cycles

        Returns:
            Captured images, one per cycle (empty without a capture)
        """
        if frames < 0:
            raise ValueError(f"Frame count must be non-negative, got {frames}")

        logger.info("Running %d frames over %d objects", frames, self.scene.get_object_count())
        images = []
        for _ in range(frames):
            self.update()
            if self.capture is not None:
                images.append(self.last_frame)
        logger.info("Finished at %.3fs after %d frames", self.elapsed, self.frame_count)
        return images

    def __repr__(self):
        return f"AnimationApp(frames={self.frame_count}, elapsed={self.elapsed:.3f}s)"
