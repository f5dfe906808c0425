#!/usr/bin/env python3
"""
TrackAnim - Main Entry Point

Runs the demo scene headless: a sprite slides along x while the app
captures one frame per update cycle.
"""

import argparse
import logging
from pathlib import Path

from src.trackanim import (
    # Configuration
    FRAME_COUNT, FIXED_TIME_STEP, USE_WALL_CLOCK, RENDER_TARGET_SIZE, OUTPUT_DIR,
    TEXTURES_DIR, DEMO_TEXTURE, DEMO_SLIDE_DISTANCE, DEMO_SLIDE_DURATION,
    LOG_LEVEL, LOG_FORMAT,
    # Animation
    Key, Track, TransformTrack,
    # Core
    AnimationApp, AnimationClock, FixedStepClock, Scene, SceneObject, Sprite,
    # Loaders / rendering
    TextureLoader, FrameCapture,
)


logger = logging.getLogger(__name__)


def build_demo_scene(textures: TextureLoader) -> Scene:
    """
    Create the demo scene: one sprite sliding from x=0 to the slide distance.

    Falls back to a solid quad when the demo texture is missing.
    """
    scene = Scene()

    try:
        texture = textures.load(DEMO_TEXTURE)
    except FileNotFoundError as exc:
        logger.warning("Demo texture unavailable, drawing a solid quad: %s", exc)
        texture = None

    scene.add_object(SceneObject(
        sprite=Sprite(texture=texture),
        transform_track=TransformTrack(
            position_x=Track([
                Key(value=0.0, duration=0.0),
                Key(value=DEMO_SLIDE_DISTANCE, duration=DEMO_SLIDE_DURATION),
            ]),
        ),
        name="Icon",
    ))
    return scene


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the keyframe animation demo headless.")
    parser.add_argument("--frames", type=int, default=FRAME_COUNT,
                        help="Number of update cycles to run")
    parser.add_argument("--step", type=float, default=FIXED_TIME_STEP,
                        help="Seconds per cycle for the fixed-step clock")
    parser.add_argument("--wall-clock", action="store_true", default=USE_WALL_CLOCK,
                        help="Measure real elapsed time instead of fixed steps")
    parser.add_argument("--size", type=int, nargs=2, metavar=("WIDTH", "HEIGHT"),
                        default=RENDER_TARGET_SIZE, help="Render target size in pixels")
    parser.add_argument("--output", type=Path, default=None,
                        help=f"Directory to save PNG frames to (e.g. {OUTPUT_DIR})")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    clock = AnimationClock() if args.wall_clock else FixedStepClock(args.step)
    app = AnimationApp(
        scene=build_demo_scene(TextureLoader(TEXTURES_DIR)),
        clock=clock,
        capture=FrameCapture(size=tuple(args.size)),
    )

    images = app.run(args.frames)

    if args.output is not None:
        for index, image in enumerate(images):
            FrameCapture.save(image, args.output, index)
        logger.info("Saved %d frames to %s", len(images), args.output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
