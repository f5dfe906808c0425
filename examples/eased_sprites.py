#!/usr/bin/env python3
"""
Eased Sprites Example

Three sprites crossing the frame with different easing curves, one of
them fading out and flipping as it goes. Frames are written to
output/eased_sprites/.
"""

import sys
sys.path.insert(0, '..')

import logging

from src.trackanim import (
    PROJECT_ROOT,
    BoolKey, BoolTrack, EaseFunction, Key, Track, SpriteTrack, TransformTrack,
    AnimationApp, FixedStepClock, FrameCapture, Scene, SceneObject, Sprite, Transform,
)


def crossing(ease, y):
    """Sprite moving from x=-200 to x=200 over 3 seconds at height y."""
    return TransformTrack(
        position_x=Track([
            Key(value=-200.0, duration=0.0),
            Key(value=200.0, duration=3.0, ease=ease),
        ]),
        position_y=Track([
            Key(value=y, duration=0.0),
            Key(value=y, duration=3.0),
        ]),
    )


def create_scene() -> Scene:
    scene = Scene()

    scene.add_object(SceneObject(
        Transform(),
        Sprite(color=(0.9, 0.3, 0.3, 1.0)),
        transform_track=crossing(None, 120.0),
        name="Linear",
    ))

    scene.add_object(SceneObject(
        Transform(),
        Sprite(color=(0.3, 0.9, 0.3, 1.0)),
        transform_track=crossing(EaseFunction.CUBIC_IN_OUT, 0.0),
        name="CubicInOut",
    ))

    scene.add_object(SceneObject(
        Transform(),
        Sprite(color=(0.3, 0.3, 0.9, 1.0), anchor=(-0.5, -0.5)),
        transform_track=crossing(EaseFunction.BOUNCE_OUT, -120.0),
        sprite_track=SpriteTrack(
            color_a=Track([
                Key(value=1.0, duration=0.0),
                Key(value=0.2, duration=3.0, ease=EaseFunction.SINE_IN),
            ]),
            flip_x=BoolTrack([
                BoolKey(value=False, duration=0.0),
                BoolKey(value=True, duration=1.0),
                BoolKey(value=False, duration=1.0),
            ]),
        ),
        name="BounceOut",
    ))

    return scene


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    app = AnimationApp(create_scene(), clock=FixedStepClock(1.0 / 30.0), capture=FrameCapture(size=(640, 360)))
    frames = app.run(120)

    out_dir = PROJECT_ROOT / "output" / "eased_sprites"
    for index, frame in enumerate(frames):
        FrameCapture.save(frame, out_dir, index)
    print(f"Saved {len(frames)} frames to {out_dir}")
