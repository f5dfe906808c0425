"""Tests for AnimationApp update cycles"""

import pytest
import numpy as np
from pyrr import Vector3

from src.trackanim.animation.components import SpriteTrack, TransformTrack
from src.trackanim.animation.keys import BoolKey, Key
from src.trackanim.animation.track import BoolTrack, Track
from src.trackanim.core.app import AnimationApp
from src.trackanim.core.clock import AnimationClock, FixedStepClock
from src.trackanim.core.scene import Scene, SceneObject, Sprite, Transform
from src.trackanim.rendering.frame_capture import FrameCapture


def slide_scene():
    scene = Scene()
    scene.add_object(SceneObject(
        sprite=Sprite(),
        transform_track=TransformTrack(
            position_x=Track([Key(value=0.0, duration=0.0), Key(value=500.0, duration=10.0)]),
        ),
        sprite_track=SpriteTrack(
            flip_x=BoolTrack([
                BoolKey(value=False, duration=0.0),
                BoolKey(value=True, duration=2.0),
                BoolKey(value=True, duration=2.0),
            ]),
        ),
        name="Icon",
    ))
    return scene


def test_update_applies_both_systems():
    """One cycle ticks the clock and runs both systems"""
    scene = slide_scene()
    app = AnimationApp(scene, clock=FixedStepClock(2.5))
    icon = scene.objects[0]

    assert app.update() == 0.0
    assert icon.transform.translation.x == 0.0

    assert app.update() == 2.5
    assert np.isclose(icon.transform.translation.x, 125.0)
    assert icon.sprite.flip_x is True
    assert app.frame_count == 2


def test_run_without_capture():
    """Running without a capture returns no frames"""
    app = AnimationApp(slide_scene(), clock=FixedStepClock(1.0))
    assert app.run(12) == []
    assert app.frame_count == 12
    assert app.elapsed == 11.0
    assert app.scene.objects[0].transform.translation.x == 500.0


def test_run_with_capture():
    """Each cycle captures a frame of the configured size"""
    app = AnimationApp(
        slide_scene(),
        clock=FixedStepClock(0.5),
        capture=FrameCapture(size=(64, 32)),
    )
    images = app.run(3)

    assert len(images) == 3
    assert all(image.size == (64, 32) for image in images)
    assert app.last_frame is images[-1]


def test_run_after_capture_removed():
    """Removing the capture stops frames from being returned"""
    app = AnimationApp(
        slide_scene(),
        clock=FixedStepClock(0.5),
        capture=FrameCapture(size=(16, 16)),
    )
    assert len(app.run(2)) == 2

    app.capture = None
    assert app.run(3) == []
    assert app.last_frame is None


def test_run_rejects_negative_frames():
    app = AnimationApp(Scene(), clock=FixedStepClock(1.0))
    with pytest.raises(ValueError):
        app.run(-1)


def test_default_clock_is_wall_clock():
    """Apps without an explicit clock measure real time"""
    app = AnimationApp()
    assert isinstance(app.clock, AnimationClock)
    assert app.update() == 0.0


def test_static_objects_are_untouched():
    """Objects without tracks keep their state across cycles"""
    scene = Scene()
    obj = scene.add_object(SceneObject(
        Transform(translation=Vector3([3.0, 4.0, 5.0])),
        Sprite(color=(0.5, 0.5, 0.5, 1.0)),
    ))
    AnimationApp(scene, clock=FixedStepClock(1.0)).run(5)

    assert np.allclose(np.asarray(obj.transform.translation), [3.0, 4.0, 5.0])
    assert obj.sprite.color == (0.5, 0.5, 0.5, 1.0)
