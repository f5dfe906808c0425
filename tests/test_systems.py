"""Tests for the transform and sprite track systems"""

import pytest
import numpy as np
from pyrr import Vector3

from src.trackanim.animation.components import SpriteTrack, TransformTrack
from src.trackanim.animation.keys import BoolKey, Key
from src.trackanim.animation.systems import sprite_track_system, transform_track_system
from src.trackanim.animation.track import BoolTrack, Track
from src.trackanim.core.scene import Sprite, Transform


def ramp(start, end, duration=10.0):
    return Track([Key(value=start, duration=0.0), Key(value=end, duration=duration)])


def test_transform_position_track():
    """Animated axes are written, the rest keep their current value"""
    transform = Transform(translation=Vector3([1.0, 2.0, 3.0]))
    track = TransformTrack(position_x=ramp(0.0, 500.0))

    transform_track_system(5.0, [(transform, track)])

    assert np.isclose(transform.translation.x, 250.0)
    assert np.isclose(transform.translation.y, 2.0)
    assert np.isclose(transform.translation.z, 3.0)


def test_transform_empty_track_is_untouched():
    """A bundle of empty tracks leaves the transform as it was"""
    transform = Transform(
        translation=Vector3([1.0, 2.0, 3.0]),
        rotation=Vector3([0.1, 0.2, 0.3]),
        scale=Vector3([2.0, 2.0, 2.0]),
    )
    transform_track_system(3.0, [(transform, TransformTrack())])

    assert np.allclose(np.asarray(transform.translation), [1.0, 2.0, 3.0])
    assert np.allclose(np.asarray(transform.rotation), [0.1, 0.2, 0.3])
    assert np.allclose(np.asarray(transform.scale), [2.0, 2.0, 2.0])


def test_transform_scale_and_rotation():
    """Scale and rotation tracks drive their components"""
    transform = Transform()
    track = TransformTrack(
        scale_y=ramp(1.0, 3.0, duration=2.0),
        rotation_z=ramp(0.0, np.pi, duration=2.0),
    )

    transform_track_system(1.0, [(transform, track)])

    assert np.allclose(np.asarray(transform.scale), [1.0, 2.0, 1.0])
    assert np.allclose(np.asarray(transform.rotation), [0.0, 0.0, np.pi / 2])


def test_zero_value_is_written():
    """A real 0.0 value replaces the current value"""
    transform = Transform(translation=Vector3([9.0, 9.0, 9.0]))
    track = TransformTrack(position_y=ramp(0.0, 10.0))

    transform_track_system(0.0, [(transform, track)])

    assert transform.translation.y == 0.0


def test_single_key_track_keeps_current():
    """Single-key tracks produce nothing, so the target is untouched"""
    transform = Transform(translation=Vector3([4.0, 0.0, 0.0]))
    track = TransformTrack(position_x=Track([Key(value=100.0, duration=0.0)]))

    transform_track_system(1.0, [(transform, track)])

    assert transform.translation.x == 4.0


def test_sprite_color_channels():
    """Color channels animate independently"""
    sprite = Sprite(color=(0.2, 0.4, 0.6, 1.0))
    track = SpriteTrack(color_a=ramp(1.0, 0.0, duration=4.0))

    sprite_track_system(1.0, [(sprite, track)])

    assert np.allclose(sprite.color, (0.2, 0.4, 0.6, 0.75))


def test_sprite_flags_and_anchor():
    """Flip, visibility and anchor tracks are applied"""
    sprite = Sprite()
    track = SpriteTrack(
        flip_x=BoolTrack([
            BoolKey(value=False, duration=0.0),
            BoolKey(value=True, duration=1.0),
            BoolKey(value=True, duration=1.0),
        ]),
        visible=BoolTrack([
            BoolKey(value=True, duration=0.0),
            BoolKey(value=False, duration=1.0),
        ]),
        anchor_y=ramp(0.0, -0.5, duration=2.0),
    )

    sprite_track_system(0.5, [(sprite, track)])
    assert sprite.flip_x is False
    assert sprite.visible is True
    assert sprite.anchor == (0.0, -0.125)

    sprite_track_system(1.5, [(sprite, track)])
    assert sprite.flip_x is True
    assert sprite.visible is False
    assert sprite.flip_y is False
    assert np.isclose(sprite.anchor[1], -0.375)


def test_systems_accept_many_pairs():
    """Each pair is evaluated against its own track"""
    transforms = [Transform() for _ in range(3)]
    tracks = [TransformTrack(position_x=ramp(0.0, float(i + 1) * 10.0)) for i in range(3)]

    transform_track_system(10.0, zip(transforms, tracks))

    assert [t.translation.x for t in transforms] == pytest.approx([10.0, 20.0, 30.0])
