"""
Track Systems

Per-cycle functions writing evaluated track values onto their targets.

A track that produces no value leaves the target property at whatever
it currently holds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Tuple, TypeVar, Union

from pyrr import Vector3

from .components import SpriteTrack, TransformTrack
from .track import BoolTrack, Track

if TYPE_CHECKING:
    from ..core.scene import Sprite, Transform

T = TypeVar("T")


def _sample(track: Union[Track, BoolTrack], elapsed: float, current: T) -> T:
    value = track.value(elapsed)
    return value if value is not None else current


def transform_track_system(elapsed: float, pairs: Iterable[Tuple[Transform, TransformTrack]]) -> None:
    """
    Apply transform tracks.

    Args:
        elapsed: Seconds since the animation started
        pairs: (transform, track) pairs to evaluate
    """
    for transform, track in pairs:
        translation = transform.translation
        rotation = transform.rotation
        scale = transform.scale

        transform.translation = Vector3([
            _sample(track.position_x, elapsed, translation.x),
            _sample(track.position_y, elapsed, translation.y),
            _sample(track.position_z, elapsed, translation.z),
        ])

        transform.scale = Vector3([
            _sample(track.scale_x, elapsed, scale.x),
            _sample(track.scale_y, elapsed, scale.y),
            _sample(track.scale_z, elapsed, scale.z),
        ])

        transform.rotation = Vector3([
            _sample(track.rotation_x, elapsed, rotation.x),
            _sample(track.rotation_y, elapsed, rotation.y),
            _sample(track.rotation_z, elapsed, rotation.z),
        ])


def sprite_track_system(elapsed: float, pairs: Iterable[Tuple[Sprite, SpriteTrack]]) -> None:
    """
    Apply sprite tracks.

    Args:
        elapsed: Seconds since the animation started
        pairs: (sprite, track) pairs to evaluate
    """
    for sprite, track in pairs:
        r, g, b, a = sprite.color
        sprite.color = (
            _sample(track.color_r, elapsed, r),
            _sample(track.color_g, elapsed, g),
            _sample(track.color_b, elapsed, b),
            _sample(track.color_a, elapsed, a),
        )

        sprite.flip_x = _sample(track.flip_x, elapsed, sprite.flip_x)
        sprite.flip_y = _sample(track.flip_y, elapsed, sprite.flip_y)
        sprite.visible = _sample(track.visible, elapsed, sprite.visible)

        anchor_x, anchor_y = sprite.anchor
        sprite.anchor = (
            _sample(track.anchor_x, elapsed, anchor_x),
            _sample(track.anchor_y, elapsed, anchor_y),
        )
