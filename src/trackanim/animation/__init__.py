"""
Animation System

Keyframe tracks, easing curves and the systems applying them.
"""

from .easing import EaseFunction, calc
from .keys import Key, BoolKey, TrackConstructionError, lerp
from .track import Track, BoolTrack
from .components import TransformTrack, SpriteTrack
from .systems import transform_track_system, sprite_track_system

__all__ = [
    'EaseFunction',
    'calc',
    'Key',
    'BoolKey',
    'TrackConstructionError',
    'lerp',
    'Track',
    'BoolTrack',
    'TransformTrack',
    'SpriteTrack',
    'transform_track_system',
    'sprite_track_system',
]
