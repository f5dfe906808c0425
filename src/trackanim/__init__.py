"""
TrackAnim - Keyframe Animation Tracks

Scalar and boolean keyframe tracks evaluated against elapsed time,
with a small scene host that applies them to transforms and sprites.
"""

# Configuration
from .config.settings import *

# Animation
from .animation import (
    EaseFunction,
    Key,
    BoolKey,
    Track,
    BoolTrack,
    TrackConstructionError,
    TransformTrack,
    SpriteTrack,
    transform_track_system,
    sprite_track_system,
)

# Core
from .core import AnimationApp, AnimationClock, FixedStepClock, Scene, SceneObject, Sprite, Transform

# Loaders
from .loaders import TextureLoader

# Rendering
from .rendering import FrameCapture

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    # Animation
    "EaseFunction",
    "Key",
    "BoolKey",
    "Track",
    "BoolTrack",
    "TrackConstructionError",
    "TransformTrack",
    "SpriteTrack",
    "transform_track_system",
    "sprite_track_system",
    # Core
    "AnimationApp",
    "AnimationClock",
    "FixedStepClock",
    "Scene",
    "SceneObject",
    "Sprite",
    "Transform",
    # Loaders
    "TextureLoader",
    # Rendering
    "FrameCapture",
]
