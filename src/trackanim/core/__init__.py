"""Core host components"""
from .clock import AnimationClock, FixedStepClock
from .scene import Scene, SceneObject, Sprite, Transform
from .app import AnimationApp

__all__ = [
    "AnimationClock",
    "FixedStepClock",
    "Scene",
    "SceneObject",
    "Sprite",
    "Transform",
    "AnimationApp",
]
