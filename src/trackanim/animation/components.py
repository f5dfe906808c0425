"""
Track Components

Per-property track bundles attached to scene objects.
"""

from dataclasses import dataclass, field

from .track import BoolTrack, Track


@dataclass
class TransformTrack:
    """Tracks driving a Transform. Rotation tracks are Euler angles in radians."""
    position_x: Track = field(default_factory=Track)
    position_y: Track = field(default_factory=Track)
    position_z: Track = field(default_factory=Track)
    rotation_x: Track = field(default_factory=Track)
    rotation_y: Track = field(default_factory=Track)
    rotation_z: Track = field(default_factory=Track)
    scale_x: Track = field(default_factory=Track)
    scale_y: Track = field(default_factory=Track)
    scale_z: Track = field(default_factory=Track)


@dataclass
class SpriteTrack:
    """Tracks driving a Sprite."""
    color_r: Track = field(default_factory=Track)
    color_g: Track = field(default_factory=Track)
    color_b: Track = field(default_factory=Track)
    color_a: Track = field(default_factory=Track)
    flip_x: BoolTrack = field(default_factory=BoolTrack)
    flip_y: BoolTrack = field(default_factory=BoolTrack)
    visible: BoolTrack = field(default_factory=BoolTrack)
    anchor_x: Track = field(default_factory=Track)
    anchor_y: Track = field(default_factory=Track)
