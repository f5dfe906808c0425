"""
Scene Management

Renderable targets and the objects that own them.
"""

from typing import Iterator, List, Optional, Tuple

from pyrr import Matrix44, Vector3

from ..animation.components import SpriteTrack, TransformTrack

Color = Tuple[float, float, float, float]


class Transform:
    """
    Position, rotation and scale of an object.

    Rotation is stored as Euler angles in radians, applied X, then Y,
    then Z.
    """

    def __init__(self, translation: Vector3 = None, rotation: Vector3 = None,
                 scale: Vector3 = None):
        """
        Initialize transform.

        Args:
            translation: World space position (default: origin)
            rotation: Euler angles in radians (default: none)
            scale: Scale factors (default: uniform 1.0)
        """
        self.translation = translation if translation is not None else Vector3([0.0, 0.0, 0.0])
        self.rotation = rotation if rotation is not None else Vector3([0.0, 0.0, 0.0])
        self.scale = scale if scale is not None else Vector3([1.0, 1.0, 1.0])

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> "Transform":
        """Create a transform translated to (x, y, z)."""
        return cls(translation=Vector3([x, y, z]))

    def get_model_matrix(self) -> Matrix44:
        """
        Get the model matrix (row-major, scale then rotation then translation).

        Returns:
            4x4 transformation matrix
        """
        matrix = Matrix44.from_scale(self.scale)
        matrix = matrix @ Matrix44.from_x_rotation(self.rotation.x)
        matrix = matrix @ Matrix44.from_y_rotation(self.rotation.y)
        matrix = matrix @ Matrix44.from_z_rotation(self.rotation.z)
        matrix = matrix @ Matrix44.from_translation(self.translation)
        return matrix

    def __repr__(self):
        return (f"Transform(translation={list(self.translation)}, "
                f"rotation={list(self.rotation)}, scale={list(self.scale)})")


class Sprite:
    """
    2D sprite drawn at its object's transform.

    Anchor is relative to the sprite size: (0, 0) is the centre and
    (-0.5, -0.5) the bottom-left corner.
    """

    def __init__(self, color: Color = (1.0, 1.0, 1.0, 1.0), flip_x: bool = False,
                 flip_y: bool = False, anchor: Tuple[float, float] = (0.0, 0.0),
                 custom_size: Optional[Tuple[float, float]] = None, texture=None,
                 visible: bool = True):
        """
        Initialize sprite.

        Args:
            color: Linear RGBA tint (0.0 to 1.0)
            flip_x: Mirror horizontally
            flip_y: Mirror vertically
            anchor: Pivot relative to the sprite size
            custom_size: Size in world units, overrides the texture size
            texture: PIL image, or None for a solid quad
            visible: Whether the sprite is drawn
        """
        self.color = tuple(color)
        self.flip_x = flip_x
        self.flip_y = flip_y
        self.anchor = tuple(anchor)
        self.custom_size = custom_size
        self.texture = texture
        self.visible = visible

    def __repr__(self):
        return (f"Sprite(color={self.color}, flip=({self.flip_x}, {self.flip_y}), "
                f"anchor={self.anchor}, visible={self.visible})")


class SceneObject:
    """
    An object in the scene.

    Owns its transform, an optional sprite and the tracks animating them.
    """

    def __init__(self, transform: Transform = None, sprite: Optional[Sprite] = None,
                 transform_track: Optional[TransformTrack] = None,
                 sprite_track: Optional[SpriteTrack] = None, name: str = "Object"):
        self.transform = transform if transform is not None else Transform()
        self.sprite = sprite
        self.transform_track = transform_track
        self.sprite_track = sprite_track
        self.name = name

    def __repr__(self):
        return f"SceneObject(name='{self.name}')"


class Scene:
    """Manages all objects in the scene."""

    def __init__(self):
        self.objects: List[SceneObject] = []

    def add_object(self, obj: SceneObject) -> SceneObject:
        """
        Add an object to the scene.

        Args:
            obj: SceneObject to add

        Returns:
            The added object
        """
        self.objects.append(obj)
        return obj

    def clear(self):
        """Remove all objects from the scene"""
        self.objects.clear()

    def get_object_count(self) -> int:
        return len(self.objects)

    def transform_pairs(self) -> Iterator[Tuple[Transform, TransformTrack]]:
        """Yield (transform, track) for every object with a transform track."""
        for obj in self.objects:
            if obj.transform_track is not None:
                yield obj.transform, obj.transform_track

    def sprite_pairs(self) -> Iterator[Tuple[Sprite, SpriteTrack]]:
        """Yield (sprite, track) for every object with a sprite and a sprite track."""
        for obj in self.objects:
            if obj.sprite is not None and obj.sprite_track is not None:
                yield obj.sprite, obj.sprite_track

    def sprites(self) -> List[SceneObject]:
        """Objects carrying a sprite, ordered back to front by translation z."""
        drawable = [obj for obj in self.objects if obj.sprite is not None]
        return sorted(drawable, key=lambda obj: float(obj.transform.translation.z))
