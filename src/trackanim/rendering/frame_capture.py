"""
Frame Capture

CPU raster of a scene's sprites into an off-screen image, one per
update cycle.

The camera sits at the world origin looking down -z: +x is right, +y is
up and one world unit maps to one pixel, with the origin at the image
centre.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageChops, ImageOps

from ..config.settings import CLEAR_COLOR, DEFAULT_SPRITE_SIZE, FRAME_FILENAME, RENDER_TARGET_SIZE
from ..core.scene import Scene, SceneObject

logger = logging.getLogger(__name__)


def to_rgba8(color) -> Tuple[int, int, int, int]:
    """Convert a linear 0-1 RGBA color to 8-bit channels, clamping out-of-range values."""
    channels = np.clip(np.asarray(color, dtype=np.float64), 0.0, 1.0)
    return tuple(int(c) for c in np.round(channels * 255.0))


class FrameCapture:
    """Renders scene sprites into RGBA images."""

    def __init__(self, size: Tuple[int, int] = RENDER_TARGET_SIZE,
                 clear_color=CLEAR_COLOR):
        """
        Initialize capture target.

        Args:
            size: Image size in pixels (width, height)
            clear_color: Linear RGBA background
        """
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError(f"Render target size must be positive, got {size}")
        self.size = (int(width), int(height))
        self.clear_color = clear_color

    def _sprite_size(self, obj: SceneObject) -> Tuple[float, float]:
        sprite = obj.sprite
        if sprite.custom_size is not None:
            return float(sprite.custom_size[0]), float(sprite.custom_size[1])
        if sprite.texture is not None:
            return float(sprite.texture.width), float(sprite.texture.height)
        return DEFAULT_SPRITE_SIZE

    def _draw_sprite(self, canvas: Image.Image, obj: SceneObject) -> bool:
        sprite = obj.sprite
        transform = obj.transform

        base_width, base_height = self._sprite_size(obj)
        width = base_width * float(transform.scale.x)
        height = base_height * float(transform.scale.y)
        pixel_size = (int(round(abs(width))), int(round(abs(height))))
        if pixel_size[0] == 0 or pixel_size[1] == 0:
            return False

        rgba = to_rgba8(sprite.color)
        if sprite.texture is not None:
            image = sprite.texture.convert("RGBA").resize(pixel_size, Image.Resampling.BILINEAR)
            image = ImageChops.multiply(image, Image.new("RGBA", pixel_size, rgba))
        else:
            image = Image.new("RGBA", pixel_size, rgba)

        # Negative scale mirrors the same way a flip does
        if sprite.flip_x != (width < 0):
            image = ImageOps.mirror(image)
        if sprite.flip_y != (height < 0):
            image = ImageOps.flip(image)

        angle = float(transform.rotation.z)
        if angle != 0.0:
            image = image.rotate(math.degrees(angle), resample=Image.Resampling.BICUBIC, expand=True)

        # The anchor is the pivot; the quad centre sits opposite it
        offset_x = -sprite.anchor[0] * width
        offset_y = -sprite.anchor[1] * height
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        center_x = float(transform.translation.x) + offset_x * cos_a - offset_y * sin_a
        center_y = float(transform.translation.y) + offset_x * sin_a + offset_y * cos_a

        canvas_width, canvas_height = self.size
        left = int(round(canvas_width / 2.0 + center_x - image.width / 2.0))
        top = int(round(canvas_height / 2.0 - center_y - image.height / 2.0))
        canvas.paste(image, (left, top), image)
        return True

    def capture(self, scene: Scene) -> Image.Image:
        """
        Render all visible sprites, back to front by translation z.

        Args:
            scene: Scene to draw

        Returns:
            RGBA image of the configured size
        """
        canvas = Image.new("RGBA", self.size, to_rgba8(self.clear_color))
        drawn = 0
        for obj in scene.sprites():
            if not obj.sprite.visible:
                continue
            if self._draw_sprite(canvas, obj):
                drawn += 1
        logger.debug("Captured frame with %d sprites", drawn)
        return canvas

    @staticmethod
    def save(image: Image.Image, directory: Path | str, index: int,
             filename: Optional[str] = None) -> Path:
        """
        Save a captured frame as PNG.

        Args:
            image: Captured frame
            directory: Output directory (created if missing)
            index: Frame number used in the file name
            filename: Format string with an ``index`` field

        Returns:
            Path of the written file
        """
        out_dir = Path(directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        path = out_dir / (filename or FRAME_FILENAME).format(index=index)
        image.save(path)
        return path
