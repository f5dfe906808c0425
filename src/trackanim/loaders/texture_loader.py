"""Texture loader for sprite images."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from PIL import Image

logger = logging.getLogger(__name__)


class TextureLoader:
    """Loads sprite textures through Pillow and caches them by path."""

    def __init__(self, base_dir: Optional[Path | str] = None) -> None:
        """
        Args:
            base_dir: Directory relative paths are resolved against
        """
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self._textures: Dict[str, Image.Image] = {}

    def _resolve(self, path: Path | str) -> Path:
        image_path = Path(path)
        if not image_path.is_absolute() and self.base_dir is not None:
            image_path = self.base_dir / image_path
        return image_path

    def load(self, path: Path | str) -> Image.Image:
        """
        Load a texture as RGBA.

        Args:
            path: Image file, absolute or relative to base_dir

        Returns:
            Cached RGBA image

        Raises:
            FileNotFoundError: If the image does not exist
        """
        image_path = self._resolve(path)
        key = str(image_path.resolve())
        if key in self._textures:
            return self._textures[key]

        if not image_path.exists():
            raise FileNotFoundError(f"Texture not found: {image_path}")

        with Image.open(image_path) as image:
            rgba = image.convert("RGBA")
        logger.debug("Loaded texture %s (%dx%d)", image_path, rgba.width, rgba.height)

        self._textures[key] = rgba
        return rgba

    def is_loaded(self, path: Path | str) -> bool:
        return str(self._resolve(path).resolve()) in self._textures

    def release(self) -> None:
        self._textures.clear()

    def __len__(self) -> int:
        return len(self._textures)
