"""Asset loaders"""
from .texture_loader import TextureLoader

__all__ = ["TextureLoader"]
