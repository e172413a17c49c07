"""Hand generated textures to pygame."""
from __future__ import annotations

from pathlib import Path

import numpy as np
import pygame

from planetgen.core.model import TextureBuffer


def texture_to_surface(texture: TextureBuffer) -> pygame.Surface:
    """Return a pygame Surface that owns a copy of the texture pixels."""
    surface = pygame.image.frombuffer(
        texture.tobytes(), (texture.width, texture.height), "RGBA"
    )
    # frombuffer shares memory with the bytes object
    return surface.copy()


def save_texture_png(texture: TextureBuffer, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(texture_to_surface(texture), path.as_posix())
    return path


def load_texture_png(path: str | Path) -> TextureBuffer:
    """Read a PNG written by :func:`save_texture_png` back into a buffer."""
    surface = pygame.image.load(Path(path).as_posix())
    width, height = surface.get_size()
    raw = pygame.image.tobytes(surface, "RGBA")
    pixels = np.frombuffer(raw, dtype=np.uint8).reshape(height, width, 4)
    return TextureBuffer.from_array(pixels)


__all__ = ["load_texture_png", "save_texture_png", "texture_to_surface"]
