"""Data models for generated planets."""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .errors import UnknownSurfaceTypeError

RGB = tuple[int, int, int]


class SurfaceType(Enum):
    """Procedural texture styles a planet can be given."""

    ROCKY = "rocky"   # Brown noise with dark craters
    GAS = "gas"       # Horizontal colour bands
    ICY = "icy"       # Pale radial gradient with frost noise

    @classmethod
    def coerce(cls, value: "SurfaceType | str") -> "SurfaceType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownSurfaceTypeError(value, tuple(member.value for member in cls))


@dataclass(frozen=True)
class OrbitalProfile:
    """Static orbit and appearance parameters of one body."""

    orbit_radius: float
    orbit_speed: float
    orbit_tilt: float
    size: float
    surface_type: SurfaceType
    color: RGB

    def as_dict(self) -> dict[str, object]:
        return {
            "orbit_radius": self.orbit_radius,
            "orbit_speed": self.orbit_speed,
            "orbit_tilt": self.orbit_tilt,
            "size": self.size,
            "surface_type": self.surface_type.value,
            "color": list(self.color),
        }


@dataclass(frozen=True, eq=False)
class TextureBuffer:
    """Row-major RGBA8 image.

    ``pixels`` has shape ``(height, width, 4)`` and is read-only, so
    :meth:`tobytes` yields ``width * height * 4`` bytes in the order expected
    by image and texture upload APIs.
    """

    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.pixels.shape != (self.height, self.width, 4):
            raise ValueError(
                f"Pixel array shape {self.pixels.shape} does not match "
                f"{self.width}x{self.height} RGBA"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError("Pixel array must be uint8")
        # The caller keeps its own array; only the stored copy is frozen.
        pixels = np.array(self.pixels, copy=True, order="C")
        pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "TextureBuffer":
        pixels = np.asarray(pixels, dtype=np.uint8)
        height, width = pixels.shape[:2]
        return cls(width=width, height=height, pixels=pixels)

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def digest(self) -> str:
        """SHA-256 of the pixel bytes."""
        return hashlib.sha256(self.tobytes()).hexdigest()

    def __len__(self) -> int:
        return self.pixels.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextureBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.pixels, other.pixels)
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class GeneratedPlanet:
    """Everything derived from one seed."""

    seed: int
    profile: OrbitalProfile
    texture: TextureBuffer


__all__ = ["GeneratedPlanet", "OrbitalProfile", "RGB", "SurfaceType", "TextureBuffer"]
