"""Exceptions raised when a generation request is malformed."""
from __future__ import annotations


class PlanetGenError(Exception):
    """Base class for planet generation errors."""


class InvalidDimensionError(PlanetGenError, ValueError):
    """Texture size is not a positive integer."""

    def __init__(self, size: object) -> None:
        super().__init__(f"Texture size must be a positive integer, got {size!r}")
        self.size = size


class UnknownSurfaceTypeError(PlanetGenError, ValueError):
    """Surface type is outside the closed set of known types."""

    def __init__(self, surface_type: object, available: tuple[str, ...] = ()) -> None:
        message = f"Unknown surface type {surface_type!r}"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message)
        self.surface_type = surface_type


class SeedOutOfRangeError(PlanetGenError, ValueError):
    """Seed is outside the accepted range (32 bits unless configured narrower)."""

    def __init__(self, seed: int, minimum: int, maximum: int) -> None:
        super().__init__(f"Seed {seed} is outside the supported range [{minimum}, {maximum}]")
        self.seed = seed


__all__ = [
    "InvalidDimensionError",
    "PlanetGenError",
    "SeedOutOfRangeError",
    "UnknownSurfaceTypeError",
]
