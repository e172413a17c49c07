"""Deterministic procedural planets: orbital profiles and surface textures from a seed."""

from planetgen.core.errors import (
    InvalidDimensionError,
    PlanetGenError,
    SeedOutOfRangeError,
    UnknownSurfaceTypeError,
)
from planetgen.core.model import GeneratedPlanet, OrbitalProfile, SurfaceType, TextureBuffer
from planetgen.core.rng import ParkMillerRNG, create_rng, rand_range
from planetgen.core.derive import derive_profile
from planetgen.render.textures import generate_texture
from planetgen.planet_generator import derive_planet_profile, generate_planet, generate_planets

__all__ = [
    "GeneratedPlanet",
    "InvalidDimensionError",
    "OrbitalProfile",
    "ParkMillerRNG",
    "PlanetGenError",
    "SeedOutOfRangeError",
    "SurfaceType",
    "TextureBuffer",
    "UnknownSurfaceTypeError",
    "create_rng",
    "derive_planet_profile",
    "derive_profile",
    "generate_planet",
    "generate_planets",
    "generate_texture",
    "rand_range",
]
