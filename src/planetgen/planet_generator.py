# src/planetgen/planet_generator.py
"""Seed-driven planet generation: orbital profile plus surface texture."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Iterable, Optional

from planetgen.core.config import GENERATION_CFG, TEXTURE_CFG, GenerationCfg, TextureCfg
from planetgen.core.derive import derive_profile
from planetgen.core.model import GeneratedPlanet, OrbitalProfile, SurfaceType
from planetgen.core.rng import create_rng
from planetgen.data.palettes import SURFACE_COLORS
from planetgen.render.pixels import validate_size
from planetgen.render.textures import generate_texture

logger = logging.getLogger(__name__)


# =======================
#   SINGLE PLANET
# =======================
def _override_surface(profile: OrbitalProfile, surface_type: SurfaceType) -> OrbitalProfile:
    if profile.surface_type is surface_type:
        return profile
    return replace(profile, surface_type=surface_type, color=SURFACE_COLORS[surface_type])


def generate_planet(
    seed: int,
    *,
    surface_type: Optional[SurfaceType | str] = None,
    texture_size: Optional[int] = None,
    lightweight: bool = False,
    cfg: GenerationCfg = GENERATION_CFG,
    texture_cfg: TextureCfg = TEXTURE_CFG,
) -> GeneratedPlanet:
    """
    Generate a complete planet from a seed.

    One generator is created for the call. The profile takes the first five
    draws and the texture continues from there, so identical arguments always
    give an identical planet.

    Args:
        seed: 32-bit integer seed
        surface_type: Force a surface type instead of the derived one. The
            five profile draws are still consumed.
        texture_size: Texture edge length in pixels (defaults to the config
            value, or the lightweight size when ``lightweight`` is set)
        lightweight: Use the cheap speckled texture meant for small bodies

    Returns:
        A new GeneratedPlanet

    Raises:
        SeedOutOfRangeError: If the seed is outside ``cfg.seed_min``..``cfg.seed_max``
        UnknownSurfaceTypeError: If surface_type is not recognised
        InvalidDimensionError: If texture_size is not positive
    """
    if texture_size is None:
        texture_size = cfg.lightweight_texture_size if lightweight else cfg.texture_size
    # Argument errors surface before any draw or pixel write.
    texture_size = validate_size(texture_size)
    forced_type = SurfaceType.coerce(surface_type) if surface_type is not None else None

    rng = create_rng(seed, seed_min=cfg.seed_min, seed_max=cfg.seed_max)
    profile = derive_profile(rng, cfg)
    if forced_type is not None:
        profile = _override_surface(profile, forced_type)

    texture = generate_texture(
        rng,
        profile.surface_type,
        texture_size,
        lightweight=lightweight,
        cfg=texture_cfg,
    )
    logger.debug(
        "Generated planet seed=%d type=%s size=%.3f after %d draws",
        seed, profile.surface_type.value, profile.size, rng.draws,
    )
    return GeneratedPlanet(seed=seed, profile=profile, texture=texture)


def derive_planet_profile(seed: int, cfg: GenerationCfg = GENERATION_CFG) -> OrbitalProfile:
    """Profile only, without synthesizing a texture."""
    return derive_profile(create_rng(seed, seed_min=cfg.seed_min, seed_max=cfg.seed_max), cfg)


# =======================
#   BATCHES
# =======================
def generate_planets(
    seeds: Iterable[int],
    *,
    max_workers: Optional[int] = None,
    **kwargs,
) -> list[GeneratedPlanet]:
    """
    Generate several planets concurrently.

    Each seed gets its own generator and buffer, so the calls share nothing.
    Results keep the order of ``seeds``. Keyword arguments are passed to
    :func:`generate_planet`.
    """
    seed_list = list(seeds)
    if not seed_list:
        return []
    if max_workers == 1 or len(seed_list) == 1:
        return [generate_planet(seed, **kwargs) for seed in seed_list]

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="planetgen") as executor:
        futures = [executor.submit(generate_planet, seed, **kwargs) for seed in seed_list]
        return [future.result() for future in futures]


__all__ = ["derive_planet_profile", "generate_planet", "generate_planets"]
