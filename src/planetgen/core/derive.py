"""Map the first draws of a generator to an orbital profile."""
from __future__ import annotations

import math
from typing import Sequence

from planetgen.data.palettes import SURFACE_COLORS, SURFACE_ORDER

from .config import GENERATION_CFG, GenerationCfg
from .model import OrbitalProfile, SurfaceType
from .rng import RandomSource

DERIVE_DRAWS = 5


def pick_surface_type(draw: float, order: Sequence[SurfaceType] = SURFACE_ORDER) -> SurfaceType:
    """Uniformly select a surface type from ``order`` with one draw."""
    index = min(int(math.floor(draw * len(order))), len(order) - 1)
    return order[max(0, index)]


def derive_profile(rng: RandomSource, cfg: GenerationCfg = GENERATION_CFG) -> OrbitalProfile:
    """
    Derive orbit and appearance parameters.

    Consumes exactly five draws, always in the same order: orbit radius,
    orbit speed, orbit tilt, size and surface type. The colour is a lookup
    on the surface type and consumes nothing.
    """
    orbit_radius = cfg.orbit_radius_min + rng() * cfg.orbit_radius_span
    orbit_speed = cfg.orbit_speed_min + rng() * cfg.orbit_speed_span
    orbit_tilt = rng() * cfg.orbit_tilt_span
    size = cfg.size_min + rng() * cfg.size_span
    surface_type = pick_surface_type(rng(), cfg.surface_order)
    return OrbitalProfile(
        orbit_radius=orbit_radius,
        orbit_speed=orbit_speed,
        orbit_tilt=orbit_tilt,
        size=size,
        surface_type=surface_type,
        color=SURFACE_COLORS[surface_type],
    )


__all__ = ["DERIVE_DRAWS", "derive_profile", "pick_surface_type"]
