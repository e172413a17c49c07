"""Configuration dataclasses for planet generation."""
from __future__ import annotations

from dataclasses import dataclass

from planetgen.data.palettes import SURFACE_ORDER

from .model import SurfaceType
from .rng import SEED_MAX, SEED_MIN


@dataclass(frozen=True)
class GenerationCfg:
    orbit_radius_min: float = 4.0
    orbit_radius_span: float = 8.0
    orbit_speed_min: float = 0.2
    orbit_speed_span: float = 0.5
    orbit_tilt_span: float = 0.5
    size_min: float = 0.4
    size_span: float = 1.2
    texture_size: int = 256
    lightweight_texture_size: int = 64
    # Surface types indexed by floor(draw * len(surface_order)).
    surface_order: tuple[SurfaceType, ...] = SURFACE_ORDER
    seed_min: int = SEED_MIN
    seed_max: int = SEED_MAX

    def __post_init__(self) -> None:
        if not self.surface_order:
            raise ValueError("surface_order must name at least one surface type")
        if self.seed_min > self.seed_max:
            raise ValueError(f"seed_min {self.seed_min} exceeds seed_max {self.seed_max}")

    @property
    def orbit_radius_range(self) -> tuple[float, float]:
        return self.orbit_radius_min, self.orbit_radius_min + self.orbit_radius_span

    @property
    def orbit_speed_range(self) -> tuple[float, float]:
        return self.orbit_speed_min, self.orbit_speed_min + self.orbit_speed_span

    @property
    def orbit_tilt_range(self) -> tuple[float, float]:
        return 0.0, self.orbit_tilt_span

    @property
    def size_range(self) -> tuple[float, float]:
        return self.size_min, self.size_min + self.size_span


@dataclass(frozen=True)
class TextureCfg:
    rocky_base: tuple[int, int, int] = (90, 60, 40)
    rocky_span: tuple[int, int, int] = (100, 60, 40)
    crater_count: int = 15
    crater_radius_min: float = 5.0
    crater_radius_span: float = 20.0
    crater_alpha_min: float = 0.1
    crater_alpha_span: float = 0.2
    gas_hue_base: float = 30.0
    gas_hue_amplitude: float = 20.0
    gas_hue_frequency: float = 10.0
    gas_saturation_min: float = 60.0
    gas_saturation_span: float = 20.0
    gas_lightness_base: float = 40.0
    gas_lightness_amplitude: float = 10.0
    gas_lightness_frequency: float = 5.0
    gas_blur_iterations: int = 3
    gas_blur_shift: int = 2
    gas_blur_opacity: float = 0.1
    icy_inner_color: tuple[int, int, int] = (255, 255, 255)
    icy_outer_color: tuple[int, int, int] = (160, 200, 255)
    icy_noise_amplitude: float = 50.0
    speckle_count: int = 100
    speckle_radius_min: float = 1.0
    speckle_radius_span: float = 3.0
    speckle_alpha_span: float = 0.3


GENERATION_CFG = GenerationCfg()
TEXTURE_CFG = TextureCfg()


__all__ = ["GENERATION_CFG", "TEXTURE_CFG", "GenerationCfg", "TextureCfg"]
