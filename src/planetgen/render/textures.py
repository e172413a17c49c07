"""Procedural surface textures written straight into RGBA buffers."""
from __future__ import annotations

import logging
import math
from typing import Callable

import numpy as np

from planetgen.core.config import TEXTURE_CFG, TextureCfg
from planetgen.core.model import SurfaceType, TextureBuffer
from planetgen.core.rng import RandomSource
from planetgen.data.palettes import SURFACE_COLORS

from .pixels import (
    composite_image,
    draw_field,
    fill_circle,
    hsl_to_rgb,
    new_buffer,
    radial_gradient,
    shift_columns,
    to_channel_bytes,
    validate_size,
)

logger = logging.getLogger(__name__)

DEFAULT_TEXTURE_SIZE = 256
LIGHTWEIGHT_TEXTURE_SIZE = 64

_BLACK = (0, 0, 0)


# =======================
#   SURFACE GENERATORS
# =======================
def generate_rocky_texture(
    rng: RandomSource,
    size: int = DEFAULT_TEXTURE_SIZE,
    cfg: TextureCfg = TEXTURE_CFG,
) -> TextureBuffer:
    """Brown per-pixel noise with dark craters.

    One draw per pixel drives all three colour channels, then each crater
    draws radius, x, y and opacity in that order.
    """
    pixels = new_buffer(size, size)
    noise = draw_field(rng, size, size)
    base = np.asarray(cfg.rocky_base, dtype=np.float64)
    span = np.asarray(cfg.rocky_span, dtype=np.float64)
    pixels[..., :3] = to_channel_bytes(base + noise[..., None] * span)
    pixels[..., 3] = 255

    for _ in range(cfg.crater_count):
        radius = cfg.crater_radius_min + rng() * cfg.crater_radius_span
        x = rng() * size
        y = rng() * size
        alpha = cfg.crater_alpha_min + rng() * cfg.crater_alpha_span
        fill_circle(pixels, x, y, radius, _BLACK, alpha)

    return TextureBuffer.from_array(pixels)


def generate_gas_texture(
    rng: RandomSource,
    size: int = DEFAULT_TEXTURE_SIZE,
    cfg: TextureCfg = TEXTURE_CFG,
) -> TextureBuffer:
    """Horizontal HSL bands smeared by a few faint shifted copies."""
    pixels = new_buffer(size, size)
    pixels[..., 3] = 255

    for y in range(size):
        t = y / size
        hue = cfg.gas_hue_base + math.sin(
            t * cfg.gas_hue_frequency + rng() * math.pi
        ) * cfg.gas_hue_amplitude
        sat = cfg.gas_saturation_min + rng() * cfg.gas_saturation_span
        light = cfg.gas_lightness_base + math.sin(
            t * cfg.gas_lightness_frequency + rng() * math.pi
        ) * cfg.gas_lightness_amplitude
        pixels[y, :, :3] = to_channel_bytes(hsl_to_rgb(hue, sat, light))

    for _ in range(cfg.gas_blur_iterations):
        for dx in (-cfg.gas_blur_shift, cfg.gas_blur_shift):
            composite_image(pixels, shift_columns(pixels, dx), cfg.gas_blur_opacity)

    return TextureBuffer.from_array(pixels)


def generate_icy_texture(
    rng: RandomSource,
    size: int = DEFAULT_TEXTURE_SIZE,
    cfg: TextureCfg = TEXTURE_CFG,
) -> TextureBuffer:
    """White-to-pale-blue radial gradient with additive frost noise."""
    pixels = new_buffer(size, size)
    half = size / 2.0
    gradient = radial_gradient(
        size, size, (half, half), half, cfg.icy_inner_color, cfg.icy_outer_color
    )
    pixels[..., :3] = to_channel_bytes(gradient)
    pixels[..., 3] = 255

    noise = draw_field(rng, size, size) * cfg.icy_noise_amplitude
    frosted = np.minimum(255.0, pixels[..., :3].astype(np.float64) + noise[..., None])
    pixels[..., :3] = to_channel_bytes(frosted)

    return TextureBuffer.from_array(pixels)


def generate_speckled_texture(
    rng: RandomSource,
    surface_type: SurfaceType | str,
    size: int = LIGHTWEIGHT_TEXTURE_SIZE,
    cfg: TextureCfg = TEXTURE_CFG,
) -> TextureBuffer:
    """Cheap texture for small bodies: flat base colour with dark specks."""
    surface_type = SurfaceType.coerce(surface_type)
    pixels = new_buffer(size, size)
    pixels[..., :3] = SURFACE_COLORS[surface_type]
    pixels[..., 3] = 255

    for _ in range(cfg.speckle_count):
        x = rng() * size
        y = rng() * size
        radius = cfg.speckle_radius_min + rng() * cfg.speckle_radius_span
        alpha = rng() * cfg.speckle_alpha_span
        fill_circle(pixels, x, y, radius, _BLACK, alpha)

    return TextureBuffer.from_array(pixels)


# =======================
#   DISPATCH
# =======================
Synthesizer = Callable[[RandomSource, int, TextureCfg], TextureBuffer]

SYNTHESIZERS: dict[SurfaceType, Synthesizer] = {
    SurfaceType.ROCKY: generate_rocky_texture,
    SurfaceType.GAS: generate_gas_texture,
    SurfaceType.ICY: generate_icy_texture,
}


def generate_texture(
    rng: RandomSource,
    surface_type: SurfaceType | str,
    size: int = DEFAULT_TEXTURE_SIZE,
    *,
    lightweight: bool = False,
    cfg: TextureCfg = TEXTURE_CFG,
) -> TextureBuffer:
    """
    Synthesize the texture for a surface type.

    The generator continues its existing sequence, so the result depends on
    how many values were drawn before this call.

    Args:
        rng: Random source, usually the one that derived the profile
        surface_type: Which style to synthesize
        size: Edge length of the square texture in pixels
        lightweight: Use the cheap speckled style instead

    Returns:
        A new TextureBuffer

    Raises:
        UnknownSurfaceTypeError: If the surface type is not recognised
        InvalidDimensionError: If size is not a positive integer
    """
    surface_type = SurfaceType.coerce(surface_type)
    size = validate_size(size)
    logger.debug(
        "Synthesizing %s texture %dx%d (lightweight=%s)",
        surface_type.value, size, size, lightweight,
    )
    if lightweight:
        return generate_speckled_texture(rng, surface_type, size, cfg)
    return SYNTHESIZERS[surface_type](rng, size, cfg)


__all__ = [
    "DEFAULT_TEXTURE_SIZE",
    "LIGHTWEIGHT_TEXTURE_SIZE",
    "SYNTHESIZERS",
    "generate_gas_texture",
    "generate_icy_texture",
    "generate_rocky_texture",
    "generate_speckled_texture",
    "generate_texture",
]
