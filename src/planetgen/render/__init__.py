"""Texture synthesis helpers.

PNG and pygame hand-off live in :mod:`planetgen.render.export`, which is not
imported here so the synthesizers run without pygame installed.
"""

from .pixels import (
    composite_over,
    fill_circle,
    hsl_to_rgb,
    radial_gradient,
    shift_columns,
)
from .textures import (
    DEFAULT_TEXTURE_SIZE,
    LIGHTWEIGHT_TEXTURE_SIZE,
    generate_gas_texture,
    generate_icy_texture,
    generate_rocky_texture,
    generate_speckled_texture,
    generate_texture,
)

__all__ = [
    "DEFAULT_TEXTURE_SIZE",
    "LIGHTWEIGHT_TEXTURE_SIZE",
    "composite_over",
    "fill_circle",
    "generate_gas_texture",
    "generate_icy_texture",
    "generate_rocky_texture",
    "generate_speckled_texture",
    "generate_texture",
    "hsl_to_rgb",
    "radial_gradient",
    "shift_columns",
]
