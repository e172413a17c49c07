"""Deterministic RGBA pixel-buffer primitives.

All buffers are ``uint8`` numpy arrays of shape ``(height, width, 4)`` with
straight (non-premultiplied) alpha. Intermediate maths is done in float64 and
every stage is written back as whole bytes, rounding half to even, so the
result never depends on a platform rasterizer.
"""
from __future__ import annotations

import colorsys
import math
from numbers import Integral
from typing import Sequence

import numpy as np

from planetgen.core.errors import InvalidDimensionError
from planetgen.core.rng import RandomSource


def validate_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, Integral) or size <= 0:
        raise InvalidDimensionError(size)
    return int(size)


def new_buffer(width: int, height: int) -> np.ndarray:
    """Allocate a fully transparent black buffer."""
    width = validate_size(width)
    height = validate_size(height)
    return np.zeros((height, width, 4), dtype=np.uint8)


def to_channel_bytes(values: np.ndarray | Sequence[float]) -> np.ndarray:
    return np.clip(np.rint(np.asarray(values, dtype=np.float64)), 0, 255).astype(np.uint8)


def draw_field(rng: RandomSource, width: int, height: int) -> np.ndarray:
    """One draw per pixel in row-major order, shaped ``(height, width)``."""
    count = width * height
    values = np.fromiter((rng() for _ in range(count)), dtype=np.float64, count=count)
    return values.reshape(height, width)


def composite_over(
    dst: np.ndarray,
    src_rgb: np.ndarray | Sequence[float],
    src_alpha: np.ndarray | float,
) -> None:
    """Source-over blend ``src`` onto ``dst`` in place.

    ``src_rgb`` broadcasts against ``dst[..., :3]`` and ``src_alpha`` (0..1)
    against ``dst[..., 3]``.
    """
    src_rgb = np.asarray(src_rgb, dtype=np.float64)
    sa = np.asarray(src_alpha, dtype=np.float64)
    da = dst[..., 3].astype(np.float64) / 255.0
    out_a = sa + da * (1.0 - sa)
    weight_dst = da * (1.0 - sa)
    blended = src_rgb * sa[..., None] if sa.ndim else src_rgb * sa
    blended = blended + dst[..., :3].astype(np.float64) * weight_dst[..., None]
    with np.errstate(divide="ignore", invalid="ignore"):
        rgb = np.where(out_a[..., None] > 0.0, blended / out_a[..., None], 0.0)
    dst[..., :3] = to_channel_bytes(rgb)
    dst[..., 3] = to_channel_bytes(out_a * 255.0)


def fill_circle(
    pixels: np.ndarray,
    cx: float,
    cy: float,
    radius: float,
    color: tuple[int, int, int],
    alpha: float = 1.0,
) -> int:
    """
    Composite a filled circle onto ``pixels``.

    A pixel is covered when its centre lies inside the circle. The shape is
    clipped to the buffer. Returns the number of covered pixels.
    """
    if radius <= 0.0 or alpha <= 0.0:
        return 0
    height, width = pixels.shape[:2]
    x0 = max(0, int(math.floor(cx - radius)))
    x1 = min(width, int(math.ceil(cx + radius)) + 1)
    y0 = max(0, int(math.floor(cy - radius)))
    y1 = min(height, int(math.ceil(cy + radius)) + 1)
    if x0 >= x1 or y0 >= y1:
        return 0

    ys = np.arange(y0, y1, dtype=np.float64)[:, None] + 0.5
    xs = np.arange(x0, x1, dtype=np.float64)[None, :] + 0.5
    mask = (xs - cx) ** 2 + (ys - cy) ** 2 <= radius * radius
    covered = int(mask.sum())
    if covered == 0:
        return 0

    window = pixels[y0:y1, x0:x1]
    region = window[mask]
    composite_over(region, color, np.full(covered, min(alpha, 1.0)))
    window[mask] = region
    return covered


def shift_columns(pixels: np.ndarray, dx: int) -> np.ndarray:
    """Copy of ``pixels`` moved ``dx`` columns right, edges clamped."""
    width = pixels.shape[1]
    source = np.clip(np.arange(width) - dx, 0, width - 1)
    return pixels[:, source].copy()


def composite_image(pixels: np.ndarray, image: np.ndarray, opacity: float) -> None:
    """Draw an RGBA ``image`` of the same shape over ``pixels`` at ``opacity``."""
    src_alpha = image[..., 3].astype(np.float64) / 255.0 * opacity
    composite_over(pixels, image[..., :3].astype(np.float64), src_alpha)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[float, float, float]:
    """Convert CSS-style HSL (degrees, percent, percent) to 0..255 floats."""
    h = (hue % 360.0) / 360.0
    s = min(max(saturation / 100.0, 0.0), 1.0)
    light = min(max(lightness / 100.0, 0.0), 1.0)
    r, g, b = colorsys.hls_to_rgb(h, light, s)
    return r * 255.0, g * 255.0, b * 255.0


def radial_gradient(
    width: int,
    height: int,
    center: tuple[float, float],
    radius: float,
    inner: tuple[int, int, int],
    outer: tuple[int, int, int],
) -> np.ndarray:
    """
    Sample a two-stop radial gradient at every pixel centre.

    Returns float RGB of shape ``(height, width, 3)``. Distances beyond
    ``radius`` take the outer colour.
    """
    ys = np.arange(height, dtype=np.float64)[:, None] + 0.5
    xs = np.arange(width, dtype=np.float64)[None, :] + 0.5
    distance = np.hypot(xs - center[0], ys - center[1])
    t = np.clip(distance / radius, 0.0, 1.0) if radius > 0 else np.ones_like(distance)
    inner_arr = np.asarray(inner, dtype=np.float64)
    outer_arr = np.asarray(outer, dtype=np.float64)
    return inner_arr + (outer_arr - inner_arr) * t[..., None]


__all__ = [
    "composite_image",
    "composite_over",
    "draw_field",
    "fill_circle",
    "hsl_to_rgb",
    "new_buffer",
    "radial_gradient",
    "shift_columns",
    "to_channel_bytes",
    "validate_size",
]
