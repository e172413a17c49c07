"""Fixed colour tables for each surface type."""
from __future__ import annotations

from planetgen.core.model import RGB, SurfaceType

# Selection order used by the deriver; index = floor(draw * 3)
SURFACE_ORDER: tuple[SurfaceType, ...] = (
    SurfaceType.ROCKY,
    SurfaceType.GAS,
    SurfaceType.ICY,
)

SURFACE_COLORS: dict[SurfaceType, RGB] = {
    SurfaceType.ROCKY: (204, 136, 85),   # #cc8855 brown
    SurfaceType.GAS: (255, 204, 102),    # #ffcc66 amber
    SurfaceType.ICY: (170, 221, 255),    # #aaddff pale blue
}


def surface_color(surface_type: SurfaceType | str) -> RGB:
    """Return the body colour for a surface type."""
    return SURFACE_COLORS[SurfaceType.coerce(surface_type)]


__all__ = ["SURFACE_COLORS", "SURFACE_ORDER", "surface_color"]
