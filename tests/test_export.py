"""Tests for handing textures to pygame."""
import pytest

from planetgen import generate_planet
from planetgen.render.export import load_texture_png, save_texture_png, texture_to_surface


@pytest.fixture(scope="module")
def texture():
    return generate_planet(42, surface_type="rocky", texture_size=12).texture


def test_surface_matches_pixels(texture):
    surface = texture_to_surface(texture)
    assert surface.get_size() == (12, 12)
    for x, y in [(0, 0), (11, 0), (3, 7), (11, 11)]:
        assert tuple(surface.get_at((x, y))) == tuple(int(c) for c in texture.pixels[y, x])


def test_png_keeps_pixels(tmp_path, texture):
    path = save_texture_png(texture, tmp_path / "nested" / "rocky.png")
    assert path.exists()
    assert load_texture_png(path) == texture
