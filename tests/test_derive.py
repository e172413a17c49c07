"""Tests for deriving orbital profiles from draws."""
import pytest

from planetgen.core.config import GenerationCfg
from planetgen.core.derive import DERIVE_DRAWS, derive_profile, pick_surface_type
from planetgen.core.model import SurfaceType
from planetgen.core.rng import MODULUS, create_rng
from planetgen.data.palettes import SURFACE_COLORS, surface_color


class TestDeriveProfile:
    def test_consumes_exactly_five_draws(self):
        rng = create_rng(1234)
        derive_profile(rng)
        assert rng.draws == DERIVE_DRAWS == 5

    def test_seed_42_profile(self):
        draws = [705894, 1126542223, 1579310009, 565444343, 807934826]
        d = [state / MODULUS for state in draws]
        profile = derive_profile(create_rng(42))
        assert profile.orbit_radius == 4.0 + d[0] * 8.0
        assert profile.orbit_speed == 0.2 + d[1] * 0.5
        assert profile.orbit_tilt == d[2] * 0.5
        assert profile.size == 0.4 + d[3] * 1.2
        assert profile.surface_type is SurfaceType.GAS
        assert profile.color == (255, 204, 102)

    def test_draw_order(self, scripted_rng):
        profile = derive_profile(scripted_rng([0.0, 0.5, 0.25, 0.75, 0.9]))
        assert profile.orbit_radius == 4.0
        assert profile.orbit_speed == pytest.approx(0.45)
        assert profile.orbit_tilt == pytest.approx(0.125)
        assert profile.size == pytest.approx(1.3)
        assert profile.surface_type is SurfaceType.ICY

    @pytest.mark.parametrize("seed", range(0, 500, 7))
    def test_ranges(self, seed):
        profile = derive_profile(create_rng(seed))
        assert 4.0 <= profile.orbit_radius < 12.0
        assert 0.2 <= profile.orbit_speed < 0.7
        assert 0.0 <= profile.orbit_tilt < 0.5
        assert 0.4 <= profile.size < 1.6

    def test_color_follows_surface_type(self):
        for seed in range(60):
            profile = derive_profile(create_rng(seed))
            assert profile.color == SURFACE_COLORS[profile.surface_type]

    def test_custom_config(self, scripted_rng):
        cfg = GenerationCfg(orbit_radius_min=1.0, orbit_radius_span=1.0)
        profile = derive_profile(scripted_rng([0.5]), cfg)
        assert profile.orbit_radius == 1.5
        assert cfg.orbit_radius_range == (1.0, 2.0)

    def test_surface_order_from_config(self, scripted_rng):
        cfg = GenerationCfg(surface_order=(SurfaceType.ICY, SurfaceType.ROCKY))
        profile = derive_profile(scripted_rng([0.5, 0.5, 0.5, 0.5, 0.1]), cfg)
        assert profile.surface_type is SurfaceType.ICY
        assert profile.color == SURFACE_COLORS[SurfaceType.ICY]

        profile = derive_profile(scripted_rng([0.5, 0.5, 0.5, 0.5, 0.9]), cfg)
        assert profile.surface_type is SurfaceType.ROCKY

    def test_as_dict(self):
        data = derive_profile(create_rng(42)).as_dict()
        assert data["surface_type"] == "gas"
        assert data["color"] == [255, 204, 102]


class TestPickSurfaceType:
    @pytest.mark.parametrize(
        "draw,expected",
        [
            (0.0, SurfaceType.ROCKY),
            (0.33, SurfaceType.ROCKY),
            (0.34, SurfaceType.GAS),
            (0.66, SurfaceType.GAS),
            (0.67, SurfaceType.ICY),
            (0.999999, SurfaceType.ICY),
        ],
    )
    def test_thirds(self, draw, expected):
        assert pick_surface_type(draw) is expected

    def test_draw_of_one_is_clamped(self):
        assert pick_surface_type(1.0) is SurfaceType.ICY


class TestSurfaceType:
    @pytest.mark.parametrize("value", ["rocky", "Rocky", " ROCKY ", SurfaceType.ROCKY])
    def test_coerce(self, value):
        assert SurfaceType.coerce(value) is SurfaceType.ROCKY

    def test_surface_color_lookup(self):
        assert surface_color("icy") == (170, 221, 255)


class TestGenerationCfg:
    def test_defaults(self):
        cfg = GenerationCfg()
        assert cfg.surface_order == (SurfaceType.ROCKY, SurfaceType.GAS, SurfaceType.ICY)
        assert (cfg.seed_min, cfg.seed_max) == (-(2**31), 2**32 - 1)
        assert (cfg.texture_size, cfg.lightweight_texture_size) == (256, 64)

    def test_single_type_order(self):
        order = (SurfaceType.GAS,)
        assert {pick_surface_type(d, order) for d in (0.0, 0.5, 1.0)} == {SurfaceType.GAS}

    def test_empty_order_rejected(self):
        with pytest.raises(ValueError):
            GenerationCfg(surface_order=())

    def test_inverted_seed_range_rejected(self):
        with pytest.raises(ValueError):
            GenerationCfg(seed_min=10, seed_max=0)
