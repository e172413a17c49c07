"""Tests for the seeded Park-Miller generator."""
import pytest

from planetgen.core.errors import SeedOutOfRangeError
from planetgen.core.rng import MODULUS, MULTIPLIER, ParkMillerRNG, create_rng, rand_range

SEED_42_STATES = [705894, 1126542223, 1579310009, 565444343, 807934826]
SEED_42_RANGE_10_20 = [
    10.003287075088959,
    15.245871020129822,
    17.354235321913954,
    12.633055407848701,
    13.762239713111072,
]


class TestCreateRNG:
    def test_same_seed_same_sequence(self):
        rng1 = create_rng(123)
        rng2 = create_rng(123)
        seq1 = [rng1(), rng1(), rng1()]
        seq2 = [rng2(), rng2(), rng2()]
        assert seq1 == seq2

    def test_seed_123_states(self):
        rng = create_rng(123)
        assert [rng() for _ in range(3)] == [
            2067261 / MODULUS,
            384717275 / MODULUS,
            2017463455 / MODULUS,
        ]

    def test_seed_42_raw_draws(self):
        rng = create_rng(42)
        assert [rng() for _ in range(5)] == [state / MODULUS for state in SEED_42_STATES]

    def test_different_seeds_differ(self):
        assert create_rng(1)() != create_rng(2)()

    def test_instances_are_independent(self):
        a = create_rng(99)
        b = create_rng(99)
        first_a = a()
        a()
        assert b() == first_a

    def test_draws_strictly_inside_unit_interval(self):
        rng = create_rng(2024)
        for _ in range(10_000):
            value = rng()
            assert 0.0 < value < 1.0

    def test_draw_counter(self):
        rng = create_rng(5)
        assert rng.draws == 0
        for _ in range(7):
            rng()
        assert rng.draws == 7


class TestSeedNormalization:
    @pytest.mark.parametrize("seed", [0, MODULUS, -MODULUS])
    def test_zero_residue_never_sticks_at_zero(self, seed):
        rng = create_rng(seed)
        values = [rng() for _ in range(100)]
        assert all(0.0 < v < 1.0 for v in values)
        assert values[0] == (MODULUS - MULTIPLIER) / MODULUS

    def test_negative_seed_wraps_into_range(self):
        assert create_rng(-5)() == ((MODULUS - 5) * MULTIPLIER % MODULUS) / MODULUS

    def test_unsigned_32_bit_seed_accepted(self):
        rng = create_rng(2**32 - 1)
        assert 0.0 < rng() < 1.0

    @pytest.mark.parametrize("seed", [2**32, -(2**31) - 1, 10**12])
    def test_out_of_range_seed(self, seed):
        with pytest.raises(SeedOutOfRangeError):
            ParkMillerRNG(seed)

    def test_out_of_range_is_value_error(self):
        with pytest.raises(ValueError):
            create_rng(2**40)

    def test_custom_seed_bounds(self):
        assert create_rng(100, seed_min=0, seed_max=100)() == create_rng(100)()
        with pytest.raises(SeedOutOfRangeError) as excinfo:
            create_rng(101, seed_min=0, seed_max=100)
        assert "101" in str(excinfo.value)
        with pytest.raises(SeedOutOfRangeError):
            ParkMillerRNG(-1, seed_min=0, seed_max=100)

    @pytest.mark.parametrize("seed", [1.5, "42", None, True])
    def test_non_integer_seed(self, seed):
        with pytest.raises(TypeError):
            create_rng(seed)


class TestRandRange:
    def test_golden_sequence_seed_42(self):
        rng = create_rng(42)
        values = [rand_range(rng, 10, 20) for _ in range(5)]
        assert values == pytest.approx(SEED_42_RANGE_10_20, abs=1e-12)

        rng_again = create_rng(42)
        assert [rand_range(rng_again, 10, 20) for _ in range(5)] == values

    @pytest.mark.parametrize("minimum,maximum", [(10, 20), (-1.0, 1.0), (0.0, 1e-3), (4, 12)])
    def test_bounds_hold_over_many_draws(self, minimum, maximum):
        rng = create_rng(31337)
        for _ in range(10_000):
            value = rand_range(rng, minimum, maximum)
            assert minimum <= value < maximum

    def test_uses_supplied_source(self, scripted_rng):
        assert rand_range(scripted_rng([0.25]), 4, 12) == 6.0
