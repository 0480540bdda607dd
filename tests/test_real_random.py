"""Bounds and bit-level behaviour of the binary64 generator."""

import math

import pytest

from constrained_random import PCG32, ConstrainedRealRandom, FloatFields, InvalidRange
from constrained_random.real_random import bits_to_float, float_to_bits

TRIALS = 10_000


def test_fields_decompose_known_values():
    assert FloatFields.from_float(1.5) == FloatFields(0, 1023, 1 << 51)
    assert FloatFields.from_float(-2.0) == FloatFields(1, 1024, 0)
    assert FloatFields.from_float(5e-324) == FloatFields(0, 0, 1)
    assert FloatFields(1, 1025, 1 << 50).to_float() == -5.0


def test_bit_reinterpretation():
    assert float_to_bits(-0.0) == 1 << 63
    assert float_to_bits(1.0) == 0x3FF0000000000000
    assert bits_to_float(0x7FF0000000000000) == math.inf


@pytest.mark.parametrize(
    "low, high",
    [
        (0.0, 1.0),
        (-1.0, 1.0),
        (-100.0, -1.0),
        (1.75, 3.0),
        (-3.5e-310, 2.5e-310),
        (-1e300, 1e-300),
    ],
)
def test_values_stay_inside_range(low, high):
    generator = ConstrainedRealRandom(PCG32(0xA2B94D10))

    for value in generator.generate(TRIALS, low, high):
        assert low <= value <= high


def test_single_point_range_is_exact():
    generator = ConstrainedRealRandom(PCG32(4))

    assert generator.generate(500, 1.5, 1.5) == [1.5] * 500
    assert generator.generate(50, -7.25, -7.25) == [-7.25] * 50


def test_zero_range_is_bit_identical_zero():
    generator = ConstrainedRealRandom(PCG32(4))

    for value in generator.generate(500, 0.0, 0.0):
        assert float_to_bits(value) == 0


def test_mixed_sign_range_draws_both_signs():
    generator = ConstrainedRealRandom(PCG32(17))
    values = generator.generate(1_000, -1.0, 1.0)

    assert any(value < 0 for value in values)
    assert any(value > 0 for value in values)


def test_exponent_floor_excludes_small_magnitudes():
    generator = ConstrainedRealRandom(PCG32(23))

    for value in generator.generate(2_000, 0.0, 8.0, min_exponent=0):
        assert 1.0 <= value <= 8.0


def test_exponent_floor_applies_to_negative_side():
    generator = ConstrainedRealRandom(PCG32(29))

    for value in generator.generate(2_000, -8.0, -1e-9, min_exponent=-2):
        assert -8.0 <= value <= -0.25


def test_floor_forces_negative_side_when_positive_side_is_too_small():
    generator = ConstrainedRealRandom(PCG32(1))

    for value in generator.generate(1_000, -8.0, 1e-9, min_exponent=0):
        assert -8.0 <= value <= -1.0


def test_floor_forces_positive_side_when_negative_side_is_too_small():
    generator = ConstrainedRealRandom(PCG32(1))

    for value in generator.generate(1_000, -1e-9, 8.0, min_exponent=0):
        assert 1.0 <= value <= 8.0


def test_floor_forces_single_side_in_legacy_mode():
    generator = ConstrainedRealRandom(PCG32(2), legacy_bounds=True)

    for value in generator.generate(1_000, -8.0, 1e-9, min_exponent=0):
        assert -16.0 < value <= -1.0


def test_floor_excluding_both_sides_rejected():
    with pytest.raises(InvalidRange):
        ConstrainedRealRandom(PCG32(1)).get_random(-1e-9, 1e-9, min_exponent=0)


def test_default_floor_reaches_denormals():
    generator = ConstrainedRealRandom(PCG32(31))
    values = generator.generate(4_000, 0.0, 1.0)

    assert any(FloatFields.from_float(value).exponent < 4 for value in values)


def test_floor_above_range_rejected():
    with pytest.raises(InvalidRange):
        ConstrainedRealRandom(PCG32(1)).get_random(0.0, 1.0, min_exponent=5)


@pytest.mark.parametrize("min_exponent", [-1024, 1025])
def test_unrepresentable_floor_rejected(min_exponent):
    with pytest.raises(InvalidRange):
        ConstrainedRealRandom(PCG32(1)).get_random(0.0, 1.0, min_exponent=min_exponent)


@pytest.mark.parametrize("low, high", [(2.0, 1.0), (math.nan, 1.0), (0.0, math.nan)])
def test_empty_ranges_rejected(low, high):
    with pytest.raises(InvalidRange):
        ConstrainedRealRandom(PCG32(1)).get_random(low, high)


def test_infinite_upper_bound_never_yields_nan():
    generator = ConstrainedRealRandom(PCG32(37))

    for value in generator.generate(2_000, 1.0, math.inf):
        assert not math.isnan(value)
        assert value >= 1.0


def test_legacy_mode_loosens_single_point_range():
    generator = ConstrainedRealRandom(PCG32(41), legacy_bounds=True)
    values = generator.generate(200, 1.5, 1.5)

    assert any(value != 1.5 for value in values)
    assert all(1.0 <= value < 2.0 for value in values)


def test_legacy_mode_ignores_mantissa_lower_bound():
    generator = ConstrainedRealRandom(PCG32(43), legacy_bounds=True)
    values = generator.generate(2_000, 1.75, 3.0)

    assert any(value < 1.75 for value in values)
    assert all(1.0 <= value < 4.0 for value in values)


def test_seeded_runs_repeat():
    first = ConstrainedRealRandom(PCG32(0xDEADBEEF)).generate(100, -50.0, 1e6)
    second = ConstrainedRealRandom(PCG32(0xDEADBEEF)).generate(100, -50.0, 1e6)

    assert first == second
