"""Unit tests for the geometric scale constructor."""

import importlib
import logging
import math
import sys
from pathlib import Path

import pytest

# Ensure project root on path for reliable imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

scale_mod = importlib.import_module("modular_scale.scale")
make_scale = scale_mod.make_scale

FACTORS = [16 / 15, 1.25, 1.5, 2.0, (1 + math.sqrt(5)) / 2]
BASES = [1.0, 12.0, 16.0]


@pytest.mark.parametrize("factor", FACTORS)
@pytest.mark.parametrize("base", BASES)
def test_exponent_zero_returns_base(factor, base):
    """Step zero of any scale is exactly its base."""
    assert make_scale(factor, base)(0) == base


@pytest.mark.parametrize("factor", FACTORS)
def test_matches_direct_power(factor):
    """Every step equals ``base * factor ** n`` computed directly."""
    scale = make_scale(factor, 12)
    for n in range(-5, 6):
        assert scale(n) == pytest.approx(12 * factor ** n, rel=1e-12)


@pytest.mark.parametrize("factor", FACTORS)
def test_consecutive_steps_differ_by_factor(factor):
    """Multiplying a step by the factor yields the next step."""
    scale = make_scale(factor, 10)
    for n in range(-4, 4):
        assert scale(n) * factor == pytest.approx(scale(n + 1), rel=1e-12)


@pytest.mark.parametrize("factor", FACTORS)
def test_symmetry_around_zero(factor):
    """``scale(n) / scale(-n)`` equals ``factor ** (2n)``."""
    scale = make_scale(factor, 7)
    for n in range(1, 5):
        assert scale(n) / scale(-n) == pytest.approx(factor ** (2 * n), rel=1e-12)


def test_negative_exponents_divide_base():
    """Negative exponents divide the base by the factor repeatedly."""
    octave = make_scale(2, 12)
    assert octave(-1) == 6.0
    assert octave(-2) == 3.0


def test_results_are_floats_for_integer_inputs():
    """Integer factor and base are coerced so results are always floats."""
    scale = make_scale(2, 3)
    assert isinstance(scale(4), float)
    assert scale.factor == 2.0 and isinstance(scale.factor, float)
    assert scale.base == 3.0 and isinstance(scale.base, float)


def test_zero_factor_collapses_steps():
    """A zero factor keeps the base at step zero and zeroes positive steps."""
    scale = make_scale(0, 5)
    assert scale(0) == 5.0
    assert scale(1) == 0.0
    assert scale(3) == 0.0
    assert scale(-1) == math.inf


def test_negative_zero_factor_keeps_sign():
    """``-0.0`` raised to an odd negative power is negative infinity."""
    scale = make_scale(-0.0, 2)
    assert scale(-1) == -math.inf
    assert scale(-2) == math.inf


def test_negative_factor_alternates_sign():
    """Negative factors flip the sign on every odd exponent."""
    scale = make_scale(-2, 1)
    assert scale(2) == 4.0
    assert scale(3) == -8.0
    assert scale(-1) == -0.5


def test_non_positive_base_is_not_rejected():
    """Negative or zero bases simply scale the output."""
    assert make_scale(2, -3)(2) == -12.0
    assert make_scale(2, 0)(5) == 0.0


def test_overflow_produces_infinity(caplog):
    """Overflowing steps become signed infinity and are logged at debug level."""
    with caplog.at_level(logging.DEBUG):
        assert make_scale(10, 1)(400) == math.inf
        assert make_scale(-10, 1)(401) == -math.inf
        assert make_scale(-10, 1)(400) == math.inf
    assert "overflowed" in caplog.text


def test_underflow_produces_zero():
    """Very negative exponents shrink to zero without raising."""
    assert make_scale(10, 1)(-400) == 0.0


def test_exponent_beyond_float_range():
    """Exponents too large for a float still follow the IEEE limits."""
    huge = 10 ** 400
    assert make_scale(2, 1)(huge) == math.inf
    assert make_scale(2, 1)(-huge) == 0.0
    assert make_scale(0.5, 1)(huge) == 0.0
    assert make_scale(1, 5)(huge) == 5.0
    assert make_scale(-2, 1)(huge + 1) == -math.inf
    assert make_scale(-1, 1)(huge + 1) == -1.0


def test_negative_factor_parity_beyond_float_precision():
    """Exponents past 2**53 keep their exact parity for the sign."""
    big = 2 ** 53
    assert make_scale(-1, 1)(big + 1) == -1.0
    assert make_scale(-1, 1)(big + 2) == 1.0
    assert make_scale(-1, 3)(-(big + 1)) == -3.0
    assert make_scale(-2, 1)(2 ** 60 + 1) == -math.inf
    tiny = make_scale(-0.5, 1)(2 ** 60 + 1)
    assert tiny == 0.0
    assert math.copysign(1.0, tiny) == -1.0


def test_degenerate_inputs_yield_nan():
    """Zero base times an infinite power gives NaN rather than an error."""
    assert math.isnan(make_scale(0, 0)(-1))
    assert math.isnan(make_scale(math.nan, 1)(2))


def test_non_integer_exponent_rejected():
    """Exponents must be integers."""
    scale = make_scale(1.25, 12)
    with pytest.raises(TypeError):
        scale(1.5)
    with pytest.raises(TypeError):
        scale("2")


def test_numpy_integer_exponent_accepted():
    """NumPy integer scalars behave like Python ints."""
    np = pytest.importorskip("numpy")
    assert make_scale(2, 3)(np.int64(3)) == 24.0


def test_scales_are_independent():
    """Building one scale does not affect another."""
    a = make_scale(2, 1)
    b = make_scale(3, 1)
    assert a(2) == 4.0
    assert b(2) == 9.0
    assert a(2) == 4.0
