"""
Unit tests for the public normal distribution functions.

This module validates:
1. Input domain validation and error kinds
2. Accuracy against a double-precision reference over the reference sweeps
3. Exact median, symmetry, monotonicity and saturation
4. Density values
"""

import pytest
from scipy.stats import norm

from fixedcdf.core.distributions import cdf, normal_cdf, normal_pdf, pdf
from fixedcdf.utils.constants import HALF_WAD, MAX_MEAN, MAX_STD_DEV, MIN_MEAN, MIN_STD_DEV, WAD
from fixedcdf.utils.errors import InvalidMean, InvalidStandardDeviation


def reference(x, mean, std_dev):
    return norm.cdf((x - mean) / std_dev)


# ===========================
# Validation Tests
# ===========================


@pytest.mark.parametrize("std_dev", [0, -1, -WAD, MAX_STD_DEV + 1, 10**30])
def test_invalid_std_dev(std_dev):
    """σ outside [1, 1e19] raises InvalidStandardDeviation."""
    with pytest.raises(InvalidStandardDeviation, match="Invalid standard deviation"):
        cdf(0, 0, std_dev)


@pytest.mark.parametrize("mean", [MIN_MEAN - 1, MAX_MEAN + 1, -(10**30)])
def test_invalid_mean(mean):
    """μ outside [-1e20, 1e20] raises InvalidMean."""
    with pytest.raises(InvalidMean, match="Invalid mean"):
        cdf(0, mean, WAD)


def test_validation_errors_are_value_errors():
    """Callers can catch both kinds as ValueError."""
    with pytest.raises(ValueError):
        cdf(0, 0, 0)
    with pytest.raises(ValueError):
        cdf(0, MAX_MEAN + 1, WAD)


def test_std_dev_checked_before_mean():
    """With both parameters invalid the standard deviation is reported."""
    with pytest.raises(InvalidStandardDeviation):
        cdf(0, MAX_MEAN + 1, 0)


def test_bounds_are_inclusive():
    """The extreme valid parameters are accepted."""
    for mean in (MIN_MEAN, MAX_MEAN):
        for std_dev in (MIN_STD_DEV, MAX_STD_DEV):
            assert cdf(mean, mean, std_dev) == HALF_WAD


def test_x_is_unbounded():
    """x far outside any sensible range saturates instead of failing."""
    assert cdf(-(10**70), 0, MIN_STD_DEV) == 0
    assert cdf(10**70, 0, MIN_STD_DEV) == WAD


@pytest.mark.parametrize("bad", [1.0, True, "1", None])
def test_non_integer_inputs_rejected(bad):
    """Floats and other types would break determinism and are refused."""
    with pytest.raises(TypeError):
        cdf(bad, 0, WAD)
    with pytest.raises(TypeError):
        cdf(0, bad, WAD)
    with pytest.raises(TypeError):
        cdf(0, 0, bad)


# ===========================
# Known Values Tests
# ===========================


def test_standard_normal_median(standard_params):
    """x = 0, μ = 0, σ = 1 gives exactly 0.5."""
    assert cdf(0, **standard_params) == HALF_WAD


@pytest.mark.parametrize("std_dev", [1, 10, 10**9, WAD, 10**19])
@pytest.mark.parametrize("mean", [MIN_MEAN, -WAD, 0, 3, MAX_MEAN])
def test_cdf_at_mean_is_exactly_half(mean, std_dev):
    """cdf(mean, mean, σ) == 0.5 for every valid σ."""
    assert cdf(mean, mean, std_dev) == HALF_WAD


def test_shifted_distribution(shifted_params):
    """One σ above a shifted mean is Φ(1)."""
    value = cdf(28 * WAD, **shifted_params)
    assert abs(value / WAD - norm.cdf(1.0)) < 1e-15


def test_narrow_distribution(narrow_params):
    """With σ = 1e-18, one raw unit of x is one standard deviation."""
    mean = narrow_params["mean"]
    assert abs(cdf(mean + 1, **narrow_params) / WAD - norm.cdf(1.0)) < 1e-15
    assert abs(cdf(mean - 2, **narrow_params) / WAD - norm.cdf(-2.0)) < 1e-15
    assert cdf(mean + 9, **narrow_params) == WAD
    assert cdf(mean - 10**5, **narrow_params) == 0


def test_edge_cases(edge_cases):
    """Edge cases of the reference harness within 1e-8."""
    for x, mean, std_dev in edge_cases:
        value = cdf(x, mean, std_dev)
        assert abs(value / WAD - reference(x, mean, std_dev)) < 1e-8, (x, mean, std_dev)


# ===========================
# Accuracy Sweep Tests
# ===========================


def test_sweep_standard_normal():
    """Error below 1e-8 for 1000 points of x in [-1e23, 1e23]."""
    start, end, points = -(10**23), 10**23, 1000
    step = (end - start) // (points - 1)

    for i in range(points):
        x = start + step * i
        value = cdf(x, 0, WAD)
        assert abs(value / WAD - reference(x, 0, WAD)) < 1e-8, x


def test_sweep_parameter_grid():
    """Error below 1e-8 for x, μ and σ combinations of the reference grid."""
    x_step = 2 * 10**23 // 99
    mean_step = 2 * 10**20 // 10

    for i in range(100):
        x = -(10**23) + x_step * i
        for j in range(11):
            mean = -(10**20) + mean_step * j
            std_dev = 1
            while std_dev <= 10**19:
                value = cdf(x, mean, std_dev)
                assert abs(value / WAD - reference(x, mean, std_dev)) < 1e-8, (x, mean, std_dev)
                std_dev *= 10


def test_sweep_near_mean():
    """Dense sweep of ±10σ where the series branch does the work."""
    mean, std_dev = 37 * WAD // 10, 2 * WAD
    for k in range(-400, 401):
        x = mean + k * std_dev // 20
        value = cdf(x, mean, std_dev)
        assert abs(value / WAD - reference(x, mean, std_dev)) < 1e-8, x


# ===========================
# Shape Tests
# ===========================


def test_symmetry(shifted_params):
    """cdf(μ - d) + cdf(μ + d) == 1 exactly."""
    mean = shifted_params["mean"]
    for d in (1, 10**9, WAD // 7, 2 * WAD, 25 * WAD, 10**23):
        below = cdf(mean - d, **shifted_params)
        above = cdf(mean + d, **shifted_params)
        assert below + above == WAD


def test_monotone_in_x(shifted_params):
    """cdf never decreases as x grows."""
    mean = shifted_params["mean"]
    xs = [mean + k * WAD // 3 for k in range(-100, 101)]
    values = [cdf(x, **shifted_params) for x in xs]
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_saturation(standard_params):
    """z < -40 is exactly 0, z > 40 exactly 1."""
    assert cdf(-41 * WAD, **standard_params) == 0
    assert cdf(41 * WAD, **standard_params) == WAD


def test_result_in_unit_interval():
    """Results always lie in [0, 1e18]."""
    for x in (-(10**23), -5 * WAD, -1, 0, 1, 5 * WAD, 10**23):
        for std_dev in (1, WAD, MAX_STD_DEV):
            assert 0 <= cdf(x, 0, std_dev) <= WAD


def test_deterministic():
    """Identical inputs give identical outputs."""
    args = (123_456_789_123_456_789, -987_654_321, 1_234_567_890_123_456_789)
    assert len({cdf(*args) for _ in range(5)}) == 1


# ===========================
# Density Tests
# ===========================


def test_pdf_at_mean(standard_params):
    """φ(0)/σ for σ = 1, 2 and 1e-18."""
    assert pdf(0, **standard_params) == 398_942_280_401_432_678
    assert pdf(0, 0, 2 * WAD) == 199_471_140_200_716_339
    assert pdf(5, 5, 1) == 398_942_280_401_432_678 * WAD


def test_pdf_matches_scipy(shifted_params):
    """Density of N(25, 3²) agrees with scipy."""
    for x_real in (19.0, 24.5, 25.0, 30.0):
        x = int(x_real * 10) * WAD // 10
        value = pdf(x, **shifted_params)
        assert abs(value / WAD - norm.pdf(x_real, loc=25.0, scale=3.0)) < 1e-15


def test_pdf_validation():
    """The density validates its parameters like the CDF."""
    with pytest.raises(InvalidStandardDeviation):
        pdf(0, 0, 0)
    with pytest.raises(InvalidMean):
        pdf(0, MAX_MEAN + 1, WAD)


def test_standard_normal_shorthands():
    """normal_cdf/normal_pdf evaluate the standard distribution."""
    assert normal_cdf(0) == HALF_WAD
    assert normal_cdf(WAD) == cdf(WAD, 0, WAD)
    assert normal_pdf(0) == pdf(0, 0, WAD)

    with pytest.raises(TypeError):
        normal_cdf(0.5)
