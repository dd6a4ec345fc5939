"""
Normal distribution functions in deterministic fixed-point arithmetic.

This module provides the public entry points: the cumulative distribution
function (CDF) and probability density function (PDF) of a normal
distribution with given mean and standard deviation, evaluated entirely
with integers scaled by 1e18. Identical inputs yield bit-identical outputs
on every platform.
"""

from fixedcdf.core.approximation import standard_normal_cdf, standard_normal_pdf
from fixedcdf.core.fixed_point import div
from fixedcdf.core.normalizer import z_score
from fixedcdf.utils.types import FixedPoint, NormalParams


def _require_int(**values: object) -> None:
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"{name} must be an int scaled by 1e18, got {type(value).__name__}"
            )


def cdf(x: FixedPoint, mean: FixedPoint, std_dev: FixedPoint) -> FixedPoint:
    """
    Normal cumulative distribution function P(X <= x), X ~ N(mean, std_dev²).

    The parameters are validated before any numeric work. x itself is not
    bounded: far outside the distribution the result saturates to exactly
    0 or 1e18.

    Args:
        x: Value at which to evaluate the CDF (WAD)
        mean: Distribution mean (WAD), within [-1e20, 1e20] raw units
        std_dev: Standard deviation (WAD), within [1, 1e19] raw units

    Returns:
        Probability in [0, 1e18], within 1e-8 of the exact CDF

    Raises:
        TypeError: If an argument is not an int
        InvalidStandardDeviation: If std_dev is outside [1, 1e19]
        InvalidMean: If mean is outside [-1e20, 1e20]

    Examples:
        >>> cdf(0, 0, 10**18)  # Median
        500000000000000000
        >>> abs(cdf(1_960_000_000_000_000_000, 0, 10**18) - 975 * 10**15) < 10**13
        True
        >>> cdf(-(10**23), 0, 10**18)  # Deep in tail
        0
    """
    _require_int(x=x, mean=mean, std_dev=std_dev)
    params = NormalParams(mean=mean, std_dev=std_dev)

    return standard_normal_cdf(z_score(x, params.mean, params.std_dev))


def pdf(x: FixedPoint, mean: FixedPoint, std_dev: FixedPoint) -> FixedPoint:
    """
    Normal probability density φ((x - mean) / std_dev) / std_dev.

    Args:
        x: Value at which to evaluate the density (WAD)
        mean: Distribution mean (WAD)
        std_dev: Standard deviation (WAD)

    Returns:
        Density (WAD). Narrow distributions have densities far above 1.

    Raises:
        TypeError: If an argument is not an int
        InvalidStandardDeviation: If std_dev is outside [1, 1e19]
        InvalidMean: If mean is outside [-1e20, 1e20]

    Notes:
        The normal PDF is given by:
            f(x) = (1/(σ√(2π))) * exp(-(x-μ)²/(2σ²))
    """
    _require_int(x=x, mean=mean, std_dev=std_dev)
    params = NormalParams(mean=mean, std_dev=std_dev)

    density = standard_normal_pdf(z_score(x, params.mean, params.std_dev))
    return div(density, params.std_dev)


def normal_cdf(z: FixedPoint) -> FixedPoint:
    """Standard normal CDF Φ(z); shorthand for cdf(z, 0, 1e18)."""
    _require_int(z=z)
    return standard_normal_cdf(z)


def normal_pdf(z: FixedPoint) -> FixedPoint:
    """Standard normal PDF φ(z); shorthand for pdf(z, 0, 1e18)."""
    _require_int(z=z)
    return standard_normal_pdf(z)
