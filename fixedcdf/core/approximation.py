"""
Exponential and error-function approximations in fixed-point arithmetic.

The standard normal CDF is evaluated through its upper tail

    Q(z) = 1/2 - φ(z) · S(z),    S(z) = z + z³/3 + z⁵/(3·5) + z⁷/(3·5·7) + ...

for z >= 0 (Marsaglia, 2004). Every term of S is positive, so the sum has
no cancellation. The product φ(z)·S(z) keeps full relative precision at
PRECISION = 1e36 (18 guard digits), so the one subtraction is accurate to
about 1e-35 before the single rounding to 18 decimals. The absolute error
of the returned value is half a raw unit plus that negligible term, far
inside the 1e-8 budget.

Negative arguments use the reflection Φ(-z) = Q(z), applied after
rounding, so cdf(-z) + cdf(z) == 1e18 holds exactly.

Beyond |z| = 9 the result saturates to exactly 0 or 1e18. The true tail
there is below half a raw unit, so the series would round to the same
value: the switch is continuous at 18 decimals.

References:
    Marsaglia, G. (2004). Evaluating the Normal Distribution.
    Journal of Statistical Software, 11(4), 1-11.
"""

from fixedcdf.core.fixed_point import mul, pow_int, round_div
from fixedcdf.utils.constants import (
    EXP_MAX_INPUT,
    HALF_WAD,
    INV_SQRT_2PI,
    LN2,
    MAX_EXP_TERMS,
    MAX_SERIES_TERMS,
    PDF_CUTOFF,
    PRECISION,
    SQRT2,
    WAD,
    WAD_TO_PRECISION,
    Z_SATURATION,
)
from fixedcdf.utils.errors import FixedPointOverflow
from fixedcdf.utils.types import FixedPoint

_HALF = PRECISION // 2
_Z_SATURATION_PRECISE = Z_SATURATION * WAD_TO_PRECISION


def _exp_parts(x: int) -> tuple[int, int]:
    """
    Split e**x (x at PRECISION) into a mantissa at PRECISION and a power of two.

    Range reduction x = k·ln2 + r with |r| <= ln2/2, then the Taylor series
    for e**r. Returns (e**r, k): the mantissa keeps full relative precision
    however small e**x is.
    """
    k = round_div(x, LN2)
    r = x - k * LN2

    total = term = PRECISION
    for n in range(1, MAX_EXP_TERMS + 1):
        term = round_div(term * r, PRECISION * n)
        if term == 0:
            break
        total += term
    return total, k


def _exp_precise(x: int) -> int:
    """e**x with x and the result at PRECISION. Callers bound x from above."""
    # e**r < 1.5, so a right shift by more than this always rounds to zero
    if -round_div(x, LN2) >= PRECISION.bit_length() + 2:
        return 0

    mantissa, k = _exp_parts(x)
    if k >= 0:
        return mantissa << k
    return round_div(mantissa, 1 << -k)


def _density_times(z_squared: int, factor: int) -> int:
    """
    φ(z)·factor at PRECISION, given z² and factor at PRECISION.

    φ(z) is tiny where factor is huge (S(z) near the 9σ threshold), so the
    product is formed from the unshifted exponential mantissa and rounded
    once.
    """
    mantissa, k = _exp_parts(-round_div(z_squared, 2))
    numerator = INV_SQRT_2PI * mantissa * factor
    denominator = PRECISION * PRECISION
    if k >= 0:
        numerator <<= k
    else:
        denominator <<= -k
    return round_div(numerator, denominator)


def exp(x: FixedPoint) -> FixedPoint:
    """
    Fixed-point exponential e**x, WAD in and out.

    Args:
        x: Exponent (WAD)

    Returns:
        e**x (WAD), exactly 0 once it rounds below one raw unit

    Raises:
        FixedPointOverflow: If x >= 135.305999368893231589, where the result
            no longer fits the int256 representation

    Examples:
        >>> exp(0)
        1000000000000000000
        >>> exp(WAD)
        2718281828459045235
        >>> exp(-50 * WAD)
        0
    """
    if x >= EXP_MAX_INPUT:
        raise FixedPointOverflow(f"exp overflows int256 for x={x}")

    return round_div(_exp_precise(x * WAD_TO_PRECISION), WAD_TO_PRECISION)


def _tail_series(z: int, z_squared: int) -> int:
    """S(z) = Σ z^(2n+1) / (2n+1)!!, at PRECISION."""
    total = term = z
    for n in range(1, MAX_SERIES_TERMS + 1):
        term = round_div(term * z_squared, PRECISION * (2 * n + 1))
        if term == 0:
            return total
        total += term

    # Unreachable for z below the saturation threshold
    raise ArithmeticError(f"Tail series did not converge for z={z}")


def upper_tail(z: int) -> int:
    """
    Standard normal upper tail Q(z) = P(Z > z) for z >= 0, at PRECISION.

    Saturates to exactly 0 at and beyond the 9σ threshold.
    """
    if z < 0:
        raise ValueError(f"upper_tail expects z >= 0, got z={z}")
    if z >= _Z_SATURATION_PRECISE:
        return 0

    z_squared = pow_int(z, 2, PRECISION)
    tail = _HALF - _density_times(z_squared, _tail_series(z, z_squared))

    # Rounding can push the last few guard digits below zero near the threshold
    return max(tail, 0)


def standard_normal_cdf(z: FixedPoint) -> FixedPoint:
    """
    Standard normal cumulative distribution function Φ(z), WAD in and out.

    Args:
        z: Standardized value (WAD), any magnitude

    Returns:
        Φ(z) in [0, 1e18]: exactly 5e17 at z = 0, exactly 0 for z <= -9
        and exactly 1e18 for z >= 9

    Examples:
        >>> standard_normal_cdf(0)
        500000000000000000
        >>> standard_normal_cdf(-40 * WAD), standard_normal_cdf(40 * WAD)
        (0, 1000000000000000000)
    """
    if z == 0:
        return HALF_WAD

    if abs(z) >= Z_SATURATION:
        tail = 0
    else:
        tail = round_div(upper_tail(abs(z) * WAD_TO_PRECISION), WAD_TO_PRECISION)

    if z > 0:
        return WAD - tail
    return tail


def standard_normal_pdf(z: FixedPoint) -> FixedPoint:
    """
    Standard normal probability density φ(z) = exp(-z²/2) / √(2π), WAD.

    For |z| >= 10 the density is below one raw unit and returns exactly 0.

    Examples:
        >>> standard_normal_pdf(0)
        398942280401432678
    """
    if abs(z) >= PDF_CUTOFF:
        return 0

    z_precise = z * WAD_TO_PRECISION
    z_squared = pow_int(z_precise, 2, PRECISION)
    return round_div(_density_times(z_squared, PRECISION), WAD_TO_PRECISION)


def erfc(x: FixedPoint) -> FixedPoint:
    """
    Complementary error function erfc(x) = 2·Q(x·√2), WAD, in [0, 2e18].

    Examples:
        >>> erfc(0)
        1000000000000000000
    """
    # x·√2 is past the tail threshold well before |x| reaches it
    if abs(x) >= Z_SATURATION:
        tail = 0
    else:
        scaled = mul(abs(x) * WAD_TO_PRECISION, SQRT2, PRECISION)
        tail = round_div(2 * upper_tail(scaled), WAD_TO_PRECISION)

    if x >= 0:
        return tail
    return 2 * WAD - tail


def erf(x: FixedPoint) -> FixedPoint:
    """
    Error function erf(x) = 1 - erfc(x), WAD, odd in x.

    Examples:
        >>> erf(0)
        0
        >>> erf(WAD)
        842700792949714869
    """
    return WAD - erfc(x)
