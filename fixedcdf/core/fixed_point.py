"""
Fixed-point arithmetic primitives with a fixed rounding rule.

This module provides scaled multiply, divide and power operations on
integers interpreted as real numbers times a unit (1e18 by default).
Everything above it in the package is built from these primitives, so
their rounding convention is part of the public contract:

    Every rescaling division rounds to the nearest integer, with ties
    rounded away from zero.

The rule is symmetric in sign (f(-a) == -f(a)) and monotone, which the
CDF relies on for exact symmetry and for monotonicity in x.

Intermediate products are Python integers and never overflow. Results are
checked against the signed 256-bit representation contract instead; a
result outside it is a defect and raises FixedPointOverflow.
"""

from decimal import Decimal, InvalidOperation

from fixedcdf.utils.constants import INT256_MAX, INT256_MIN, WAD
from fixedcdf.utils.errors import DivisionByZero, FixedPointOverflow
from fixedcdf.utils.types import FixedPoint

_DECIMALS = 18


def round_div(numerator: int, denominator: int) -> int:
    """
    Integer division rounded to nearest, ties away from zero.

    Args:
        numerator: Dividend
        denominator: Divisor, must be non-zero

    Returns:
        The rounded quotient

    Raises:
        DivisionByZero: If denominator is zero

    Examples:
        >>> round_div(5, 2), round_div(-5, 2), round_div(7, 3)
        (3, -3, 2)
    """
    if denominator == 0:
        raise DivisionByZero("Fixed-point division by zero")

    quotient, remainder = divmod(abs(numerator), abs(denominator))
    if 2 * remainder >= abs(denominator):
        quotient += 1

    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def _checked(value: int) -> FixedPoint:
    if value > INT256_MAX or value < INT256_MIN:
        raise FixedPointOverflow(f"Result {value} does not fit in int256")
    return value


def mul(a: FixedPoint, b: FixedPoint, unit: int = WAD) -> FixedPoint:
    """
    Fixed-point product a·b / unit.

    The raw product is formed at full width before rescaling, so operands
    near 1e41 (x up to 1e23 scaled by 1e18) multiply without loss.

    Examples:
        >>> mul(3 * WAD // 2, 2 * WAD)  # 1.5 * 2.0
        3000000000000000000
        >>> mul(1, 1)  # 1e-18 * 1e-18 rounds to zero
        0
    """
    return _checked(round_div(a * b, unit))


def div(a: FixedPoint, b: FixedPoint, unit: int = WAD) -> FixedPoint:
    """
    Fixed-point quotient a·unit / b.

    Raises:
        DivisionByZero: If b is zero

    Examples:
        >>> div(WAD, 3 * WAD)
        333333333333333333
        >>> div(2 * WAD, 3 * WAD)
        666666666666666667
    """
    return _checked(round_div(a * unit, b))


def pow_int(a: FixedPoint, n: int, unit: int = WAD) -> FixedPoint:
    """
    Fixed-point integer power a**n by square-and-multiply.

    Each multiplication is rounded, so the result may differ from the
    exact power by a few units in the last place for large n.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got n={n}")

    result = unit
    base = a
    while n:
        if n & 1:
            result = mul(result, base, unit)
        n >>= 1
        if n:
            base = mul(base, base, unit)
    return result


def rescale(value: int, from_unit: int, to_unit: int) -> int:
    """Convert a value between two scales, rounding like every other primitive."""
    return round_div(value * to_unit, from_unit)


def to_fixed(value: str | int | Decimal) -> FixedPoint:
    """
    Convert an exact decimal value to WAD representation.

    Floats are refused: they carry binary rounding that would make the
    fixed-point result depend on how the caller produced them.

    Raises:
        TypeError: If value is a float or another unsupported type
        ValueError: If value is not a finite decimal or has more than 18
            fractional digits

    Examples:
        >>> to_fixed("1.5")
        1500000000000000000
        >>> to_fixed(-2)
        -2000000000000000000
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, Decimal)):
        raise TypeError(f"Expected str, int or Decimal, got {type(value).__name__}")

    try:
        number = Decimal(value)
    except InvalidOperation:
        raise ValueError(f"Not a decimal number: {value!r}") from None

    if not number.is_finite():
        raise ValueError(f"Value must be finite, got {value!r}")

    # Work on the digit tuple: Decimal arithmetic would round to the context precision
    sign, digits, exponent = number.as_tuple()
    coefficient = int("".join(map(str, digits)))
    exponent += _DECIMALS

    if exponent >= 0:
        scaled = coefficient * 10**exponent
    else:
        scaled, remainder = divmod(coefficient, 10**-exponent)
        if remainder:
            raise ValueError(f"More than {_DECIMALS} fractional digits: {value!r}")

    return _checked(-scaled if sign else scaled)


def from_fixed(value: FixedPoint) -> Decimal:
    """
    Exact Decimal value of a WAD integer.

    Examples:
        >>> from_fixed(1500000000000000000)
        Decimal('1.500000000000000000')
    """
    sign, digits, exponent = Decimal(value).as_tuple()
    return Decimal((sign, digits, exponent - _DECIMALS))
