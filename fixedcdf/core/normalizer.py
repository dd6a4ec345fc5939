"""
Standardization of fixed-point inputs to z-scores.
"""

from fixedcdf.core.fixed_point import div
from fixedcdf.utils.constants import INT256_MAX, WAD
from fixedcdf.utils.types import FixedPoint


def z_score(x: FixedPoint, mean: FixedPoint, std_dev: FixedPoint) -> FixedPoint:
    """
    Compute z = (x - mean) / std_dev in WAD.

    With std_dev as small as one raw unit the quotient can reach 1e41 raw
    for the supported range of x. That still fits the representation, but x
    itself is unbounded, so quotients beyond int256 saturate to ±INT256_MAX
    instead of overflowing. The CDF saturates long before that.

    Args:
        x: Evaluation point (WAD)
        mean: Distribution mean (WAD)
        std_dev: Standard deviation (WAD), already validated positive

    Returns:
        The z-score, rounded half away from zero

    Examples:
        >>> z_score(3 * WAD, WAD, 2 * WAD)
        1000000000000000000
        >>> z_score(-(10**23), 0, 1)
        -100000000000000000000000000000000000000000
    """
    delta = x - mean

    # Compare at full width: |delta|·WAD / std_dev > INT256_MAX
    if abs(delta) * WAD > INT256_MAX * std_dev:
        return INT256_MAX if delta > 0 else -INT256_MAX

    return div(delta, std_dev)
