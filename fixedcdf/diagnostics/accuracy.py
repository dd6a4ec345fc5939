"""
Accuracy diagnostics for the fixed-point normal CDF.

This module checks the integer implementation against a double-precision
reference (scipy.stats.norm) and verifies its shape:
- Absolute error bound over sweeps of x, mean and standard deviation
- Monotonicity in x
- Symmetry around the mean

The sweeps reproduce the grids of the reference harness the library was
first validated with: integer grids stepped exactly, no float sampling.
"""

from collections.abc import Iterable, Iterator

import numpy as np
import structlog
from scipy.stats import norm

from fixedcdf.core.distributions import cdf
from fixedcdf.utils.constants import (
    ACCURACY_TOLERANCE,
    DEFAULT_GRID_MEAN_POINTS,
    DEFAULT_GRID_X_POINTS,
    DEFAULT_SWEEP_POINTS,
    MAX_MEAN,
    MAX_STD_DEV,
    MIN_MEAN,
    MIN_STD_DEV,
    SWEEP_STD_DEV_FACTOR,
    SWEEP_X_END,
    SWEEP_X_START,
    WAD,
)
from fixedcdf.utils.types import AccuracyCheck, FixedPoint, SamplePoint

logger = structlog.get_logger()


def reference_cdf(x: FixedPoint, mean: FixedPoint, std_dev: FixedPoint) -> float:
    """
    Double-precision normal CDF used as the oracle.

    The z-score is formed by exact integer true division, so the only float
    rounding is the final conversion of the ratio.
    """
    return float(norm.cdf((x - mean) / std_dev))


def evaluate(x: FixedPoint, mean: FixedPoint, std_dev: FixedPoint) -> SamplePoint:
    """Evaluate one point and compare it with the reference."""
    value = cdf(x, mean, std_dev)
    reference = reference_cdf(x, mean, std_dev)
    return SamplePoint(
        x=x,
        mean=mean,
        std_dev=std_dev,
        value=value,
        reference=reference,
        error=abs(value / WAD - reference),
    )


def linear_grid(start: int, end: int, count: int) -> list[int]:
    """
    Evenly stepped integer grid.

    The step is truncated, so the last point may fall short of end.

    Raises:
        ValueError: If count < 2 or end < start
    """
    if count < 2:
        raise ValueError(f"count must be at least 2, got {count}")
    if end < start:
        raise ValueError(f"end must not precede start, got start={start}, end={end}")

    step = (end - start) // (count - 1)
    return [start + step * i for i in range(count)]


def geometric_grid(start: int, end: int, factor: int = SWEEP_STD_DEV_FACTOR) -> list[int]:
    """
    Integer grid start, start·factor, start·factor², ... up to end inclusive.

    Raises:
        ValueError: If start < 1 or factor < 2
    """
    if start < 1:
        raise ValueError(f"start must be positive, got {start}")
    if factor < 2:
        raise ValueError(f"factor must be at least 2, got {factor}")

    points = []
    value = start
    while value <= end:
        points.append(value)
        value *= factor
    return points


def check_accuracy(
    samples: Iterable[SamplePoint], tolerance: float = ACCURACY_TOLERANCE
) -> AccuracyCheck:
    """
    Validate that every sample lies within tolerance of the reference.

    Args:
        samples: Evaluated points, see evaluate()
        tolerance: Maximum absolute error allowed

    Returns:
        AccuracyCheck with the worst sample and summary details
    """
    violations = []
    worst = None
    count = 0

    for sample in samples:
        count += 1
        if worst is None or sample.error > worst.error:
            worst = sample
        if sample.error >= tolerance:
            violations.append(
                f"Error {sample.error:.3e} at x={sample.x}, "
                f"mean={sample.mean}, std_dev={sample.std_dev}"
            )
            logger.warning(
                "Accuracy violation",
                x=sample.x,
                mean=sample.mean,
                std_dev=sample.std_dev,
                error=sample.error,
            )

    details = {
        "samples": float(count),
        "max_error": worst.error if worst is not None else 0.0,
        "tolerance": tolerance,
    }
    logger.debug("Accuracy check complete", **details)

    return AccuracyCheck(
        is_valid=len(violations) == 0,
        violations=violations,
        details=details,
        worst=worst,
    )


def check_monotonicity(
    xs: list[FixedPoint], mean: FixedPoint, std_dev: FixedPoint
) -> AccuracyCheck:
    """
    Check that the CDF is non-decreasing along the given x values.

    Args:
        xs: Evaluation points; sorted before checking
        mean, std_dev: Distribution parameters

    Returns:
        AccuracyCheck listing every inversion found
    """
    ordered = sorted(xs)
    values = np.array([cdf(x, mean, std_dev) for x in ordered], dtype=np.int64)
    steps = np.diff(values)

    violations = [
        f"CDF decreases between x={ordered[i]} ({values[i]}) "
        f"and x={ordered[i + 1]} ({values[i + 1]})"
        for i in np.flatnonzero(steps < 0)
    ]
    if violations:
        logger.warning("Monotonicity violated", count=len(violations))

    details = {
        "points": float(len(ordered)),
        "min_step": float(steps.min()) if steps.size else 0.0,
    }
    return AccuracyCheck(is_valid=len(violations) == 0, violations=violations, details=details)


def check_symmetry(
    offsets: list[int], mean: FixedPoint, std_dev: FixedPoint, tolerance: int = 0
) -> AccuracyCheck:
    """
    Check cdf(mean - d) + cdf(mean + d) == 1e18 for every offset d.

    Args:
        offsets: Distances d from the mean (raw units)
        mean, std_dev: Distribution parameters
        tolerance: Allowed deviation of the sum from 1e18, in raw units

    Returns:
        AccuracyCheck with the largest deviation found
    """
    below = np.array([cdf(mean - d, mean, std_dev) for d in offsets], dtype=np.int64)
    above = np.array([cdf(mean + d, mean, std_dev) for d in offsets], dtype=np.int64)
    deviation = np.abs(below + above - WAD)

    violations = [
        f"cdf(mean - {offsets[i]}) + cdf(mean + {offsets[i]}) deviates by {deviation[i]}"
        for i in np.flatnonzero(deviation > tolerance)
    ]

    details = {"max_deviation": float(deviation.max()) if deviation.size else 0.0}
    return AccuracyCheck(is_valid=len(violations) == 0, violations=violations, details=details)


def _standard_normal_samples(points: int) -> Iterator[SamplePoint]:
    for x in linear_grid(SWEEP_X_START, SWEEP_X_END, points):
        yield evaluate(x, 0, WAD)


def _parameter_grid_samples(x_points: int, mean_points: int) -> Iterator[SamplePoint]:
    std_devs = geometric_grid(MIN_STD_DEV, MAX_STD_DEV)
    means = linear_grid(MIN_MEAN, MAX_MEAN, mean_points)

    for x in linear_grid(SWEEP_X_START, SWEEP_X_END, x_points):
        for mean in means:
            for std_dev in std_devs:
                yield evaluate(x, mean, std_dev)


def sweep_standard_normal(
    points: int = DEFAULT_SWEEP_POINTS, tolerance: float = ACCURACY_TOLERANCE
) -> AccuracyCheck:
    """Sweep x over [-1e23, 1e23] for the standard normal distribution."""
    logger.info("Sweeping standard normal", points=points)
    return check_accuracy(_standard_normal_samples(points), tolerance)


def sweep_parameter_grid(
    x_points: int = DEFAULT_GRID_X_POINTS,
    mean_points: int = DEFAULT_GRID_MEAN_POINTS,
    tolerance: float = ACCURACY_TOLERANCE,
) -> AccuracyCheck:
    """
    Sweep x linearly, the mean linearly over its full domain and the
    standard deviation geometrically (×10) from 1 to 1e19 raw units.
    """
    logger.info("Sweeping parameter grid", x_points=x_points, mean_points=mean_points)
    return check_accuracy(_parameter_grid_samples(x_points, mean_points), tolerance)
