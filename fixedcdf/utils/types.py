"""
Data types and structures for fixed-point distribution evaluation.

This module defines the scaled-integer alias and the dataclasses used
throughout the toolkit for distribution parameters and diagnostic results.
"""

from dataclasses import dataclass, field

from fixedcdf.utils.constants import MAX_MEAN, MAX_STD_DEV, MIN_MEAN, MIN_STD_DEV
from fixedcdf.utils.errors import InvalidMean, InvalidStandardDeviation

# Signed integer interpreted as a real number scaled by 1e18
FixedPoint = int


@dataclass(frozen=True)
class NormalParams:
    """
    Immutable container for normal distribution parameters.

    Attributes:
        mean: Location μ in raw scaled units, within [-1e20, 1e20]
        std_dev: Scale σ in raw scaled units, within [1, 1e19]
    """
    mean: FixedPoint
    std_dev: FixedPoint

    def __post_init__(self) -> None:
        """Validate the standard deviation first, then the mean."""
        if not MIN_STD_DEV <= self.std_dev <= MAX_STD_DEV:
            raise InvalidStandardDeviation(self.std_dev)
        if not MIN_MEAN <= self.mean <= MAX_MEAN:
            raise InvalidMean(self.mean)


@dataclass(frozen=True)
class SamplePoint:
    """
    One evaluated point of an accuracy sweep.

    Attributes:
        x: Evaluation point (raw scaled units)
        mean: Distribution mean (raw scaled units)
        std_dev: Distribution standard deviation (raw scaled units)
        value: Fixed-point CDF result (raw scaled units)
        reference: Double-precision reference CDF
        error: Absolute difference between value / 1e18 and reference
    """
    x: FixedPoint
    mean: FixedPoint
    std_dev: FixedPoint
    value: FixedPoint
    reference: float
    error: float


@dataclass
class AccuracyCheck:
    """
    Result from an accuracy or shape validation.

    Attributes:
        is_valid: Whether every checked point satisfied the condition
        violations: List of specific violations detected
        details: Dictionary with summary figures of the check
        worst: Sample with the largest error, when the check measures error
    """
    is_valid: bool
    violations: list[str]
    details: dict[str, float]
    worst: SamplePoint | None = field(default=None)
