"""
Error kinds raised by the fixed-point normal distribution.

Validation errors subclass ValueError and are raised eagerly, before any
numeric work. Arithmetic errors subclass the matching builtin so callers
can catch them generically.
"""


class InvalidStandardDeviation(ValueError):
    """Standard deviation outside [MIN_STD_DEV, MAX_STD_DEV] raw units."""

    def __init__(self, std_dev: int):
        self.std_dev = std_dev
        super().__init__(f"Invalid standard deviation: std_dev={std_dev}")


class InvalidMean(ValueError):
    """Mean outside [MIN_MEAN, MAX_MEAN] raw units."""

    def __init__(self, mean: int):
        self.mean = mean
        super().__init__(f"Invalid mean: mean={mean}")


class DivisionByZero(ZeroDivisionError):
    """Fixed-point division with a zero divisor."""


class FixedPointOverflow(OverflowError):
    """A fixed-point result does not fit the signed 256-bit representation."""
