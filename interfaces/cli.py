"""
Command-line interface for the fixed-point normal distribution toolkit.

This CLI provides access to:
- Normal CDF and PDF evaluation
- Error function evaluation
- Accuracy sweeps against a double-precision reference
"""

import logging
import sys

import click
import structlog

from fixedcdf.core.approximation import erf as erf_fixed
from fixedcdf.core.distributions import cdf as cdf_fixed
from fixedcdf.core.distributions import pdf as pdf_fixed
from fixedcdf.core.fixed_point import from_fixed, to_fixed
from fixedcdf.diagnostics.accuracy import sweep_parameter_grid, sweep_standard_normal
from fixedcdf.utils.constants import (
    ACCURACY_TOLERANCE,
    DEFAULT_GRID_MEAN_POINTS,
    DEFAULT_GRID_X_POINTS,
    DEFAULT_SWEEP_POINTS,
    WAD,
)

logger = structlog.get_logger()


def configure_logging(log_level: str) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _parse(value: str | None, decimal: bool, default: int = 0) -> int:
    """Raw scaled integer by default, exact decimal text with --decimal."""
    if value is None:
        return default
    if decimal:
        return to_fixed(value)
    try:
        return int(value)
    except ValueError:
        raise click.BadParameter(
            f"{value!r} is not an integer; use --decimal for real values"
        ) from None


def _show(label: str, value: int) -> None:
    click.echo(f"\n{label}: {from_fixed(value):f}")
    click.echo(f"Raw (1e18 scale): {value}")


_decimal_option = click.option(
    "--decimal", "-d", is_flag=True, help="Read inputs as decimals instead of raw 1e18-scaled ints"
)


@click.group()
@click.version_option(version="1.0.0")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    help="Logging verbosity",
)
def cli(log_level):
    """Fixed-Point Normal CDF - deterministic integer-only Gaussian distribution."""
    configure_logging(log_level)


@cli.command()
@click.option("--x", "-x", "x", required=True, help="Evaluation point")
@click.option("--mean", "-m", default="0", help="Distribution mean")
@click.option("--std-dev", "-s", default=None, help="Standard deviation [default: 1]")
@_decimal_option
def cdf(x, mean, std_dev, decimal):
    """Evaluate the normal CDF P(X <= x)."""
    try:
        value = cdf_fixed(_parse(x, decimal), _parse(mean, decimal), _parse(std_dev, decimal, default=WAD))
    except (ValueError, ArithmeticError) as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(1)

    _show("CDF", value)


@cli.command()
@click.option("--x", "-x", "x", required=True, help="Evaluation point")
@click.option("--mean", "-m", default="0", help="Distribution mean")
@click.option("--std-dev", "-s", default=None, help="Standard deviation [default: 1]")
@_decimal_option
def pdf(x, mean, std_dev, decimal):
    """Evaluate the normal probability density at x."""
    try:
        value = pdf_fixed(_parse(x, decimal), _parse(mean, decimal), _parse(std_dev, decimal, default=WAD))
    except (ValueError, ArithmeticError) as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(1)

    _show("PDF", value)


@cli.command()
@click.argument("x")
@_decimal_option
def erf(x, decimal):
    """Evaluate the error function erf(x)."""
    try:
        value = erf_fixed(_parse(x, decimal))
    except (ValueError, ArithmeticError) as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(1)

    _show("erf", value)


@cli.command()
@click.option("--points", type=int, default=DEFAULT_SWEEP_POINTS, help="Standard normal sweep points")
@click.option("--x-points", type=int, default=DEFAULT_GRID_X_POINTS, help="Grid points for x")
@click.option("--mean-points", type=int, default=DEFAULT_GRID_MEAN_POINTS, help="Grid points for the mean")
@click.option("--tolerance", type=float, default=ACCURACY_TOLERANCE, help="Maximum absolute error")
@click.option("--grid/--no-grid", default=True, help="Also sweep the (x, mean, std dev) grid")
def sweep(points, x_points, mean_points, tolerance, grid):
    """Check accuracy against scipy over the reference sweeps."""
    checks = [("Standard normal", sweep_standard_normal(points, tolerance))]
    if grid:
        checks.append(("Parameter grid", sweep_parameter_grid(x_points, mean_points, tolerance)))

    failed = False
    for name, result in checks:
        status = "OK" if result.is_valid else "FAILED"
        click.echo(f"\n{name}: {status}")
        click.echo(f"  Samples:   {int(result.details['samples'])}")
        click.echo(f"  Max error: {result.details['max_error']:.3e}")
        if result.worst is not None:
            click.echo(
                f"  Worst at:  x={result.worst.x}, mean={result.worst.mean}, "
                f"std_dev={result.worst.std_dev}"
            )
        for violation in result.violations[:10]:
            click.echo(f"  {violation}", err=True)
        failed = failed or not result.is_valid

    if failed:
        logger.error("Accuracy sweep failed", tolerance=tolerance)
        sys.exit(1)


if __name__ == "__main__":
    cli()
