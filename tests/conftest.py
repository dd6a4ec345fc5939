"""
Pytest configuration and shared fixtures.
"""

import pytest

from fixedcdf.utils.constants import WAD


@pytest.fixture
def standard_params():
    """Standard normal distribution in raw 1e18-scaled units."""
    return {
        "mean": 0,
        "std_dev": WAD,
    }


@pytest.fixture
def shifted_params():
    """Non-zero mean with a wide standard deviation."""
    return {
        "mean": 25 * WAD,
        "std_dev": 3 * WAD,
    }


@pytest.fixture
def narrow_params():
    """Smallest representable standard deviation (1e-18)."""
    return {
        "mean": -7 * WAD,
        "std_dev": 1,
    }


@pytest.fixture
def edge_cases():
    """Edge cases exercised by the reference harness: (x, mean, std_dev)."""
    return [
        (-(10**23), 0, WAD),
        (10**23, 0, WAD),
        (0, -(10**20), WAD),
        (0, 10**20, WAD),
        (0, 0, 1),
        (0, 0, 10**19),
    ]
