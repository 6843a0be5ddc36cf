"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pricefit.observations import Observation


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_line_points():
    """Points lying exactly on y = 2x + 3."""
    return [(1, 5), (2, 7), (3, 9), (4, 11)]


@pytest.fixture
def house_prices():
    """Three houses priced at exactly 2000 per square metre."""
    return [
        Observation(50, 100_000),
        Observation(100, 200_000),
        Observation(150, 300_000),
    ]


@pytest.fixture
def noisy_regression_data(rng):
    """Noisy samples around price = 1800·area + 25000."""
    n = 40
    x = rng.uniform(30, 250, size=n)
    y = 1800.0 * x + 25_000.0 + rng.standard_normal(n) * 15_000.0
    return x, y


@pytest.fixture
def sequential_ids():
    """Deterministic id factory: 'id-0', 'id-1', ..."""
    counter = iter(range(10_000))
    return lambda: f"id-{next(counter)}"
