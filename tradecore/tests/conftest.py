# tests/conftest.py
"""
Configuration for pytest.

This file contains fixtures and helpers shared by the test modules.
"""

import numpy as np
import pandas as pd
import pytest

from tradecore.num import configure_context
from tradecore.tests.helpers import make_series


@pytest.fixture(autouse=True)
def default_numeric_context():
    """Reset the Num context around every test."""
    configure_context()
    yield
    configure_context()


@pytest.fixture
def sample_price_data():
    """Create deterministic sample price data for testing."""
    dates = pd.date_range('2023-01-01', periods=20)
    prices = np.round(np.linspace(100, 119, 20), 2)

    df = pd.DataFrame({
        'Open': prices - 0.5,
        'High': prices + 1,
        'Low': prices - 1,
        'Close': prices,
        'Volume': np.arange(1000, 1020)
    }, index=dates)

    return df


@pytest.fixture
def rising_series():
    """Ten bars closing at 1, 2, ..., 10."""
    return make_series(list(range(1, 11)))


@pytest.fixture
def flat_series():
    """Factory for a series of identical closes."""
    def _make(price, length=10):
        return make_series([price] * length)
    return _make
