"""
Series module.

This module provides the Bar and PriceSeries classes that hold the raw
market data indicators are computed from.
"""

from .bar import Bar
from .price_series import PriceSeries

__all__ = ['Bar', 'PriceSeries']
