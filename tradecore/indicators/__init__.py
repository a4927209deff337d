"""
Indicators module.

This module provides lazily evaluated, cached indicators computed over a
PriceSeries with exact decimal arithmetic.
"""

from .indicator_base import Indicator, CachedIndicator
from .helpers import (
    ClosePriceIndicator,
    OpenPriceIndicator,
    HighPriceIndicator,
    LowPriceIndicator,
    VolumeIndicator,
    ConstantIndicator
)
from .moving_averages import SMAIndicator

__all__ = [
    'Indicator',
    'CachedIndicator',
    'ClosePriceIndicator',
    'OpenPriceIndicator',
    'HighPriceIndicator',
    'LowPriceIndicator',
    'VolumeIndicator',
    'ConstantIndicator',
    'SMAIndicator'
]
