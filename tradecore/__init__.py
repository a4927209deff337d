"""
Trading core package.

This package contains the exact-decimal indicator engine, the trade and
trading record model, and the rules that decide entries and exits.
"""

__version__ = '0.1.0'

from .errors import ConfigurationError, IndexOutOfRange, InvalidTradeTransition, TradecoreError
from .num import HUNDRED, ONE, ZERO, Num

__all__ = [
    'ConfigurationError',
    'IndexOutOfRange',
    'InvalidTradeTransition',
    'TradecoreError',
    'Num',
    'ZERO',
    'ONE',
    'HUNDRED'
]
