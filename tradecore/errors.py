"""
Exceptions raised by the trading core.

Arithmetic failures surface as the builtin ArithmeticError family
(decimal.DivisionByZero, decimal.InvalidOperation).
"""


class TradecoreError(Exception):
    """Base class for errors raised by this package."""


class IndexOutOfRange(TradecoreError, IndexError):
    """Raised when an index falls outside [0, length) of a price series."""

    def __init__(self, index, length):
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of range [0, {length})")


class InvalidTradeTransition(TradecoreError, ValueError):
    """Raised on an illegal trade or trading record state change."""


class ConfigurationError(TradecoreError, ValueError):
    """Raised for invalid configuration or rule definitions."""
