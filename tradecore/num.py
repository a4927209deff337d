"""
Numeric Value Module

This module defines the Num class, the exact decimal scalar used by every
indicator and rule in the system. All arithmetic runs in a single module-level
decimal context so results are reproducible regardless of platform.
"""

import decimal
from decimal import Decimal
from typing import Union

DEFAULT_PRECISION = 32
DEFAULT_ROUNDING = decimal.ROUND_HALF_UP

ROUNDING_MODES = (
    'ROUND_UP', 'ROUND_DOWN', 'ROUND_CEILING', 'ROUND_FLOOR',
    'ROUND_HALF_UP', 'ROUND_HALF_DOWN', 'ROUND_HALF_EVEN', 'ROUND_05UP'
)


def _make_context(precision: int, rounding: str) -> decimal.Context:
    return decimal.Context(
        prec=precision,
        rounding=rounding,
        traps=[decimal.DivisionByZero, decimal.InvalidOperation, decimal.Overflow]
    )


_context = _make_context(DEFAULT_PRECISION, DEFAULT_ROUNDING)


def configure_context(precision: int = DEFAULT_PRECISION, rounding: str = DEFAULT_ROUNDING) -> None:
    """
    Replace the decimal context used by all Num operations.

    Args:
        precision: Number of significant digits
        rounding: Name of a decimal rounding mode (e.g. 'ROUND_HALF_UP')

    Raises:
        ValueError: If precision or rounding are invalid
    """
    global _context

    if not isinstance(precision, int) or isinstance(precision, bool) or precision < 1:
        raise ValueError(f"Precision must be a positive integer, got {precision!r}")
    if rounding not in ROUNDING_MODES:
        raise ValueError(f"Rounding must be one of {ROUNDING_MODES}, got {rounding!r}")

    _context = _make_context(precision, rounding)


def get_context() -> decimal.Context:
    """Get the decimal context used by Num arithmetic."""
    return _context


NumLike = Union['Num', Decimal, int, float, str]


class Num:
    """
    Immutable exact decimal number.

    Supports the arithmetic operators, ordered comparison and min/max.
    Operands that are not Num are converted with Num.of().
    """

    __slots__ = ('_value',)

    def __init__(self, value: Decimal):
        if not isinstance(value, Decimal):
            raise TypeError(f"Num wraps a Decimal, got {type(value).__name__}")
        object.__setattr__(self, '_value', value)

    @classmethod
    def of(cls, value: NumLike) -> 'Num':
        """
        Convert a value to Num.

        Floats go through their shortest repr, so Num.of(102.99) is exactly
        102.99 rather than the nearest binary fraction.

        Args:
            value: Num, Decimal, int, float or numeric string

        Returns:
            Num instance

        Raises:
            TypeError: If the value type is not supported
            ArithmeticError: If the value is not a finite number
        """
        if isinstance(value, Num):
            return value
        if isinstance(value, bool) or value is None:
            raise TypeError(f"Cannot convert {value!r} to Num")

        if isinstance(value, Decimal):
            number = value
        elif isinstance(value, int):
            number = Decimal(value)
        elif isinstance(value, float):
            number = Decimal(repr(float(value)))
        elif isinstance(value, str):
            number = _context.create_decimal(value.strip())
        else:
            raise TypeError(f"Cannot convert {type(value).__name__} to Num")

        if not number.is_finite():
            raise decimal.InvalidOperation(f"Num must be finite, got {value!r}")
        return cls(number)

    def __setattr__(self, name, value):
        raise AttributeError("Num is immutable")

    # Arithmetic

    def plus(self, other: NumLike) -> 'Num':
        return Num(_context.add(self._value, Num.of(other)._value))

    def minus(self, other: NumLike) -> 'Num':
        return Num(_context.subtract(self._value, Num.of(other)._value))

    def multiplied_by(self, other: NumLike) -> 'Num':
        return Num(_context.multiply(self._value, Num.of(other)._value))

    def divided_by(self, other: NumLike) -> 'Num':
        """
        Divide by another value.

        Raises:
            ArithmeticError: On division by zero
        """
        return Num(_context.divide(self._value, Num.of(other)._value))

    def min(self, other: NumLike) -> 'Num':
        """Return the lesser operand, self on a tie."""
        other = Num.of(other)
        return self if self._value <= other._value else other

    def max(self, other: NumLike) -> 'Num':
        """Return the greater operand, self on a tie."""
        other = Num.of(other)
        return self if self._value >= other._value else other

    def abs(self) -> 'Num':
        return Num(_context.abs(self._value))

    def negate(self) -> 'Num':
        return Num(_context.minus(self._value))

    __add__ = plus
    __sub__ = minus
    __mul__ = multiplied_by
    __truediv__ = divided_by

    def __radd__(self, other):
        return Num.of(other).plus(self)

    def __rsub__(self, other):
        return Num.of(other).minus(self)

    def __rmul__(self, other):
        return Num.of(other).multiplied_by(self)

    def __rtruediv__(self, other):
        return Num.of(other).divided_by(self)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    # Comparison

    def _coerce(self, other):
        # strings convert through Num.of() explicitly, never implicitly in comparisons
        if isinstance(other, (Num, Decimal, int, float)) and not isinstance(other, bool):
            return Num.of(other)._value
        return None

    def __eq__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __le__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value <= value

    def __gt__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value > value

    def __ge__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value >= value

    def __hash__(self):
        return hash(self._value)

    def is_zero(self) -> bool:
        return self._value.is_zero()

    def is_positive(self) -> bool:
        return self._value > 0

    def is_negative(self) -> bool:
        return self._value < 0

    # Conversion

    def to_decimal(self) -> Decimal:
        return self._value

    def __float__(self):
        return float(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Num('{self._value}')"


ZERO = Num(Decimal(0))
ONE = Num(Decimal(1))
HUNDRED = Num(Decimal(100))
