"""
Rule Base Module

This module defines the base Rule class and the boolean combinators used to
compose rules. A rule is a stateless predicate over a bar index and the
current trading record.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

# Set up logging
logger = logging.getLogger(__name__)


class Rule(ABC):
    """
    Base class for all trading rules in the system.

    Rules never mutate the trading record they are given.
    """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def is_satisfied(self, index: int, trading_record=None) -> bool:
        """
        Evaluate the rule at an index.

        Args:
            index: Bar index
            trading_record: Optional TradingRecord describing the position

        Returns:
            True if the rule is satisfied
        """
        pass

    def trace_is_satisfied(self, index: int, satisfied: bool) -> None:
        logger.debug(f"{self.name}#is_satisfied({index}): {satisfied}")

    def and_(self, other: 'Rule') -> 'Rule':
        return AndRule(self, other)

    def or_(self, other: 'Rule') -> 'Rule':
        return OrRule(self, other)

    def xor(self, other: 'Rule') -> 'Rule':
        return XorRule(self, other)

    def negation(self) -> 'Rule':
        return NotRule(self)

    def __and__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return self.xor(other)

    def __invert__(self):
        return self.negation()

    def __str__(self) -> str:
        return f"{self.name} (Rule)"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AndRule(Rule):
    """Satisfied when both rules are satisfied."""

    def __init__(self, rule1: Rule, rule2: Rule):
        self.rule1 = rule1
        self.rule2 = rule2

    def is_satisfied(self, index: int, trading_record=None) -> bool:
        satisfied = (self.rule1.is_satisfied(index, trading_record)
                     and self.rule2.is_satisfied(index, trading_record))
        self.trace_is_satisfied(index, satisfied)
        return satisfied

    def __repr__(self) -> str:
        return f"AndRule({self.rule1!r}, {self.rule2!r})"


class OrRule(Rule):
    """Satisfied when at least one of the rules is satisfied."""

    def __init__(self, rule1: Rule, rule2: Rule):
        self.rule1 = rule1
        self.rule2 = rule2

    def is_satisfied(self, index: int, trading_record=None) -> bool:
        satisfied = (self.rule1.is_satisfied(index, trading_record)
                     or self.rule2.is_satisfied(index, trading_record))
        self.trace_is_satisfied(index, satisfied)
        return satisfied

    def __repr__(self) -> str:
        return f"OrRule({self.rule1!r}, {self.rule2!r})"


class XorRule(Rule):
    """Satisfied when exactly one of the rules is satisfied."""

    def __init__(self, rule1: Rule, rule2: Rule):
        self.rule1 = rule1
        self.rule2 = rule2

    def is_satisfied(self, index: int, trading_record=None) -> bool:
        satisfied = (self.rule1.is_satisfied(index, trading_record)
                     != self.rule2.is_satisfied(index, trading_record))
        self.trace_is_satisfied(index, satisfied)
        return satisfied

    def __repr__(self) -> str:
        return f"XorRule({self.rule1!r}, {self.rule2!r})"


class NotRule(Rule):
    """Satisfied when the wrapped rule is not."""

    def __init__(self, rule: Rule):
        self.rule = rule

    def is_satisfied(self, index: int, trading_record=None) -> bool:
        satisfied = not self.rule.is_satisfied(index, trading_record)
        self.trace_is_satisfied(index, satisfied)
        return satisfied

    def __repr__(self) -> str:
        return f"NotRule({self.rule!r})"


class BooleanRule(Rule):
    """Always satisfied or never satisfied."""

    TRUE: Optional['BooleanRule'] = None
    FALSE: Optional['BooleanRule'] = None

    def __init__(self, satisfied: bool):
        self.satisfied = bool(satisfied)

    def is_satisfied(self, index: int, trading_record=None) -> bool:
        self.trace_is_satisfied(index, self.satisfied)
        return self.satisfied

    def __repr__(self) -> str:
        return f"BooleanRule({self.satisfied})"


BooleanRule.TRUE = BooleanRule(True)
BooleanRule.FALSE = BooleanRule(False)
