"""
Rules Module

This module provides rule classes that decide whether to enter or exit a
position at a given index. Rules combine indicators and the trading record
and compose with boolean combinators.
"""

from .rule_base import Rule, AndRule, OrRule, XorRule, NotRule, BooleanRule
from .rule_registry import RuleRegistry, register_rule, get_registry
from .indicator_rules import OverIndicatorRule, UnderIndicatorRule
from .stop_rules import MovingStopRule, MovingStopGainRule, MovingStopLossRule
from .rule_factory import RuleFactory

__all__ = [
    'Rule',
    'AndRule',
    'OrRule',
    'XorRule',
    'NotRule',
    'BooleanRule',
    'RuleRegistry',
    'register_rule',
    'get_registry',
    'OverIndicatorRule',
    'UnderIndicatorRule',
    'MovingStopRule',
    'MovingStopGainRule',
    'MovingStopLossRule',
    'RuleFactory'
]
