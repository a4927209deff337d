"""
Indicator comparison rules.

Rules that compare two indicators at the same index. A plain number may be
given in place of the second indicator.
"""

from tradecore.indicators.helpers import ConstantIndicator
from tradecore.indicators.indicator_base import Indicator
from tradecore.rules.rule_base import Rule
from tradecore.rules.rule_registry import register_rule


def _as_indicator(value, reference: Indicator) -> Indicator:
    if isinstance(value, Indicator):
        return value
    return ConstantIndicator(reference.get_time_series(), value)


class _IndicatorComparisonRule(Rule):

    def __init__(self, first: Indicator, second):
        self.first = first
        self.second = _as_indicator(second, first)

    @classmethod
    def from_params(cls, factory, params):
        return cls(factory.indicator(params['first']), factory.indicator(params['second']))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.first.name}, {self.second.name})"


@register_rule(category="indicator")
class OverIndicatorRule(_IndicatorComparisonRule):
    """Satisfied when the first indicator is strictly greater than the second."""

    def is_satisfied(self, index: int, trading_record=None) -> bool:
        satisfied = self.first.get_value(index) > self.second.get_value(index)
        self.trace_is_satisfied(index, satisfied)
        return satisfied


@register_rule(category="indicator")
class UnderIndicatorRule(_IndicatorComparisonRule):
    """Satisfied when the first indicator is strictly lower than the second."""

    def is_satisfied(self, index: int, trading_record=None) -> bool:
        satisfied = self.first.get_value(index) < self.second.get_value(index)
        self.trace_is_satisfied(index, satisfied)
        return satisfied
