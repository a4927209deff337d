"""
Rule Factory Module

This module provides the RuleFactory, which builds rule instances and nested
rule combinations from plain definitions such as those found in a
configuration file.

Definition format:
    {"rule": "MovingStopGainRule", "params": {"gain_percentage": 3, "frames": 5}}
    {"and": [definition, definition, ...]}
    {"or": [definition, definition, ...]}
    {"xor": [definition, definition]}
    {"not": definition}

Indicator references inside params:
    "close", "open", "high", "low", "volume"   price indicators
    42, "101.5"                                 constant value
    {"sma": {"of": reference, "time_frame": 10}}
"""

from decimal import Decimal
from functools import reduce
from typing import Any, Dict, Optional
import logging

from tradecore.errors import ConfigurationError
from tradecore.indicators.helpers import (
    ClosePriceIndicator,
    ConstantIndicator,
    HighPriceIndicator,
    LowPriceIndicator,
    OpenPriceIndicator,
    VolumeIndicator
)
from tradecore.indicators.indicator_base import Indicator
from tradecore.indicators.moving_averages import SMAIndicator
from tradecore.num import Num
from tradecore.rules.rule_base import Rule
from tradecore.rules.rule_registry import RuleRegistry, get_registry
# imported for their registrations
from tradecore.rules import indicator_rules, stop_rules  # noqa: F401

# Set up logging
logger = logging.getLogger(__name__)

PRICE_INDICATORS = {
    'close': ClosePriceIndicator,
    'open': OpenPriceIndicator,
    'high': HighPriceIndicator,
    'low': LowPriceIndicator,
    'volume': VolumeIndicator
}

# Configuration sections holding default params per rule name
RULE_DEFAULT_SECTIONS = {
    'MovingStopGainRule': 'rules.moving_stop_gain',
    'MovingStopLossRule': 'rules.moving_stop_loss'
}


class RuleFactory:
    """
    Factory for creating rule instances over one price series.

    Price indicators are shared between all rules built by the same factory.
    """

    def __init__(self, series, config=None, registry: Optional[RuleRegistry] = None):
        """
        Initialize the rule factory.

        Args:
            series: PriceSeries the rules are evaluated on
            config: Optional ConfigManager supplying default rule params
            registry: Optional rule registry to use (defaults to global registry)
        """
        self.series = series
        self.config = config
        self.registry = registry or get_registry()
        self._price_indicators: Dict[str, Indicator] = {}

    def default_params(self, rule_name: str) -> Dict[str, Any]:
        section = RULE_DEFAULT_SECTIONS.get(rule_name)
        if self.config is None or section is None:
            return {}
        return dict(self.config.get(section, {}) or {})

    def indicator(self, reference) -> Indicator:
        """
        Resolve an indicator reference.

        Args:
            reference: Indicator, price name, number or {"sma": {...}} dict

        Returns:
            Indicator over the factory's series

        Raises:
            ConfigurationError: If the reference cannot be resolved
        """
        if isinstance(reference, Indicator):
            return reference

        if isinstance(reference, str) and reference.strip().lower() in PRICE_INDICATORS:
            key = reference.strip().lower()
            if key not in self._price_indicators:
                self._price_indicators[key] = PRICE_INDICATORS[key](self.series)
            return self._price_indicators[key]

        if isinstance(reference, dict) and 'sma' in reference:
            sma = reference['sma'] or {}
            try:
                return SMAIndicator(self.indicator(sma.get('of', 'close')), sma['time_frame'])
            except (AttributeError, KeyError, ValueError) as e:
                raise ConfigurationError(f"Invalid SMA definition {reference!r}: {e}") from e

        if isinstance(reference, (Num, Decimal, int, float, str)) and not isinstance(reference, bool):
            try:
                return ConstantIndicator(self.series, Num.of(reference))
            except ArithmeticError as e:
                raise ConfigurationError(f"Unknown indicator reference {reference!r}") from e

        raise ConfigurationError(f"Unknown indicator reference {reference!r}")

    def create_rule(self, rule_name: str, params: Optional[Dict[str, Any]] = None) -> Rule:
        """
        Create a rule instance by registered name.

        Args:
            rule_name: Name of the rule class to instantiate
            params: Parameters for the rule, merged over configured defaults

        Returns:
            Instantiated rule

        Raises:
            ConfigurationError: If the rule is unknown or params are invalid
        """
        rule_class = self.registry.get_rule_class(rule_name)

        merged = self.default_params(rule_name)
        merged.update(params or {})

        try:
            rule = rule_class.from_params(self, merged)
        except KeyError as e:
            raise ConfigurationError(f"Missing parameter {e} for rule '{rule_name}'") from e
        except (TypeError, ValueError, ArithmeticError) as e:
            raise ConfigurationError(f"Invalid parameters for rule '{rule_name}': {e}") from e

        logger.debug(f"Created rule {rule!r}")
        return rule

    def build(self, definition) -> Rule:
        """
        Build a rule from a possibly nested definition.

        Args:
            definition: Rule instance or definition dict (see module docstring)

        Returns:
            Rule instance

        Raises:
            ConfigurationError: If the definition is malformed
        """
        if isinstance(definition, Rule):
            return definition
        if not isinstance(definition, dict) or len(definition) == 0:
            raise ConfigurationError(f"Invalid rule definition: {definition!r}")

        if 'rule' in definition:
            return self.create_rule(definition['rule'], definition.get('params'))

        if len(definition) != 1:
            raise ConfigurationError(f"Combinator definition must have a single key: {definition!r}")

        operator, operands = next(iter(definition.items()))

        if operator == 'not':
            return self.build(operands).negation()

        if operator in ('and', 'or', 'xor'):
            if not isinstance(operands, list) or len(operands) < 2:
                raise ConfigurationError(f"'{operator}' needs a list of at least two rules")
            if operator == 'xor' and len(operands) != 2:
                raise ConfigurationError("'xor' needs exactly two rules")

            rules = [self.build(operand) for operand in operands]
            if operator == 'and':
                return reduce(lambda left, right: left.and_(right), rules)
            if operator == 'or':
                return reduce(lambda left, right: left.or_(right), rules)
            return rules[0].xor(rules[1])

        raise ConfigurationError(f"Unknown rule operator '{operator}'")
