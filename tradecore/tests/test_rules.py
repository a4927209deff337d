# tests/test_rules.py
import itertools
import logging
import unittest

from tradecore.indicators import ClosePriceIndicator, SMAIndicator
from tradecore.rules import (
    AndRule,
    BooleanRule,
    NotRule,
    OrRule,
    OverIndicatorRule,
    Rule,
    UnderIndicatorRule,
    XorRule
)
from tradecore.rules.rule_registry import get_registry
from tradecore.tests.helpers import make_series


class EvenIndexRule(Rule):
    """Satisfied on even indices, used to vary results by index."""

    def is_satisfied(self, index, trading_record=None):
        return index % 2 == 0


class TestBooleanRules(unittest.TestCase):
    """Test suite for rule combinators."""

    def test_boolean_rule(self):
        self.assertTrue(BooleanRule.TRUE.is_satisfied(0))
        self.assertFalse(BooleanRule.FALSE.is_satisfied(0))
        self.assertTrue(BooleanRule(True).is_satisfied(5, None))

    def test_and_truth_table(self):
        for a, b in itertools.product([True, False], repeat=2):
            rule = BooleanRule(a).and_(BooleanRule(b))
            self.assertIsInstance(rule, AndRule)
            self.assertEqual(rule.is_satisfied(0), a and b)

    def test_or_truth_table(self):
        for a, b in itertools.product([True, False], repeat=2):
            rule = BooleanRule(a).or_(BooleanRule(b))
            self.assertIsInstance(rule, OrRule)
            self.assertEqual(rule.is_satisfied(0), a or b)

    def test_xor_truth_table(self):
        for a, b in itertools.product([True, False], repeat=2):
            rule = BooleanRule(a).xor(BooleanRule(b))
            self.assertIsInstance(rule, XorRule)
            self.assertEqual(rule.is_satisfied(0), a != b)

    def test_negation(self):
        rule = BooleanRule.TRUE.negation()
        self.assertIsInstance(rule, NotRule)
        self.assertFalse(rule.is_satisfied(0))
        self.assertTrue(rule.negation().is_satisfied(0))

    def test_operators(self):
        even = EvenIndexRule()
        odd = ~even

        self.assertTrue((even | odd).is_satisfied(3))
        self.assertFalse((even & odd).is_satisfied(3))
        self.assertTrue((even ^ odd).is_satisfied(4))
        self.assertTrue((even & BooleanRule.TRUE).is_satisfied(4))
        self.assertFalse((even & BooleanRule.TRUE).is_satisfied(5))

    def test_composite_evaluated_per_index(self):
        rule = EvenIndexRule().and_(BooleanRule.TRUE)
        self.assertEqual([rule.is_satisfied(i) for i in range(4)], [True, False, True, False])

    def test_and_short_circuits(self):
        class ExplodingRule(Rule):
            def is_satisfied(self, index, trading_record=None):
                raise AssertionError("should not be evaluated")

        self.assertFalse(BooleanRule.FALSE.and_(ExplodingRule()).is_satisfied(0))
        self.assertTrue(BooleanRule.TRUE.or_(ExplodingRule()).is_satisfied(0))

    def test_trace_logging(self):
        with self.assertLogs('tradecore.rules', level='DEBUG') as captured:
            BooleanRule.TRUE.is_satisfied(7)
        self.assertIn('BooleanRule#is_satisfied(7): True', captured.output[0])


class TestIndicatorRules(unittest.TestCase):
    """Test suite for indicator comparison rules."""

    def setUp(self):
        self.series = make_series([1, 2, 3, 2, 1])
        self.close = ClosePriceIndicator(self.series)

    def test_over_constant(self):
        rule = OverIndicatorRule(self.close, 2)
        self.assertEqual([rule.is_satisfied(i) for i in range(5)], [False, False, True, False, False])

    def test_under_constant(self):
        rule = UnderIndicatorRule(self.close, '2')
        self.assertEqual([rule.is_satisfied(i) for i in range(5)], [True, False, False, False, True])

    def test_over_indicator(self):
        sma = SMAIndicator(self.close, 2)
        rule = OverIndicatorRule(self.close, sma)
        # sma: 1, 1.5, 2.5, 2.5, 1.5
        self.assertEqual([rule.is_satisfied(i) for i in range(5)], [False, True, True, False, False])

    def test_registered(self):
        registry = get_registry()
        self.assertIn('OverIndicatorRule', registry.list_rules('indicator'))
        self.assertIn('MovingStopGainRule', registry.list_rules('stop'))
        self.assertTrue({'indicator', 'stop'} <= set(registry.list_categories()))
        self.assertIn('MovingStopLossRule', registry)
        self.assertIs(registry.get_rule_class('UnderIndicatorRule'), UnderIndicatorRule)


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()
