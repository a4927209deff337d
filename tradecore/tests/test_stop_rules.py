# tests/test_stop_rules.py
"""
Tests for the moving stop-gain and stop-loss rules.
"""

import pytest

from tradecore.indicators import ClosePriceIndicator
from tradecore.num import Num
from tradecore.rules import MovingStopGainRule, MovingStopLossRule
from tradecore.tests.helpers import make_series
from tradecore.trading import OrderType, Trade, TradingRecord


def _record(entry_type, *orders):
    record = TradingRecord(entry_type=entry_type)
    for index, price in orders:
        record.operate(index, price)
    return record


def _gain(series, percentage=3, frames=5):
    return MovingStopGainRule(ClosePriceIndicator(series), percentage, frames)


def _loss(series, percentage=3, frames=5):
    return MovingStopLossRule(ClosePriceIndicator(series), percentage, frames)

# ---------------------------------------------------------------------------
# Long trades
# ---------------------------------------------------------------------------


def test_long_stop_gain_reached(flat_series):
    record = _record(OrderType.BUY, (0, 100))
    assert _gain(flat_series(103)).is_satisfied(5, record)


def test_long_stop_gain_not_reached(flat_series):
    record = _record(OrderType.BUY, (0, 100))
    assert not _gain(flat_series('102.99')).is_satisfied(5, record)


def test_long_stop_loss_reached(flat_series):
    record = _record(OrderType.BUY, (0, 100))
    assert _loss(flat_series(97)).is_satisfied(5, record)
    assert _loss(flat_series(90)).is_satisfied(5, record)


def test_long_stop_loss_not_reached(flat_series):
    record = _record(OrderType.BUY, (0, 100))
    assert not _loss(flat_series('97.01')).is_satisfied(5, record)
    assert not _loss(flat_series(110)).is_satisfied(5, record)

# ---------------------------------------------------------------------------
# Short trades
# ---------------------------------------------------------------------------


def test_short_stop_loss_reached(flat_series):
    record = _record(OrderType.SELL, (0, 100))
    assert _loss(flat_series(103)).is_satisfied(5, record)


def test_short_stop_loss_not_reached(flat_series):
    record = _record(OrderType.SELL, (0, 100))
    assert not _loss(flat_series(102)).is_satisfied(5, record)


def test_short_stop_gain(flat_series):
    # same 3% threshold as a long trade, satisfied at or below 103
    record = _record(OrderType.SELL, (0, 100))
    assert _gain(flat_series('102.5')).is_satisfied(5, record)
    assert _gain(flat_series(103)).is_satisfied(5, record)
    assert _gain(flat_series(97)).is_satisfied(5, record)
    assert not _gain(flat_series('103.01')).is_satisfied(5, record)

# ---------------------------------------------------------------------------
# Missing position
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("factory", [_gain, _loss])
def test_not_satisfied_without_record(flat_series, factory):
    rule = factory(flat_series(50))
    assert not rule.is_satisfied(5)
    assert not rule.is_satisfied(5, None)


@pytest.mark.parametrize("factory", [_gain, _loss])
def test_not_satisfied_with_empty_record(flat_series, factory):
    rule = factory(flat_series(50))
    assert not rule.is_satisfied(5, TradingRecord())


class FreshTradeRecord:
    """Record whose current trade has neither entry nor exit."""

    def get_current_trade(self):
        return Trade()


@pytest.mark.parametrize("factory", [_gain, _loss])
def test_not_satisfied_with_new_trade(flat_series, factory):
    rule = factory(flat_series(50))
    assert not rule.is_satisfied(5, FreshTradeRecord())

# ---------------------------------------------------------------------------
# Price blending and reference price
# ---------------------------------------------------------------------------


def test_stop_gain_uses_lower_of_price_and_average():
    # At index 4 the close is 110 but the 5-bar average is only 102
    series = make_series([100, 100, 100, 100, 110])
    record = _record(OrderType.BUY, (0, 100))

    assert not _gain(series).is_satisfied(4, record)
    assert _gain(series, frames=1).is_satisfied(4, record)


def test_stop_loss_uses_higher_of_price_and_average():
    # At index 4 the close is 90 but the 5-bar average is still 98
    series = make_series([100, 100, 100, 100, 90])
    record = _record(OrderType.BUY, (0, 100))

    assert not _loss(series).is_satisfied(4, record)
    assert _loss(series, frames=1).is_satisfied(4, record)


def test_average_covers_prefix_near_start():
    series = make_series([100, 106])
    record = _record(OrderType.BUY, (0, 100))

    # average of 100 and 106 is 103
    assert _gain(series).is_satisfied(1, record)


def test_closed_trade_uses_exit_price(flat_series):
    record = _record(OrderType.BUY, (0, 100), (1, 110))
    assert record.is_closed()

    # 105 clears 3% over the entry but not over the exit at 110
    assert not _gain(flat_series(105)).is_satisfied(5, record)
    assert _gain(flat_series('113.3')).is_satisfied(5, record)


def test_rule_does_not_mutate_record(flat_series):
    record = _record(OrderType.BUY, (0, 100))
    _gain(flat_series(200)).is_satisfied(5, record)
    _loss(flat_series(1)).is_satisfied(5, record)

    assert record.is_opened()
    assert len(record.get_trades()) == 1

# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("frames", [0, -1])
def test_invalid_frames(flat_series, frames):
    with pytest.raises(ValueError):
        _gain(flat_series(100), frames=frames)
    with pytest.raises(ValueError):
        _loss(flat_series(100), frames=frames)


def test_thresholds_are_exact():
    rule = _gain(make_series([1]), percentage='2.5')
    assert rule.long_ratio == Num.of('1.025')
    assert rule.short_ratio == Num.of('1.025')

    rule = _loss(make_series([1]), percentage='2.5')
    assert rule.long_ratio == Num.of('0.975')
    assert rule.short_ratio == Num.of('1.025')
