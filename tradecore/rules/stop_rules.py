"""
Moving stop rules.

Stop-gain and stop-loss rules that compare a blend of a raw price indicator
and its simple moving average against a percentage threshold around the
current trade's reference price.

Stop-gain uses the lesser of the raw and smoothed price, stop-loss the
greater.
"""

from abc import abstractmethod

from tradecore.indicators.indicator_base import Indicator
from tradecore.indicators.moving_averages import SMAIndicator
from tradecore.num import HUNDRED, Num
from tradecore.rules.rule_base import Rule
from tradecore.rules.rule_registry import register_rule


class MovingStopRule(Rule):
    """
    Shared evaluation of the moving stop rules.

    The rule is not satisfied when there is no trading record, no current
    trade, or a current trade with neither entry nor exit. The reference price
    is the exit price of a closed trade and the entry price otherwise; the
    direction always comes from the entry order.
    """

    percentage_param = None

    def __init__(self, price_indicator: Indicator, percentage, frames: int):
        """
        Initialize a moving stop rule.

        Args:
            price_indicator: Raw price indicator (usually close price)
            percentage: Threshold in percent (e.g. 3 for 3%)
            frames: Window of the moving average built over price_indicator

        Raises:
            ValueError: If frames is smaller than 1
        """
        self.price_indicator = price_indicator
        self.percentage = Num.of(percentage)
        self.frames = frames
        self.moving_average = SMAIndicator(price_indicator, frames)

        self.long_ratio = self._ratio(long=True)
        self.short_ratio = self._ratio(long=False)

    @classmethod
    def from_params(cls, factory, params):
        return cls(
            factory.indicator(params.get('price', 'close')),
            params[cls.percentage_param],
            params['frames']
        )

    @abstractmethod
    def _ratio(self, long: bool) -> Num:
        pass

    @abstractmethod
    def _effective_price(self, raw: Num, smoothed: Num) -> Num:
        pass

    @abstractmethod
    def _triggered(self, long: bool, price: Num, threshold: Num) -> bool:
        pass

    def is_satisfied(self, index: int, trading_record=None) -> bool:
        satisfied = False

        trade = trading_record.get_current_trade() if trading_record is not None else None
        if trade is not None and (trade.get_entry() is not None or trade.get_exit() is not None):
            entry = trade.get_entry()
            reference = trade.get_exit() or entry
            long = entry.is_buy()

            raw = self.price_indicator.get_value(index)
            smoothed = self.moving_average.get_value(index)
            price = self._effective_price(raw, smoothed)

            ratio = self.long_ratio if long else self.short_ratio
            threshold = reference.price * ratio
            satisfied = self._triggered(long, price, threshold)

        self.trace_is_satisfied(index, satisfied)
        return satisfied

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}({self.price_indicator.name}, "
                f"{self.percentage}, {self.frames})")


@register_rule(category="stop")
class MovingStopGainRule(MovingStopRule):
    """
    A moving stop-gain rule.

    Satisfied when min(price, SMA(price)) reaches entry * (1 + gain%) for a
    long trade, or is at or below that same threshold for a short trade.
    """

    percentage_param = 'gain_percentage'

    def _ratio(self, long: bool) -> Num:
        # one threshold for both directions, only the comparison flips
        return (HUNDRED + self.percentage) / HUNDRED

    def _effective_price(self, raw: Num, smoothed: Num) -> Num:
        return smoothed.min(raw)

    def _triggered(self, long: bool, price: Num, threshold: Num) -> bool:
        if long:
            return price >= threshold
        return price <= threshold


@register_rule(category="stop")
class MovingStopLossRule(MovingStopRule):
    """
    A moving stop-loss rule.

    Satisfied when max(price, SMA(price)) falls to entry * (1 - loss%) for a
    long trade, or rises to entry * (1 + loss%) for a short trade.
    """

    percentage_param = 'loss_percentage'

    def _ratio(self, long: bool) -> Num:
        if long:
            return (HUNDRED - self.percentage) / HUNDRED
        return (HUNDRED + self.percentage) / HUNDRED

    def _effective_price(self, raw: Num, smoothed: Num) -> Num:
        return smoothed.max(raw)

    def _triggered(self, long: bool, price: Num, threshold: Num) -> bool:
        if long:
            return price <= threshold
        return price >= threshold
