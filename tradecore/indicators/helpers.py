"""
Price indicators.

These indicators read a single field of the bar at the requested index. They
do not cache since the series already holds the values.
"""

from tradecore.indicators.indicator_base import Indicator
from tradecore.num import Num
from tradecore.series.price_series import PriceSeries


class ClosePriceIndicator(Indicator):
    """Close price of each bar."""

    def get_value(self, index: int) -> Num:
        return self.series.get_bar(index).close


class OpenPriceIndicator(Indicator):
    """Open price of each bar."""

    def get_value(self, index: int) -> Num:
        return self.series.get_bar(index).open


class HighPriceIndicator(Indicator):
    """High price of each bar."""

    def get_value(self, index: int) -> Num:
        return self.series.get_bar(index).high


class LowPriceIndicator(Indicator):
    """Low price of each bar."""

    def get_value(self, index: int) -> Num:
        return self.series.get_bar(index).low


class VolumeIndicator(Indicator):
    """Traded volume of each bar."""

    def get_value(self, index: int) -> Num:
        return self.series.get_bar(index).volume


class ConstantIndicator(Indicator):
    """Same value at every valid index of the series."""

    def __init__(self, series: PriceSeries, value, name=None):
        self.value = Num.of(value)
        super().__init__(series, name or f"ConstantIndicator({self.value})")

    def get_value(self, index: int) -> Num:
        self.series.check_index(index)
        return self.value
