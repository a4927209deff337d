"""
Moving average indicators.

This module provides the simple moving average over any wrapped indicator.
"""

from tradecore.indicators.indicator_base import CachedIndicator, Indicator
from tradecore.num import Num, ZERO


class SMAIndicator(CachedIndicator):
    """
    Simple Moving Average.

    The value at index i is the arithmetic mean of the wrapped indicator over
    [max(0, i - time_frame + 1), i]. Near the start of the series the mean is
    taken over the available prefix instead of failing.
    """

    def __init__(self, indicator: Indicator, time_frame: int):
        """
        Initialize the moving average.

        Args:
            indicator: Indicator to average
            time_frame: Size of the moving window

        Raises:
            ValueError: If time_frame is smaller than 1
        """
        if isinstance(time_frame, bool) or not isinstance(time_frame, int) or time_frame < 1:
            raise ValueError(f"SMA time frame must be a positive integer, got {time_frame!r}")

        super().__init__(indicator.get_time_series(), f"SMAIndicator({indicator.name}, {time_frame})")
        self.indicator = indicator
        self.time_frame = time_frame

    def calculate(self, index: int) -> Num:
        start = max(0, index - self.time_frame + 1)

        total = ZERO
        for i in range(start, index + 1):
            total = total + self.indicator.get_value(i)

        return total / (index - start + 1)
