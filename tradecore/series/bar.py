"""
Bar Module

This module defines the Bar, a single OHLCV period of a price series.
"""

import datetime
from dataclasses import dataclass

from tradecore.num import Num, ZERO


@dataclass(frozen=True)
class Bar:
    """One period of market data with exact decimal prices."""
    timestamp: datetime.datetime
    open: Num
    high: Num
    low: Num
    close: Num
    volume: Num = ZERO

    @classmethod
    def create(cls, timestamp, open, high, low, close, volume=0) -> 'Bar':
        """
        Create a bar from raw numbers.

        Args:
            timestamp: Bar end time
            open: Opening price
            high: Highest price
            low: Lowest price
            close: Closing price
            volume: Traded volume

        Returns:
            Bar with every price converted to Num
        """
        return cls(
            timestamp=timestamp,
            open=Num.of(open),
            high=Num.of(high),
            low=Num.of(low),
            close=Num.of(close),
            volume=Num.of(volume)
        )

    def to_dict(self):
        return {
            'timestamp': self.timestamp,
            'Open': self.open.to_decimal(),
            'High': self.high.to_decimal(),
            'Low': self.low.to_decimal(),
            'Close': self.close.to_decimal(),
            'Volume': self.volume.to_decimal()
        }
