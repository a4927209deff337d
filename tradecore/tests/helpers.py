"""
Helpers shared by the test modules.
"""

import pandas as pd

from tradecore.series import Bar, PriceSeries


def make_series(closes, name="test"):
    """Build a series whose bars all open, high, low and close at the given prices."""
    dates = pd.date_range('2023-01-01', periods=len(closes), freq='D')
    bars = [
        Bar.create(date.to_pydatetime(), close, close, close, close, 1000)
        for date, close in zip(dates, closes)
    ]
    return PriceSeries(bars, name=name)
