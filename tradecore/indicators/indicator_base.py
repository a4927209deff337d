"""
Indicator Base Module

This module defines the Indicator abstraction: a function from a bar index to
a Num value computed over a PriceSeries. Indicators may wrap other indicators,
forming a DAG that is evaluated lazily on demand.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import logging
import threading

import pandas as pd

from tradecore.num import Num
from tradecore.series.price_series import PriceSeries

# Set up logging
logger = logging.getLogger(__name__)


class Indicator(ABC):
    """
    Base class for all indicators.

    get_value(index) must be referentially transparent: repeated calls with
    the same index return the same value.
    """

    def __init__(self, series: PriceSeries, name: Optional[str] = None):
        """
        Initialize an indicator.

        Args:
            series: Price series the indicator is computed over
            name: Optional display name (defaults to the class name)
        """
        self.series = series
        self.name = name or self.__class__.__name__

    @abstractmethod
    def get_value(self, index: int) -> Num:
        """
        Get the indicator value at an index.

        Args:
            index: Bar index in [0, len(series))

        Returns:
            Indicator value

        Raises:
            IndexOutOfRange: If the index is outside the series
        """
        pass

    def get_time_series(self) -> PriceSeries:
        return self.series

    def __len__(self) -> int:
        return len(self.series)

    def values(self) -> List[Num]:
        """Compute the indicator over the whole series."""
        return [self.get_value(i) for i in range(len(self.series))]

    def to_series(self) -> pd.Series:
        """
        Export the indicator as a pandas Series indexed by bar timestamp.

        Returns:
            Series of Decimal values named after the indicator
        """
        return pd.Series(
            [value.to_decimal() for value in self.values()],
            index=pd.DatetimeIndex(self.series.timestamps(), name='timestamp'),
            name=self.name,
            dtype=object
        )

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


class CachedIndicator(Indicator):
    """
    Indicator whose values are memoized per index.

    Values are a pure function of the series up to the index, so the cache is
    never invalidated. Each index is published at most once; a concurrent
    re-derivation of the same index keeps the first stored value.
    """

    def __init__(self, series: PriceSeries, name: Optional[str] = None):
        super().__init__(series, name)
        self._cache: Dict[int, Num] = {}
        self._lock = threading.Lock()

    @abstractmethod
    def calculate(self, index: int) -> Num:
        """
        Compute the value at an already validated index.

        Args:
            index: Bar index

        Returns:
            Computed value
        """
        pass

    def get_value(self, index: int) -> Num:
        self.series.check_index(index)

        value = self._cache.get(index)
        if value is not None:
            return value

        value = self.calculate(index)
        with self._lock:
            return self._cache.setdefault(index, value)

    def cache_size(self) -> int:
        return len(self._cache)
