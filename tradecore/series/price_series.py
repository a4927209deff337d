"""
Price Series Module

This module provides the PriceSeries class, an ordered and immutable sequence
of bars addressed by a stable 0-based index. Indicators are built on top of a
series and share it read-only.
"""

import datetime
import logging
from typing import Iterable, Iterator, List, Optional

import pandas as pd

from tradecore.errors import IndexOutOfRange
from tradecore.num import Num
from tradecore.series.bar import Bar

# Set up logging
logger = logging.getLogger(__name__)

# Accepted column spellings when importing a DataFrame
COLUMN_ALIASES = {
    'open': 'open',
    'high': 'high',
    'low': 'low',
    'close': 'close',
    'volume': 'volume',
    'timestamp': 'timestamp',
    'date': 'timestamp',
    'time': 'timestamp',
    'datetime': 'timestamp'
}

REQUIRED_COLUMNS = ('open', 'high', 'low', 'close')


def _to_num(value) -> Num:
    # numpy scalars expose item() to get the plain Python number
    if hasattr(value, 'item'):
        value = value.item()
    return Num.of(value)


def _to_datetime(value) -> datetime.datetime:
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, datetime.datetime):
        return value
    return pd.Timestamp(value).to_pydatetime()


class PriceSeries:
    """
    Ordered, 0-indexed, immutable sequence of bars.

    Indices are stable and monotonic in time. Negative indices are not
    supported; any index outside [0, length) raises IndexOutOfRange.
    """

    def __init__(self, bars: Iterable[Bar], name: str = ""):
        """
        Initialize a price series.

        Args:
            bars: Bars ordered by strictly increasing timestamp
            name: Optional name of the series (e.g. the instrument symbol)

        Raises:
            ValueError: If the timestamps are not strictly increasing
        """
        self._bars = tuple(bars)
        self.name = name

        for previous, current in zip(self._bars, self._bars[1:]):
            if current.timestamp <= previous.timestamp:
                raise ValueError(
                    f"Bar timestamps must be strictly increasing: "
                    f"{current.timestamp} follows {previous.timestamp}"
                )

        logger.debug(f"Created series '{self.name}' with {len(self._bars)} bars")

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, name: str = "") -> 'PriceSeries':
        """
        Build a series from a pandas DataFrame.

        The DataFrame needs Open/High/Low/Close columns (any case), an
        optional Volume column, and either a timestamp/date column or a
        datetime index.

        Args:
            df: DataFrame with OHLCV data
            name: Optional name of the series

        Returns:
            PriceSeries instance

        Raises:
            ValueError: If required columns are missing
        """
        columns = {}
        for column in df.columns:
            key = COLUMN_ALIASES.get(str(column).strip().lower())
            if key is not None and key not in columns:
                columns[key] = column

        missing = [c for c in REQUIRED_COLUMNS if c not in columns]
        if missing:
            raise ValueError(f"DataFrame is missing required columns: {missing}")

        if 'timestamp' in columns:
            timestamps = list(df[columns['timestamp']])
        elif isinstance(df.index, pd.DatetimeIndex):
            timestamps = list(df.index)
        else:
            raise ValueError("DataFrame needs a timestamp column or a DatetimeIndex")

        bars = []
        for position, (_, row) in enumerate(df.iterrows()):
            bars.append(Bar(
                timestamp=_to_datetime(timestamps[position]),
                open=_to_num(row[columns['open']]),
                high=_to_num(row[columns['high']]),
                low=_to_num(row[columns['low']]),
                close=_to_num(row[columns['close']]),
                volume=_to_num(row[columns['volume']]) if 'volume' in columns else Num.of(0)
            ))

        return cls(bars, name=name)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Export the series as a DataFrame indexed by timestamp.

        Returns:
            DataFrame with Open/High/Low/Close/Volume columns of Decimal values
        """
        records = [bar.to_dict() for bar in self._bars]
        df = pd.DataFrame(records, columns=['timestamp', 'Open', 'High', 'Low', 'Close', 'Volume'])
        return df.set_index('timestamp')

    def check_index(self, index: int) -> None:
        """
        Validate an index.

        Raises:
            IndexOutOfRange: If index is outside [0, length)
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Index must be an int, got {type(index).__name__}")
        if index < 0 or index >= len(self._bars):
            raise IndexOutOfRange(index, len(self._bars))

    def get_bar(self, index: int) -> Bar:
        self.check_index(index)
        return self._bars[index]

    def __getitem__(self, index: int) -> Bar:
        return self.get_bar(index)

    def __len__(self) -> int:
        return len(self._bars)

    def __iter__(self) -> Iterator[Bar]:
        return iter(self._bars)

    def is_empty(self) -> bool:
        return len(self._bars) == 0

    @property
    def begin_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        return len(self._bars) - 1

    def get_bar_count(self) -> int:
        return len(self._bars)

    def timestamps(self) -> List[datetime.datetime]:
        return [bar.timestamp for bar in self._bars]

    def get_first_bar(self) -> Optional[Bar]:
        return self._bars[0] if self._bars else None

    def get_last_bar(self) -> Optional[Bar]:
        return self._bars[-1] if self._bars else None

    def __str__(self) -> str:
        return f"{self.name or 'PriceSeries'} ({len(self._bars)} bars)"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', bars={len(self._bars)})"
