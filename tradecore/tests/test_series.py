# tests/test_series.py
"""
Tests for Bar and PriceSeries.
"""

import datetime
from decimal import Decimal

import pandas as pd
import pytest

from tradecore.errors import IndexOutOfRange
from tradecore.num import Num
from tradecore.series import Bar, PriceSeries
from tradecore.tests.helpers import make_series


def test_bar_create_converts_prices():
    bar = Bar.create(datetime.datetime(2023, 1, 1), 1, '2.5', 0.5, 2.25, 100)
    assert bar.open == Num.of(1)
    assert bar.high == Num.of('2.5')
    assert bar.low == Num.of('0.5')
    assert bar.close == Num.of('2.25')
    assert bar.volume == Num.of(100)


def test_series_indexing(rising_series):
    assert len(rising_series) == 10
    assert rising_series.begin_index == 0
    assert rising_series.end_index == 9
    assert rising_series.get_bar(0).close == Num.of(1)
    assert rising_series[9].close == Num.of(10)
    assert not rising_series.is_empty()
    assert rising_series.get_bar_count() == 10
    assert rising_series.get_first_bar().close == Num.of(1)
    assert rising_series.get_last_bar().close == Num.of(10)


@pytest.mark.parametrize("index", [-1, 10, 100])
def test_series_out_of_range(rising_series, index):
    with pytest.raises(IndexOutOfRange) as excinfo:
        rising_series.get_bar(index)
    assert excinfo.value.index == index
    assert excinfo.value.length == 10


def test_out_of_range_is_an_index_error(rising_series):
    with pytest.raises(IndexError):
        rising_series[10]


def test_empty_series():
    series = PriceSeries([])
    assert series.is_empty()
    assert series.end_index == -1
    assert series.get_first_bar() is None
    assert series.get_last_bar() is None
    assert series.get_bar_count() == 0
    with pytest.raises(IndexOutOfRange):
        series.get_bar(0)


def test_timestamps_must_increase():
    timestamp = datetime.datetime(2023, 1, 1)
    bars = [Bar.create(timestamp, 1, 1, 1, 1), Bar.create(timestamp, 2, 2, 2, 2)]
    with pytest.raises(ValueError):
        PriceSeries(bars)


def test_series_is_immutable(rising_series):
    bars = list(rising_series)
    bars.append(bars[0])
    assert len(rising_series) == 10


def test_from_dataframe_with_datetime_index(sample_price_data):
    series = PriceSeries.from_dataframe(sample_price_data, name="SAMPLE")

    assert len(series) == 20
    assert series.name == "SAMPLE"
    assert series[0].close == Num.of(100)
    assert series[0].open == Num.of('99.5')
    assert series[19].high == Num.of(120)
    assert series[5].volume == Num.of(1005)
    assert series[0].timestamp == datetime.datetime(2023, 1, 1)


def test_from_dataframe_with_timestamp_column():
    df = pd.DataFrame({
        'timestamp': ['2023-01-01', '2023-01-02'],
        'open': [1.0, 2.0],
        'high': [1.5, 2.5],
        'low': [0.5, 1.5],
        'close': [1.25, 2.25]
    })
    series = PriceSeries.from_dataframe(df)

    assert series[1].close == Num.of('2.25')
    assert series[1].volume == Num.of(0)
    assert series[1].timestamp == datetime.datetime(2023, 1, 2)


def test_from_dataframe_missing_columns():
    df = pd.DataFrame({'Close': [1.0]}, index=pd.date_range('2023-01-01', periods=1))
    with pytest.raises(ValueError):
        PriceSeries.from_dataframe(df)


def test_to_dataframe_round_trip_values():
    series = make_series(['1.1', '2.2'])
    df = series.to_dataframe()

    assert list(df.columns) == ['Open', 'High', 'Low', 'Close', 'Volume']
    assert df['Close'].iloc[1] == Decimal('2.2')
    assert df.index[0] == pd.Timestamp('2023-01-01')
