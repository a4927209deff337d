"""
Trading module.

This module provides orders, trades and the trading record that rules inspect
to learn whether a position is open, its direction and its reference price.
"""

from .order import Order, OrderType
from .trade import Trade, TradeState
from .trading_record import TradingRecord

__all__ = ['Order', 'OrderType', 'Trade', 'TradeState', 'TradingRecord']
