"""
Trading Record Module

This module provides the TradingRecord, the append-only ledger of trades that
rules consult to learn about the current position. Only the strategy driver
mutates a record; rules read it.
"""

from typing import List, Optional, Tuple
import logging

from tradecore.errors import InvalidTradeTransition
from tradecore.num import ONE
from tradecore.trading.order import Order, OrderType
from tradecore.trading.trade import Trade

# Set up logging
logger = logging.getLogger(__name__)


class TradingRecord:
    """
    Append-only ordered sequence of trades.

    At most one trade is open at a time and a new trade only begins once the
    previous one is closed. Orders must be placed at strictly increasing
    indices.
    """

    def __init__(self, entry_type: OrderType = OrderType.BUY, price_indicator=None):
        """
        Initialize a trading record.

        Args:
            entry_type: Side of entry orders (BUY for long, SELL for short)
            price_indicator: Optional indicator giving the default execution
                price when operate() is called without a price
        """
        self.entry_type = OrderType.from_value(entry_type)
        self.price_indicator = price_indicator
        self._trades: List[Trade] = []
        self._orders: List[Order] = []

    def _open_trade(self) -> Optional[Trade]:
        if self._trades and self._trades[-1].is_opened():
            return self._trades[-1]
        return None

    def get_current_trade(self) -> Optional[Trade]:
        """
        Get the current trade.

        Returns:
            The open trade if any, otherwise the most recently closed trade,
            otherwise None
        """
        if not self._trades:
            return None
        return self._trades[-1]

    def operate(self, index: int, price=None, amount=ONE) -> Order:
        """
        Enter a new trade or exit the open one.

        Args:
            index: Bar index of the order
            price: Execution price (defaults to the price indicator value)
            amount: Order amount

        Returns:
            The created order

        Raises:
            InvalidTradeTransition: If the index does not follow the last order
                or no price is available
        """
        last_order = self.get_last_order()
        if last_order is not None and index <= last_order.index:
            raise InvalidTradeTransition(
                f"Order index {index} must be greater than last order index {last_order.index}"
            )

        if price is None:
            if self.price_indicator is None:
                raise InvalidTradeTransition(
                    "No price given and the record has no price indicator"
                )
            price = self.price_indicator.get_value(index)

        trade = self._open_trade()
        if trade is None:
            trade = Trade(self.entry_type)
            order = trade.operate(index, price, amount)
            self._trades.append(trade)
            logger.info(f"Entered trade #{len(self._trades)}: {order}")
        else:
            order = trade.operate(index, price, amount)
            logger.info(f"Exited trade #{len(self._trades)}: {order} (profit {trade.get_profit()})")

        self._orders.append(order)
        return order

    def enter(self, index: int, price=None, amount=ONE) -> bool:
        """
        Operate only if no trade is open.

        Returns:
            True if an entry order was placed
        """
        if self.is_closed():
            self.operate(index, price, amount)
            return True
        return False

    def exit(self, index: int, price=None, amount=ONE) -> bool:
        """
        Operate only if a trade is open.

        Returns:
            True if an exit order was placed
        """
        if self.is_opened():
            self.operate(index, price, amount)
            return True
        return False

    def is_opened(self) -> bool:
        return self._open_trade() is not None

    def is_closed(self) -> bool:
        return self._open_trade() is None

    def get_trades(self) -> Tuple[Trade, ...]:
        return tuple(self._trades)

    def get_trade_count(self) -> int:
        """Number of closed trades."""
        return sum(1 for trade in self._trades if trade.is_closed())

    def get_last_order(self) -> Optional[Order]:
        return self._orders[-1] if self._orders else None

    def get_last_entry(self) -> Optional[Order]:
        return self._trades[-1].get_entry() if self._trades else None

    def get_last_exit(self) -> Optional[Order]:
        for trade in reversed(self._trades):
            if trade.get_exit() is not None:
                return trade.get_exit()
        return None

    def __len__(self) -> int:
        return len(self._trades)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(entry_type={self.entry_type.value}, "
                f"trades={len(self._trades)})")
