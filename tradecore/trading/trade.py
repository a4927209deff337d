"""
Trade Module

This module defines the Trade, one position lifecycle made of an entry order
and an optional exit order.
"""

from enum import Enum, auto
from typing import Optional
import logging

from tradecore.errors import InvalidTradeTransition
from tradecore.num import Num, ONE, ZERO
from tradecore.trading.order import Order, OrderType

# Set up logging
logger = logging.getLogger(__name__)


class TradeState(Enum):
    """Lifecycle states of a trade."""
    NEW = auto()        # No entry yet
    OPENED = auto()     # Entry set, no exit
    CLOSED = auto()     # Entry and exit set


class Trade:
    """
    A position lifecycle with at most one entry and one exit order.

    The entry, once set, is never replaced; the exit can only be set once and
    only after the entry. The position direction comes from the entry side.
    """

    def __init__(self, starting_type: OrderType = OrderType.BUY):
        """
        Initialize a new trade.

        Args:
            starting_type: Side of the entry order (BUY for long, SELL for short)
        """
        self.starting_type = OrderType.from_value(starting_type)
        self._entry: Optional[Order] = None
        self._exit: Optional[Order] = None

    @property
    def state(self) -> TradeState:
        if self._entry is None:
            return TradeState.NEW
        if self._exit is None:
            return TradeState.OPENED
        return TradeState.CLOSED

    def open(self, order: Order) -> None:
        """
        Set the entry order.

        The entry side decides the direction of the position.

        Raises:
            InvalidTradeTransition: If the trade is not new
        """
        if self.state is not TradeState.NEW:
            raise InvalidTradeTransition(f"Cannot open a trade in state {self.state.name}")

        self._entry = order
        self.starting_type = order.order_type
        logger.debug(f"Trade opened: {order}")

    def close(self, order: Order) -> None:
        """
        Set the exit order.

        Raises:
            InvalidTradeTransition: If the trade is not opened, the order is on
                the same side as the entry, or the order precedes the entry
        """
        if self.state is not TradeState.OPENED:
            raise InvalidTradeTransition(f"Cannot close a trade in state {self.state.name}")
        if order.order_type is self._entry.order_type:
            raise InvalidTradeTransition(
                f"Exit order must be {self._entry.order_type.complement_type().value}, "
                f"got {order.order_type.value}"
            )
        if order.index < self._entry.index:
            raise InvalidTradeTransition(
                f"Exit index {order.index} precedes entry index {self._entry.index}"
            )

        self._exit = order
        logger.debug(f"Trade closed: {order}")

    def operate(self, index: int, price, amount=ONE) -> Order:
        """
        Open or close the trade with an order on the appropriate side.

        Args:
            index: Bar index of the order
            price: Execution price
            amount: Order amount

        Returns:
            The created order

        Raises:
            InvalidTradeTransition: If the trade is already closed
        """
        if self.state is TradeState.NEW:
            order = Order(self.starting_type, index, price, amount)
            self.open(order)
        elif self.state is TradeState.OPENED:
            order = Order(self.starting_type.complement_type(), index, price, amount)
            self.close(order)
        else:
            raise InvalidTradeTransition("Cannot operate a closed trade")
        return order

    def get_entry(self) -> Optional[Order]:
        return self._entry

    def get_exit(self) -> Optional[Order]:
        return self._exit

    def is_new(self) -> bool:
        return self.state is TradeState.NEW

    def is_opened(self) -> bool:
        return self.state is TradeState.OPENED

    def is_closed(self) -> bool:
        return self.state is TradeState.CLOSED

    def is_long(self) -> bool:
        return self._entry is not None and self._entry.is_buy()

    def is_short(self) -> bool:
        return self._entry is not None and self._entry.is_sell()

    def get_profit(self) -> Num:
        """
        Gross profit of a closed trade, ZERO otherwise.

        Returns:
            (exit - entry) * amount for long trades,
            (entry - exit) * amount for short trades
        """
        if not self.is_closed():
            return ZERO

        difference = self._exit.price - self._entry.price
        if self.is_short():
            difference = -difference
        return difference * self._entry.amount

    def __str__(self) -> str:
        return f"Trade({self.state.name}, entry={self._entry}, exit={self._exit})"

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(starting_type={self.starting_type.value}, "
                f"entry={self._entry!r}, exit={self._exit!r})")
