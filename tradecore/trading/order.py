"""
Order Module

This module defines the Order, a single buy or sell execution at a bar index
and price.
"""

from dataclasses import dataclass
from enum import Enum

from tradecore.num import Num, ONE


class OrderType(Enum):
    """Side of an order."""
    BUY = 'BUY'
    SELL = 'SELL'

    def complement_type(self) -> 'OrderType':
        return OrderType.SELL if self is OrderType.BUY else OrderType.BUY

    @classmethod
    def from_value(cls, value) -> 'OrderType':
        """Convert 'BUY'/'SELL' (any case) or an OrderType to an OrderType."""
        if isinstance(value, OrderType):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown order type: {value!r}") from None


@dataclass(frozen=True)
class Order:
    """One execution. Immutable once created."""
    order_type: OrderType
    index: int
    price: Num
    amount: Num = ONE

    def __post_init__(self):
        # accept raw numbers but always store Num
        object.__setattr__(self, 'price', Num.of(self.price))
        object.__setattr__(self, 'amount', Num.of(self.amount))

    @classmethod
    def buy_at(cls, index: int, price, amount=ONE) -> 'Order':
        return cls(OrderType.BUY, index, price, amount)

    @classmethod
    def sell_at(cls, index: int, price, amount=ONE) -> 'Order':
        return cls(OrderType.SELL, index, price, amount)

    def is_buy(self) -> bool:
        return self.order_type is OrderType.BUY

    def is_sell(self) -> bool:
        return self.order_type is OrderType.SELL

    def get_price(self) -> Num:
        return self.price

    def get_index(self) -> int:
        return self.index

    def get_amount(self) -> Num:
        return self.amount

    def __str__(self) -> str:
        return f"{self.order_type.value} {self.amount} @ {self.price} (index {self.index})"
