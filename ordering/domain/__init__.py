"""Domain layer - pure domain models and interfaces."""

from .entities import Order
from .enums import OrderStatus
from .exceptions import (
    InvalidStateError,
    MalformedMoneyError,
    NotFoundError,
    OrderingError,
)
from .repositories import OrderRepository
from .value_objects import Money

__all__ = [
    "InvalidStateError",
    "MalformedMoneyError",
    "Money",
    "NotFoundError",
    "Order",
    "OrderingError",
    "OrderRepository",
    "OrderStatus",
]
