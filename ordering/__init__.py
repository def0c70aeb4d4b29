"""Order lifecycle: create orders and confirm them, backed by an in-memory store."""

from ordering.application import (
    ConfirmOrderUseCase,
    CreateOrderRequest,
    CreateOrderUseCase,
    OrderDTO,
)
from ordering.domain import (
    InvalidStateError,
    MalformedMoneyError,
    Money,
    NotFoundError,
    Order,
    OrderingError,
    OrderRepository,
    OrderStatus,
)
from ordering.infrastructure.event_bus import InMemoryEventBus
from ordering.infrastructure.persistence import InMemoryOrderRepository

__version__ = "0.1.0"

__all__ = [
    "ConfirmOrderUseCase",
    "CreateOrderRequest",
    "CreateOrderUseCase",
    "InMemoryEventBus",
    "InMemoryOrderRepository",
    "InvalidStateError",
    "MalformedMoneyError",
    "Money",
    "NotFoundError",
    "Order",
    "OrderDTO",
    "OrderingError",
    "OrderRepository",
    "OrderStatus",
]
