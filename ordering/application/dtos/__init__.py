"""Application DTOs."""

from .order_dto import CreateOrderRequest, MoneyDTO, OrderDTO, OrderListDTO

__all__ = [
    "CreateOrderRequest",
    "MoneyDTO",
    "OrderDTO",
    "OrderListDTO",
]
