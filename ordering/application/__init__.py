"""Application layer - use cases and DTOs."""

from .dtos import CreateOrderRequest, MoneyDTO, OrderDTO, OrderListDTO
from .use_cases import ConfirmOrderUseCase, CreateOrderUseCase

__all__ = [
    # DTOs
    "CreateOrderRequest",
    "MoneyDTO",
    "OrderDTO",
    "OrderListDTO",
    # Use Cases
    "CreateOrderUseCase",
    "ConfirmOrderUseCase",
]
