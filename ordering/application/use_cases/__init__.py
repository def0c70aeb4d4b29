"""Application use cases."""
from .create_order import CreateOrderUseCase
from .confirm_order import ConfirmOrderUseCase

__all__ = [
    "CreateOrderUseCase",
    "ConfirmOrderUseCase",
]
