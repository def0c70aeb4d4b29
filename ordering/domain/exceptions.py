"""
Domain errors.

Raised at the point of detection and propagated unchanged; the caller
decides how to present them.
"""
from typing import Any, Optional
from uuid import UUID


class OrderingError(Exception):
    """Base class for all order lifecycle errors."""


class NotFoundError(OrderingError):
    """No stored snapshot exists for the requested order id."""

    def __init__(self, order_id: UUID):
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")


class InvalidStateError(OrderingError):
    """A transition was requested from a status that does not allow it."""

    def __init__(
        self,
        message: str,
        order_id: Optional[UUID] = None,
        current_status: Optional[Any] = None,
    ):
        self.order_id = order_id
        self.current_status = current_status
        super().__init__(message)


class MalformedMoneyError(OrderingError, ValueError):
    """Amount or currency could not be turned into a Money value."""
