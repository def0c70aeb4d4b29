"""
Order Domain Events.

Events that occur during the order lifecycle.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .base import DomainEvent


@dataclass(frozen=True)
class OrderCreatedEvent(DomainEvent):
    """
    Order was created and stored with status CREATED.

    Trigger: CreateOrderUseCase
    """

    order_id: str = ""
    customer_id: str = ""
    amount: Optional[Decimal] = None
    currency: str = ""

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()


@dataclass(frozen=True)
class OrderConfirmedEvent(DomainEvent):
    """
    Order moved from CREATED to CONFIRMED.

    Trigger: ConfirmOrderUseCase
    """

    order_id: str = ""
    previous_status: str = ""
    new_status: str = ""

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()
