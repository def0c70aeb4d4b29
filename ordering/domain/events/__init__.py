"""Domain events published through the event bus."""
from .base import DomainEvent
from .order_events import OrderCreatedEvent, OrderConfirmedEvent

__all__ = [
    "DomainEvent",
    "OrderCreatedEvent",
    "OrderConfirmedEvent",
]
