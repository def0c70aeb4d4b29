"""
Confirm Order Use Case.

Flow:
1. Load the current snapshot (NotFoundError if absent)
2. Apply the CREATED -> CONFIRMED transition
3. Save the confirmed snapshot
4. Publish OrderConfirmedEvent (when an event bus is wired)

Steps 1-3 run inside repository.atomic() so concurrent confirmations
of the same order cannot both succeed.
"""
from typing import Optional
from uuid import UUID
import logging

from ordering.domain.entities.order import Order
from ordering.domain.event_bus import EventBus
from ordering.domain.events import OrderConfirmedEvent
from ordering.domain.exceptions import InvalidStateError, NotFoundError
from ordering.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


class ConfirmOrderUseCase:
    """Use case for confirming a CREATED order."""

    def __init__(
        self,
        order_repository: OrderRepository,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
            event_bus: Optional Event Bus for publishing domain events
        """
        self.order_repository = order_repository
        self.event_bus = event_bus

    def execute(self, order_id: UUID) -> Order:
        """
        Confirm an order.

        Args:
            order_id: Order identifier

        Returns:
            The confirmed Order, as stored

        Raises:
            NotFoundError: If no order is stored under order_id
            InvalidStateError: If the order is not in CREATED status
        """
        with self.order_repository.atomic():
            order = self.order_repository.find_by_id(order_id)
            if order is None:
                logger.warning(f"Cannot confirm, order not found: {order_id}")
                raise NotFoundError(order_id)

            try:
                confirmed = order.confirm()
            except InvalidStateError as e:
                logger.warning(f"Confirm rejected for order {order_id}: {e}")
                raise

            saved = self.order_repository.save(confirmed)

        logger.info(f"Order confirmed: {saved.id}")

        if self.event_bus is not None:
            self.event_bus.publish(
                OrderConfirmedEvent(
                    order_id=str(saved.id),
                    previous_status=order.status.value,
                    new_status=saved.status.value,
                )
            )

        return saved
