"""
Create Order Use Case.

Flow:
1. Build Money from the raw amount and currency
2. Create Order entity (status CREATED, fresh id)
3. Save the snapshot
4. Publish OrderCreatedEvent (when an event bus is wired)
"""
from decimal import Decimal
from typing import Optional, Union
import logging

from ordering.application.dtos import CreateOrderRequest
from ordering.domain.entities.order import Order
from ordering.domain.event_bus import EventBus
from ordering.domain.events import OrderCreatedEvent
from ordering.domain.repositories.order_repository import OrderRepository
from ordering.domain.value_objects import Money


logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    """Use case for creating a new order in CREATED status."""

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

    def execute(
        self,
        customer_id: str,
        amount: Union[Decimal, int, float, str],
        currency: str,
    ) -> Order:
        """
        Create and persist a new order.

        Args:
            customer_id: External customer reference
            amount: Order total amount
            currency: Currency code

        Returns:
            The persisted Order

        Raises:
            MalformedMoneyError: If amount or currency is malformed
        """
        total_amount = Money.of(amount, currency)
        order = Order.create(customer_id, total_amount)
        saved = self.order_repository.save(order)

        logger.info(
            f"Order created: {saved.id} "
            f"(customer: {saved.customer_id}, total: {saved.total_amount})"
        )

        if self.event_bus is not None:
            self.event_bus.publish(
                OrderCreatedEvent(
                    order_id=str(saved.id),
                    customer_id=saved.customer_id,
                    amount=saved.total_amount.amount,
                    currency=saved.total_amount.currency,
                )
            )

        return saved

    def execute_request(self, request: CreateOrderRequest) -> Order:
        """Create an order from a validated request DTO."""
        return self.execute(request.customer_id, request.amount, request.currency)
