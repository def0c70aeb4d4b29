"""
End-to-End Demo: Order Lifecycle

This demonstrates the complete workflow:
1. Create order (status CREATED)
2. Confirm order (status CONFIRMED)
3. Confirm again (rejected with InvalidStateError)
4. Confirm an unknown id (rejected with NotFoundError)

Uses the process-wide in-memory wiring from ordering.dependencies.
"""
from decimal import Decimal
from uuid import uuid4

from ordering.application.dtos import OrderDTO
from ordering.dependencies import (
    get_confirm_order_use_case,
    get_create_order_use_case,
    get_event_bus,
    get_order_repository,
)
from ordering.domain.exceptions import InvalidStateError, NotFoundError
from ordering.infrastructure.logging import configure_logging

logger = configure_logging()


def demo_order_lifecycle() -> None:
    """Demo: create, confirm, and the two rejected confirmations."""

    print("\n" + "=" * 80)
    print("DEMO: Order Lifecycle")
    print("=" * 80 + "\n")

    create_order = get_create_order_use_case()
    confirm_order = get_confirm_order_use_case()

    order = create_order.execute("cust-1", Decimal("100.00"), "USD")
    print(f"Created:   {OrderDTO.from_entity(order).model_dump_json()}")

    confirmed = confirm_order.execute(order.id)
    print(f"Confirmed: {OrderDTO.from_entity(confirmed).model_dump_json()}")

    try:
        confirm_order.execute(order.id)
    except InvalidStateError as e:
        print(f"Second confirm rejected: {e}")

    try:
        confirm_order.execute(uuid4())
    except NotFoundError as e:
        print(f"Unknown order rejected: {e}")

    print(f"\nStored orders: {len(get_order_repository())}")
    for event in get_event_bus().published:
        print(f"  event: {event.to_dict()}")


if __name__ == "__main__":
    demo_order_lifecycle()
