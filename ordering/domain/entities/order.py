"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- the infrastructure layer
"""
from dataclasses import dataclass, replace
from typing import Any, Dict
from uuid import UUID, uuid4

from ..enums import OrderStatus
from ..exceptions import InvalidStateError
from ..value_objects import Money


@dataclass(frozen=True)
class Order:
    """
    Order aggregate root.

    An Order is an immutable snapshot. Every transition returns a new
    Order with the same id and customer_id; the repository replaces the
    stored snapshot keyed by id.
    """
    id: UUID
    customer_id: str
    status: OrderStatus
    total_amount: Money

    @classmethod
    def create(cls, customer_id: str, total_amount: Money) -> 'Order':
        """
        Factory method to create a new Order.

        No validation is applied to customer_id or to the sign of the
        amount.

        Args:
            customer_id: Opaque reference to an external customer
            total_amount: Order total

        Returns:
            New Order with a fresh id and status CREATED
        """
        return cls(
            id=uuid4(),
            customer_id=customer_id,
            status=OrderStatus.CREATED,
            total_amount=total_amount,
        )

    def confirm(self) -> 'Order':
        """
        Business rule: CREATED -> CONFIRMED.

        Returns:
            New Order with status CONFIRMED

        Raises:
            InvalidStateError: If the order is not in CREATED status
        """
        if self.status != OrderStatus.CREATED:
            raise InvalidStateError(
                f"Order can only be confirmed when in CREATED status "
                f"(order {self.id} is {self.status.value})",
                order_id=self.id,
                current_status=self.status,
            )
        return replace(self, status=OrderStatus.CONFIRMED)

    def to_snapshot_dict(self) -> Dict[str, Any]:
        """
        Serialize Order state to a plain dictionary.

        Returns:
            Dictionary containing all Order state
        """
        return {
            'id': str(self.id),
            'customer_id': self.customer_id,
            'status': self.status.value,
            'total_amount': {
                'amount': str(self.total_amount.amount),
                'currency': self.total_amount.currency,
            },
        }

    @classmethod
    def from_snapshot_dict(cls, snapshot_data: Dict[str, Any]) -> 'Order':
        """
        Restore Order from a snapshot dictionary.

        Args:
            snapshot_data: Dictionary produced by to_snapshot_dict()

        Returns:
            Restored Order instance
        """
        total = snapshot_data['total_amount']
        return cls(
            id=UUID(str(snapshot_data['id'])),
            customer_id=snapshot_data['customer_id'],
            status=OrderStatus(snapshot_data['status']),
            total_amount=Money.of(total['amount'], total['currency']),
        )
