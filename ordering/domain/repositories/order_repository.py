"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import ContextManager, List, Optional
from uuid import UUID

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order snapshots keyed by order id."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Store or overwrite the snapshot under order.id.

        Last write wins; there is no conflict detection.

        Args:
            order: Order snapshot to persist

        Returns:
            The same order value
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Retrieve the current snapshot for an id.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise (never raises for a missing id)
        """
        pass

    @abstractmethod
    def find_all(self, limit: int = 100) -> List[Order]:
        """List stored snapshots.

        Args:
            limit: Maximum number of orders to return

        Returns:
            List of Order snapshots
        """
        pass

    @abstractmethod
    def exists(self, order_id: UUID) -> bool:
        """Check whether a snapshot is stored for the id."""
        pass

    @abstractmethod
    def atomic(self) -> ContextManager:
        """Context manager that serializes read-modify-write sequences.

        Repository calls made inside the block by the holding thread
        must not deadlock.
        """
        pass
