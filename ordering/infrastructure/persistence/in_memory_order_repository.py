"""
In-memory Order Repository Implementation.

Process-wide store: empty at start, never persisted, discarded at exit.
"""
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional
from uuid import UUID
import logging
import threading

from ordering.domain.entities.order import Order
from ordering.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores the latest Order snapshot per id in a dictionary. All access
    goes through a re-entrant lock, which atomic() exposes to callers
    that need a read-modify-write sequence.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[UUID, Order] = {}
        self._lock = threading.RLock()
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    def save(self, order: Order) -> Order:
        """
        Save order snapshot, overwriting any previous one for the id.

        Args:
            order: Order entity to save

        Returns:
            The same order
        """
        with self._lock:
            self._storage[order.id] = order
        logger.info(f"Order saved: {order.id} (status: {order.status.value})")
        return order

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """
        Get order by ID from in-memory storage.

        Args:
            order_id: Order ID to lookup

        Returns:
            Order if found, None otherwise
        """
        with self._lock:
            order = self._storage.get(order_id)

        if order is None:
            logger.debug(f"Order not found: {order_id}")
        else:
            logger.debug(f"Order found: {order_id}")

        return order

    def find_all(self, limit: int = 100) -> List[Order]:
        """
        Get stored orders in insertion order.

        Args:
            limit: Maximum number of orders to return

        Returns:
            List of orders (up to limit)
        """
        with self._lock:
            orders = list(self._storage.values())[:limit]
        logger.debug(f"Found {len(orders)} order(s) (limit: {limit})")
        return orders

    def exists(self, order_id: UUID) -> bool:
        with self._lock:
            return order_id in self._storage

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Hold the storage lock for the duration of the block."""
        with self._lock:
            yield

    def clear(self) -> None:
        """Clear all orders (for tests)."""
        with self._lock:
            self._storage.clear()
        logger.info("In-memory order repository cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)
