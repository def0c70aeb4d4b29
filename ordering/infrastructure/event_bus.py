"""
Event Bus Implementation (Infrastructure Layer).

Keeps published events in memory and notifies subscribers.
"""
import logging
import threading
from typing import Callable, List

from ordering.domain.event_bus import EventBus
from ordering.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class InMemoryEventBus(EventBus):
    """
    In-Memory Event Bus Implementation.

    Features:
    - Records every published event (see `published`)
    - Notifies registered subscribers in subscription order
    - Synchronous: publish() returns after all handlers ran
    """

    def __init__(self):
        """Initialize event bus with no subscribers."""
        self._subscribers: List[EventHandler] = []
        self._published: List[DomainEvent] = []
        self._lock = threading.Lock()

    def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        A failing subscriber is logged and skipped; the remaining
        subscribers still receive the event.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")

        with self._lock:
            self._published.append(event)
            subscribers = list(self._subscribers)

        self._notify_subscribers(event, subscribers)

    def publish_all(self, events: List[DomainEvent]) -> None:
        """
        Publish multiple domain events in order.

        Args:
            events: List of domain events to publish
        """
        if not events:
            return

        logger.info(f"Publishing {len(events)} events")
        for event in events:
            self.publish(event)

    def subscribe(self, handler: EventHandler) -> None:
        """
        Subscribe to all domain events.

        Args:
            handler: Callback function that receives events
        """
        with self._lock:
            if handler not in self._subscribers:
                self._subscribers.append(handler)
        logger.info(f"Registered event subscriber: {getattr(handler, '__name__', handler)}")

    def unsubscribe(self, handler: EventHandler) -> None:
        """
        Unsubscribe from domain events.

        Args:
            handler: Callback function to remove
        """
        with self._lock:
            if handler in self._subscribers:
                self._subscribers.remove(handler)
                logger.info(f"Unregistered event subscriber: {getattr(handler, '__name__', handler)}")

    def _notify_subscribers(self, event: DomainEvent, subscribers: List[EventHandler]) -> None:
        """Notify subscribers about an event."""
        if not subscribers:
            return

        logger.debug(f"Notifying {len(subscribers)} subscribers about {event.event_type}")

        for handler in subscribers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"Subscriber {getattr(handler, '__name__', handler)} failed: {e}",
                    exc_info=True,
                )

    @property
    def published(self) -> List[DomainEvent]:
        """Copy of every event published so far."""
        with self._lock:
            return list(self._published)

    def clear(self) -> None:
        """Forget published events (subscribers are kept)."""
        with self._lock:
            self._published.clear()
