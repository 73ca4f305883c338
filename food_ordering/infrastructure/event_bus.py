"""
Event Publisher Implementation (Infrastructure Layer).

Keeps a log of published events and notifies subscribers.
"""
import asyncio
from typing import Awaitable, Callable, Dict, List, Optional, Type, Union

from food_ordering.domain.event_publisher import DomainEventPublisher
from food_ordering.domain.events.base import DomainEvent
from food_ordering.infrastructure.logging import get_logger

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[None]]]

logger = get_logger(__name__)


class InMemoryEventPublisher(DomainEventPublisher[DomainEvent]):
    """
    In-memory domain event publisher.

    Features:
    - Records every published event in order
    - Notifies subscribers registered for the event's type (or all events)
    - Supports sync and async handlers

    A failing subscriber is logged and does not stop the others.
    """

    def __init__(self) -> None:
        """Initialize publisher with no subscribers."""
        self._handlers: Dict[Optional[str], List[EventHandler]] = {}
        self._published: List[DomainEvent] = []

    @property
    def published_events(self) -> List[DomainEvent]:
        """Copy of all events published so far."""
        return list(self._published)

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")
        self._published.append(event)
        await self._notify_subscribers(event)

    def subscribe(
        self,
        handler: EventHandler,
        event_type: Optional[Union[str, Type[DomainEvent]]] = None,
    ) -> None:
        """
        Subscribe to domain events.

        Args:
            handler: Callback receiving the event (sync or async)
            event_type: Event class or class name; None subscribes to all events
        """
        key = event_type.__name__ if isinstance(event_type, type) else event_type
        self._handlers.setdefault(key, []).append(handler)
        logger.info(f"Registered event subscriber: {_handler_name(handler)} ({key or 'all events'})")

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: Optional[Union[str, Type[DomainEvent]]] = None,
    ) -> None:
        key = event_type.__name__ if isinstance(event_type, type) else event_type
        handlers = self._handlers.get(key, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.info(f"Unregistered event subscriber: {_handler_name(handler)}")

    async def _notify_subscribers(self, event: DomainEvent) -> None:
        """Notify subscribers of this event type, then catch-all subscribers."""
        handlers = self._handlers.get(event.event_type, []) + self._handlers.get(None, [])
        if not handlers:
            return

        logger.debug(f"Notifying {len(handlers)} subscribers about {event.event_type}")

        for handler in handlers:
            try:
                result = handler(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(f"Subscriber {_handler_name(handler)} failed: {e}", exc_info=True)


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__name__", repr(handler))
