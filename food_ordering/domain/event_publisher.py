"""
Domain Event Publisher Interface (Domain Layer).

Pure interface definition - no implementation details.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .events.base import DomainEvent

E = TypeVar("E", bound=DomainEvent)


class DomainEventPublisher(ABC, Generic[E]):
    """
    Accepts one constructed event at a time.

    Implemented in the infrastructure layer (in-memory bus, outbox,
    message broker). Callers never wait for delivery confirmation.
    """

    @abstractmethod
    async def publish(self, event: E) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        pass
