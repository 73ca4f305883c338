"""Domain events raised by the order lifecycle."""
from .base import DomainEvent
from .order_events import (
    OrderCancelledEvent,
    OrderCreatedEvent,
    OrderEvent,
    OrderPaidEvent,
)

__all__ = [
    "DomainEvent",
    "OrderCancelledEvent",
    "OrderCreatedEvent",
    "OrderEvent",
    "OrderPaidEvent",
]
