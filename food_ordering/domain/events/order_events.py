"""
Order Domain Events.

Events raised by the order lifecycle:
- OrderCreatedEvent: order validated and initiated (PENDING)
- OrderPaidEvent: payment completed (PAID)
- OrderCancelledEvent: payment cancellation started (CANCELLING)
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from .base import DomainEvent

if TYPE_CHECKING:
    from ..entities.order import Order
    from ..event_publisher import DomainEventPublisher


@dataclass(frozen=True)
class OrderEvent(DomainEvent):
    """
    Event wrapping the Order in its post-transition state.

    The publisher is attached by the domain service; fire() hands the
    event over to it. Delivery is entirely the publisher's concern.
    """

    order: Optional['Order'] = None
    publisher: Optional['DomainEventPublisher'] = field(
        default=None, repr=False, compare=False
    )

    def __post_init__(self):
        """Require the order and set aggregate_id to its tracking id."""
        if self.order is None:
            raise ValueError(f"{type(self).__name__} requires an order")
        if not self.aggregate_id and self.order.tracking_id:
            object.__setattr__(self, 'aggregate_id', str(self.order.tracking_id))
        super().__post_init__()

    @property
    def created_at(self) -> datetime:
        return self.occurred_at

    async def fire(self) -> None:
        """Hand this event to the attached publisher (no-op without one)."""
        if self.publisher is not None:
            await self.publisher.publish(self)

    def _get_event_data(self) -> Dict[str, Any]:
        data = super()._get_event_data()
        data['order'] = self.order.to_snapshot_dict()
        return data


@dataclass(frozen=True)
class OrderCreatedEvent(OrderEvent):
    """Order passed validation and is PENDING."""


@dataclass(frozen=True)
class OrderPaidEvent(OrderEvent):
    """Payment for the order completed; order is PAID."""


@dataclass(frozen=True)
class OrderCancelledEvent(OrderEvent):
    """
    Payment cancellation started; order is CANCELLING.

    Carries the failure messages accumulated on the order so far.
    """

    failure_messages: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.failure_messages, tuple):
            object.__setattr__(self, 'failure_messages', tuple(self.failure_messages))
        super().__post_init__()
