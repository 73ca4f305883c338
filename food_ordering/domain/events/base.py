"""
Base Domain Event.

All domain events inherit from this base class.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional
import uuid


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for all domain events.

    Events are immutable records of things that have happened.
    They capture state changes in the system.
    """

    # Event metadata
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = field(init=False)
    event_version: int = 1

    # Aggregate information
    aggregate_id: str = field(default="")
    aggregate_type: str = field(init=False)

    # Timestamp (UTC)
    occurred_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Set event type and aggregate type from class name."""
        object.__setattr__(self, 'event_type', self.__class__.__name__)
        object.__setattr__(self, 'aggregate_type', self._get_aggregate_type())

    def _get_aggregate_type(self) -> str:
        """
        Extract aggregate type from event type.

        Example: OrderCreatedEvent -> Order
        """
        event_name = self.__class__.__name__

        # Remove 'Event' suffix
        if event_name.endswith('Event'):
            event_name = event_name[:-5]

        # Extract aggregate name (first word before action)
        for i, char in enumerate(event_name):
            if i > 0 and char.isupper():
                return event_name[:i]

        return event_name

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary for serialization.

        Returns:
            Dictionary representation of event
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "event_version": self.event_version,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """
        Get event-specific data.

        Override in subclasses to provide event payload.
        """
        data: Dict[str, Any] = {}

        for f in fields(self):
            if f.name in _METADATA_FIELDS or not f.repr:
                continue
            value = getattr(self, f.name)
            if isinstance(value, Decimal):
                # Convert Decimal to string for JSON serialization
                data[f.name] = str(value)
            elif hasattr(value, 'to_dict'):
                data[f.name] = value.to_dict()
            elif isinstance(value, tuple):
                data[f.name] = list(value)
            else:
                data[f.name] = value

        return data


_METADATA_FIELDS = frozenset({
    'event_id', 'event_type', 'event_version',
    'aggregate_id', 'aggregate_type', 'occurred_at',
})
