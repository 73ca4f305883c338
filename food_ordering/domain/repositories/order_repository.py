"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order
from ..value_objects import OrderId, TrackingId


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def save(self, order: Order) -> Optional[Order]:
        """Persist order aggregate, assigning its identity on first save.

        Args:
            order: Order aggregate to persist

        Returns:
            The saved order, or None if it could not be saved
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by persistence identity.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_tracking_id(self, tracking_id: TrackingId) -> Optional[Order]:
        """Retrieve order by tracking identity.

        Args:
            tracking_id: TrackingId handed out at creation

        Returns:
            Order if found, None otherwise
        """
        pass
