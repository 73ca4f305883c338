"""Repository interface for restaurant snapshots."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..entities.restaurant import Restaurant
from ..value_objects import ProductId, RestaurantId


class RestaurantRepository(ABC):
    """Read access to restaurant information for order validation."""

    @abstractmethod
    async def find_restaurant_information(
        self,
        restaurant_id: RestaurantId,
        product_ids: Iterable[ProductId],
    ) -> Optional[Restaurant]:
        """Snapshot of the restaurant with the requested products.

        Args:
            restaurant_id: Restaurant to look up
            product_ids: Products referenced by the order items

        Returns:
            Restaurant with its activity flag and the matching products,
            or None if the restaurant does not exist
        """
        pass
