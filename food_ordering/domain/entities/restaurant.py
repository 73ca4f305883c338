"""Restaurant and product snapshots used while creating an order."""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..value_objects import Money, ProductId, RestaurantId


@dataclass(frozen=True)
class Product:
    """Menu product with its current price."""
    product_id: ProductId
    name: str
    price: Money


@dataclass(frozen=True)
class Restaurant:
    """
    Point-in-time copy of a restaurant and the products an order refers to.

    Read-only: orders never keep a reference to it.
    """
    restaurant_id: RestaurantId
    products: Tuple[Product, ...] = field(default_factory=tuple)
    active: bool = False

    def __post_init__(self):
        if not isinstance(self.products, tuple):
            object.__setattr__(self, 'products', tuple(self.products))

    def is_active(self) -> bool:
        return self.active

    def find_product(self, product_id: ProductId) -> Optional[Product]:
        """First product with the given id, or None."""
        for product in self.products:
            if product.product_id == product_id:
                return product
        return None
