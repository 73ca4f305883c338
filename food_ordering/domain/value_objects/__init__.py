"""Domain value objects."""

from .value_objects import (
    DEFAULT_CURRENCY,
    BaseId,
    CustomerId,
    Money,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    TrackingId,
)
from .order_address import OrderAddress

__all__ = [
    "DEFAULT_CURRENCY",
    "BaseId",
    "CustomerId",
    "Money",
    "OrderAddress",
    "OrderId",
    "OrderItemId",
    "ProductId",
    "RestaurantId",
    "TrackingId",
]
