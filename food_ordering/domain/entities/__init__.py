"""Domain entities."""

from .customer import Customer
from .order import Order, OrderItem
from .restaurant import Product, Restaurant

__all__ = ["Customer", "Order", "OrderItem", "Product", "Restaurant"]
