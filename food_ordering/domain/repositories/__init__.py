"""Repository interfaces."""

from .customer_repository import CustomerRepository
from .order_repository import OrderRepository
from .restaurant_repository import RestaurantRepository

__all__ = ["CustomerRepository", "OrderRepository", "RestaurantRepository"]
