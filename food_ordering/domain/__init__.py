"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Order, OrderItem, Product, Restaurant
from .enums import OrderStatus
from .event_publisher import DomainEventPublisher
from .repositories import CustomerRepository, OrderRepository, RestaurantRepository
from .services import OrderDomainService
from .value_objects import (
    CustomerId,
    Money,
    OrderAddress,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    TrackingId,
)

__all__ = [
    "Customer",
    "CustomerId",
    "CustomerRepository",
    "DomainEventPublisher",
    "Money",
    "Order",
    "OrderAddress",
    "OrderDomainService",
    "OrderId",
    "OrderItem",
    "OrderItemId",
    "OrderRepository",
    "OrderStatus",
    "Product",
    "ProductId",
    "Restaurant",
    "RestaurantId",
    "RestaurantRepository",
    "TrackingId",
]
