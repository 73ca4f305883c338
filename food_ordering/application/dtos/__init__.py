"""Application DTOs."""

from .order_dto import (
    CreateOrderCommand,
    CreateOrderResponse,
    OrderAddressDTO,
    OrderItemCommand,
    TrackOrderQuery,
    TrackOrderResponse,
)

__all__ = [
    "CreateOrderCommand",
    "CreateOrderResponse",
    "OrderAddressDTO",
    "OrderItemCommand",
    "TrackOrderQuery",
    "TrackOrderResponse",
]
