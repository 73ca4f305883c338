"""Mapping between application DTOs and domain objects."""

from typing import List

from food_ordering.application.dtos import (
    CreateOrderCommand,
    CreateOrderResponse,
    TrackOrderResponse,
)
from food_ordering.domain.entities import Order, OrderItem
from food_ordering.domain.value_objects import (
    DEFAULT_CURRENCY,
    CustomerId,
    Money,
    OrderAddress,
    ProductId,
    RestaurantId,
)


class OrderDataMapper:
    """Transforms commands into domain entities and orders into responses."""

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self._currency = currency

    def create_order_command_to_order(self, command: CreateOrderCommand) -> Order:
        """Build a fresh, uninitiated Order from the command."""
        items = [
            OrderItem(
                product_id=ProductId(item.product_id),
                quantity=item.quantity,
                price=Money(item.price, self._currency),
                sub_total=Money(item.sub_total, self._currency),
            )
            for item in command.items
        ]

        return Order(
            customer_id=CustomerId(command.customer_id),
            restaurant_id=RestaurantId(command.restaurant_id),
            delivery_address=OrderAddress(
                street=command.address.street,
                postal_code=command.address.postal_code,
                city=command.address.city,
            ),
            price=Money(command.price, self._currency),
            items=items,
        )

    def create_order_command_to_product_ids(self, command: CreateOrderCommand) -> List[ProductId]:
        """Distinct product ids referenced by the command, in first-seen order."""
        product_ids: List[ProductId] = []
        for item in command.items:
            product_id = ProductId(item.product_id)
            if product_id not in product_ids:
                product_ids.append(product_id)
        return product_ids

    def order_to_create_order_response(self, order: Order, message: str) -> CreateOrderResponse:
        return CreateOrderResponse(
            order_tracking_id=order.tracking_id.value,
            order_status=order.status,
            message=message,
        )

    def order_to_track_order_response(self, order: Order) -> TrackOrderResponse:
        return TrackOrderResponse(
            order_tracking_id=order.tracking_id.value,
            order_status=order.status,
            failure_messages=list(order.failure_messages),
        )
