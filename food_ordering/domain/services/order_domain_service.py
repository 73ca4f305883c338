"""
Order domain service.

Stateless, synchronous and I/O free. Each operation runs every check
before touching the order, so a failed call leaves the order unchanged.
"""
from typing import Iterable, Optional

from ..entities import Order, Restaurant
from ..entities.order import invalid_item_price
from ..event_publisher import DomainEventPublisher
from ..events import OrderCancelledEvent, OrderCreatedEvent, OrderPaidEvent
from ..events.base import utc_now
from ..exceptions import InvalidOrderItemPriceError, RestaurantNotActiveError


class OrderDomainService:
    """
    Validates orders and performs the order lifecycle transitions.

    State machine:
        PENDING -> PAID -> APPROVED
        PENDING | PAID -> CANCELLING -> CANCELLED
    """

    def __init__(self, allow_cancel_from_pending: bool = True) -> None:
        """
        Args:
            allow_cancel_from_pending: Whether cancel_order accepts PENDING
                orders in addition to CANCELLING ones
        """
        self._allow_cancel_from_pending = allow_cancel_from_pending

    def validate_and_initiate_order(
        self,
        order: Order,
        restaurant: Restaurant,
        publisher: Optional[DomainEventPublisher[OrderCreatedEvent]] = None,
    ) -> OrderCreatedEvent:
        """
        Validate a fresh order against the restaurant snapshot and initiate it.

        Checks run in this order and the first failure wins:
        fresh order, restaurant active, declared total, item prices,
        item prices against the restaurant's products.

        Raises:
            OrderInitializationError: Order already has an identity or status
            RestaurantNotActiveError: Restaurant is not accepting orders
            OrderValidationError: Declared total is invalid or mismatched
            InvalidOrderItemPriceError: An item price is invalid
        """
        order.validate_initial_order()
        self._validate_restaurant(restaurant)
        order.validate_total_price()
        order.validate_items_price()
        self._validate_products(order, restaurant)

        order.initialize_order()
        return OrderCreatedEvent(order=order, occurred_at=utc_now(), publisher=publisher)

    def pay_order(
        self,
        order: Order,
        publisher: Optional[DomainEventPublisher[OrderPaidEvent]] = None,
    ) -> OrderPaidEvent:
        """PENDING -> PAID."""
        order.pay()
        return OrderPaidEvent(order=order, occurred_at=utc_now(), publisher=publisher)

    def approve_order(self, order: Order) -> None:
        """PAID -> APPROVED. No event is raised."""
        order.approve()

    def cancel_order_payment(
        self,
        order: Order,
        failure_messages: Optional[Iterable[str]],
        publisher: Optional[DomainEventPublisher[OrderCancelledEvent]] = None,
    ) -> OrderCancelledEvent:
        """PAID | CANCELLING -> CANCELLING, appending the failure messages."""
        order.init_cancel(failure_messages)
        return OrderCancelledEvent(
            order=order,
            occurred_at=utc_now(),
            publisher=publisher,
            failure_messages=order.failure_messages,
        )

    def cancel_order(self, order: Order, failure_messages: Optional[Iterable[str]]) -> None:
        """CANCELLING (or PENDING when allowed) -> CANCELLED."""
        order.cancel(failure_messages, allow_from_pending=self._allow_cancel_from_pending)

    def _validate_restaurant(self, restaurant: Restaurant) -> None:
        if not restaurant.is_active():
            raise RestaurantNotActiveError(
                f"Restaurant with id {restaurant.restaurant_id} is currently not active!"
            )

    def _validate_products(self, order: Order, restaurant: Restaurant) -> None:
        for item in order.items:
            product = restaurant.find_product(item.product_id)
            if product is None:
                raise InvalidOrderItemPriceError(
                    f"Could not find product with id: {item.product_id} "
                    f"in restaurant {restaurant.restaurant_id}"
                )
            if item.price != product.price:
                raise invalid_item_price(item)
