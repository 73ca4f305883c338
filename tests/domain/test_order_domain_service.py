"""
Tests for OrderDomainService.

Covers order initiation checks and every lifecycle transition.
"""
from datetime import timezone
from uuid import UUID

import pytest

from food_ordering.domain.enums import OrderStatus
from food_ordering.domain.events import (
    OrderCancelledEvent,
    OrderCreatedEvent,
    OrderPaidEvent,
)
from food_ordering.domain.exceptions import (
    InvalidOrderItemPriceError,
    OrderInitializationError,
    OrderStateError,
    OrderValidationError,
    RestaurantNotActiveError,
)
from food_ordering.domain.services import OrderDomainService
from food_ordering.domain.value_objects import OrderId, OrderItemId


class TestValidateAndInitiateOrder:
    """Order initiation: validation order and resulting state."""

    def test_valid_order_becomes_pending(self, domain_service, order, restaurant):
        event = domain_service.validate_and_initiate_order(order, restaurant)

        assert isinstance(event, OrderCreatedEvent)
        assert event.order is order
        assert order.status == OrderStatus.PENDING
        assert order.tracking_id is not None
        assert isinstance(order.tracking_id.value, UUID)
        assert order.failure_messages == ()
        assert event.created_at.tzinfo == timezone.utc

    def test_items_are_numbered_in_order(self, domain_service, order, restaurant):
        domain_service.validate_and_initiate_order(order, restaurant)

        assert [item.item_id for item in order.items] == [OrderItemId(1), OrderItemId(2)]
        assert all(item.order_id is None for item in order.items)

    def test_tracking_ids_are_unique_per_order(self, domain_service, order_factory, restaurant):
        first, second = order_factory(), order_factory()
        domain_service.validate_and_initiate_order(first, restaurant)
        domain_service.validate_and_initiate_order(second, restaurant)

        assert first.tracking_id != second.tracking_id

    def test_publisher_is_attached_not_called(self, domain_service, order, restaurant, publisher):
        event = domain_service.validate_and_initiate_order(order, restaurant, publisher)

        assert event.publisher is publisher
        assert publisher.published_events == []

    def test_order_with_identity_is_rejected(self, domain_service, order, restaurant):
        order.assign_id(OrderId.generate())

        with pytest.raises(OrderInitializationError):
            domain_service.validate_and_initiate_order(order, restaurant)
        assert order.status is None

    def test_initiated_order_cannot_be_initiated_again(self, domain_service, pending_order, restaurant):
        tracking_id = pending_order.tracking_id

        with pytest.raises(OrderInitializationError):
            domain_service.validate_and_initiate_order(pending_order, restaurant)
        assert pending_order.tracking_id == tracking_id

    def test_inactive_restaurant(self, domain_service, order, restaurant_factory):
        restaurant = restaurant_factory(active=False)

        with pytest.raises(RestaurantNotActiveError) as exc_info:
            domain_service.validate_and_initiate_order(order, restaurant)

        assert str(exc_info.value) == (
            f"Restaurant with id {restaurant.restaurant_id} is currently not active!"
        )
        assert order.status is None
        assert order.tracking_id is None

    def test_inactive_restaurant_wins_over_price_errors(
        self, domain_service, order_factory, restaurant_factory
    ):
        order = order_factory(price="250.00")

        with pytest.raises(RestaurantNotActiveError):
            domain_service.validate_and_initiate_order(order, restaurant_factory(active=False))

    def test_total_price_mismatch(self, domain_service, order_factory, restaurant):
        order = order_factory(price="250.00")

        with pytest.raises(OrderValidationError) as exc_info:
            domain_service.validate_and_initiate_order(order, restaurant)

        assert str(exc_info.value) == "Total price: 250.00 is not equal to Order items total: 200.00!"
        assert order.status is None

    def test_total_price_must_be_positive(self, domain_service, order_factory, restaurant):
        order = order_factory(price="0.00", items=[])

        with pytest.raises(OrderValidationError, match="Total price must be greater than zero!"):
            domain_service.validate_and_initiate_order(order, restaurant)

    def test_total_is_exact_decimal_equality(self, domain_service, order_factory, restaurant):
        order = order_factory(price="200.001")

        with pytest.raises(OrderValidationError) as exc_info:
            domain_service.validate_and_initiate_order(order, restaurant)
        assert str(exc_info.value) == "Total price: 200.00 is not equal to Order items total: 200.00!"

    def test_item_subtotal_mismatch(self, domain_service, order_factory, item_factory, restaurant, product_id):
        # total matches the broken subtotal, so the item check is the one that fails
        order = order_factory(
            price="150.00",
            items=[item_factory("50.00", 2, "150.00")],
        )

        with pytest.raises(InvalidOrderItemPriceError) as exc_info:
            domain_service.validate_and_initiate_order(order, restaurant)

        assert str(exc_info.value) == f"Order item price: 50.00 is not valid for product {product_id}"

    def test_item_price_differs_from_product_price(
        self, domain_service, order_factory, item_factory, restaurant, product_id
    ):
        order = order_factory(
            price="210.00",
            items=[item_factory("60.00", 1, "60.00"), item_factory("50.00", 3, "150.00")],
        )

        with pytest.raises(InvalidOrderItemPriceError) as exc_info:
            domain_service.validate_and_initiate_order(order, restaurant)

        assert str(exc_info.value) == f"Order item price: 60.00 is not valid for product {product_id}"
        assert order.status is None
        assert all(item.item_id is None for item in order.items)

    def test_product_missing_from_restaurant(
        self, domain_service, order_factory, item_factory, restaurant
    ):
        missing = UUID("00000000-0000-0000-0000-000000000001")
        order = order_factory(price="10.00", items=[item_factory("10.00", 1, "10.00", product_id=missing)])

        with pytest.raises(InvalidOrderItemPriceError, match=f"Could not find product with id: {missing}"):
            domain_service.validate_and_initiate_order(order, restaurant)

    def test_items_from_several_products(
        self, domain_service, order_factory, item_factory, restaurant, other_product_id
    ):
        order = order_factory(
            price="101.00",
            items=[
                item_factory("50.00", 1, "50.00"),
                item_factory("25.50", 2, "51.00", product_id=other_product_id.value),
            ],
        )

        domain_service.validate_and_initiate_order(order, restaurant)
        assert order.status == OrderStatus.PENDING


class TestPayOrder:

    def test_pending_to_paid(self, domain_service, pending_order):
        event = domain_service.pay_order(pending_order)

        assert isinstance(event, OrderPaidEvent)
        assert pending_order.status == OrderStatus.PAID
        assert event.order is pending_order

    def test_paying_twice_fails(self, domain_service, paid_order):
        with pytest.raises(OrderStateError) as exc_info:
            domain_service.pay_order(paid_order)

        assert str(exc_info.value) == "Order is in PAID state, expected PENDING for pay operation!"
        assert paid_order.status == OrderStatus.PAID

    def test_uninitiated_order_cannot_be_paid(self, domain_service, order):
        with pytest.raises(OrderStateError, match="uninitialized"):
            domain_service.pay_order(order)
        assert order.status is None


class TestApproveOrder:

    def test_paid_to_approved(self, domain_service, paid_order):
        assert domain_service.approve_order(paid_order) is None
        assert paid_order.status == OrderStatus.APPROVED

    def test_pending_order_cannot_be_approved(self, domain_service, pending_order):
        with pytest.raises(OrderStateError):
            domain_service.approve_order(pending_order)
        assert pending_order.status == OrderStatus.PENDING

    def test_approved_order_cannot_be_approved_again(self, domain_service, paid_order):
        domain_service.approve_order(paid_order)

        with pytest.raises(OrderStateError):
            domain_service.approve_order(paid_order)


class TestCancelOrderPayment:

    def test_paid_to_cancelling(self, domain_service, paid_order):
        event = domain_service.cancel_order_payment(paid_order, ["Restaurant rejected"])

        assert isinstance(event, OrderCancelledEvent)
        assert paid_order.status == OrderStatus.CANCELLING
        assert paid_order.failure_messages == ("Restaurant rejected",)
        assert event.failure_messages == ("Restaurant rejected",)

    def test_reentry_from_cancelling_appends_messages(self, domain_service, paid_order):
        domain_service.cancel_order_payment(paid_order, ["first", "dup"])
        event = domain_service.cancel_order_payment(paid_order, ["dup", "second"])

        assert paid_order.status == OrderStatus.CANCELLING
        assert paid_order.failure_messages == ("first", "dup", "dup", "second")
        assert event.failure_messages == ("first", "dup", "dup", "second")

    def test_pending_order_cannot_cancel_payment(self, domain_service, pending_order):
        with pytest.raises(OrderStateError):
            domain_service.cancel_order_payment(pending_order, ["nope"])

        assert pending_order.status == OrderStatus.PENDING
        assert pending_order.failure_messages == ()

    def test_approved_order_cannot_cancel_payment(self, domain_service, paid_order):
        domain_service.approve_order(paid_order)

        with pytest.raises(OrderStateError):
            domain_service.cancel_order_payment(paid_order, ["too late"])
        assert paid_order.failure_messages == ()


class TestCancelOrder:

    def test_cancelling_to_cancelled(self, domain_service, paid_order):
        domain_service.cancel_order_payment(paid_order, ["rejected"])
        domain_service.cancel_order(paid_order, ["refunded"])

        assert paid_order.status == OrderStatus.CANCELLED
        assert paid_order.failure_messages == ("rejected", "refunded")

    def test_pending_to_cancelled(self, domain_service, pending_order):
        domain_service.cancel_order(pending_order, ["Payment failed"])

        assert pending_order.status == OrderStatus.CANCELLED
        assert pending_order.failure_messages == ("Payment failed",)

    def test_pending_cancel_can_be_disabled(self, order, restaurant):
        service = OrderDomainService(allow_cancel_from_pending=False)
        service.validate_and_initiate_order(order, restaurant)

        with pytest.raises(OrderStateError, match="expected CANCELLING for cancel"):
            service.cancel_order(order, ["Payment failed"])
        assert order.status == OrderStatus.PENDING

    def test_approved_order_cannot_be_cancelled(self, domain_service, paid_order):
        domain_service.approve_order(paid_order)

        with pytest.raises(OrderStateError) as exc_info:
            domain_service.cancel_order(paid_order, ["late"])

        assert str(exc_info.value) == (
            "Order is in APPROVED state, expected CANCELLING or PENDING for cancel operation!"
        )
        assert paid_order.status == OrderStatus.APPROVED
        assert paid_order.failure_messages == ()

    def test_paid_order_cannot_be_cancelled_directly(self, domain_service, paid_order):
        with pytest.raises(OrderStateError):
            domain_service.cancel_order(paid_order, [])

    def test_no_messages(self, domain_service, pending_order):
        domain_service.cancel_order(pending_order, None)
        assert pending_order.failure_messages == ()


class TestRoundTrip:

    def test_initiate_pay_approve(self, domain_service, order, restaurant):
        domain_service.validate_and_initiate_order(order, restaurant)
        tracking_id = order.tracking_id

        domain_service.pay_order(order)
        domain_service.approve_order(order)

        assert order.status == OrderStatus.APPROVED
        assert order.tracking_id == tracking_id
        assert order.failure_messages == ()
