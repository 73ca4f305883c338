"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- logging
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import UUID

from ..enums import OrderStatus
from ..exceptions import (
    InvalidOrderItemPriceError,
    OrderInitializationError,
    OrderStateError,
    OrderValidationError,
)
from ..value_objects import (
    CustomerId,
    Money,
    OrderAddress,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    TrackingId,
)


@dataclass
class OrderItem:
    """
    Individual line item within an order.

    Price and subtotal are not checked at construction; is_price_valid()
    is where they are validated.
    """
    product_id: ProductId
    quantity: int
    price: Money
    sub_total: Money
    item_id: Optional[OrderItemId] = None
    order_id: Optional[OrderId] = None

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError(f"Quantity must be a positive integer, got: {self.quantity}")

    def is_price_valid(self) -> bool:
        """Unit price is positive and subtotal equals price times quantity."""
        return (
            self.price.is_greater_than_zero()
            and self.price * self.quantity == self.sub_total
        )

    def _bind(self, order_id: Optional[OrderId], item_id: OrderItemId) -> None:
        self.order_id = order_id
        self.item_id = item_id


class Order:
    """
    Order aggregate root.

    Status and failure messages are only changed through the transition
    methods below, each of which checks the current status first and
    leaves the order untouched when the check fails. OrderDomainService
    is the intended caller.

    The order keeps its own copy of the items it was built with and
    exposes them as a tuple. The tracking id is read-only and is set by
    initialize_order() or restored from a snapshot.
    """

    def __init__(
        self,
        customer_id: CustomerId,
        restaurant_id: RestaurantId,
        delivery_address: OrderAddress,
        price: Money,
        items: Optional[Iterable[OrderItem]] = None,
        order_id: Optional[OrderId] = None,
    ):
        self.customer_id = customer_id
        self.restaurant_id = restaurant_id
        self.delivery_address = delivery_address
        self.price = price
        self._items: List[OrderItem] = list(items or ())
        self._order_id = order_id
        self._tracking_id: Optional[TrackingId] = None
        self._status: Optional[OrderStatus] = None
        self._failure_messages: List[str] = []

    def __repr__(self) -> str:
        return (
            f"Order(order_id={self._order_id!r}, tracking_id={self._tracking_id!r}, "
            f"status={self._status!r}, price={self.price!r}, items={len(self._items)})"
        )

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def order_id(self) -> Optional[OrderId]:
        """Persistence identity, bound through assign_id()."""
        return self._order_id

    @property
    def tracking_id(self) -> Optional[TrackingId]:
        return self._tracking_id

    @property
    def status(self) -> Optional[OrderStatus]:
        """Current status, None until the order is initiated."""
        return self._status

    @property
    def failure_messages(self) -> Tuple[str, ...]:
        return tuple(self._failure_messages)

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate_initial_order(self) -> None:
        if self.order_id is not None or self._status is not None:
            raise OrderInitializationError(
                "Order is not in correct state for initialization!"
            )

    def validate_total_price(self) -> None:
        if self.price is None or not self.price.is_greater_than_zero():
            raise OrderValidationError("Total price must be greater than zero!")

        items_total = self.items_total()
        if items_total != self.price:
            raise OrderValidationError(
                f"Total price: {self.price.format()} is not equal to "
                f"Order items total: {items_total.format()}!"
            )

    def validate_items_price(self) -> None:
        for item in self.items:
            if not item.is_price_valid():
                raise invalid_item_price(item)

    def items_total(self) -> Money:
        """Sum of item subtotals in the order's currency."""
        total = Money.zero(self.price.currency)
        for item in self.items:
            if item.sub_total.currency != total.currency:
                raise OrderValidationError(
                    f"Order item currency: {item.sub_total.currency} does not match "
                    f"order currency: {total.currency}!"
                )
            total = total + item.sub_total
        return total

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def initialize_order(self) -> None:
        """Assign the tracking id, number the items and enter PENDING."""
        self.validate_initial_order()
        self._tracking_id = TrackingId.generate()
        self._status = OrderStatus.PENDING
        for position, item in enumerate(self.items, start=1):
            item._bind(self.order_id, OrderItemId(position))

    def pay(self) -> None:
        self._require_status("pay", OrderStatus.PENDING)
        self._status = OrderStatus.PAID

    def approve(self) -> None:
        self._require_status("approve", OrderStatus.PAID)
        self._status = OrderStatus.APPROVED

    def init_cancel(self, failure_messages: Optional[Iterable[str]]) -> None:
        messages = _collect_messages(failure_messages)
        self._require_status("cancel payment", OrderStatus.PAID, OrderStatus.CANCELLING)
        self._status = OrderStatus.CANCELLING
        self._failure_messages.extend(messages)

    def cancel(
        self,
        failure_messages: Optional[Iterable[str]],
        allow_from_pending: bool = True,
    ) -> None:
        messages = _collect_messages(failure_messages)
        allowed = [OrderStatus.CANCELLING]
        if allow_from_pending:
            allowed.append(OrderStatus.PENDING)
        self._require_status("cancel", *allowed)
        self._status = OrderStatus.CANCELLED
        self._failure_messages.extend(messages)

    def assign_id(self, order_id: OrderId) -> None:
        """
        Bind the persistence identity. Called by repositories on first save.

        Raises:
            OrderInitializationError: If a different identity is already bound
        """
        if self.order_id is not None and self.order_id != order_id:
            raise OrderInitializationError(
                f"Order already has id {self.order_id}, cannot assign {order_id}"
            )
        self._order_id = order_id
        for item in self.items:
            item.order_id = order_id

    def _require_status(self, operation: str, *expected: OrderStatus) -> None:
        if self._status not in expected:
            current = self._status.value if self._status else "uninitialized"
            raise OrderStateError(
                f"Order is in {current} state, expected "
                f"{' or '.join(status.value for status in expected)} "
                f"for {operation} operation!"
            )

    # =========================================================================
    # SNAPSHOT SUPPORT
    # =========================================================================

    def to_snapshot_dict(self) -> Dict[str, Any]:
        """
        Serialize Order state to a plain dictionary.

        Returns:
            Dictionary containing all Order state
        """
        return {
            'order_id': str(self.order_id) if self.order_id else None,
            'customer_id': str(self.customer_id),
            'restaurant_id': str(self.restaurant_id),
            'tracking_id': str(self.tracking_id) if self.tracking_id else None,
            'status': self._status.value if self._status else None,
            'price_amount': str(self.price.amount),
            'price_currency': self.price.currency,
            'delivery_address': {
                'address_id': str(self.delivery_address.address_id),
                'street': self.delivery_address.street,
                'postal_code': self.delivery_address.postal_code,
                'city': self.delivery_address.city,
            },
            'items': [
                {
                    'item_id': item.item_id.value if item.item_id else None,
                    'product_id': str(item.product_id),
                    'quantity': item.quantity,
                    'price_amount': str(item.price.amount),
                    'sub_total_amount': str(item.sub_total.amount),
                    'currency': item.price.currency,
                }
                for item in self.items
            ],
            'failure_messages': list(self._failure_messages),
        }

    @classmethod
    def from_snapshot_dict(cls, snapshot_data: Dict[str, Any]) -> 'Order':
        """
        Restore Order from snapshot dictionary.

        Args:
            snapshot_data: Dictionary produced by to_snapshot_dict()

        Returns:
            Restored Order instance
        """
        order_id = OrderId(snapshot_data['order_id']) if snapshot_data.get('order_id') else None
        address = snapshot_data['delivery_address']

        items = [
            OrderItem(
                product_id=ProductId(item_data['product_id']),
                quantity=item_data['quantity'],
                price=Money(Decimal(item_data['price_amount']), item_data['currency']),
                sub_total=Money(Decimal(item_data['sub_total_amount']), item_data['currency']),
                item_id=OrderItemId(item_data['item_id']) if item_data.get('item_id') else None,
                order_id=order_id,
            )
            for item_data in snapshot_data.get('items', [])
        ]

        order = cls(
            customer_id=CustomerId(snapshot_data['customer_id']),
            restaurant_id=RestaurantId(snapshot_data['restaurant_id']),
            delivery_address=OrderAddress(
                street=address['street'],
                postal_code=address['postal_code'],
                city=address['city'],
                address_id=UUID(address['address_id']),
            ),
            price=Money(Decimal(snapshot_data['price_amount']), snapshot_data['price_currency']),
            items=items,
            order_id=order_id,
        )
        if snapshot_data.get('tracking_id'):
            order._tracking_id = TrackingId(snapshot_data['tracking_id'])
        if snapshot_data.get('status'):
            order._status = OrderStatus(snapshot_data['status'])
        order._failure_messages = list(snapshot_data.get('failure_messages', []))
        return order


def invalid_item_price(item: OrderItem) -> InvalidOrderItemPriceError:
    return InvalidOrderItemPriceError(
        f"Order item price: {item.price.format()} is not valid for product {item.product_id}"
    )


def _collect_messages(failure_messages: Optional[Iterable[str]]) -> List[str]:
    if failure_messages is None:
        return []
    if isinstance(failure_messages, str):
        return [failure_messages]
    return list(failure_messages)
