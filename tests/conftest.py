"""Shared fixtures for the order domain and application tests."""

from decimal import Decimal
from uuid import UUID

import pytest

from food_ordering.application.dtos import (
    CreateOrderCommand,
    OrderAddressDTO,
    OrderItemCommand,
)
from food_ordering.application.services import OrderApplicationService
from food_ordering.domain.entities import Customer, Order, OrderItem, Product, Restaurant
from food_ordering.domain.services import OrderDomainService
from food_ordering.domain.value_objects import (
    CustomerId,
    Money,
    OrderAddress,
    ProductId,
    RestaurantId,
)
from food_ordering.infrastructure.event_bus import InMemoryEventPublisher
from food_ordering.infrastructure.persistence import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryRestaurantRepository,
)

CUSTOMER_ID = UUID("96a1003d-f0bc-46c6-98ab-3522b8a60fe1")
RESTAURANT_ID = UUID("30f28f4c-9153-464e-b0a7-bfff19a9cc2a")
PRODUCT_ID = UUID("9140fcad-4514-4661-8540-4d0aae854df0")
OTHER_PRODUCT_ID = UUID("2a6f3b1e-5c4d-4e8f-9a0b-1c2d3e4f5a6b")


def money(value: str) -> Money:
    return Money(Decimal(value))


def make_item(price: str, quantity: int, sub_total: str, product_id: UUID = PRODUCT_ID) -> OrderItem:
    return OrderItem(
        product_id=ProductId(product_id),
        quantity=quantity,
        price=money(price),
        sub_total=money(sub_total),
    )


def make_order(price: str = "200.00", items=None) -> Order:
    """Fresh order: one item of 50.00 and three of 50.00 by default."""
    if items is None:
        items = [make_item("50.00", 1, "50.00"), make_item("50.00", 3, "150.00")]
    return Order(
        customer_id=CustomerId(CUSTOMER_ID),
        restaurant_id=RestaurantId(RESTAURANT_ID),
        delivery_address=OrderAddress(street="street_1", postal_code="1000AB", city="Paris"),
        price=money(price),
        items=items,
    )


def make_restaurant(active: bool = True) -> Restaurant:
    return Restaurant(
        restaurant_id=RestaurantId(RESTAURANT_ID),
        products=(
            Product(ProductId(PRODUCT_ID), "product-1", money("50.00")),
            Product(ProductId(OTHER_PRODUCT_ID), "product-2", money("25.50")),
        ),
        active=active,
    )


def make_command(price: str = "200.00", items=None) -> CreateOrderCommand:
    if items is None:
        items = [
            OrderItemCommand(product_id=PRODUCT_ID, quantity=1, price=Decimal("50.00"), sub_total=Decimal("50.00")),
            OrderItemCommand(product_id=PRODUCT_ID, quantity=3, price=Decimal("50.00"), sub_total=Decimal("150.00")),
        ]
    return CreateOrderCommand(
        customer_id=CUSTOMER_ID,
        restaurant_id=RESTAURANT_ID,
        price=Decimal(price),
        items=items,
        address=OrderAddressDTO(street="street_1", postal_code="1000AB", city="Paris"),
    )


@pytest.fixture
def domain_service() -> OrderDomainService:
    return OrderDomainService()


@pytest.fixture
def restaurant() -> Restaurant:
    return make_restaurant()


@pytest.fixture
def order() -> Order:
    return make_order()


@pytest.fixture
def pending_order(domain_service, order, restaurant) -> Order:
    domain_service.validate_and_initiate_order(order, restaurant)
    return order


@pytest.fixture
def paid_order(domain_service, pending_order) -> Order:
    domain_service.pay_order(pending_order)
    return pending_order


@pytest.fixture
def publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def restaurant_repository(restaurant) -> InMemoryRestaurantRepository:
    return InMemoryRestaurantRepository([restaurant])


@pytest.fixture
def customer_repository() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository([Customer(customer_id=CustomerId(CUSTOMER_ID), username="user_1")])


@pytest.fixture
def application_service(
    order_repository, customer_repository, restaurant_repository, publisher
) -> OrderApplicationService:
    return OrderApplicationService(
        order_repository=order_repository,
        customer_repository=customer_repository,
        restaurant_repository=restaurant_repository,
        publisher=publisher,
    )


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def order_factory():
    return make_order


@pytest.fixture
def restaurant_factory():
    return make_restaurant


@pytest.fixture
def command_factory():
    return make_command


@pytest.fixture
def product_id() -> ProductId:
    return ProductId(PRODUCT_ID)


@pytest.fixture
def other_product_id() -> ProductId:
    return ProductId(OTHER_PRODUCT_ID)
