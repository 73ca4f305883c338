"""Application service for Order operations."""

from typing import Iterable, Optional
from uuid import UUID

from food_ordering.application.dtos import (
    CreateOrderCommand,
    CreateOrderResponse,
    TrackOrderQuery,
    TrackOrderResponse,
)
from food_ordering.application.mappers import OrderDataMapper
from food_ordering.domain.entities import Order, Restaurant
from food_ordering.domain.event_publisher import DomainEventPublisher
from food_ordering.domain.events import OrderCancelledEvent, OrderPaidEvent
from food_ordering.domain.exceptions import (
    CustomerNotFoundError,
    OrderDomainException,
    OrderNotFoundError,
    RestaurantNotFoundError,
)
from food_ordering.domain.repositories import (
    CustomerRepository,
    OrderRepository,
    RestaurantRepository,
)
from food_ordering.domain.services import OrderDomainService
from food_ordering.domain.value_objects import CustomerId, OrderId, RestaurantId, TrackingId
from food_ordering.infrastructure.logging import get_logger, set_log_level
from food_ordering.settings import OrderingSettings, get_app_settings

ORDER_CREATED_MESSAGE = "Order Created Successfully"

logger = get_logger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Load customers, restaurants and orders through the repositories
    - Delegate validation and transitions to OrderDomainService
    - Persist the order before firing the resulting event
    - Transform between DTOs and domain entities
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        customer_repository: CustomerRepository,
        restaurant_repository: RestaurantRepository,
        publisher: DomainEventPublisher,
        domain_service: Optional[OrderDomainService] = None,
        mapper: Optional[OrderDataMapper] = None,
    ) -> None:
        self._orders = order_repository
        self._customers = customer_repository
        self._restaurants = restaurant_repository
        self._publisher = publisher
        self._domain_service = domain_service or OrderDomainService()
        self._mapper = mapper or OrderDataMapper()

    async def create_order(self, command: CreateOrderCommand) -> CreateOrderResponse:
        """Create a new order.

        Args:
            command: CreateOrderCommand DTO

        Returns:
            CreateOrderResponse with tracking id and PENDING status

        Raises:
            CustomerNotFoundError: Unknown customer
            RestaurantNotFoundError: Unknown restaurant
            OrderDomainException: Any domain validation failure
        """
        await self._check_customer(CustomerId(command.customer_id))
        restaurant = await self._check_restaurant(command)

        order = self._mapper.create_order_command_to_order(command)
        event = self._domain_service.validate_and_initiate_order(
            order, restaurant, self._publisher
        )

        saved = await self._save(order)
        logger.info(f"Order is created with id: {saved.order_id}")

        await event.fire()
        return self._mapper.order_to_create_order_response(saved, ORDER_CREATED_MESSAGE)

    async def track_order(self, query: TrackOrderQuery) -> TrackOrderResponse:
        """Get order status by tracking id.

        Raises:
            OrderNotFoundError: No order with this tracking id
        """
        tracking_id = TrackingId(query.order_tracking_id)
        order = await self._orders.find_by_tracking_id(tracking_id)
        if order is None:
            logger.warning(f"Could not find order with tracking id: {tracking_id}")
            raise OrderNotFoundError(f"Could not find order with tracking id: {tracking_id}")
        return self._mapper.order_to_track_order_response(order)

    # =========================================================================
    # PAYMENT / RESTAURANT APPROVAL RESPONSES
    # =========================================================================

    async def payment_completed(self, order_id: UUID) -> OrderPaidEvent:
        """Payment succeeded: PENDING -> PAID, then fire OrderPaidEvent."""
        order = await self._find_order(OrderId(order_id))
        event = self._domain_service.pay_order(order, self._publisher)
        await self._save(order)
        logger.info(f"Order with id: {order.order_id} is paid")
        await event.fire()
        return event

    async def payment_cancelled(self, order_id: UUID, failure_messages: Iterable[str]) -> None:
        """Payment failed or was refunded: order becomes CANCELLED."""
        order = await self._find_order(OrderId(order_id))
        self._domain_service.cancel_order(order, failure_messages)
        await self._save(order)
        logger.info(f"Order with id: {order.order_id} is cancelled")

    async def restaurant_approved(self, order_id: UUID) -> None:
        """Restaurant accepted the order: PAID -> APPROVED."""
        order = await self._find_order(OrderId(order_id))
        self._domain_service.approve_order(order)
        await self._save(order)
        logger.info(f"Order with id: {order.order_id} is approved")

    async def restaurant_rejected(
        self, order_id: UUID, failure_messages: Iterable[str]
    ) -> OrderCancelledEvent:
        """Restaurant rejected the order: start cancelling the payment."""
        order = await self._find_order(OrderId(order_id))
        event = self._domain_service.cancel_order_payment(order, failure_messages, self._publisher)
        await self._save(order)
        logger.info(f"Order with id: {order.order_id} is cancelling")
        await event.fire()
        return event

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _check_customer(self, customer_id: CustomerId) -> None:
        customer = await self._customers.find_customer(customer_id)
        if customer is None:
            logger.warning(f"Could not find customer with customer id: {customer_id}")
            raise CustomerNotFoundError(f"Could not find customer with customer id: {customer_id}")

    async def _check_restaurant(self, command: CreateOrderCommand) -> Restaurant:
        restaurant_id = RestaurantId(command.restaurant_id)
        restaurant = await self._restaurants.find_restaurant_information(
            restaurant_id,
            self._mapper.create_order_command_to_product_ids(command),
        )
        if restaurant is None:
            logger.warning(f"Could not find restaurant with restaurant id: {restaurant_id}")
            raise RestaurantNotFoundError(
                f"Could not find restaurant with restaurant id: {restaurant_id}"
            )
        return restaurant

    async def _find_order(self, order_id: OrderId) -> Order:
        order = await self._orders.find_by_id(order_id)
        if order is None:
            logger.warning(f"Could not find order with order id: {order_id}")
            raise OrderNotFoundError(f"Could not find order with order id: {order_id}")
        return order

    async def _save(self, order: Order) -> Order:
        saved = await self._orders.save(order)
        if saved is None:
            logger.error(f"Could not save order with tracking id: {order.tracking_id}")
            raise OrderDomainException("Could not save order!")
        return saved


def build_order_application_service(
    order_repository: OrderRepository,
    customer_repository: CustomerRepository,
    restaurant_repository: RestaurantRepository,
    publisher: DomainEventPublisher,
    settings: Optional[OrderingSettings] = None,
) -> OrderApplicationService:
    """Wire the application service from ordering settings.

    Args:
        settings: Ordering settings; the cached app settings when omitted
    """
    settings = settings or get_app_settings().ordering
    set_log_level(settings.log_level)
    return OrderApplicationService(
        order_repository=order_repository,
        customer_repository=customer_repository,
        restaurant_repository=restaurant_repository,
        publisher=publisher,
        domain_service=OrderDomainService(
            allow_cancel_from_pending=settings.allow_cancel_from_pending
        ),
        mapper=OrderDataMapper(currency=settings.default_currency),
    )
