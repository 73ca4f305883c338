"""
In-memory repository implementations.

Used for testing and demos. Orders are stored as snapshot dictionaries,
so callers always get a fresh aggregate back and changes only become
visible after save().
"""
from typing import Dict, Iterable, List, Optional

from food_ordering.domain.entities import Customer, Order, Product, Restaurant
from food_ordering.domain.repositories import (
    CustomerRepository,
    OrderRepository,
    RestaurantRepository,
)
from food_ordering.domain.value_objects import (
    CustomerId,
    OrderId,
    ProductId,
    RestaurantId,
    TrackingId,
)
from food_ordering.infrastructure.logging import get_logger


logger = get_logger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """In-memory implementation of OrderRepository."""

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[OrderId, dict] = {}
        self._tracking_index: Dict[TrackingId, OrderId] = {}
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    async def save(self, order: Order) -> Optional[Order]:
        """
        Save order, assigning an OrderId on first save.

        Args:
            order: Order entity to save

        Returns:
            The saved order
        """
        if order.order_id is None:
            order.assign_id(OrderId.generate())

        self._storage[order.order_id] = order.to_snapshot_dict()
        if order.tracking_id is not None:
            self._tracking_index[order.tracking_id] = order.order_id

        logger.info(
            f"Order saved: {order.order_id} "
            f"(status: {order.status}, tracking_id: {order.tracking_id})"
        )
        return order

    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        snapshot = self._storage.get(order_id)
        if snapshot is None:
            logger.info(f"Order not found: {order_id}")
            return None
        return Order.from_snapshot_dict(snapshot)

    async def find_by_tracking_id(self, tracking_id: TrackingId) -> Optional[Order]:
        order_id = self._tracking_index.get(tracking_id)
        if order_id is None:
            logger.info(f"Order not found for tracking id: {tracking_id}")
            return None
        return await self.find_by_id(order_id)

    def get_all(self) -> List[Order]:
        """
        Get all orders (for demo/testing).

        Returns:
            List of all orders
        """
        return [Order.from_snapshot_dict(snapshot) for snapshot in self._storage.values()]


class InMemoryCustomerRepository(CustomerRepository):
    """In-memory implementation of CustomerRepository."""

    def __init__(self, customers: Iterable[Customer] = ()):
        self._customers: Dict[CustomerId, Customer] = {}
        for customer in customers:
            self.add(customer)

    def add(self, customer: Customer) -> None:
        self._customers[customer.customer_id] = customer

    async def find_customer(self, customer_id: CustomerId) -> Optional[Customer]:
        customer = self._customers.get(customer_id)
        logger.debug(f"Customer {customer_id} found: {customer is not None}")
        return customer


class InMemoryRestaurantRepository(RestaurantRepository):
    """
    In-memory implementation of RestaurantRepository.

    Holds full restaurants and answers with snapshots limited to the
    requested products.
    """

    def __init__(self, restaurants: Iterable[Restaurant] = ()):
        self._restaurants: Dict[RestaurantId, Restaurant] = {}
        for restaurant in restaurants:
            self.add(restaurant)

    def add(self, restaurant: Restaurant) -> None:
        self._restaurants[restaurant.restaurant_id] = restaurant

    async def find_restaurant_information(
        self,
        restaurant_id: RestaurantId,
        product_ids: Iterable[ProductId],
    ) -> Optional[Restaurant]:
        restaurant = self._restaurants.get(restaurant_id)
        if restaurant is None:
            logger.info(f"Restaurant not found: {restaurant_id}")
            return None

        wanted = set(product_ids)
        products: List[Product] = [
            product for product in restaurant.products if product.product_id in wanted
        ]
        return Restaurant(
            restaurant_id=restaurant.restaurant_id,
            products=tuple(products),
            active=restaurant.active,
        )
