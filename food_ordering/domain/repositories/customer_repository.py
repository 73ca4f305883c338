"""Repository interface for customers."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.customer import Customer
from ..value_objects import CustomerId


class CustomerRepository(ABC):
    """Read access to customers placing orders."""

    @abstractmethod
    async def find_customer(self, customer_id: CustomerId) -> Optional[Customer]:
        pass
