"""
Order Status Enum.

Lifecycle states of the Order aggregate.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""

    PENDING = "PENDING"
    PAID = "PAID"
    APPROVED = "APPROVED"
    CANCELLING = "CANCELLING"
    CANCELLED = "CANCELLED"

    def __str__(self) -> str:
        return self.value
