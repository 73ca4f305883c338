"""Customer entity."""
from dataclasses import dataclass
from typing import Optional

from ..value_objects import CustomerId


@dataclass(frozen=True)
class Customer:
    """Customer allowed to place orders."""
    customer_id: CustomerId
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
