"""Delivery address value object."""
from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(frozen=True)
class OrderAddress:
    """
    Street address an order is delivered to.

    Only presence of each part is checked; the address itself is
    external data.
    """
    street: str
    postal_code: str
    city: str
    address_id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        for name in ("street", "postal_code", "city"):
            if not getattr(self, name):
                raise ValueError(f"Address {name} cannot be empty")

    def __str__(self) -> str:
        return f"{self.street}, {self.postal_code} {self.city}"
