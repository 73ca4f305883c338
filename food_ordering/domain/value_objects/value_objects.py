"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN
from functools import total_ordering
from uuid import UUID, uuid4

DEFAULT_CURRENCY = "EUR"

_CENTS = Decimal("0.01")


@total_ordering
@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    Arithmetic keeps full Decimal precision; rounding to two fractional
    digits only happens in format().

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        # Validate currency code (3 letters)
        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> 'Money':
        return cls(amount=Decimal("0"), currency=currency)

    def __str__(self) -> str:
        return f"{self.format()} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects (must have same currency)."""
        self._check_currency(other, "add")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, multiplier: int) -> 'Money':
        """Multiply by an integer quantity."""
        if isinstance(multiplier, bool) or not isinstance(multiplier, int):
            return NotImplemented
        return Money(amount=self.amount * multiplier, currency=self.currency)

    __rmul__ = __mul__

    def __lt__(self, other: 'Money') -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other, "compare")
        return self.amount < other.amount

    def add(self, other: 'Money') -> 'Money':
        return self + other

    def multiply(self, multiplier: int) -> 'Money':
        return self * multiplier

    def is_greater_than(self, other: 'Money') -> bool:
        return self > other

    def is_greater_than_zero(self) -> bool:
        """Check if amount is strictly positive."""
        return self.amount > 0

    def format(self) -> str:
        """Amount with exactly two fractional digits (half-even)."""
        return str(self.amount.quantize(_CENTS, rounding=ROUND_HALF_EVEN))

    def _check_currency(self, other: 'Money', operation: str) -> None:
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot {operation} different currencies: {self.currency} vs {other.currency}"
            )


@dataclass(frozen=True)
class BaseId:
    """UUID-backed identifier."""

    value: UUID

    def __post_init__(self):
        if not isinstance(self.value, UUID):
            object.__setattr__(self, 'value', UUID(str(self.value)))

    @classmethod
    def generate(cls):
        """Generate a new random identifier."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


class OrderId(BaseId):
    """Persistence identity of an order."""


class CustomerId(BaseId):
    """Customer reference."""


class RestaurantId(BaseId):
    """Restaurant reference."""


class ProductId(BaseId):
    """Product reference."""


class TrackingId(BaseId):
    """Caller-facing order identifier, assigned once at initiation."""


@dataclass(frozen=True)
class OrderItemId:
    """Position of an item within its order, starting at 1."""

    value: int

    def __post_init__(self):
        if self.value < 1:
            raise ValueError(f"Invalid order item id: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
