"""Order domain exceptions.

Raised synchronously at the point a business rule is violated and
propagated unmodified. None of them is retryable: the caller has to
correct the order or its context first.
"""

from __future__ import annotations


class OrderDomainException(Exception):
    """Base class for every order domain failure."""


class OrderValidationError(OrderDomainException, ValueError):
    """The order is economically inconsistent (totals, prices)."""


class InvalidOrderItemPriceError(OrderValidationError):
    """An item price is invalid or differs from the restaurant's price."""


class RestaurantNotActiveError(OrderValidationError):
    """The restaurant does not accept orders right now."""


class OrderStateError(OrderDomainException):
    """An operation was invoked on an order in an ineligible status."""


class OrderInitializationError(OrderDomainException):
    """An order that already has an identity was initiated again."""


class OrderNotFoundError(OrderDomainException):
    """No order exists for the given id or tracking id."""


class CustomerNotFoundError(OrderDomainException):
    """The customer placing the order does not exist."""


class RestaurantNotFoundError(OrderDomainException):
    """The restaurant referenced by the order does not exist."""
