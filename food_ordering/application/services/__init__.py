"""Application services."""

from .order_service import (
    ORDER_CREATED_MESSAGE,
    OrderApplicationService,
    build_order_application_service,
)

__all__ = [
    "ORDER_CREATED_MESSAGE",
    "OrderApplicationService",
    "build_order_application_service",
]
