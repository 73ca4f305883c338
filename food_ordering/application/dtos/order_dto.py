"""Application DTOs for Order operations."""

from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from food_ordering.domain.enums import OrderStatus


class OrderAddressDTO(BaseModel):
    """DTO for delivery address."""

    street: str = Field(..., min_length=1, max_length=50, description="Street")
    postal_code: str = Field(..., min_length=1, max_length=10, description="Postal code")
    city: str = Field(..., min_length=1, max_length=50, description="City")

    model_config = {"frozen": True}


class OrderItemCommand(BaseModel):
    """DTO for a requested order item."""

    product_id: UUID = Field(..., description="Product ID")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    price: Decimal = Field(..., ge=0, description="Unit price amount")
    sub_total: Decimal = Field(..., ge=0, description="Price times quantity")

    model_config = {"frozen": True}


class CreateOrderCommand(BaseModel):
    """Request DTO for creating an order."""

    customer_id: UUID = Field(..., description="Customer placing the order")
    restaurant_id: UUID = Field(..., description="Restaurant the order is placed at")
    price: Decimal = Field(..., ge=0, description="Declared order total")
    items: List[OrderItemCommand] = Field(default_factory=list, description="Order items")
    address: OrderAddressDTO = Field(..., description="Delivery address")

    model_config = {"frozen": True}


class CreateOrderResponse(BaseModel):
    """Response DTO for a created order."""

    order_tracking_id: UUID = Field(..., description="Tracking ID")
    order_status: OrderStatus = Field(..., description="Order status")
    message: str = Field(..., description="Result message")

    model_config = {"frozen": True}


class TrackOrderQuery(BaseModel):
    """Query DTO for tracking an order."""

    order_tracking_id: UUID = Field(..., description="Tracking ID")

    model_config = {"frozen": True}


class TrackOrderResponse(BaseModel):
    """Response DTO for order tracking."""

    order_tracking_id: UUID = Field(..., description="Tracking ID")
    order_status: OrderStatus = Field(..., description="Order status")
    failure_messages: List[str] = Field(default_factory=list, description="Failure messages")

    model_config = {"frozen": True}
