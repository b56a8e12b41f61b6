"""
Orders module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from shared.models import Money


class OrderStatus(str, Enum):
    """Fulfilment status of an order."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPING = "shipping"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderPaymentStatus(str, Enum):
    """Payment status as tracked on the order."""

    PENDING = "pending"
    AUTHORIZED = "authorized"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REFUNDED = "refunded"


class Address(BaseModel):
    """Shipping address. Country is an ISO 3166-1 alpha-2 code."""

    street: str = Field(..., min_length=1, max_length=200)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=2, max_length=2)

    @field_validator("country")
    @classmethod
    def validate_country(cls, value: str) -> str:
        if not value.isalpha() or not value.isascii():
            raise ValueError("must be an ISO 3166-1 alpha-2 country code")
        return value.upper()


class OrderItem(BaseModel):
    """A product line captured on the order at creation time."""

    id: Optional[str] = None
    order_id: Optional[str] = None
    product_id: str
    quantity: int = Field(..., ge=1)
    unit_price: Money


class Order(BaseModel):
    """A placed order."""

    id: str
    customer_id: str
    status: OrderStatus = OrderStatus.PENDING
    total_amount: Money
    payment_status: OrderPaymentStatus = OrderPaymentStatus.PENDING
    payment_intent_id: Optional[str] = None
    shipping_address: Address
    items: list[OrderItem] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class CreateOrderRequest(BaseModel):
    """Place an order for everything in the caller's cart."""

    shipping_address: Address


class UpdateOrderStatusRequest(BaseModel):
    status: OrderStatus
