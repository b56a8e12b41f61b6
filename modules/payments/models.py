"""
Payments module data models.

Amounts are integers in the currency's minor unit (e.g. cents).
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from shared.models import UUIDStr


class PaymentStatus(str, Enum):
    """Local payment status, mirrored from the provider."""

    PENDING = "pending"
    AUTHORIZED = "authorized"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REFUNDED = "refunded"


# Provider payment intent status -> local status
INTENT_STATUS_MAP: dict[str, PaymentStatus] = {
    "succeeded": PaymentStatus.SUCCEEDED,
    "requires_capture": PaymentStatus.AUTHORIZED,
    "canceled": PaymentStatus.FAILED,
    "requires_payment_method": PaymentStatus.FAILED,
}

# Webhook event type -> local status
WEBHOOK_STATUS_MAP: dict[str, PaymentStatus] = {
    "payment_intent.succeeded": PaymentStatus.SUCCEEDED,
    "payment_intent.payment_failed": PaymentStatus.FAILED,
    "charge.refunded": PaymentStatus.REFUNDED,
}


class Payment(BaseModel):
    """A payment. Its ID is the provider's payment intent ID."""

    id: str
    customer_id: str
    amount: int
    currency: str
    description: str = ""
    payment_method: str
    status: PaymentStatus = PaymentStatus.PENDING
    created_at: datetime
    updated_at: datetime


class CreatePaymentRequest(BaseModel):
    """
    Request to start a payment.

    customer_id defaults to the caller and may not name anyone else.
    token is the client-side payment method ID, required for cards.
    """

    customer_id: Optional[UUIDStr] = None
    amount: int = Field(..., gt=0, description="Amount in minor currency units")
    currency: str = Field(..., min_length=3, max_length=3)
    description: str = Field(default="", max_length=500)
    payment_method: str = Field(..., min_length=1)
    token: Optional[str] = None

    @field_validator("currency", "payment_method")
    @classmethod
    def normalize(cls, value: str) -> str:
        return value.strip().lower()


class CreatePaymentResponse(BaseModel):
    payment: Payment
    client_secret: Optional[str] = None
    payment_status: PaymentStatus
    message: str = "Payment initiated successfully."


class WebhookResult(BaseModel):
    """Acknowledgement returned to the provider."""

    received: bool = True
    event_id: str
    event_type: str
