"""
Payments module.

Handles payment intents, confirmation, refunds and provider webhooks.
"""

from .interfaces import IPaymentService
from .models import (
    CreatePaymentRequest,
    CreatePaymentResponse,
    Payment,
    PaymentStatus,
    WebhookResult,
)
from .exceptions import (
    InvalidPaymentStateError,
    MissingPaymentTokenError,
    PaymentAccessDeniedError,
    PaymentNotFoundError,
    UnsupportedCurrencyError,
    UnsupportedPaymentMethodError,
)

__all__ = [
    "IPaymentService",
    "CreatePaymentRequest",
    "CreatePaymentResponse",
    "Payment",
    "PaymentStatus",
    "WebhookResult",
    "InvalidPaymentStateError",
    "MissingPaymentTokenError",
    "PaymentAccessDeniedError",
    "PaymentNotFoundError",
    "UnsupportedCurrencyError",
    "UnsupportedPaymentMethodError",
]
