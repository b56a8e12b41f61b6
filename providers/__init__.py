"""External service providers (payments, email)."""

from .base import EmailMessage, EmailProvider, PaymentIntent, PaymentProvider, WebhookEvent
from .email import ResendEmailProvider, sanitize_html, sanitize_text
from .payments import StripePaymentProvider

__all__ = [
    "EmailMessage",
    "EmailProvider",
    "PaymentIntent",
    "PaymentProvider",
    "WebhookEvent",
    "ResendEmailProvider",
    "StripePaymentProvider",
    "sanitize_html",
    "sanitize_text",
]
