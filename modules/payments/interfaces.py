"""
Payments module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import PaginatedResponse, Pagination

from .models import CreatePaymentRequest, CreatePaymentResponse, Payment, WebhookResult


@runtime_checkable
class IPaymentService(Protocol):
    """
    Interface for payment operations.

    Payments are backed by provider payment intents. Status changes
    arrive through confirm/refund calls and through signed webhooks.
    """

    async def create_payment(self, user_id: str, request: CreatePaymentRequest) -> CreatePaymentResponse:
        """
        Create a payment intent and record the payment as pending.

        For card payments the method identified by ``request.token`` is
        attached to the intent.

        Raises:
            PaymentAccessDeniedError: If customer_id is not the caller
            UnsupportedCurrencyError: If the currency isn't configured
            UnsupportedPaymentMethodError: If the method isn't configured
            ThirdPartyError: If the provider call fails
        """
        ...

    async def get_payment(self, payment_id: str, user_id: str) -> Payment:
        """
        Raises:
            PaymentNotFoundError: If the payment doesn't exist
            PaymentAccessDeniedError: If it belongs to someone else
        """
        ...

    async def list_payments(self, user_id: str, pagination: Pagination) -> PaginatedResponse[Payment]:
        ...

    async def confirm_payment(self, payment_id: str, user_id: str) -> Payment:
        """Confirm a pending payment's intent and mirror the resulting status."""
        ...

    async def refund_payment(self, payment_id: str, user_id: str) -> Payment:
        """Fully refund a succeeded payment."""
        ...

    async def process_webhook(self, payload: bytes, signature: str) -> WebhookResult:
        """
        Verify and apply a provider webhook event.

        Unhandled event types are acknowledged without changes.

        Raises:
            UnauthorizedError: If the signature doesn't verify
            BadRequestError: If the payload is malformed or lacks an intent ID
        """
        ...
