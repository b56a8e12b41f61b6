"""
Payments service implementation.

Wraps the payment provider: every provider failure is reported as a
THIRD_PARTY_ERROR, webhook signature failures as UNAUTHORIZED.
"""

import asyncio
import logging
from typing import Any, Callable, TypeVar

import stripe

from providers.base import PaymentProvider
from shared.config import Settings
from shared.database import run_db
from shared.exceptions import BadRequestError, ThirdPartyError, UnauthorizedError
from shared.models import PaginatedResponse, Pagination

from .exceptions import (
    InvalidPaymentStateError,
    MissingPaymentTokenError,
    PaymentAccessDeniedError,
    PaymentNotFoundError,
    UnsupportedCurrencyError,
    UnsupportedPaymentMethodError,
)
from .interfaces import IPaymentService
from .models import (
    INTENT_STATUS_MAP,
    WEBHOOK_STATUS_MAP,
    CreatePaymentRequest,
    CreatePaymentResponse,
    Payment,
    PaymentStatus,
    WebhookResult,
)
from .repository import PaymentRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

CARD = "card"


class PaymentService(IPaymentService):
    """
    Payment service with Supabase and Stripe backends.

    Implements IPaymentService protocol.
    """

    def __init__(
        self,
        repository: PaymentRepository,
        provider: PaymentProvider,
        settings: Settings,
    ):
        self._repository = repository
        self._provider = provider
        self._currencies = [c.lower() for c in settings.stripe_supported_currencies]
        self._methods = [m.lower() for m in settings.stripe_payment_methods]
        self._timeout = settings.db_timeout_seconds

    async def _call_provider(self, action: str, func: Callable[..., T], *args: Any) -> T:
        try:
            return await asyncio.to_thread(func, *args)
        except stripe.StripeError as e:
            logger.error("Payment provider failed to %s: %s", action, type(e).__name__)
            raise ThirdPartyError(f"Failed to {action}", service="stripe", cause=e)

    async def create_payment(self, user_id: str, request: CreatePaymentRequest) -> CreatePaymentResponse:
        customer_id = request.customer_id or user_id
        if customer_id != user_id:
            raise PaymentAccessDeniedError("Cannot create a payment for another customer")
        if request.currency not in self._currencies:
            raise UnsupportedCurrencyError(request.currency, self._currencies)
        if request.payment_method not in self._methods:
            raise UnsupportedPaymentMethodError(request.payment_method, self._methods)
        if request.payment_method == CARD and not request.token:
            raise MissingPaymentTokenError()

        intent = await self._call_provider(
            "create payment intent",
            self._provider.create_payment_intent,
            request.amount,
            request.currency,
            request.description,
            customer_id,
        )

        if request.payment_method == CARD:
            method_id = await self._call_provider(
                "retrieve payment method", self._provider.retrieve_payment_method, request.token
            )
            await self._call_provider(
                "attach payment method", self._provider.attach_payment_method, method_id, intent.id
            )

        payment = await run_db(
            self._repository.create_payment,
            {
                "id": intent.id,
                "customer_id": customer_id,
                "amount": request.amount,
                "currency": request.currency,
                "description": request.description,
                "payment_method": request.payment_method,
                "status": PaymentStatus.PENDING.value,
            },
            timeout=self._timeout,
        )

        logger.info("Created payment %s for customer %s", payment.id, customer_id)
        return CreatePaymentResponse(
            payment=payment,
            client_secret=intent.client_secret,
            payment_status=payment.status,
        )

    async def get_payment(self, payment_id: str, user_id: str) -> Payment:
        payment = await run_db(self._repository.get_by_id, payment_id, timeout=self._timeout)
        if payment is None:
            raise PaymentNotFoundError(payment_id)
        if payment.customer_id != user_id:
            raise PaymentAccessDeniedError()
        return payment

    async def list_payments(self, user_id: str, pagination: Pagination) -> PaginatedResponse[Payment]:
        payments, total = await run_db(
            self._repository.list_by_customer, user_id, pagination, timeout=self._timeout
        )
        return PaginatedResponse[Payment](
            items=payments,
            total=total,
            page=pagination.page,
            page_size=pagination.page_size,
        )

    async def confirm_payment(self, payment_id: str, user_id: str) -> Payment:
        payment = await self.get_payment(payment_id, user_id)
        if payment.status != PaymentStatus.PENDING:
            raise InvalidPaymentStateError("confirm", payment.status.value)

        intent = await self._call_provider(
            "confirm payment intent", self._provider.confirm_payment_intent, payment.id
        )
        status = INTENT_STATUS_MAP.get(intent.status, PaymentStatus.PENDING)
        return await self._set_status(payment, status)

    async def refund_payment(self, payment_id: str, user_id: str) -> Payment:
        payment = await self.get_payment(payment_id, user_id)
        if payment.status != PaymentStatus.SUCCEEDED:
            raise InvalidPaymentStateError("refund", payment.status.value)

        await self._call_provider("refund payment", self._provider.refund_payment, payment.id)
        return await self._set_status(payment, PaymentStatus.REFUNDED)

    async def _set_status(self, payment: Payment, status: PaymentStatus) -> Payment:
        if status == payment.status:
            return payment
        updated = await run_db(self._repository.update_status, payment.id, status, timeout=self._timeout)
        if updated is None:
            raise PaymentNotFoundError(payment.id)
        logger.info("Payment %s moved from %s to %s", payment.id, payment.status.value, status.value)
        return updated

    async def process_webhook(self, payload: bytes, signature: str) -> WebhookResult:
        try:
            event = await asyncio.to_thread(self._provider.construct_webhook_event, payload, signature)
        except stripe.SignatureVerificationError as e:
            raise UnauthorizedError("Webhook signature verification failed", cause=e)
        except ValueError as e:
            raise BadRequestError("Invalid webhook payload", cause=e)

        result = WebhookResult(event_id=event.id, event_type=event.type)

        status = WEBHOOK_STATUS_MAP.get(event.type)
        if status is None:
            logger.info("Ignoring webhook event %s of type %s", event.id, event.type)
            return result

        # Charge events carry the intent ID in payment_intent; intent events in id
        if event.type.startswith("charge."):
            intent_id = event.data.get("payment_intent")
        else:
            intent_id = event.data.get("id")
        if not intent_id:
            raise BadRequestError("Missing payment intent ID in webhook")

        updated = await run_db(self._repository.update_status, intent_id, status, timeout=self._timeout)
        if updated is None:
            logger.warning("Webhook event %s refers to unknown payment %s", event.id, intent_id)
        else:
            logger.info("Webhook %s set payment %s to %s", event.type, intent_id, status.value)
        return result
