"""Stripe payment provider."""

import logging
from typing import Any, Optional

import stripe

from .base import PaymentIntent, PaymentProvider, WebhookEvent

logger = logging.getLogger(__name__)


def _field(obj: Any, key: str, default: Any = None) -> Any:
    # StripeObject supports item access but not every release exposes dict.get
    try:
        value = obj[key]
    except KeyError:
        return default
    return default if value is None else value


def _to_intent(intent: Any) -> PaymentIntent:
    return PaymentIntent(
        id=intent["id"],
        client_secret=_field(intent, "client_secret"),
        status=_field(intent, "status", ""),
        amount=_field(intent, "amount", 0),
        currency=_field(intent, "currency", ""),
    )


class StripePaymentProvider(PaymentProvider):
    """Thin wrapper over the Stripe API.

    The API key is passed on every call rather than set globally, so
    several providers can coexist in one process (e.g. in tests).
    """

    def __init__(self, api_key: str, webhook_secret: str):
        self._api_key = api_key
        self._webhook_secret = webhook_secret

    def create_payment_intent(
        self,
        amount: int,
        currency: str,
        description: str,
        customer_id: str,
    ) -> PaymentIntent:
        intent = stripe.PaymentIntent.create(
            api_key=self._api_key,
            amount=amount,
            currency=currency,
            description=description,
            metadata={"customer_id": customer_id},
        )
        logger.info("Created payment intent %s", intent["id"])
        return _to_intent(intent)

    def retrieve_payment_method(self, token: str) -> str:
        method = stripe.PaymentMethod.retrieve(token, api_key=self._api_key)
        return method["id"]

    def attach_payment_method(self, payment_method_id: str, payment_intent_id: str) -> None:
        stripe.PaymentIntent.modify(
            payment_intent_id,
            api_key=self._api_key,
            payment_method=payment_method_id,
        )

    def confirm_payment_intent(self, payment_intent_id: str) -> PaymentIntent:
        intent = stripe.PaymentIntent.confirm(payment_intent_id, api_key=self._api_key)
        return _to_intent(intent)

    def refund_payment(self, payment_intent_id: str, amount: Optional[int] = None) -> str:
        params: dict[str, Any] = {"payment_intent": payment_intent_id}
        if amount is not None:
            params["amount"] = amount
        refund = stripe.Refund.create(api_key=self._api_key, **params)
        logger.info("Created refund %s for payment intent %s", refund["id"], payment_intent_id)
        return refund["id"]

    def construct_webhook_event(self, payload: bytes, signature: str) -> WebhookEvent:
        if not self._webhook_secret:
            raise RuntimeError("Stripe webhook secret is not configured")

        event = stripe.Webhook.construct_event(payload, signature, self._webhook_secret)
        return WebhookEvent(
            id=event["id"],
            type=event["type"],
            data=event["data"]["object"].to_dict() if hasattr(event["data"]["object"], "to_dict")
            else dict(event["data"]["object"]),
        )
