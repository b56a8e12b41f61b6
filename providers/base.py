"""Base classes and models for external service providers."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, Field


class PaymentIntent(BaseModel):
    """A planned payment at the payment provider.

    Attributes:
        id: Provider identifier, also used as the local payment id
        client_secret: Secret the client uses to complete the payment
        status: Provider-side status string
        amount: Amount in minor currency units
        currency: Lowercase ISO currency code
    """

    model_config = {"frozen": True}

    id: str
    client_secret: Optional[str] = None
    status: str = ""
    amount: int = 0
    currency: str = ""


class WebhookEvent(BaseModel):
    """A verified provider webhook event."""

    model_config = {"frozen": True}

    id: str
    type: str
    data: dict[str, Any] = Field(default_factory=dict)


class EmailMessage(BaseModel):
    """An outgoing email, already sanitized by the caller."""

    to: str
    subject: str
    text: str
    html: Optional[str] = None
    cc: list[str] = Field(default_factory=list)
    bcc: list[str] = Field(default_factory=list)


class PaymentProvider(ABC):
    """Abstract base class for payment providers.

    Implementations raise the underlying client library's exceptions
    unchanged; callers classify them.
    """

    @abstractmethod
    def create_payment_intent(
        self,
        amount: int,
        currency: str,
        description: str,
        customer_id: str,
    ) -> PaymentIntent:
        """Create a payment intent.

        Args:
            amount: Amount in minor currency units
            currency: Lowercase ISO currency code
            description: Free-form description shown on the payment
            customer_id: Local customer id, stored as intent metadata

        Returns:
            The created intent with its client secret
        """
        pass

    @abstractmethod
    def retrieve_payment_method(self, token: str) -> str:
        """Resolve a client-side payment method token to its id."""
        pass

    @abstractmethod
    def attach_payment_method(self, payment_method_id: str, payment_intent_id: str) -> None:
        pass

    @abstractmethod
    def confirm_payment_intent(self, payment_intent_id: str) -> PaymentIntent:
        pass

    @abstractmethod
    def refund_payment(self, payment_intent_id: str, amount: Optional[int] = None) -> str:
        """Refund an intent, fully when ``amount`` is None.

        Returns:
            The refund id
        """
        pass

    @abstractmethod
    def construct_webhook_event(self, payload: bytes, signature: str) -> WebhookEvent:
        """Verify a webhook signature and parse the event.

        Raises:
            ValueError: If the payload is not a valid event
        """
        pass


class EmailProvider(ABC):
    """Abstract base class for email delivery providers."""

    @abstractmethod
    def send(self, message: EmailMessage) -> str:
        """Send an email.

        Returns:
            Provider message id
        """
        pass
