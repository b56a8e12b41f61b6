"""Tests for the payments service."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import stripe

from modules.payments.exceptions import (
    InvalidPaymentStateError,
    MissingPaymentTokenError,
    PaymentAccessDeniedError,
    PaymentNotFoundError,
    UnsupportedCurrencyError,
    UnsupportedPaymentMethodError,
)
from modules.payments.models import CreatePaymentRequest, Payment, PaymentStatus
from modules.payments.service import PaymentService
from providers.base import PaymentIntent, WebhookEvent
from shared.exceptions import BadRequestError, ThirdPartyError, UnauthorizedError

USER_ID = "0b7c2f64-3c4e-4a8b-9d0e-1f2a3b4c5d6e"
OTHER_ID = "9f8e7d6c-5b4a-4392-8a1b-0c9d8e7f6a5b"


def _payment(status: PaymentStatus = PaymentStatus.PENDING, customer_id: str = USER_ID) -> Payment:
    now = datetime.now(timezone.utc)
    return Payment(
        id="pi_123",
        customer_id=customer_id,
        amount=5000,
        currency="usd",
        payment_method="card",
        status=status,
        created_at=now,
        updated_at=now,
    )


def _request(**overrides) -> CreatePaymentRequest:
    data = {"amount": 5000, "currency": "USD", "payment_method": "Card", "token": "pm_card_visa"}
    data.update(overrides)
    return CreatePaymentRequest(**data)


@pytest.fixture
def repository():
    repo = MagicMock()
    repo.create_payment.side_effect = lambda data: _payment()
    return repo


@pytest.fixture
def provider():
    provider = MagicMock()
    provider.create_payment_intent.return_value = PaymentIntent(
        id="pi_123", client_secret="pi_123_secret", status="requires_payment_method", amount=5000, currency="usd"
    )
    provider.retrieve_payment_method.return_value = "pm_456"
    return provider


@pytest.fixture
def service(repository, provider, test_settings):
    return PaymentService(repository=repository, provider=provider, settings=test_settings)


class TestCreatePaymentRequest:
    def test_normalizes_currency_and_method(self):
        request = _request()
        assert request.currency == "usd"
        assert request.payment_method == "card"

    def test_rejects_non_positive_amount(self):
        with pytest.raises(ValueError):
            _request(amount=0)


class TestCreatePayment:
    @pytest.mark.asyncio
    async def test_card_payment(self, service, provider, repository):
        result = await service.create_payment(USER_ID, _request(description="Order 1"))

        provider.create_payment_intent.assert_called_once_with(5000, "usd", "Order 1", USER_ID)
        provider.retrieve_payment_method.assert_called_once_with("pm_card_visa")
        provider.attach_payment_method.assert_called_once_with("pm_456", "pi_123")

        stored = repository.create_payment.call_args.args[0]
        assert stored["id"] == "pi_123"
        assert stored["customer_id"] == USER_ID
        assert stored["status"] == "pending"

        assert result.client_secret == "pi_123_secret"
        assert result.payment_status == PaymentStatus.PENDING
        assert result.message == "Payment initiated successfully."

    @pytest.mark.asyncio
    async def test_bank_transfer_needs_no_token(self, service, provider):
        await service.create_payment(USER_ID, _request(payment_method="bank_transfer", token=None))

        provider.create_payment_intent.assert_called_once()
        provider.retrieve_payment_method.assert_not_called()
        provider.attach_payment_method.assert_not_called()

    @pytest.mark.asyncio
    async def test_explicit_own_customer_id(self, service):
        result = await service.create_payment(USER_ID, _request(customer_id=USER_ID))
        assert result.payment.customer_id == USER_ID

    @pytest.mark.asyncio
    async def test_other_customer_forbidden(self, service, provider):
        with pytest.raises(PaymentAccessDeniedError):
            await service.create_payment(USER_ID, _request(customer_id=OTHER_ID))
        provider.create_payment_intent.assert_not_called()

    @pytest.mark.asyncio
    async def test_unsupported_currency(self, service, provider):
        with pytest.raises(UnsupportedCurrencyError) as exc_info:
            await service.create_payment(USER_ID, _request(currency="gbp"))
        assert exc_info.value.details == ["Supported currencies: inr, usd, eur"]
        provider.create_payment_intent.assert_not_called()

    @pytest.mark.asyncio
    async def test_unsupported_method(self, service):
        with pytest.raises(UnsupportedPaymentMethodError):
            await service.create_payment(USER_ID, _request(payment_method="crypto"))

    @pytest.mark.asyncio
    async def test_card_requires_token(self, service):
        with pytest.raises(MissingPaymentTokenError):
            await service.create_payment(USER_ID, _request(token=None))

    @pytest.mark.asyncio
    async def test_provider_failure(self, service, provider, repository):
        provider.create_payment_intent.side_effect = stripe.APIConnectionError("network down")

        with pytest.raises(ThirdPartyError) as exc_info:
            await service.create_payment(USER_ID, _request())

        assert exc_info.value.service == "stripe"
        assert exc_info.value.status_code == 500
        repository.create_payment.assert_not_called()


class TestGetPayment:
    @pytest.mark.asyncio
    async def test_not_found(self, service, repository):
        repository.get_by_id.return_value = None
        with pytest.raises(PaymentNotFoundError):
            await service.get_payment("pi_123", USER_ID)

    @pytest.mark.asyncio
    async def test_other_customer(self, service, repository):
        repository.get_by_id.return_value = _payment(customer_id=OTHER_ID)
        with pytest.raises(PaymentAccessDeniedError):
            await service.get_payment("pi_123", USER_ID)


class TestConfirmAndRefund:
    @pytest.mark.asyncio
    async def test_confirm_maps_intent_status(self, service, repository, provider):
        repository.get_by_id.return_value = _payment()
        provider.confirm_payment_intent.return_value = PaymentIntent(id="pi_123", status="succeeded")
        repository.update_status.return_value = _payment(PaymentStatus.SUCCEEDED)

        payment = await service.confirm_payment("pi_123", USER_ID)

        repository.update_status.assert_called_once_with("pi_123", PaymentStatus.SUCCEEDED)
        assert payment.status == PaymentStatus.SUCCEEDED

    @pytest.mark.asyncio
    async def test_confirm_still_processing(self, service, repository, provider):
        repository.get_by_id.return_value = _payment()
        provider.confirm_payment_intent.return_value = PaymentIntent(id="pi_123", status="processing")

        payment = await service.confirm_payment("pi_123", USER_ID)

        assert payment.status == PaymentStatus.PENDING
        repository.update_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_confirm_requires_pending(self, service, repository, provider):
        repository.get_by_id.return_value = _payment(PaymentStatus.SUCCEEDED)

        with pytest.raises(InvalidPaymentStateError):
            await service.confirm_payment("pi_123", USER_ID)
        provider.confirm_payment_intent.assert_not_called()

    @pytest.mark.asyncio
    async def test_refund(self, service, repository, provider):
        repository.get_by_id.return_value = _payment(PaymentStatus.SUCCEEDED)
        repository.update_status.return_value = _payment(PaymentStatus.REFUNDED)

        payment = await service.refund_payment("pi_123", USER_ID)

        provider.refund_payment.assert_called_once_with("pi_123")
        assert payment.status == PaymentStatus.REFUNDED

    @pytest.mark.asyncio
    async def test_refund_requires_succeeded(self, service, repository, provider):
        repository.get_by_id.return_value = _payment(PaymentStatus.PENDING)

        with pytest.raises(InvalidPaymentStateError, match="Cannot refund"):
            await service.refund_payment("pi_123", USER_ID)
        provider.refund_payment.assert_not_called()


class TestProcessWebhook:
    @pytest.mark.asyncio
    async def test_intent_succeeded(self, service, provider, repository):
        provider.construct_webhook_event.return_value = WebhookEvent(
            id="evt_1", type="payment_intent.succeeded", data={"id": "pi_123"}
        )
        repository.update_status.return_value = _payment(PaymentStatus.SUCCEEDED)

        result = await service.process_webhook(b"{}", "sig")

        provider.construct_webhook_event.assert_called_once_with(b"{}", "sig")
        repository.update_status.assert_called_once_with("pi_123", PaymentStatus.SUCCEEDED)
        assert result.received is True
        assert result.event_id == "evt_1"

    @pytest.mark.asyncio
    async def test_intent_failed(self, service, provider, repository):
        provider.construct_webhook_event.return_value = WebhookEvent(
            id="evt_2", type="payment_intent.payment_failed", data={"id": "pi_123"}
        )

        await service.process_webhook(b"{}", "sig")

        repository.update_status.assert_called_once_with("pi_123", PaymentStatus.FAILED)

    @pytest.mark.asyncio
    async def test_charge_refunded_uses_payment_intent(self, service, provider, repository):
        provider.construct_webhook_event.return_value = WebhookEvent(
            id="evt_3", type="charge.refunded", data={"id": "ch_1", "payment_intent": "pi_123"}
        )

        await service.process_webhook(b"{}", "sig")

        repository.update_status.assert_called_once_with("pi_123", PaymentStatus.REFUNDED)

    @pytest.mark.asyncio
    async def test_unhandled_event_ignored(self, service, provider, repository):
        provider.construct_webhook_event.return_value = WebhookEvent(
            id="evt_4", type="customer.created", data={"id": "cus_1"}
        )

        result = await service.process_webhook(b"{}", "sig")

        assert result.event_type == "customer.created"
        repository.update_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_payment_acknowledged(self, service, provider, repository):
        provider.construct_webhook_event.return_value = WebhookEvent(
            id="evt_5", type="payment_intent.succeeded", data={"id": "pi_unknown"}
        )
        repository.update_status.return_value = None

        result = await service.process_webhook(b"{}", "sig")

        assert result.received is True

    @pytest.mark.asyncio
    async def test_missing_intent_id(self, service, provider):
        provider.construct_webhook_event.return_value = WebhookEvent(
            id="evt_6", type="charge.refunded", data={"id": "ch_1"}
        )

        with pytest.raises(BadRequestError, match="Missing payment intent ID in webhook"):
            await service.process_webhook(b"{}", "sig")

    @pytest.mark.asyncio
    async def test_bad_signature(self, service, provider):
        provider.construct_webhook_event.side_effect = stripe.SignatureVerificationError("bad", "sig")

        with pytest.raises(UnauthorizedError):
            await service.process_webhook(b"{}", "sig")

    @pytest.mark.asyncio
    async def test_bad_payload(self, service, provider):
        provider.construct_webhook_event.side_effect = ValueError("not json")

        with pytest.raises(BadRequestError, match="Invalid webhook payload"):
            await service.process_webhook(b"{}", "sig")
