"""Tests for payment API endpoints."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from api.dependencies import get_payment_service
from modules.payments.exceptions import PaymentNotFoundError
from modules.payments.models import CreatePaymentResponse, Payment, PaymentStatus, WebhookResult
from shared.exceptions import UnauthorizedError


@pytest.fixture
def mock_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_payment_service] = lambda: service
    return service


@pytest.fixture
def payment(test_user_id) -> Payment:
    now = datetime.now(timezone.utc)
    return Payment(
        id="pi_123",
        customer_id=test_user_id,
        amount=5000,
        currency="usd",
        payment_method="card",
        status=PaymentStatus.PENDING,
        created_at=now,
        updated_at=now,
    )


class TestWebhook:
    """Tests for POST /api/v1/payments/webhook"""

    def test_no_bearer_needed(self, client, mock_service):
        mock_service.process_webhook.return_value = WebhookResult(event_id="evt_1", event_type="payment_intent.succeeded")

        response = client.post(
            "/api/v1/payments/webhook",
            content=b'{"id": "evt_1"}',
            headers={"Stripe-Signature": "t=1,v1=abc"},
        )

        assert response.status_code == 200
        assert response.json()["data"] == {
            "received": True,
            "event_id": "evt_1",
            "event_type": "payment_intent.succeeded",
        }
        mock_service.process_webhook.assert_awaited_once_with(b'{"id": "evt_1"}', "t=1,v1=abc")

    def test_missing_signature(self, client, mock_service):
        response = client.post("/api/v1/payments/webhook", content=b"{}")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Missing Stripe-Signature header"
        mock_service.process_webhook.assert_not_called()

    def test_bad_signature(self, client, mock_service):
        mock_service.process_webhook.side_effect = UnauthorizedError("Webhook signature verification failed")

        response = client.post(
            "/api/v1/payments/webhook",
            content=b"{}",
            headers={"Stripe-Signature": "forged"},
        )

        assert response.status_code == 401


class TestCreatePayment:
    """Tests for POST /api/v1/payments"""

    def test_created(self, client, mock_service, auth_headers, payment, test_user_id):
        mock_service.create_payment.return_value = CreatePaymentResponse(
            payment=payment, client_secret="pi_123_secret", payment_status=PaymentStatus.PENDING
        )

        response = client.post(
            "/api/v1/payments",
            json={"amount": 5000, "currency": "usd", "payment_method": "card", "token": "pm_card_visa"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["client_secret"] == "pi_123_secret"
        assert data["payment_status"] == "pending"
        assert data["message"] == "Payment initiated successfully."
        assert mock_service.create_payment.call_args.args[0] == test_user_id

    def test_validation(self, client, mock_service, auth_headers):
        response = client.post(
            "/api/v1/payments",
            json={"amount": -5, "currency": "dollars", "payment_method": "card"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        details = response.json()["error"]["details"]
        assert "Field amount must be greater than 0" in details
        assert "Field currency must be at most 3 characters" in details

    def test_requires_auth(self, client, mock_service):
        response = client.post("/api/v1/payments", json={"amount": 1, "currency": "usd", "payment_method": "card"})
        assert response.status_code == 401


class TestReadPayments:
    def test_get(self, client, mock_service, auth_headers, payment, test_user_id):
        mock_service.get_payment.return_value = payment

        response = client.get("/api/v1/payments/pi_123", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["amount"] == 5000
        mock_service.get_payment.assert_awaited_once_with("pi_123", test_user_id)

    def test_not_found(self, client, mock_service, auth_headers):
        mock_service.get_payment.side_effect = PaymentNotFoundError("pi_x")
        response = client.get("/api/v1/payments/pi_x", headers=auth_headers)
        assert response.status_code == 404


class TestPaymentActions:
    def test_confirm(self, client, mock_service, auth_headers, payment):
        mock_service.confirm_payment.return_value = payment.model_copy(update={"status": PaymentStatus.SUCCEEDED})

        response = client.post("/api/v1/payments/pi_123/confirm", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "succeeded"

    def test_refund(self, client, mock_service, auth_headers, payment):
        mock_service.refund_payment.return_value = payment.model_copy(update={"status": PaymentStatus.REFUNDED})

        response = client.post("/api/v1/payments/pi_123/refund", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "refunded"
