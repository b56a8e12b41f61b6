"""
Payments module exceptions.
"""

from shared.exceptions import BadRequestError, ForbiddenError, NotFoundError


class PaymentNotFoundError(NotFoundError):
    """Raised when a payment is not found."""

    def __init__(self, payment_id: str):
        super().__init__("Payment not found")
        self.payment_id = payment_id


class PaymentAccessDeniedError(ForbiddenError):
    """Raised when a user acts on another customer's payment."""

    def __init__(self, message: str = "You do not have access to this payment"):
        super().__init__(message)


class UnsupportedCurrencyError(BadRequestError):
    def __init__(self, currency: str, supported: list[str]):
        super().__init__(f"Unsupported currency: {currency}")
        self.with_detail(f"Supported currencies: {', '.join(supported)}")


class UnsupportedPaymentMethodError(BadRequestError):
    def __init__(self, method: str, supported: list[str]):
        super().__init__(f"Unsupported payment method: {method}")
        self.with_detail(f"Supported payment methods: {', '.join(supported)}")


class MissingPaymentTokenError(BadRequestError):
    """Raised when a card payment arrives without a payment method token."""

    def __init__(self):
        super().__init__("Token is required for card payments")


class InvalidPaymentStateError(BadRequestError):
    """Raised when confirming or refunding a payment in the wrong status."""

    def __init__(self, action: str, status: str):
        super().__init__(f"Cannot {action} a payment in status '{status}'")
