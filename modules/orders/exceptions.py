"""
Orders module exceptions.
"""

from shared.exceptions import BadRequestError, ForbiddenError, NotFoundError


class OrderNotFoundError(NotFoundError):
    """Raised when an order is not found."""

    def __init__(self, order_id: str):
        super().__init__("Order not found")
        self.order_id = order_id


class OrderAccessDeniedError(ForbiddenError):
    """Raised when a user accesses someone else's order."""

    def __init__(self, order_id: str, user_id: str):
        super().__init__("You do not have access to this order")
        self.order_id = order_id
        self.user_id = user_id


class EmptyCartError(BadRequestError):
    """Raised when placing an order from a cart with no items."""

    def __init__(self):
        super().__init__("Cart is empty")


class ProductUnavailableError(BadRequestError):
    """Raised when a cart line refers to a product that is not for sale."""

    def __init__(self, product_id: str):
        super().__init__("Product is not available")
        self.product_id = product_id
        self.with_detail(f"Product {product_id} is not active")


class InsufficientStockError(BadRequestError):
    """Raised when a cart line asks for more than is in stock."""

    def __init__(self, product_id: str, requested: int, available: int):
        super().__init__("Insufficient stock")
        self.product_id = product_id
        self.with_detail(f"Product {product_id}: requested {requested}, available {available}")
