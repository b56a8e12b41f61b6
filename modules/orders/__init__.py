"""
Orders module.

Turns a cart into an order and tracks its fulfilment status.
"""

from .interfaces import IOrderService
from .models import (
    Address,
    CreateOrderRequest,
    Order,
    OrderItem,
    OrderPaymentStatus,
    OrderStatus,
    UpdateOrderStatusRequest,
)
from .exceptions import (
    EmptyCartError,
    InsufficientStockError,
    OrderAccessDeniedError,
    OrderNotFoundError,
    ProductUnavailableError,
)

__all__ = [
    "IOrderService",
    "Address",
    "CreateOrderRequest",
    "Order",
    "OrderItem",
    "OrderPaymentStatus",
    "OrderStatus",
    "UpdateOrderStatusRequest",
    "EmptyCartError",
    "InsufficientStockError",
    "OrderAccessDeniedError",
    "OrderNotFoundError",
    "ProductUnavailableError",
]
