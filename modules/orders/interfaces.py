"""
Orders module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import PaginatedResponse, Pagination

from .models import CreateOrderRequest, Order, OrderStatus


@runtime_checkable
class IOrderService(Protocol):
    """
    Interface for order operations.

    All operations are scoped to the calling customer.
    """

    async def create_order(self, user_id: str, request: CreateOrderRequest) -> Order:
        """
        Place an order for the contents of the user's cart.

        Lines are priced from the catalog and stock is checked and
        decremented. The cart is emptied once the order is stored.

        Raises:
            CartNotFoundError: If the user has no cart
            EmptyCartError: If the cart has no items
            ProductNotFoundError: If a line's product no longer exists
            ProductUnavailableError: If a line's product is not active
            InsufficientStockError: If a line exceeds available stock
        """
        ...

    async def get_order(self, order_id: str, user_id: str) -> Order:
        """
        Get an order with its items.

        Raises:
            OrderNotFoundError: If the order doesn't exist
            OrderAccessDeniedError: If the order belongs to someone else
        """
        ...

    async def list_orders(self, user_id: str, pagination: Pagination) -> PaginatedResponse[Order]:
        """List the user's orders, newest first."""
        ...

    async def update_order_status(self, order_id: str, user_id: str, status: OrderStatus) -> Order:
        """
        Move an order to a new status.

        Raises:
            OrderNotFoundError: If the order doesn't exist
            OrderAccessDeniedError: If the order belongs to someone else
        """
        ...
