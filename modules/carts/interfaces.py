"""
Carts module interface.
"""

from typing import Protocol, runtime_checkable

from .models import AddItemRequest, Cart, UpdateQuantityRequest


@runtime_checkable
class ICartService(Protocol):
    """
    Interface for cart operations.

    Every operation acts on the caller's own cart.
    """

    async def create_cart(self, user_id: str) -> Cart:
        """
        Create an empty cart.

        Raises:
            CartAlreadyExistsError: If the user already has a cart
        """
        ...

    async def get_cart(self, user_id: str) -> Cart:
        """
        Get the user's cart.

        Raises:
            CartNotFoundError: If the user has no cart
        """
        ...

    async def add_item(self, user_id: str, request: AddItemRequest) -> Cart:
        """
        Put a line in the cart, creating the cart first if needed.

        An existing line for the same product is replaced.
        """
        ...

    async def update_quantity(self, user_id: str, request: UpdateQuantityRequest) -> Cart:
        """
        Change a line's quantity; zero removes it.

        Raises:
            CartNotFoundError: If the user has no cart
            CartItemNotFoundError: If the product isn't in the cart
        """
        ...
