"""
Carts module.

One cart per user, created lazily on first add.
"""

from .interfaces import ICartService
from .models import AddItemRequest, Cart, CartItem, UpdateQuantityRequest
from .exceptions import CartAlreadyExistsError, CartItemNotFoundError, CartNotFoundError

__all__ = [
    "ICartService",
    "Cart",
    "CartItem",
    "AddItemRequest",
    "UpdateQuantityRequest",
    "CartNotFoundError",
    "CartAlreadyExistsError",
    "CartItemNotFoundError",
]
