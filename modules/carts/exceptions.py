"""
Carts module exceptions.
"""

from shared.exceptions import DuplicateEntryError, NotFoundError


class CartNotFoundError(NotFoundError):
    """Raised when the user has no cart."""

    def __init__(self, user_id: str):
        super().__init__("Cart not found")
        self.user_id = user_id


class CartAlreadyExistsError(DuplicateEntryError):
    """Raised when creating a second cart for a user."""

    def __init__(self, user_id: str):
        super().__init__("Cart already exists for this user")
        self.user_id = user_id


class CartItemNotFoundError(NotFoundError):
    """Raised when updating a product that isn't in the cart."""

    def __init__(self, product_id: str):
        super().__init__("Item not found in the cart")
        self.product_id = product_id
