"""
Products module exceptions.
"""

from shared.exceptions import BadRequestError, DuplicateEntryError, NotFoundError


class ProductNotFoundError(NotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id: str):
        super().__init__("Product not found")
        self.product_id = product_id


class DuplicateSkuError(DuplicateEntryError):
    """Raised when a SKU is already used by another product."""

    def __init__(self, sku: str):
        super().__init__(f"Product with SKU {sku} already exists")
        self.sku = sku


class EmptyUpdateError(BadRequestError):
    """Raised when an update request carries no fields."""

    def __init__(self):
        super().__init__("No fields to update")
