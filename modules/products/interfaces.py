"""
Products module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import PaginatedResponse, Pagination

from .models import CreateProductRequest, Product, UpdateProductRequest


@runtime_checkable
class IProductService(Protocol):
    """
    Interface for catalog operations.

    This protocol defines the contract that the products module exposes
    to the API layer.
    """

    async def create_product(self, request: CreateProductRequest) -> Product:
        """
        Add a product in ACTIVE status.

        Raises:
            DuplicateSkuError: If the SKU is already used
        """
        ...

    async def get_product(self, product_id: str) -> Product:
        """
        Get a product by ID.

        Raises:
            ProductNotFoundError: If the product doesn't exist
        """
        ...

    async def update_product(self, product_id: str, request: UpdateProductRequest) -> Product:
        """
        Apply a partial update.

        Raises:
            ProductNotFoundError: If the product doesn't exist
            EmptyUpdateError: If no field is set
        """
        ...

    async def list_products(self, pagination: Pagination) -> PaginatedResponse[Product]:
        """List products, newest first."""
        ...
