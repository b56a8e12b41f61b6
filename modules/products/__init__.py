"""
Products module.

Handles the product catalog.
"""

from .interfaces import IProductService
from .models import CreateProductRequest, Product, ProductStatus, UpdateProductRequest
from .exceptions import DuplicateSkuError, EmptyUpdateError, ProductNotFoundError

__all__ = [
    "IProductService",
    "Product",
    "ProductStatus",
    "CreateProductRequest",
    "UpdateProductRequest",
    "ProductNotFoundError",
    "DuplicateSkuError",
    "EmptyUpdateError",
]
