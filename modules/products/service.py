"""
Products service implementation.
"""

import logging

from shared.config import Settings
from shared.database import run_db
from shared.exceptions import DuplicateEntryError
from shared.models import PaginatedResponse, Pagination

from .exceptions import DuplicateSkuError, EmptyUpdateError, ProductNotFoundError
from .interfaces import IProductService
from .models import CreateProductRequest, Product, ProductStatus, UpdateProductRequest
from .repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService(IProductService):
    """
    Product service with Supabase backend.

    Implements IProductService protocol.
    """

    def __init__(self, repository: ProductRepository, settings: Settings):
        self._repository = repository
        self._timeout = settings.db_timeout_seconds

    async def create_product(self, request: CreateProductRequest) -> Product:
        data = {
            **request.model_dump(),
            "status": ProductStatus.ACTIVE,
        }
        try:
            product = await run_db(self._repository.create_product, data, timeout=self._timeout)
        except DuplicateEntryError as e:
            raise DuplicateSkuError(request.sku) from e

        logger.info("Created product %s (sku=%s)", product.id, product.sku)
        return product

    async def get_product(self, product_id: str) -> Product:
        product = await run_db(self._repository.get_by_id, product_id, timeout=self._timeout)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def update_product(self, product_id: str, request: UpdateProductRequest) -> Product:
        fields = request.model_dump(exclude_unset=True, exclude_none=True)
        if not fields:
            raise EmptyUpdateError()

        product = await run_db(
            self._repository.update_product, product_id, fields, timeout=self._timeout
        )
        if product is None:
            raise ProductNotFoundError(product_id)

        logger.info("Updated product %s fields=%s", product_id, sorted(fields))
        return product

    async def list_products(self, pagination: Pagination) -> PaginatedResponse[Product]:
        products, total = await run_db(
            self._repository.list_products, pagination, timeout=self._timeout
        )
        return PaginatedResponse[Product](
            items=products,
            total=total,
            page=pagination.page,
            page_size=pagination.page_size,
        )
