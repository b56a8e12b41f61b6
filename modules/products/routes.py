"""
Product API endpoints.

Catalog reads are public; creating and updating products requires a
bearer token.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_product_service
from api.middleware.auth import RequestContext, RequireAuth
from api.request import get_pagination, json_body, parse_id
from api.responses import success
from shared.models import Pagination

from .interfaces import IProductService
from .models import CreateProductRequest, UpdateProductRequest

router = APIRouter()


@router.post("", status_code=201)
async def create_product(
    ctx: RequestContext = RequireAuth,
    body: CreateProductRequest = Depends(json_body(CreateProductRequest)),
    service: IProductService = Depends(get_product_service),
) -> JSONResponse:
    """Add a product to the catalog in 'active' status."""
    product = await service.create_product(body)
    ctx.logger.info("Product created", extra={"fields": {"product_id": product.id}})
    return success(product, status_code=201)


@router.get("")
async def list_products(
    pagination: Pagination = Depends(get_pagination),
    service: IProductService = Depends(get_product_service),
) -> JSONResponse:
    """List products, newest first."""
    return success(await service.list_products(pagination))


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    service: IProductService = Depends(get_product_service),
) -> JSONResponse:
    """Get a single product."""
    return success(await service.get_product(parse_id(product_id, "product")))


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    ctx: RequestContext = RequireAuth,
    body: UpdateProductRequest = Depends(json_body(UpdateProductRequest)),
    service: IProductService = Depends(get_product_service),
) -> JSONResponse:
    """Update any subset of a product's fields, including its status."""
    product = await service.update_product(parse_id(product_id, "product"), body)
    return success(product)
