"""
Cart API endpoints.

All endpoints act on the authenticated caller's cart.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_cart_service
from api.middleware.auth import RequestContext, RequireAuth
from api.request import json_body
from api.responses import success

from .interfaces import ICartService
from .models import AddItemRequest, UpdateQuantityRequest

router = APIRouter()


@router.post("", status_code=201)
async def create_cart(
    ctx: RequestContext = RequireAuth,
    service: ICartService = Depends(get_cart_service),
) -> JSONResponse:
    """Create an empty cart for the caller."""
    return success(await service.create_cart(ctx.user_id), status_code=201)


@router.get("")
async def get_cart(
    ctx: RequestContext = RequireAuth,
    service: ICartService = Depends(get_cart_service),
) -> JSONResponse:
    """Get the caller's cart with derived totals."""
    return success(await service.get_cart(ctx.user_id))


@router.post("/items")
async def add_item(
    ctx: RequestContext = RequireAuth,
    body: AddItemRequest = Depends(json_body(AddItemRequest)),
    service: ICartService = Depends(get_cart_service),
) -> JSONResponse:
    """
    Add a product line.

    Creates the cart on first use; replaces an existing line for the
    same product.
    """
    return success(await service.add_item(ctx.user_id, body))


@router.put("/items")
async def update_quantity(
    ctx: RequestContext = RequireAuth,
    body: UpdateQuantityRequest = Depends(json_body(UpdateQuantityRequest)),
    service: ICartService = Depends(get_cart_service),
) -> JSONResponse:
    """Change a line's quantity. A quantity of 0 removes the line."""
    return success(await service.update_quantity(ctx.user_id, body))
