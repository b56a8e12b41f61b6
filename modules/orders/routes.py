"""
Order API endpoints.

All endpoints require a bearer token and act on the caller's orders.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_order_service
from api.middleware.auth import RequestContext, RequireAuth
from api.request import get_pagination, json_body, parse_id
from api.responses import success
from shared.models import Pagination

from .interfaces import IOrderService
from .models import CreateOrderRequest, UpdateOrderStatusRequest

router = APIRouter()


@router.post("", status_code=201)
async def create_order(
    ctx: RequestContext = RequireAuth,
    body: CreateOrderRequest = Depends(json_body(CreateOrderRequest)),
    service: IOrderService = Depends(get_order_service),
) -> JSONResponse:
    """
    Place an order for the contents of the caller's cart.

    The order starts in 'pending' status with a 'pending' payment.
    """
    order = await service.create_order(ctx.user_id, body)
    ctx.logger.info("Order created", extra={"fields": {"order_id": order.id}})
    return success(order, status_code=201)


@router.get("")
async def list_orders(
    ctx: RequestContext = RequireAuth,
    pagination: Pagination = Depends(get_pagination),
    service: IOrderService = Depends(get_order_service),
) -> JSONResponse:
    """List the caller's orders, newest first."""
    return success(await service.list_orders(ctx.user_id, pagination))


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    ctx: RequestContext = RequireAuth,
    service: IOrderService = Depends(get_order_service),
) -> JSONResponse:
    """Get one of the caller's orders with its items."""
    return success(await service.get_order(parse_id(order_id, "order"), ctx.user_id))


@router.patch("/{order_id}/status")
async def update_order_status(
    order_id: str,
    ctx: RequestContext = RequireAuth,
    body: UpdateOrderStatusRequest = Depends(json_body(UpdateOrderStatusRequest)),
    service: IOrderService = Depends(get_order_service),
) -> JSONResponse:
    """Move one of the caller's orders to a new status."""
    order = await service.update_order_status(parse_id(order_id, "order"), ctx.user_id, body.status)
    return success(order)
