"""
Payment API endpoints.

The webhook endpoint is called by the payment provider and is
authenticated by its signature header instead of a bearer token.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.dependencies import get_payment_service
from api.middleware.auth import RequestContext, RequireAuth
from api.request import get_pagination, json_body
from api.responses import success
from shared.exceptions import BadRequestError
from shared.models import Pagination

from .interfaces import IPaymentService
from .models import CreatePaymentRequest

router = APIRouter()

SIGNATURE_HEADER = "Stripe-Signature"


@router.post("/webhook")
async def handle_webhook(
    request: Request,
    service: IPaymentService = Depends(get_payment_service),
) -> JSONResponse:
    """
    Receive a provider webhook event.

    The raw body is verified against the signature header before any
    event is applied.
    """
    signature = request.headers.get(SIGNATURE_HEADER)
    if not signature:
        raise BadRequestError("Missing Stripe-Signature header")

    payload = await request.body()
    return success(await service.process_webhook(payload, signature))


@router.post("", status_code=201)
async def create_payment(
    ctx: RequestContext = RequireAuth,
    body: CreatePaymentRequest = Depends(json_body(CreatePaymentRequest)),
    service: IPaymentService = Depends(get_payment_service),
) -> JSONResponse:
    """
    Start a payment for the caller.

    Returns the stored payment and the client secret needed to complete
    it client-side.
    """
    result = await service.create_payment(ctx.user_id, body)
    ctx.logger.info("Payment created", extra={"fields": {"payment_id": result.payment.id}})
    return success(result, status_code=201)


@router.get("")
async def list_payments(
    ctx: RequestContext = RequireAuth,
    pagination: Pagination = Depends(get_pagination),
    service: IPaymentService = Depends(get_payment_service),
) -> JSONResponse:
    """List the caller's payments, newest first."""
    return success(await service.list_payments(ctx.user_id, pagination))


@router.get("/{payment_id}")
async def get_payment(
    payment_id: str,
    ctx: RequestContext = RequireAuth,
    service: IPaymentService = Depends(get_payment_service),
) -> JSONResponse:
    return success(await service.get_payment(payment_id, ctx.user_id))


@router.post("/{payment_id}/confirm")
async def confirm_payment(
    payment_id: str,
    ctx: RequestContext = RequireAuth,
    service: IPaymentService = Depends(get_payment_service),
) -> JSONResponse:
    """Confirm a pending payment at the provider."""
    return success(await service.confirm_payment(payment_id, ctx.user_id))


@router.post("/{payment_id}/refund")
async def refund_payment(
    payment_id: str,
    ctx: RequestContext = RequireAuth,
    service: IPaymentService = Depends(get_payment_service),
) -> JSONResponse:
    """Fully refund a succeeded payment."""
    return success(await service.refund_payment(payment_id, ctx.user_id))
