"""
Notification API endpoints.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_notification_service
from api.middleware.auth import RequestContext, RequireAuth
from api.request import get_pagination, json_body, parse_id
from api.responses import success
from shared.models import Pagination

from .interfaces import INotificationService
from .models import EmailNotificationRequest

router = APIRouter()


@router.post("/email", status_code=201)
async def send_email(
    ctx: RequestContext = RequireAuth,
    body: EmailNotificationRequest = Depends(json_body(EmailNotificationRequest)),
    service: INotificationService = Depends(get_notification_service),
) -> JSONResponse:
    """
    Send an email.

    A failed send is still recorded, with status 'failed'.
    """
    result = await service.send_email(ctx.user_id, body)
    return success(result, status_code=201)


@router.get("")
async def list_notifications(
    ctx: RequestContext = RequireAuth,
    pagination: Pagination = Depends(get_pagination),
    service: INotificationService = Depends(get_notification_service),
) -> JSONResponse:
    """List the caller's notifications, newest first."""
    return success(await service.list_notifications(ctx.user_id, pagination))


@router.get("/{notification_id}")
async def get_notification(
    notification_id: str,
    ctx: RequestContext = RequireAuth,
    service: INotificationService = Depends(get_notification_service),
) -> JSONResponse:
    notification_id = parse_id(notification_id, "notification")
    return success(await service.get_notification(notification_id, ctx.user_id))
