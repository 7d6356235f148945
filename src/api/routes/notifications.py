"""Notification ingestion route."""

from fastapi import APIRouter, Depends

from api.dependencies.services import get_notification_service
from api.schemas.notification import NotificationAckResponse, NotificationRequest
from domain.services.notification_service import NotificationService

router = APIRouter(tags=["notifications"])


@router.post(
    "/notifications",
    response_model=NotificationAckResponse,
    summary="Ingest an activity notification",
    responses={
        200: {"description": "Notification acknowledged"},
        500: {"description": "Internal error while processing"},
    },
)
async def ingest_notification(
    body: NotificationRequest,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationAckResponse:
    """Acknowledge a notification, storing it when the sender has a profile."""
    receipt = await service.ingest(
        body.telegram_id,
        message=body.message,
        activity_type=body.activity_type,
        user_data=body.user_data,
        metadata=body.metadata,
    )
    return NotificationAckResponse(
        timestamp=receipt.timestamp,
        notification_id=receipt.notification_id,
    )
