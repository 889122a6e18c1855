"""
Notification routes.

POST takes a multipart form; `image` may be an uploaded file or a path to
an image that is already stored. NotificationService checks the content
against the type (text, image, both).
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.schemas.common import ErrorResponse, SuccessResponse
from campus_library.schemas.notification import NotificationResponse
from campus_library.security import require_admin
from campus_library.services.file_service import IMAGE, file_service
from campus_library.services.notification_service import notification_service

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@router.get("", response_model=List[NotificationResponse], summary="List notifications")
async def list_notifications(db: AsyncSession = Depends(get_db_session)):
    return await notification_service.list(db)


@router.post(
    "",
    response_model=NotificationResponse,
    dependencies=[Depends(require_admin)],
    responses={400: {"description": "Content does not match type", "model": ErrorResponse}},
    summary="Publish a notification",
)
async def create_notification(
    request: Request,
    title: Optional[str] = Form(None),
    message: Optional[str] = Form(None),
    type: str = Form("text"),
    db: AsyncSession = Depends(get_db_session),
):
    form = await request.form()
    uploads = file_service.batch()
    try:
        image = await uploads.store_field(form.get("image"), IMAGE)
        return await notification_service.create(
            db, {"title": title, "message": message, "type": type, "image": image}
        )
    except Exception:
        await uploads.discard()
        raise


@router.delete(
    "/{notification_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete a notification",
)
async def delete_notification(notification_id: UUID, db: AsyncSession = Depends(get_db_session)):
    await notification_service.delete(db, notification_id)
    return SuccessResponse()
