"""Event routes: public listing, admin posting with up to ten photos."""

import datetime as dt
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.exceptions import ValidationError
from campus_library.schemas.common import SuccessResponse
from campus_library.schemas.event import EventResponse, EventUpdate
from campus_library.security import require_admin
from campus_library.services.event_service import event_service
from campus_library.services.file_service import IMAGE, file_service

MAX_EVENT_IMAGES = 10

router = APIRouter(prefix="/api/events", tags=["Events"])


@router.get("", response_model=List[EventResponse], summary="List events")
async def list_events(db: AsyncSession = Depends(get_db_session)):
    return await event_service.list(db)


@router.post(
    "",
    response_model=EventResponse,
    dependencies=[Depends(require_admin)],
    summary="Post an event (multipart, up to 10 images)",
)
async def create_event(
    title: str = Form(...),
    description: str = Form(...),
    date: Optional[dt.date] = Form(None),
    images: Optional[List[UploadFile]] = File(None),
    db: AsyncSession = Depends(get_db_session),
):
    if images and len(images) > MAX_EVENT_IMAGES:
        raise ValidationError(
            message=f"At most {MAX_EVENT_IMAGES} images can be attached to an event",
            field="images",
        )
    uploads = file_service.batch()
    try:
        paths = await uploads.store_many(images, IMAGE)
        return await event_service.create(
            db,
            {"title": title, "description": description, "date": date, "images": paths},
        )
    except Exception:
        await uploads.discard()
        raise


@router.patch(
    "/{event_id}",
    response_model=EventResponse,
    dependencies=[Depends(require_admin)],
    summary="Edit an event",
)
async def update_event(event_id: UUID, payload: EventUpdate, db: AsyncSession = Depends(get_db_session)):
    return await event_service.update(db, event_id, payload.model_dump(exclude_unset=True))


@router.delete(
    "/{event_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete an event",
)
async def delete_event(event_id: UUID, db: AsyncSession = Depends(get_db_session)):
    await event_service.delete(db, event_id)
    return SuccessResponse()
