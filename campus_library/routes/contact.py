"""Contact form routes: public submission, admin inbox."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.schemas.common import SuccessResponse
from campus_library.schemas.contact import ContactCreate, ContactMessageResponse, ContactSeenUpdate
from campus_library.security import require_admin
from campus_library.services.contact_service import contact_service

router = APIRouter(prefix="/api", tags=["Contact"])


@router.post("/contact", response_model=ContactMessageResponse, summary="Send a message to the library")
async def send_message(payload: ContactCreate, db: AsyncSession = Depends(get_db_session)):
    return await contact_service.create(db, payload.model_dump())


@router.get(
    "/contact-messages",
    response_model=List[ContactMessageResponse],
    dependencies=[Depends(require_admin)],
    summary="List contact messages",
)
async def list_messages(db: AsyncSession = Depends(get_db_session)):
    return await contact_service.list(db)


@router.patch(
    "/contact-messages/{message_id}/seen",
    response_model=ContactMessageResponse,
    dependencies=[Depends(require_admin)],
    summary="Mark a message read or unread",
)
async def set_seen(
    message_id: UUID,
    payload: ContactSeenUpdate,
    db: AsyncSession = Depends(get_db_session),
):
    return await contact_service.set_seen(db, message_id, payload.is_seen)


@router.delete(
    "/contact-messages/{message_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete a message",
)
async def delete_message(message_id: UUID, db: AsyncSession = Depends(get_db_session)):
    await contact_service.delete(db, message_id)
    return SuccessResponse()
