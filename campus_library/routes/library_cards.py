"""
Campus Library Backend — Library Card Routes
==============================================

What:  Public application form plus the admin review queue.

    POST   /api/library-card/apply                       public
    GET    /api/library-card/applications                admin
    PATCH  /api/library-card/applications/{id}/status    admin
    DELETE /api/library-card/applications/{id}           admin
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.schemas.common import ErrorResponse, SuccessResponse
from campus_library.schemas.library_card import (
    CardApplicationCreate,
    CardApplicationResponse,
    CardStatusUpdate,
)
from campus_library.security import require_admin
from campus_library.services.library_card_service import library_card_service

router = APIRouter(prefix="/api/library-card", tags=["Library Cards"])


@router.get(
    "/applications",
    response_model=List[CardApplicationResponse],
    dependencies=[Depends(require_admin)],
    summary="List card applications",
)
async def list_applications(db: AsyncSession = Depends(get_db_session)):
    return await library_card_service.list(db)


@router.post(
    "/apply",
    response_model=CardApplicationResponse,
    responses={400: {"description": "Missing fields or card number taken", "model": ErrorResponse}},
    summary="Apply for a library card",
)
async def apply(payload: CardApplicationCreate, db: AsyncSession = Depends(get_db_session)):
    return await library_card_service.apply(db, payload.model_dump())


@router.patch(
    "/applications/{application_id}/status",
    response_model=CardApplicationResponse,
    dependencies=[Depends(require_admin)],
    responses={
        400: {"description": "Unknown status value", "model": ErrorResponse},
        404: {"description": "Unknown application", "model": ErrorResponse},
    },
    summary="Approve, reject or reset an application",
)
async def update_status(
    application_id: UUID,
    payload: CardStatusUpdate,
    db: AsyncSession = Depends(get_db_session),
):
    return await library_card_service.update_status(db, application_id, payload.status)


@router.delete(
    "/applications/{application_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete an application",
)
async def delete_application(application_id: UUID, db: AsyncSession = Depends(get_db_session)):
    await library_card_service.delete(db, application_id)
    return SuccessResponse()
