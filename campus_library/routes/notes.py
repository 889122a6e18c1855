"""
Campus Library Backend — Study Note Routes
============================================

What:  Class/subject study notes published as PDFs.

Filtering (GET /api/notes):
    ?class=BSCS&subject=Physics   active notes for that pair
    anything less                 every active note
"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.exceptions import ValidationError
from campus_library.schemas.common import ErrorResponse, SuccessResponse
from campus_library.schemas.note import NoteResponse, NoteUpdate
from campus_library.security import require_admin
from campus_library.services.file_service import DOCUMENT, file_service
from campus_library.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


@router.get("/notes", response_model=List[NoteResponse], summary="List active notes")
async def list_notes(
    student_class: Optional[str] = Query(None, alias="class"),
    subject: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db_session),
):
    return await note_service.list_active(db, student_class=student_class, subject=subject)


@router.get(
    "/admin/notes",
    response_model=List[NoteResponse],
    dependencies=[Depends(require_admin)],
    summary="List every note, inactive ones included",
)
async def list_all_notes(db: AsyncSession = Depends(get_db_session)):
    return await note_service.list(db)


@router.post(
    "/notes",
    response_model=NoteResponse,
    dependencies=[Depends(require_admin)],
    responses={400: {"description": "Missing or invalid PDF", "model": ErrorResponse}},
    summary="Publish a note (multipart with a pdf file)",
)
async def create_note(
    student_class: str = Form(..., alias="class"),
    subject: str = Form(...),
    title: str = Form(...),
    description: str = Form(""),
    status: str = Form("active"),
    pdf: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db_session),
):
    uploads = file_service.batch()
    try:
        pdf_path = await uploads.store(pdf, DOCUMENT)
        if not pdf_path:
            raise ValidationError(message="A PDF file is required", field="pdf")
        return await note_service.create(
            db,
            {
                "student_class": student_class,
                "subject": subject,
                "title": title,
                "description": description,
                "status": status,
                "pdf_path": pdf_path,
            },
        )
    except Exception:
        await uploads.discard()
        raise


@router.patch(
    "/notes/{note_id}",
    response_model=NoteResponse,
    dependencies=[Depends(require_admin)],
    summary="Edit note details",
)
async def update_note(note_id: UUID, payload: NoteUpdate, db: AsyncSession = Depends(get_db_session)):
    return await note_service.update(db, note_id, payload.model_dump(exclude_unset=True))


@router.patch(
    "/notes/{note_id}/toggle",
    response_model=NoteResponse,
    dependencies=[Depends(require_admin)],
    summary="Flip between active and inactive",
)
async def toggle_note(note_id: UUID, db: AsyncSession = Depends(get_db_session)):
    return await note_service.toggle_active(db, note_id)


@router.delete(
    "/notes/{note_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete a note",
)
async def delete_note(note_id: UUID, db: AsyncSession = Depends(get_db_session)):
    await note_service.delete(db, note_id)
    return SuccessResponse()
