"""
Campus Library Backend — Book Catalog Routes
==============================================

What:  Public catalog listing plus admin create/update/delete.
How:   Writes arrive as multipart forms so a cover image can ride along.
       `bookImage` is either an uploaded file (stored, its public path
       saved) or a path string that is saved as given.

Upload cleanup:
    Files stored for a request are removed again when the write fails,
    so a rejected form never leaves an orphaned cover on disk.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.exceptions import ValidationError
from campus_library.schemas.book import BookResponse
from campus_library.schemas.common import ErrorResponse, SuccessResponse
from campus_library.security import require_admin
from campus_library.services.book_service import book_service
from campus_library.services.file_service import IMAGE, file_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/books", tags=["Books"])

ADMIN_ERRORS = {
    400: {"description": "Invalid form data or upload", "model": ErrorResponse},
    403: {"description": "Admin session required", "model": ErrorResponse},
}


async def _save_book(request: Request, fields: Dict[str, Any], book_id: Optional[UUID], db: AsyncSession):
    form = await request.form()
    uploads = file_service.batch()
    try:
        image = await uploads.store_field(form.get("bookImage"), IMAGE)
        if image is not None:
            fields["book_image"] = image
        if book_id is None:
            return await book_service.create(db, fields)
        return await book_service.update(db, book_id, fields)
    except Exception:
        await uploads.discard()
        raise


@router.get("", response_model=List[BookResponse], summary="List books, newest first")
async def list_books(db: AsyncSession = Depends(get_db_session)):
    return await book_service.list(db)


@router.post(
    "",
    response_model=BookResponse,
    dependencies=[Depends(require_admin)],
    responses=ADMIN_ERRORS,
    summary="Add a book (multipart, optional bookImage)",
)
async def create_book(
    request: Request,
    book_name: str = Form(..., alias="bookName"),
    short_intro: str = Form(..., alias="shortIntro"),
    description: str = Form(...),
    total_copies: int = Form(1, alias="totalCopies"),
    available_copies: Optional[int] = Form(None, alias="availableCopies"),
    db: AsyncSession = Depends(get_db_session),
):
    if not book_name.strip():
        raise ValidationError(message="Book name is required", field="bookName")
    fields = {
        "book_name": book_name,
        "short_intro": short_intro,
        "description": description,
        "total_copies": total_copies,
        "available_copies": total_copies if available_copies is None else available_copies,
    }
    return await _save_book(request, fields, None, db)


@router.patch(
    "/{book_id}",
    response_model=BookResponse,
    dependencies=[Depends(require_admin)],
    responses={**ADMIN_ERRORS, 404: {"description": "Unknown book", "model": ErrorResponse}},
    summary="Update a book; every field is optional",
)
async def update_book(
    book_id: UUID,
    request: Request,
    book_name: Optional[str] = Form(None, alias="bookName"),
    short_intro: Optional[str] = Form(None, alias="shortIntro"),
    description: Optional[str] = Form(None),
    total_copies: Optional[int] = Form(None, alias="totalCopies"),
    available_copies: Optional[int] = Form(None, alias="availableCopies"),
    db: AsyncSession = Depends(get_db_session),
):
    submitted = {
        "book_name": book_name,
        "short_intro": short_intro,
        "description": description,
        "total_copies": total_copies,
        "available_copies": available_copies,
    }
    fields = {key: value for key, value in submitted.items() if value is not None}
    return await _save_book(request, fields, book_id, db)


@router.delete(
    "/{book_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete a book",
)
async def delete_book(book_id: UUID, db: AsyncSession = Depends(get_db_session)):
    await book_service.delete(db, book_id)
    return SuccessResponse()
