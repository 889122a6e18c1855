"""
Campus Library Backend — Rare Book Archive Routes
===================================================

What:  Scanned rare books (PDF plus cover image).
Who:   Students browse the active ones; admins upload, hide and delete.
"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.exceptions import ValidationError
from campus_library.schemas.common import ErrorResponse, SuccessResponse
from campus_library.schemas.rare_book import RareBookResponse
from campus_library.security import require_admin
from campus_library.services.file_service import DOCUMENT, IMAGE, file_service
from campus_library.services.rare_book_service import rare_book_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Rare Books"])


@router.get("/rare-books", response_model=List[RareBookResponse], summary="List active rare books")
async def list_rare_books(db: AsyncSession = Depends(get_db_session)):
    return await rare_book_service.list_active(db)


@router.get(
    "/admin/rare-books",
    response_model=List[RareBookResponse],
    dependencies=[Depends(require_admin)],
    summary="List every rare book, hidden ones included",
)
async def list_all_rare_books(db: AsyncSession = Depends(get_db_session)):
    return await rare_book_service.list(db)


@router.post(
    "/rare-books",
    response_model=RareBookResponse,
    dependencies=[Depends(require_admin)],
    responses={400: {"description": "Missing or invalid upload", "model": ErrorResponse}},
    summary="Upload a rare book (multipart: pdf and cover files)",
)
async def create_rare_book(
    title: str = Form(...),
    description: str = Form(...),
    category: str = Form("General"),
    status: str = Form("active"),
    pdf: Optional[UploadFile] = File(None),
    cover: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db_session),
):
    uploads = file_service.batch()
    try:
        pdf_path = await uploads.store(pdf, DOCUMENT)
        cover_path = await uploads.store(cover, IMAGE)
        if not pdf_path:
            raise ValidationError(message="A PDF file is required", field="pdf")
        if not cover_path:
            raise ValidationError(message="A cover image is required", field="cover")
        return await rare_book_service.create(
            db,
            {
                "title": title,
                "description": description,
                "category": category or "General",
                "status": status,
                "pdf_path": pdf_path,
                "cover_image": cover_path,
            },
        )
    except Exception:
        await uploads.discard()
        raise


@router.patch(
    "/rare-books/{rare_book_id}/toggle",
    response_model=RareBookResponse,
    dependencies=[Depends(require_admin)],
    summary="Flip between active and inactive",
)
async def toggle_rare_book(rare_book_id: UUID, db: AsyncSession = Depends(get_db_session)):
    return await rare_book_service.toggle_active(db, rare_book_id)


@router.delete(
    "/rare-books/{rare_book_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete a rare book",
)
async def delete_rare_book(rare_book_id: UUID, db: AsyncSession = Depends(get_db_session)):
    await rare_book_service.delete(db, rare_book_id)
    return SuccessResponse()
