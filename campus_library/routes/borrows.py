"""
Campus Library Backend — Book Borrow Routes
=============================================

What:  The admin desk's borrow ledger. Every route requires an admin session.

Status transitions:
    PATCH /{id}/status   {"status": "returned", "returnDate"?: ...}
    PATCH /{id}/return   shortcut for returned-now
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.schemas.book import BorrowCreate, BorrowResponse, BorrowStatusUpdate
from campus_library.schemas.common import SuccessResponse
from campus_library.security import require_admin
from campus_library.services.book_service import borrow_service

router = APIRouter(
    prefix="/api/book-borrows",
    tags=["Borrows"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=List[BorrowResponse], summary="List borrow records")
async def list_borrows(db: AsyncSession = Depends(get_db_session)):
    return await borrow_service.list(db)


@router.post("", response_model=BorrowResponse, summary="Record a borrow")
async def create_borrow(payload: BorrowCreate, db: AsyncSession = Depends(get_db_session)):
    return await borrow_service.create(db, payload.model_dump())


@router.patch("/{borrow_id}/status", response_model=BorrowResponse, summary="Set borrow status")
async def update_borrow_status(
    borrow_id: UUID,
    payload: BorrowStatusUpdate,
    db: AsyncSession = Depends(get_db_session),
):
    return await borrow_service.update_status(db, borrow_id, payload.status, payload.return_date)


@router.patch("/{borrow_id}/return", response_model=BorrowResponse, summary="Mark returned now")
async def return_borrow(borrow_id: UUID, db: AsyncSession = Depends(get_db_session)):
    return await borrow_service.mark_returned(db, borrow_id)


@router.delete("/{borrow_id}", response_model=SuccessResponse, summary="Delete a borrow record")
async def delete_borrow(borrow_id: UUID, db: AsyncSession = Depends(get_db_session)):
    await borrow_service.delete(db, borrow_id)
    return SuccessResponse()
