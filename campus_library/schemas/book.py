"""
Book catalog and borrowing schemas.

Books are written through multipart forms (see routes/books.py), so only
the response model lives here; borrows are plain JSON.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from campus_library.schemas.common import CamelModel


class BookResponse(CamelModel):
    id: uuid.UUID
    book_name: str
    short_intro: str
    description: str
    book_image: Optional[str] = None
    total_copies: int
    available_copies: int
    created_at: datetime
    updated_at: datetime


class BorrowCreate(CamelModel):
    user_id: uuid.UUID
    book_id: str
    book_title: str
    borrower_name: str
    borrower_phone: Optional[str] = None
    borrower_email: Optional[str] = None
    # Defaults to now when omitted
    borrow_date: Optional[datetime] = None
    due_date: datetime
    status: str = "borrowed"


class BorrowStatusUpdate(CamelModel):
    status: str
    return_date: Optional[datetime] = Field(
        default=None,
        description="Set when marking returned; defaults to now for status 'returned'",
    )


class BorrowResponse(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    book_id: str
    book_title: str
    borrower_name: str
    borrower_phone: Optional[str] = None
    borrower_email: Optional[str] = None
    borrow_date: datetime
    due_date: datetime
    return_date: Optional[datetime] = None
    status: str
    created_at: datetime
