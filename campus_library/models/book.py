"""
Campus Library Backend — Book and Borrow Models
=================================================

What:  ORM models for the circulating catalog (`books`) and the borrowing
       ledger (`book_borrows`).

Borrow records reference a book and a user by id only. There is no foreign
key, so deleting a book leaves its borrow history intact, and copy counts
are maintained by the admin, not derived from the ledger.

Borrow status lifecycle:
    borrowed ──(PATCH /status or /return)──▶ returned
    returned ──(PATCH /status)─────────────▶ borrowed   (admin correction)
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from campus_library.database import Base
from campus_library.models.mixins import (
    CreatedAtMixin,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
    utcnow,
)

BORROW_STATUSES = ("borrowed", "returned")


class Book(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A title in the circulating collection."""

    __tablename__ = "books"

    book_name: Mapped[str] = mapped_column(Text, nullable=False)
    short_intro: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # Public upload path, e.g. /server/uploads/2024/01/15/<uuid>.jpg
    book_image: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    total_copies: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    available_copies: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, book_name='{self.book_name}')>"


class BookBorrow(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    """One lending of a book to a borrower."""

    __tablename__ = "book_borrows"

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    book_id: Mapped[str] = mapped_column(String(64), nullable=False)
    # Denormalized so the ledger still reads correctly after a book is deleted
    book_title: Mapped[str] = mapped_column(Text, nullable=False)
    borrower_name: Mapped[str] = mapped_column(Text, nullable=False)
    borrower_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    borrower_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    borrow_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    due_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    return_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="borrowed")

    __table_args__ = (
        Index("idx_book_borrows_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<BookBorrow(id={self.id}, book_title='{self.book_title}', status='{self.status}')>"
