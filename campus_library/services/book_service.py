"""
Campus Library Backend — Book Catalog and Borrowing Services
==============================================================

What:  Storage accessors for `books` and `book_borrows`.

Borrowing is a ledger kept by the admin desk: creating a borrow record does
not check or change the book's copy counts, and a record can name a book
id that no longer exists.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.exceptions import ValidationError
from campus_library.models.book import BORROW_STATUSES, Book, BookBorrow
from campus_library.models.mixins import utcnow
from campus_library.services.base import CrudService

logger = logging.getLogger(__name__)


class BookService(CrudService[Book]):
    model = Book
    resource = "book"

    def _check_copies(self, data: Dict[str, Any]) -> None:
        for key in ("total_copies", "available_copies"):
            if key in data and data[key] is not None and data[key] < 0:
                raise ValidationError(message=f"{key} cannot be negative", field=key)

    async def create(self, db: AsyncSession, data: Dict[str, Any]) -> Book:
        self._check_copies(data)
        return await super().create(db, data)

    async def update(self, db: AsyncSession, item_id: uuid.UUID, data: Dict[str, Any]) -> Book:
        self._check_copies(data)
        return await super().update(db, item_id, data)


class BorrowService(CrudService[BookBorrow]):
    model = BookBorrow
    resource = "book borrow"

    @staticmethod
    def _check_status(status: str) -> None:
        if status not in BORROW_STATUSES:
            raise ValidationError(
                message=f"Invalid status '{status}'. Must be one of: {', '.join(BORROW_STATUSES)}",
                field="status",
            )

    async def create(self, db: AsyncSession, data: Dict[str, Any]) -> BookBorrow:
        data = dict(data)
        self._check_status(data.get("status") or "borrowed")
        if not data.get("borrow_date"):
            data["borrow_date"] = utcnow()
        return await super().create(db, data)

    async def update_status(
        self,
        db: AsyncSession,
        borrow_id: uuid.UUID,
        status: str,
        return_date: Optional[datetime] = None,
    ) -> BookBorrow:
        """
        Move a borrow record between 'borrowed' and 'returned'.

        Marking returned stamps return_date (the given value, else now);
        moving back to borrowed clears it.
        """
        self._check_status(status)
        data: Dict[str, Any] = {"status": status}
        if status == "returned":
            data["return_date"] = return_date or utcnow()
        else:
            data["return_date"] = None
        return await self.update(db, borrow_id, data)

    async def mark_returned(self, db: AsyncSession, borrow_id: uuid.UUID) -> BookBorrow:
        return await self.update_status(db, borrow_id, "returned")


book_service = BookService()
borrow_service = BorrowService()
