"""Rare book archive service: listing, creation and hide/show toggling."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.models.rare_book import RareBook
from campus_library.services.base import ActiveStatusService


class RareBookService(ActiveStatusService[RareBook]):
    model = RareBook
    resource = "rare book"

    async def list_active(self, db: AsyncSession) -> List[RareBook]:
        return await self.list(db, RareBook.status == "active")


rare_book_service = RareBookService()
