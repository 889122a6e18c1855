"""
Campus Library Backend — Library Card Application Service
===========================================================

What:  Applications for borrowing privileges and their admin review.

Workflow:
    1. Student applies (public): password hashed, card number generated,
       status 'pending'
    2. Admin sets status to 'approved' or 'rejected'
       Approval stamps issue_date and valid_through when they are unset
    3. Student logs in with card number + password (AuthService); only
       approved applications get a session
"""

import logging
import secrets
import uuid
from datetime import timedelta
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.config import settings
from campus_library.exceptions import ValidationError
from campus_library.models.library_card import CARD_STATUSES, LibraryCardApplication
from campus_library.models.mixins import utcnow
from campus_library.security import hash_password
from campus_library.services.base import CrudService

logger = logging.getLogger(__name__)


def generate_card_number() -> str:
    """e.g. GCMN-2024-04817"""
    year = utcnow().year
    return f"{settings.card_number_prefix}-{year}-{secrets.randbelow(100_000):05d}"


class LibraryCardService(CrudService[LibraryCardApplication]):
    model = LibraryCardApplication
    resource = "library card application"

    async def get_by_card_number(
        self, db: AsyncSession, card_number: str
    ) -> Optional[LibraryCardApplication]:
        result = await db.execute(
            select(LibraryCardApplication).where(LibraryCardApplication.card_number == card_number)
        )
        return result.scalar_one_or_none()

    async def apply(self, db: AsyncSession, data: Dict[str, Any]) -> LibraryCardApplication:
        """
        Record a new application.

        The stored status is always 'pending' whatever the body says; only an
        admin can approve. A supplied card number is kept, otherwise one is
        generated; the unique constraint turns a clash into a 400.
        """
        data = dict(data)
        password = data.pop("password", None)
        if password:
            data["password"] = hash_password(password)
        if not data.get("card_number"):
            data["card_number"] = generate_card_number()
        data["status"] = "pending"
        application = await self.create(db, data)
        logger.info(
            "Library card application %s received (card %s)",
            application.id,
            application.card_number,
        )
        return application

    async def update_status(
        self, db: AsyncSession, application_id: uuid.UUID, status: str
    ) -> LibraryCardApplication:
        if status not in CARD_STATUSES:
            raise ValidationError(
                message=f"Invalid status '{status}'. Must be one of: {', '.join(CARD_STATUSES)}",
                field="status",
            )
        application = await self.get_or_404(db, application_id)
        data: Dict[str, Any] = {"status": status}
        if status == "approved":
            today = utcnow().date()
            if application.issue_date is None:
                data["issue_date"] = today
            if application.valid_through is None:
                data["valid_through"] = today + timedelta(days=settings.card_validity_days)
        return await self.update(db, application_id, data)


library_card_service = LibraryCardService()
