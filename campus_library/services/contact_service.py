"""Contact form inbox: submissions from the public site, read-flagged by admins."""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.models.contact_message import ContactMessage
from campus_library.services.base import CrudService


class ContactService(CrudService[ContactMessage]):
    model = ContactMessage
    resource = "contact message"

    async def set_seen(self, db: AsyncSession, message_id: uuid.UUID, is_seen: bool) -> ContactMessage:
        return await self.update(db, message_id, {"is_seen": is_seen})


contact_service = ContactService()
