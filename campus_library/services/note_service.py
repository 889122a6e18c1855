"""
Campus Library Backend — Study Note Service
=============================================

What:  Storage accessor for study note PDFs.

Visibility:
    Students only ever see 'active' notes, either all of them or the ones
    filed under one class and subject. Admins list everything and flip a
    note between active and inactive with toggle_active().
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.models.note import Note
from campus_library.services.base import ActiveStatusService


class NoteService(ActiveStatusService[Note]):
    model = Note
    resource = "note"

    async def list_active(
        self,
        db: AsyncSession,
        student_class: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> List[Note]:
        """
        Active notes, narrowed to one class and subject when both are given.

        A single filter on its own is ignored and all active notes are returned.
        """
        criteria = [Note.status == "active"]
        if student_class and subject:
            criteria += [Note.student_class == student_class, Note.subject == subject]
        return await self.list(db, *criteria)


note_service = NoteService()
