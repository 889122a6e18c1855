"""
Campus Library Backend — Contact Message Model
================================================

What:  ORM model for `contact_messages` submitted through the public contact form.
"""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campus_library.database import Base
from campus_library.models.mixins import CreatedAtMixin, UUIDPrimaryKeyMixin


class ContactMessage(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "contact_messages"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    # Admin inbox read flag
    is_seen: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<ContactMessage(id={self.id}, subject='{self.subject}', seen={self.is_seen})>"
