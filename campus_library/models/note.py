"""
Campus Library Backend — Study Note Model
===========================================

What:  ORM model for `notes`: PDF study material filed by class and subject.

Query Patterns:
    - Student browsing: WHERE status = 'active' AND class = :c AND subject = :s
      → idx_notes_class_subject
    - Admin listing: all notes, newest first
"""

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campus_library.database import Base
from campus_library.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin

ACTIVE_STATUSES = ("active", "inactive")


class Note(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """
    A study note PDF.

    Lifecycle:
        1. Uploaded by an admin (status defaults to 'active')
        2. Hidden / shown with the toggle endpoint (active ⇄ inactive)
        3. Edited via PATCH or removed via DELETE
    """

    __tablename__ = "notes"

    student_class: Mapped[str] = mapped_column("class", String(100), nullable=False)
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    pdf_path: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")

    __table_args__ = (
        Index("idx_notes_class_subject", "class", "subject"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}', status='{self.status}')>"
