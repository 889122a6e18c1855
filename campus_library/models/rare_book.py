"""
Campus Library Backend — Rare Book Model
==========================================

What:  ORM model for `rare_books`, the archival PDF collection.

Unlike circulating books, a rare book is a scanned PDF with a cover image.
Admins hide or show an entry by toggling status between 'active' and
'inactive'; the public listing only returns active entries.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campus_library.database import Base
from campus_library.models.mixins import CreatedAtMixin, UUIDPrimaryKeyMixin


class RareBook(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "rare_books"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, default="General")
    pdf_path: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    cover_image: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")

    def __repr__(self) -> str:
        return f"<RareBook(id={self.id}, title='{self.title}', status='{self.status}')>"
