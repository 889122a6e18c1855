"""
Campus Library Backend — Notification Model
=============================================

What:  ORM model for `notifications`, the announcements feed.

type decides which fields must be present:
    text   → message
    image  → image
    both   → message and image
"""

from typing import Optional

from sqlalchemy import CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campus_library.database import Base
from campus_library.models.mixins import CreatedAtMixin, UUIDPrimaryKeyMixin

NOTIFICATION_TYPES = ("text", "image", "both")


class Notification(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "notifications"
    __table_args__ = (
        CheckConstraint("type IN ('text', 'image', 'both')", name="ck_notifications_type"),
    )

    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    type: Mapped[str] = mapped_column(String(10), nullable=False)

    def __repr__(self) -> str:
        return f"<Notification(id={self.id}, type='{self.type}')>"
