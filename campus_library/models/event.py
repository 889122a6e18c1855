"""
Campus Library Backend — Event Model
======================================

What:  ORM model for `events` (library activities shown on the public site).

images is a JSON list of upload paths instead of a PostgreSQL ARRAY so the
model also runs on SQLite.
"""

import datetime as dt
from typing import List, Optional

from sqlalchemy import JSON, Date, Text
from sqlalchemy.orm import Mapped, mapped_column

from campus_library.database import Base
from campus_library.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Event(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "events"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    images: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title='{self.title}')>"
