"""
Campus Library Backend — Shared Column Definitions
====================================================

What:  Primary key and timestamp columns shared by every library table.
Why:   All entities are flat records with a generated UUID and UTC
       timestamps; declaring them once keeps the tables consistent.

Column types are the generic SQLAlchemy ones (Uuid, DateTime(timezone=True))
so the same models run on PostgreSQL in production and SQLite in tests.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UUIDPrimaryKeyMixin:
    # Non-sequential ids: can't enumerate records by guessing the next id
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )


class CreatedAtMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


class TimestampMixin(CreatedAtMixin):
    # Services stamp updated_at explicitly on every write
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
