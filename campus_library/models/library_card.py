"""
Campus Library Backend — Library Card Application Model
=========================================================

What:  ORM model for `library_card_applications`.

An application doubles as the login account for library-card holders:
the student signs in with `card_number` plus the password chosen when
applying. Only applications whose status is 'approved' may open a session.

Status lifecycle (admin driven):
    pending ──▶ approved
       │    └─▶ rejected
       └─ any status can be set again by an admin
"""

import uuid
from datetime import date
from typing import Optional

from sqlalchemy import Date, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from campus_library.database import Base
from campus_library.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin

CARD_STATUSES = ("pending", "approved", "rejected")


class LibraryCardApplication(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "library_card_applications"

    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid(as_uuid=True), nullable=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    father_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    dob: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    # "class" is a Python keyword; the column keeps the public name
    student_class: Mapped[str] = mapped_column("class", String(100), nullable=False)
    field: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    roll_no: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    address_street: Mapped[str] = mapped_column(Text, nullable=False)
    address_city: Mapped[str] = mapped_column(Text, nullable=False)
    address_state: Mapped[str] = mapped_column(Text, nullable=False)
    address_zip: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    card_number: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, unique=True, index=True)
    student_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    issue_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    valid_through: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    # bcrypt hash; never serialized
    password: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self) -> str:
        return (
            f"<LibraryCardApplication(id={self.id}, card_number='{self.card_number}', "
            f"status='{self.status}')>"
        )
