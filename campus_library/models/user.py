"""
Campus Library Backend — User and Profile Models
==================================================

What:  ORM models for the `users` and `profiles` tables.
Who:   UserService (registration, admin listing), AuthService (login),
       ProfileService (profile upsert).

Table Design Rationale:
    - email is unique: registration rejects a second account for the same address
    - password holds a bcrypt hash, never the plaintext
    - type is 'student' when a class was given at registration, else 'user'
    - is_admin lets a stored account act as admin; the configured secret-key
      admin login does not need a row here
    - profiles.user_id references users.id by value only (no FK cascade)
"""

import uuid
from typing import Optional

from sqlalchemy import Boolean, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from campus_library.database import Base
from campus_library.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class User(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A registered student or general library user."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    full_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    roll_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    department: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    student_class: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="user")
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', type='{self.type}')>"


class Profile(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Editable profile details, one row per session user id."""

    __tablename__ = "profiles"

    # Holds either a users.id or a library card application id
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, unique=True)
    full_name: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    roll_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    department: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    student_class: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="user")

    def __repr__(self) -> str:
        return f"<Profile(user_id={self.user_id}, full_name='{self.full_name}')>"
