"""
Campus Library Backend — User and Profile Services
====================================================

What:  Registered-user accounts and the per-session profile record.

Profile ownership:
    The profile key is the session's user id, which is either a users.id or
    a library card application id. Both are UUIDs; any other session value
    (the configured admin's "admin") has no profile.
"""

import logging
import uuid
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.exceptions import ValidationError
from campus_library.models.mixins import utcnow
from campus_library.models.user import Profile, User
from campus_library.security import hash_password
from campus_library.services.base import CrudService

logger = logging.getLogger(__name__)


def parse_uuid(value: Optional[str]) -> Optional[uuid.UUID]:
    """Session ids arrive as strings; returns None for anything not a UUID."""
    if not value:
        return None
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class UserService(CrudService[User]):
    model = User
    resource = "user"

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def register(self, db: AsyncSession, data: Dict[str, Any]) -> User:
        """
        Create an account from the registration form.

        type is 'student' when a class was given, otherwise 'user'.

        Raises:
            ValidationError("Email already registered") for a taken email.
        """
        data = dict(data)
        if await self.get_by_email(db, data["email"]) is not None:
            raise ValidationError(message="Email already registered", field="email")

        data["password"] = hash_password(data["password"])
        data["type"] = "student" if data.get("student_class") else "user"
        data["is_admin"] = False
        user = await self.create(db, data)
        logger.info("Registered %s account %s", user.type, user.id)
        return user


class ProfileService(CrudService[Profile]):
    model = Profile
    resource = "profile"

    async def get_for_user(self, db: AsyncSession, user_id: str) -> Optional[Profile]:
        owner = parse_uuid(user_id)
        if owner is None:
            return None
        result = await db.execute(select(Profile).where(Profile.user_id == owner))
        return result.scalar_one_or_none()

    async def upsert(self, db: AsyncSession, user_id: str, data: Dict[str, Any]) -> Profile:
        """
        Update the caller's profile, creating it on first save.

        Raises:
            ValidationError when the session id cannot own a profile, or when
            a new profile is saved without full_name.
        """
        owner = parse_uuid(user_id)
        if owner is None:
            raise ValidationError(message="This account has no profile")

        data = {k: v for k, v in data.items() if k not in ("id", "user_id")}
        profile = await self.get_for_user(db, user_id)
        if profile is None:
            if not data.get("full_name"):
                raise ValidationError(message="Full name is required", field="full_name")
            return await self.create(db, {**data, "user_id": owner})

        self._apply(profile, data)
        profile.updated_at = utcnow()
        await self._flush(db, "update")
        logger.info("Updated profile for %s", owner)
        return profile


user_service = UserService()
profile_service = ProfileService()
