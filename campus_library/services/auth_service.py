"""
Campus Library Backend — Authentication Service
=================================================

What:  Decides who a login request is and what session it earns.
Why:   Three kinds of caller share one login endpoint; the body's fields
       pick the path and each path has its own failure message.
How:   Returns a LoginResult; the route writes it into request.session.

Login paths (first match wins, never falls through):
    secretKey present        → configured admin (email, password, secret key)
    libraryCardId present    → library card holder (card number + password,
                               approved applications only)
    otherwise                → registered user (email + password)
"""

import hmac
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.config import settings
from campus_library.exceptions import AuthenticationError
from campus_library.security import ADMIN_USER_ID, verify_password
from campus_library.services.library_card_service import library_card_service
from campus_library.services.user_service import parse_uuid, user_service

logger = logging.getLogger(__name__)

ADMIN_REDIRECT = "/admin-dashboard"


@dataclass
class LoginResult:
    user_id: str
    email: str
    is_admin: bool = False
    is_library_card: bool = False
    redirect: Optional[str] = None


def _matches(given: Optional[str], expected: str) -> bool:
    return hmac.compare_digest((given or "").encode("utf-8"), expected.encode("utf-8"))


class AuthService:
    async def login(
        self,
        db: AsyncSession,
        password: str,
        email: Optional[str] = None,
        secret_key: Optional[str] = None,
        library_card_id: Optional[str] = None,
    ) -> LoginResult:
        # Blank fields from a shared login form do not select a path
        if secret_key:
            return self._login_admin(email, password, secret_key)
        if library_card_id:
            return await self._login_library_card(db, library_card_id, password)
        return await self._login_user(db, email, password)

    def _login_admin(self, email: Optional[str], password: str, secret_key: str) -> LoginResult:
        # Evaluate all three so a mismatch takes the same time whichever field is wrong
        checks = [
            _matches(email, settings.admin_email),
            _matches(password, settings.admin_password),
            _matches(secret_key, settings.admin_secret_key),
        ]
        if not all(checks):
            logger.warning("Admin login rejected")
            raise AuthenticationError(message="Invalid admin credentials")
        logger.info("Admin logged in")
        return LoginResult(
            user_id=ADMIN_USER_ID,
            email=settings.admin_email,
            is_admin=True,
            redirect=ADMIN_REDIRECT,
        )

    async def _login_library_card(
        self, db: AsyncSession, card_number: str, password: str
    ) -> LoginResult:
        application = await library_card_service.get_by_card_number(db, card_number)
        if application is None or not verify_password(password, application.password):
            logger.warning("Library card login rejected for card %s", card_number)
            raise AuthenticationError(message="Write correct details")

        if application.status == "pending":
            raise AuthenticationError(message="Your account is pending for approval")
        if application.status != "approved":
            raise AuthenticationError(
                message="Your application was rejected. Please contact library."
            )

        logger.info("Library card %s logged in", card_number)
        return LoginResult(
            user_id=str(application.id),
            email=application.email,
            is_library_card=True,
        )

    async def _login_user(self, db: AsyncSession, email: Optional[str], password: str) -> LoginResult:
        user = await user_service.get_by_email(db, email) if email else None
        if user is None or not verify_password(password, user.password):
            logger.warning("User login rejected")
            raise AuthenticationError(message="Invalid credentials")
        logger.info("User %s logged in", user.id)
        return LoginResult(user_id=str(user.id), email=user.email, is_admin=user.is_admin)

    async def current_user(self, db: AsyncSession, session_user_id: Optional[str]) -> LoginResult:
        """
        Resolve the session's user id for GET /api/auth/me.

        Raises:
            AuthenticationError("Not logged in") without a session,
            AuthenticationError("User not found") when the id matches nothing.
        """
        if not session_user_id:
            raise AuthenticationError(message="Not logged in")
        if session_user_id == ADMIN_USER_ID:
            return LoginResult(user_id=ADMIN_USER_ID, email=settings.admin_email, is_admin=True)

        key = parse_uuid(session_user_id)
        if key is not None:
            user = await user_service.get(db, key)
            if user is not None:
                return LoginResult(user_id=str(user.id), email=user.email, is_admin=user.is_admin)
            application = await library_card_service.get(db, key)
            if application is not None:
                return LoginResult(
                    user_id=str(application.id),
                    email=application.email,
                    is_library_card=True,
                )
        raise AuthenticationError(message="User not found")


auth_service = AuthService()
