"""
Campus Library Backend — Password Hashing and Session Gate
============================================================

What:  bcrypt password helpers and the FastAPI dependencies that guard routes.
Why:   Every privileged route makes the same check against the session, so it
       lives in one place and is attached with `Depends(...)`.
How:   Sessions are managed by Starlette's SessionMiddleware (signed cookie,
       fixed lifetime). Handlers read `request.session`; nothing is global.

Session keys:
    user_id          str   user UUID, library card application UUID, or "admin"
    is_admin         bool  admin flag checked by require_admin
    is_library_card  bool  session was opened with a library card login
"""

import logging
from typing import Optional

import bcrypt
from fastapi import Request

from campus_library.config import settings
from campus_library.exceptions import AuthenticationError, ForbiddenError

logger = logging.getLogger(__name__)

ADMIN_USER_ID = "admin"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    ).decode("utf-8")


def verify_password(password: str, hashed: Optional[str]) -> bool:
    """
    Compare a plaintext password with a stored bcrypt hash.

    Returns False (never raises) for a missing hash or a malformed one, so
    a corrupt row reads as a failed login rather than a 500.
    """
    if not hashed or password is None:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


# ── Session helpers ───────────────────────────────────────────────────────

def open_session(
    request: Request,
    user_id: str,
    is_admin: bool = False,
    is_library_card: bool = False,
) -> None:
    """Replaces whatever the session held with a fresh login."""
    request.session.clear()
    request.session["user_id"] = user_id
    request.session["is_admin"] = bool(is_admin)
    request.session["is_library_card"] = bool(is_library_card)


def close_session(request: Request) -> None:
    request.session.clear()


def session_user_id(request: Request) -> Optional[str]:
    return request.session.get("user_id")


# ── Route dependencies ────────────────────────────────────────────────────

def require_admin(request: Request) -> None:
    """
    Authorization gate for admin-only routes.

    Usage:
        @router.post("/api/books", dependencies=[Depends(require_admin)])

    Raises:
        ForbiddenError (403) unless the session carries the admin flag.
    """
    if not request.session.get("is_admin"):
        raise ForbiddenError()


def require_login(request: Request) -> str:
    """Returns the session's user id; AuthenticationError (401) without one."""
    user_id = session_user_id(request)
    if not user_id:
        raise AuthenticationError(message="Unauthorized")
    return user_id
