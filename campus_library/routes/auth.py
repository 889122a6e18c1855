"""
Campus Library Backend — Auth Route Handlers
==============================================

What:  Registration, login, logout and the "who am I" probe.
How:   AuthService decides the identity; these handlers write it into the
       signed session cookie via security.open_session().

Session after login:
    admin         user_id="admin"               is_admin=True
    library card  user_id=<application uuid>    is_library_card=True
    user          user_id=<user uuid>           is_admin=<users.is_admin>
"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, SessionUser
from campus_library.schemas.common import ErrorResponse, SuccessResponse
from campus_library.security import close_session, open_session, session_user_id
from campus_library.services.auth_service import LoginResult, auth_service
from campus_library.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _auth_response(result: LoginResult, include_admin_flag: bool = True) -> AuthResponse:
    return AuthResponse(
        user=SessionUser(id=result.user_id, email=result.email),
        is_admin=result.is_admin if include_admin_flag else None,
        redirect=result.redirect,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    responses={400: {"description": "Email already registered", "model": ErrorResponse}},
    summary="Create a user account and log it in",
)
async def register(
    payload: RegisterRequest,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> AuthResponse:
    user = await user_service.register(db, payload.model_dump())
    open_session(request, str(user.id))
    return AuthResponse(user=SessionUser(id=str(user.id), email=user.email))


@router.post(
    "/login",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    responses={401: {"description": "Login rejected", "model": ErrorResponse}},
    summary="Log in as admin, library card holder or user",
    description=(
        "The body selects the login path: `secretKey` for the admin, "
        "`libraryCardId` for a card holder, otherwise email and password."
    ),
)
async def login(
    payload: LoginRequest,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> AuthResponse:
    result = await auth_service.login(
        db,
        password=payload.password,
        email=payload.email,
        secret_key=payload.secret_key,
        library_card_id=payload.library_card_id,
    )
    open_session(
        request,
        result.user_id,
        is_admin=result.is_admin,
        is_library_card=result.is_library_card,
    )
    # Card holders get no isAdmin flag on login
    return _auth_response(result, include_admin_flag=not result.is_library_card)


@router.post("/logout", response_model=SuccessResponse, summary="Clear the session")
async def logout(request: Request) -> SuccessResponse:
    close_session(request)
    return SuccessResponse()


@router.get(
    "/me",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    responses={401: {"description": "No session or unknown user", "model": ErrorResponse}},
    summary="Describe the logged-in caller",
)
async def me(request: Request, db: AsyncSession = Depends(get_db_session)) -> AuthResponse:
    result = await auth_service.current_user(db, session_user_id(request))
    return _auth_response(result)
