"""Profile routes: the logged-in caller reads and upserts their own profile."""

from typing import Union

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.schemas.user import ProfileResponse, ProfileUpdate
from campus_library.security import require_login
from campus_library.services.user_service import profile_service

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=Union[ProfileResponse, dict], summary="Get my profile ({} when unset)")
async def get_profile(
    user_id: str = Depends(require_login),
    db: AsyncSession = Depends(get_db_session),
):
    profile = await profile_service.get_for_user(db, user_id)
    if profile is None:
        return {}
    return ProfileResponse.model_validate(profile)


@router.post("", response_model=ProfileResponse, summary="Create or update my profile")
async def save_profile(
    payload: ProfileUpdate,
    user_id: str = Depends(require_login),
    db: AsyncSession = Depends(get_db_session),
):
    return await profile_service.upsert(db, user_id, payload.model_dump(exclude_unset=True))
