"""Admin user management: list registered accounts, remove one."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.schemas.common import SuccessResponse
from campus_library.schemas.user import UserResponse
from campus_library.security import require_admin
from campus_library.services.user_service import user_service

router = APIRouter(prefix="/api/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/users", response_model=List[UserResponse], summary="List registered users")
async def list_users(db: AsyncSession = Depends(get_db_session)):
    return await user_service.list(db)


@router.delete("/users/{user_id}", response_model=SuccessResponse, summary="Delete a user")
async def delete_user(user_id: UUID, db: AsyncSession = Depends(get_db_session)):
    await user_service.delete(db, user_id)
    return SuccessResponse()
