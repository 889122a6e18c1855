"""Donation routes: public pledge form, admin ledger."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import get_db_session
from campus_library.schemas.common import SuccessResponse
from campus_library.schemas.donation import DonationCreate, DonationResponse
from campus_library.security import require_admin
from campus_library.services.donation_service import donation_service

router = APIRouter(prefix="/api/donations", tags=["Donations"])


@router.post("", response_model=DonationResponse, summary="Record a donation")
async def create_donation(payload: DonationCreate, db: AsyncSession = Depends(get_db_session)):
    return await donation_service.create(db, payload.model_dump())


@router.get(
    "",
    response_model=List[DonationResponse],
    dependencies=[Depends(require_admin)],
    summary="List donations",
)
async def list_donations(db: AsyncSession = Depends(get_db_session)):
    return await donation_service.list(db)


@router.delete(
    "/{donation_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete a donation record",
)
async def delete_donation(donation_id: UUID, db: AsyncSession = Depends(get_db_session)):
    await donation_service.delete(db, donation_id)
    return SuccessResponse()
