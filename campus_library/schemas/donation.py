"""Donation schemas."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from campus_library.schemas.common import CamelModel


class DonationCreate(CamelModel):
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    method: str = Field(min_length=1)
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class DonationResponse(CamelModel):
    id: uuid.UUID
    amount: Decimal
    method: str
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    status: str
    created_at: datetime
