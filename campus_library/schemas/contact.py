"""Contact form schemas."""

import uuid
from datetime import datetime

from pydantic import EmailStr, Field

from campus_library.schemas.common import CamelModel


class ContactCreate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactSeenUpdate(CamelModel):
    is_seen: bool


class ContactMessageResponse(CamelModel):
    id: uuid.UUID
    name: str
    email: str
    subject: str
    message: str
    is_seen: bool
    created_at: datetime
