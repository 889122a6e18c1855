"""
Library card application schemas.

`class` is a Python keyword, so the field is `student_class` with an
explicit "class" alias. The stored password hash is never part of a response.
"""

import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import Field

from campus_library.schemas.common import CamelModel


class CardApplicationCreate(CamelModel):
    user_id: Optional[uuid.UUID] = None
    first_name: str
    last_name: str
    father_name: Optional[str] = None
    dob: Optional[date] = None
    student_class: str = Field(alias="class")
    field: Optional[str] = None
    roll_no: str
    email: str
    phone: str
    address_street: str
    address_city: str
    address_state: str
    address_zip: str
    student_id: Optional[str] = None
    # Generated when omitted
    card_number: Optional[str] = None
    # Plaintext on the way in; stored as a bcrypt hash
    password: Optional[str] = None


class CardStatusUpdate(CamelModel):
    status: str


class CardApplicationResponse(CamelModel):
    id: uuid.UUID
    user_id: Optional[uuid.UUID] = None
    first_name: str
    last_name: str
    father_name: Optional[str] = None
    dob: Optional[date] = None
    student_class: str = Field(alias="class")
    field: Optional[str] = None
    roll_no: str
    email: str
    phone: str
    address_street: str
    address_city: str
    address_state: str
    address_zip: str
    status: str
    card_number: Optional[str] = None
    student_id: Optional[str] = None
    issue_date: Optional[date] = None
    valid_through: Optional[date] = None
    created_at: datetime
    updated_at: datetime
