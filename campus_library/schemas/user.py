"""User and profile schemas. Password hashes are deliberately absent."""

import uuid
from datetime import datetime
from typing import Optional

from campus_library.schemas.common import CamelModel


class UserResponse(CamelModel):
    id: uuid.UUID
    email: str
    username: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    roll_number: Optional[str] = None
    department: Optional[str] = None
    student_class: Optional[str] = None
    type: str
    is_admin: bool
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(CamelModel):
    # Required when the profile does not exist yet (checked by ProfileService)
    full_name: Optional[str] = None
    phone: Optional[str] = None
    roll_number: Optional[str] = None
    department: Optional[str] = None
    student_class: Optional[str] = None
    type: Optional[str] = None


class ProfileResponse(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    full_name: str
    phone: Optional[str] = None
    roll_number: Optional[str] = None
    department: Optional[str] = None
    student_class: Optional[str] = None
    type: str
    created_at: datetime
    updated_at: datetime
