"""
Auth request/response schemas.

LoginRequest carries the union of the three login forms; which optional
fields are present selects the path (see AuthService.login).
"""

from typing import Optional

from pydantic import EmailStr, Field

from campus_library.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)
    full_name: Optional[str] = None
    phone: Optional[str] = None
    roll_number: Optional[str] = None
    department: Optional[str] = None
    student_class: Optional[str] = None


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: str = ""
    # Present → admin login
    secret_key: Optional[str] = None
    # Present → library card login
    library_card_id: Optional[str] = None


class SessionUser(CamelModel):
    id: str
    email: str


class AuthResponse(CamelModel):
    user: SessionUser
    is_admin: Optional[bool] = None
    redirect: Optional[str] = None
