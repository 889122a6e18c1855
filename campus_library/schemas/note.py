"""
Study note schemas.

Notes are created through a multipart form (the PDF travels with the
fields); edits are JSON and every field is optional.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from campus_library.schemas.common import CamelModel


class NoteUpdate(CamelModel):
    student_class: Optional[str] = Field(default=None, alias="class")
    subject: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    pdf_path: Optional[str] = None
    status: Optional[str] = None


class NoteResponse(CamelModel):
    id: uuid.UUID
    student_class: str = Field(alias="class")
    subject: str
    title: str
    description: str
    pdf_path: str
    status: str
    created_at: datetime
    updated_at: datetime
