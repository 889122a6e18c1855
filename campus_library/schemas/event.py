"""Event schemas."""

import datetime as dt
import uuid
from typing import List, Optional

from campus_library.schemas.common import CamelModel


class EventUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None
    images: Optional[List[str]] = None


class EventResponse(CamelModel):
    id: uuid.UUID
    title: str
    description: str
    images: List[str] = []
    date: Optional[dt.date] = None
    created_at: dt.datetime
    updated_at: dt.datetime
