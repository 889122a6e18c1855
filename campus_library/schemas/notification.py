"""Notification schemas."""

import uuid
from datetime import datetime
from typing import Optional

from campus_library.schemas.common import CamelModel


class NotificationResponse(CamelModel):
    id: uuid.UUID
    title: Optional[str] = None
    message: Optional[str] = None
    image: Optional[str] = None
    type: str
    created_at: datetime
