"""Rare book archive schemas."""

import uuid
from datetime import datetime

from campus_library.schemas.common import CamelModel


class RareBookResponse(CamelModel):
    id: uuid.UUID
    title: str
    description: str
    category: str
    pdf_path: str
    cover_image: str
    status: str
    created_at: datetime
