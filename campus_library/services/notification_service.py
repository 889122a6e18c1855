"""
Campus Library Backend — Notification Service
===============================================

What:  Announcements feed. Validates that the content matches the declared
       type before storing.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.exceptions import ValidationError
from campus_library.models.notification import NOTIFICATION_TYPES, Notification
from campus_library.services.base import CrudService


class NotificationService(CrudService[Notification]):
    model = Notification
    resource = "notification"

    @staticmethod
    def check_content(data: Dict[str, Any]) -> None:
        """
        Raises ValidationError unless:
            text  → has a message
            image → has an image
            both  → has a message and an image
        """
        kind = data.get("type")
        if kind not in NOTIFICATION_TYPES:
            raise ValidationError(
                message=f"Invalid type '{kind}'. Must be one of: {', '.join(NOTIFICATION_TYPES)}",
                field="type",
            )
        has_message = bool((data.get("message") or "").strip())
        has_image = bool(data.get("image"))
        if kind in ("text", "both") and not has_message:
            raise ValidationError(message="A message is required for this notification type", field="message")
        if kind in ("image", "both") and not has_image:
            raise ValidationError(message="An image is required for this notification type", field="image")

    async def create(self, db: AsyncSession, data: Dict[str, Any]) -> Notification:
        self.check_content(data)
        return await super().create(db, data)


notification_service = NotificationService()
