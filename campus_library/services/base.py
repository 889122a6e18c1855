"""
Campus Library Backend — Generic CRUD Service
===============================================

What:  The storage accessor every entity service builds on: list, get,
       create, update and delete for one ORM model.
Why:   Resource routes are direct pass-throughs to storage. Writing those
       five operations once keeps every entity's behavior identical.
How:   Subclasses set `model` and `resource`; entity-specific services add
       filters and status transitions on top.

Error Handling Strategy:
    - Unknown id on update/toggle → NotFoundError (404)
    - Unknown id on delete → no-op, returns False (deletes are idempotent)
    - IntegrityError / DataError on write → ValidationError (400) with the
      database's message, e.g. duplicate email or missing required column
    - Any other SQLAlchemyError → DatabaseError (500), details logged only

Services are stateless; the AsyncSession is passed in on every call and the
transaction is committed by the get_db_session dependency.
"""

import logging
import uuid
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campus_library.database import Base
from campus_library.exceptions import DatabaseError, NotFoundError, ValidationError
from campus_library.models.mixins import utcnow
from campus_library.models.note import ACTIVE_STATUSES

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def flip_active(status: Optional[str]) -> str:
    """active → inactive; anything else → active."""
    return "inactive" if status == "active" else "active"


class CrudService(Generic[ModelT]):
    model: Type[ModelT]
    resource: str = "resource"

    def _order_by(self):
        return desc(self.model.created_at)

    def _apply(self, obj: ModelT, data: Dict[str, Any]) -> None:
        for key, value in data.items():
            if not hasattr(self.model, key):
                logger.debug("Ignoring unknown %s field: %s", self.resource, key)
                continue
            setattr(obj, key, value)

    async def _flush(self, db: AsyncSession, action: str) -> None:
        """Flush pending writes, translating database errors for the error handlers."""
        try:
            await db.flush()
        except (IntegrityError, DataError) as e:
            logger.warning("Rejected %s %s: %s", self.resource, action, e.orig)
            raise ValidationError(
                message=str(e.orig),
                context={"resource": self.resource, "action": action},
            )
        except SQLAlchemyError as e:
            logger.error("Database error during %s %s: %s", self.resource, action, str(e))
            raise DatabaseError(context={"resource": self.resource, "action": action})

    async def list(self, db: AsyncSession, *criteria) -> List[ModelT]:
        query = select(self.model)
        if criteria:
            query = query.where(*criteria)
        result = await db.execute(query.order_by(self._order_by()))
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, item_id: uuid.UUID) -> Optional[ModelT]:
        result = await db.execute(select(self.model).where(self.model.id == item_id))
        return result.scalar_one_or_none()

    async def get_or_404(self, db: AsyncSession, item_id: uuid.UUID) -> ModelT:
        obj = await self.get(db, item_id)
        if obj is None:
            raise NotFoundError(resource=self.resource, resource_id=str(item_id))
        return obj

    async def create(self, db: AsyncSession, data: Dict[str, Any]) -> ModelT:
        obj = self.model()
        self._apply(obj, data)
        db.add(obj)
        await self._flush(db, "create")
        logger.info("Created %s %s", self.resource, obj.id)
        return obj

    async def update(self, db: AsyncSession, item_id: uuid.UUID, data: Dict[str, Any]) -> ModelT:
        obj = await self.get_or_404(db, item_id)
        self._apply(obj, data)
        if hasattr(self.model, "updated_at"):
            obj.updated_at = utcnow()
        await self._flush(db, "update")
        logger.info("Updated %s %s (%s)", self.resource, item_id, ", ".join(sorted(data)) or "no fields")
        return obj

    async def delete(self, db: AsyncSession, item_id: uuid.UUID) -> bool:
        """Returns whether a row was removed. Missing ids are not an error."""
        result = await db.execute(delete(self.model).where(self.model.id == item_id))
        removed = bool(result.rowcount)
        if removed:
            logger.info("Deleted %s %s", self.resource, item_id)
        else:
            logger.info("Delete of missing %s %s ignored", self.resource, item_id)
        return removed

    async def toggle_active(self, db: AsyncSession, item_id: uuid.UUID) -> ModelT:
        """Flip status between 'active' and 'inactive'."""
        obj = await self.get_or_404(db, item_id)
        obj.status = flip_active(obj.status)
        if hasattr(self.model, "updated_at"):
            obj.updated_at = utcnow()
        await self._flush(db, "toggle")
        logger.info("Toggled %s %s to %s", self.resource, item_id, obj.status)
        return obj


class ActiveStatusService(CrudService[ModelT]):
    """CrudService for models whose status is either 'active' or 'inactive'."""

    @staticmethod
    def _check_status(data: Dict[str, Any]) -> None:
        status = data.get("status")
        if status is not None and status not in ACTIVE_STATUSES:
            raise ValidationError(
                message=f"Invalid status '{status}'. Must be one of: {', '.join(ACTIVE_STATUSES)}",
                field="status",
            )

    async def create(self, db: AsyncSession, data: Dict[str, Any]) -> ModelT:
        self._check_status(data)
        return await super().create(db, data)

    async def update(self, db: AsyncSession, item_id: uuid.UUID, data: Dict[str, Any]) -> ModelT:
        self._check_status(data)
        return await super().update(db, item_id, data)
