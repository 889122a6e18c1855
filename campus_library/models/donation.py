"""
Campus Library Backend — Donation Model
=========================================

What:  ORM model for `donations`. Payments happen outside the system; a row
       records what the donor reported (amount, method, optional contact).
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campus_library.database import Base
from campus_library.models.mixins import CreatedAtMixin, UUIDPrimaryKeyMixin


class Donation(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "donations"

    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    method: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="completed")

    def __repr__(self) -> str:
        return f"<Donation(id={self.id}, amount={self.amount}, method='{self.method}')>"
