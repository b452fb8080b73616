"""Contact submission SQLAlchemy model."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseDBModel, utcnow


class ContactSubmission(BaseDBModel):
    """Lead captured by the public contact form."""

    __tablename__ = "contact_submissions"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    shift_preference: Mapped[str] = mapped_column(
        Text, nullable=False, default=""
    )
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        status = "read" if self.is_read else "unread"
        return f"<ContactSubmission(id={self.id}, name='{self.name}', status='{status}')>"


__all__ = ["ContactSubmission"]
