"""Shift SQLAlchemy model."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseDBModel, OrderedContentMixin


class Shift(BaseDBModel, OrderedContentMixin):
    """A bookable study time slot, e.g. "6 AM - 10 AM"."""

    __tablename__ = "shifts"

    icon: Mapped[str] = mapped_column(Text, nullable=False, default="fa-clock")
    time_slot: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Shift(id={self.id}, time_slot='{self.time_slot}')>"


__all__ = ["Shift"]
