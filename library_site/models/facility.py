"""Facility SQLAlchemy model."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseDBModel, OrderedContentMixin


class Facility(BaseDBModel, OrderedContentMixin):
    """An amenity listed on the site (Wi-Fi, AC, lockers, ...)."""

    __tablename__ = "facilities"

    icon: Mapped[str] = mapped_column(Text, nullable=False, default="fa-check")
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Facility(id={self.id}, title='{self.title}')>"


__all__ = ["Facility"]
