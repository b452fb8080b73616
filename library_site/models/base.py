"""
Base Models

Base classes and common model utilities for library-site.
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Integer
from sqlalchemy.orm import Mapped, mapped_column

from library_site.stores.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseDBModel(Base):
    """Base model with a surrogate integer key that is never reused."""

    __abstract__ = True
    # AUTOINCREMENT keeps sqlite from handing out ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class OrderedContentMixin:
    """Visibility flag and display position shared by site content tables."""

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


__all__ = ["Base", "BaseDBModel", "OrderedContentMixin", "utcnow"]
