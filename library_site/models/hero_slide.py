"""Hero slide SQLAlchemy model."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseDBModel, OrderedContentMixin


class HeroSlide(BaseDBModel, OrderedContentMixin):
    """Banner image with headline shown in the homepage carousel."""

    __tablename__ = "hero_slides"

    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    subtitle: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        status = "active" if self.is_active else "hidden"
        return f"<HeroSlide(id={self.id}, title='{self.title}', status='{status}')>"


__all__ = ["HeroSlide"]
