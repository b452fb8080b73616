"""Gallery image SQLAlchemy model."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseDBModel, OrderedContentMixin


class GalleryImage(BaseDBModel, OrderedContentMixin):
    __tablename__ = "gallery_images"

    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    caption: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<GalleryImage(id={self.id}, sort_order={self.sort_order})>"


__all__ = ["GalleryImage"]
