"""
Models Package

SQLAlchemy models for the six site tables. The tables are independent: no
foreign keys and no cascades between them.
"""

from .base import Base, BaseDBModel, OrderedContentMixin
from .contact_submission import ContactSubmission
from .facility import Facility
from .gallery_image import GalleryImage
from .hero_slide import HeroSlide
from .shift import Shift
from .site_setting import SiteSetting

__all__ = [
    # Base classes
    "Base",
    "BaseDBModel",
    "OrderedContentMixin",
    # Database models
    "SiteSetting",
    "HeroSlide",
    "GalleryImage",
    "Shift",
    "Facility",
    "ContactSubmission",
]
