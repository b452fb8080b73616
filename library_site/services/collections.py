"""
Site content collections.

Each collection describes one ordered content table: its model, how its
rows are shown to the admin and to the public site, which inputs are
required, and what optional inputs default to.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from library_site.models import BaseDBModel, Facility, GalleryImage, HeroSlide, Shift


class HeroSlidePublic(BaseModel):
    """Slide as rendered by the homepage carousel."""

    id: int = Field(..., description="Slide identifier")
    image_url: str = Field(..., description="Background image URL")
    title: str = Field(..., description="Headline")
    subtitle: str = Field("", description="Secondary line under the headline")

    model_config = ConfigDict(from_attributes=True)


class HeroSlideData(HeroSlidePublic):
    """Full slide row for the admin console."""

    is_active: bool = Field(..., description="Whether the slide is shown")
    sort_order: int = Field(..., description="Ascending display position")


class GalleryImagePublic(BaseModel):
    id: int = Field(..., description="Image identifier")
    image_url: str = Field(..., description="Image URL")
    caption: str = Field("", description="Caption shown under the image")

    model_config = ConfigDict(from_attributes=True)


class GalleryImageData(GalleryImagePublic):
    is_active: bool = Field(..., description="Whether the image is shown")
    sort_order: int = Field(..., description="Ascending display position")


class ShiftPublic(BaseModel):
    id: int = Field(..., description="Shift identifier")
    icon: str = Field(..., description="Font Awesome icon class")
    time_slot: str = Field(..., description="Time range, e.g. '6 AM - 10 AM'")
    description: str = Field("", description="Short description")

    model_config = ConfigDict(from_attributes=True)


class ShiftData(ShiftPublic):
    is_active: bool = Field(..., description="Whether the shift is shown")
    sort_order: int = Field(..., description="Ascending display position")


class FacilityPublic(BaseModel):
    id: int = Field(..., description="Facility identifier")
    icon: str = Field(..., description="Font Awesome icon class")
    title: str = Field(..., description="Facility name")
    description: str = Field("", description="Short description")

    model_config = ConfigDict(from_attributes=True)


class FacilityData(FacilityPublic):
    is_active: bool = Field(..., description="Whether the facility is shown")
    sort_order: int = Field(..., description="Ascending display position")


@dataclass(frozen=True)
class ContentCollection:
    """Static description of one content table."""

    name: str
    label: str
    model: Type[BaseDBModel]
    data_schema: Type[BaseModel]
    public_schema: Type[BaseModel]
    required_fields: Tuple[str, ...]
    optional_defaults: Mapping[str, str]


SLIDES = ContentCollection(
    name="slides",
    label="Slide",
    model=HeroSlide,
    data_schema=HeroSlideData,
    public_schema=HeroSlidePublic,
    required_fields=("image_url", "title"),
    optional_defaults={"subtitle": ""},
)

GALLERY = ContentCollection(
    name="gallery",
    label="Image",
    model=GalleryImage,
    data_schema=GalleryImageData,
    public_schema=GalleryImagePublic,
    required_fields=("image_url",),
    optional_defaults={"caption": ""},
)

SHIFTS = ContentCollection(
    name="shifts",
    label="Shift",
    model=Shift,
    data_schema=ShiftData,
    public_schema=ShiftPublic,
    required_fields=("time_slot",),
    optional_defaults={"icon": "fa-clock", "description": ""},
)

FACILITIES = ContentCollection(
    name="facilities",
    label="Facility",
    model=Facility,
    data_schema=FacilityData,
    public_schema=FacilityPublic,
    required_fields=("title",),
    optional_defaults={"icon": "fa-check", "description": ""},
)

COLLECTIONS: Dict[str, ContentCollection] = {
    collection.name: collection for collection in (SLIDES, GALLERY, SHIFTS, FACILITIES)
}


__all__ = [
    "COLLECTIONS",
    "ContentCollection",
    "FACILITIES",
    "FacilityData",
    "FacilityPublic",
    "GALLERY",
    "GalleryImageData",
    "GalleryImagePublic",
    "HeroSlideData",
    "HeroSlidePublic",
    "SHIFTS",
    "SLIDES",
    "ShiftData",
    "ShiftPublic",
]
