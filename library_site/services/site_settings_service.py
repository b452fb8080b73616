"""Service for the site-wide key-value settings."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from library_site.core.error_codes import ValidationErrorCode
from library_site.core.exceptions import ValidationException
from library_site.core.logger import get_logger
from library_site.stores.site_settings_store import SiteSettingsStore

logger = get_logger(__name__)

# Keys the public pages and the admin settings form read. Values are starting
# content only; seed_defaults never overwrites what an admin has saved.
DEFAULT_SITE_SETTINGS: Dict[str, str] = {
    "site_name": "Drishti Library",
    "tagline": "A calm place to study",
    "logo_text": "DRISHTI",
    "logo_highlight": "LIBRARY",
    "about_text": "",
    "address": "",
    "phone": "",
    "email": "",
    "footer_text": "",
    "whatsapp_link": "",
    "facebook_link": "",
    "instagram_link": "",
    "youtube_link": "",
    "google_map_embed": "",
}


class SiteSettingData(BaseModel):
    """Full setting row."""

    key: str = Field(..., description="Setting key")
    value: str = Field(..., description="Setting value")
    updated_at: Optional[datetime] = Field(
        None, description="Timestamp of the last persisted change"
    )

    model_config = ConfigDict(from_attributes=True)


class SiteSettingsService:
    """Read/write access layer for site settings."""

    def __init__(self, store: Optional[SiteSettingsStore] = None) -> None:
        self.store = store or SiteSettingsStore()

    def get_public_settings(self) -> Dict[str, str]:
        """Every stored setting collapsed into a key -> value mapping."""
        return {row.key: row.value for row in self.store.list_settings()}

    def list_settings(self) -> List[SiteSettingData]:
        return [SiteSettingData.model_validate(row) for row in self.store.list_settings()]

    def get_setting(self, key: str) -> Optional[SiteSettingData]:
        row = self.store.get_setting(key)
        return SiteSettingData.model_validate(row) if row else None

    def update_setting(self, key: str, value: Optional[str]) -> SiteSettingData:
        """Insert or replace one setting. Any string is accepted, including ""."""
        if value is None:
            raise ValidationException(
                "value is required",
                ValidationErrorCode.MISSING_FIELD,
                details={"field": "value", "key": key},
            )
        record = self.store.upsert_setting(key, value)
        logger.info("Setting '%s' updated", key)
        return SiteSettingData.model_validate(record)

    def seed_defaults(self) -> List[str]:
        """Insert default values for missing keys; returns the keys inserted."""
        inserted = []
        for key, value in DEFAULT_SITE_SETTINGS.items():
            if self.store.get_setting(key) is None:
                self.store.upsert_setting(key, value)
                inserted.append(key)
        if inserted:
            logger.info("Seeded %d default settings", len(inserted))
        return inserted


__all__ = [
    "DEFAULT_SITE_SETTINGS",
    "SiteSettingData",
    "SiteSettingsService",
]
