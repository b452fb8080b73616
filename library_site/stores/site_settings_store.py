"""Store for site settings persisted as key-value rows."""

from __future__ import annotations

from typing import List, Optional

from library_site.core.error_codes import DatabaseErrorCode
from library_site.core.exceptions import DatabaseException
from library_site.core.logger import get_logger
from library_site.models import SiteSetting
from library_site.models.base import utcnow
from library_site.stores.database import database_session

logger = get_logger(__name__)


class SiteSettingsStore:
    """CRUD operations for site settings."""

    def list_settings(self) -> List[SiteSetting]:
        """Return every stored setting ordered by key."""
        try:
            with database_session() as db:
                return db.query(SiteSetting).order_by(SiteSetting.key).all()
        except Exception as exc:
            logger.error("Failed to list settings: %s", exc)
            raise DatabaseException(
                "Failed to list settings", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def get_setting(self, key: str) -> Optional[SiteSetting]:
        """Return a stored setting by key."""
        try:
            with database_session() as db:
                return db.get(SiteSetting, key)
        except Exception as exc:
            logger.error("Failed to load setting %s: %s", key, exc)
            raise DatabaseException(
                f"Failed to load setting: {key}", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def upsert_setting(self, key: str, value: str) -> SiteSetting:
        """Insert or replace a setting and stamp its update time."""
        try:
            with database_session() as db:
                setting = db.get(SiteSetting, key)
                if setting is None:
                    setting = SiteSetting(key=key, value=value, updated_at=utcnow())
                    db.add(setting)
                else:
                    setting.value = value
                    setting.updated_at = utcnow()
                db.commit()
                db.refresh(setting)
                logger.info("Persisted setting '%s'", key)
                return setting
        except Exception as exc:
            logger.error("Failed to persist setting %s: %s", key, exc)
            raise DatabaseException(
                f"Failed to persist setting: {key}", DatabaseErrorCode.QUERY_FAILED
            ) from exc


__all__ = ["SiteSettingsStore"]
