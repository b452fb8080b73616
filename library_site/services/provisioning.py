"""Database provisioning shared by main.py and scripts/init_database.py."""

from typing import List

from library_site.core.logger import get_logger
from library_site.services.site_settings_service import SiteSettingsService
from library_site.stores.database import create_tables, test_connection

logger = get_logger(__name__)


def initialize_database(seed: bool = False) -> List[str]:
    """
    Check connectivity, create missing tables and optionally seed settings.

    Returns:
        List[str]: Setting keys inserted by seeding (empty without seed)

    Raises:
        DatabaseException: If the database is unreachable or DDL fails
    """
    status = test_connection()
    logger.info("Database connection test passed: %s", status["engine_url"])

    create_tables()

    inserted: List[str] = []
    if seed:
        inserted = SiteSettingsService().seed_defaults()
        logger.info("Default settings inserted: %s", ", ".join(inserted) or "none")

    logger.info("Database initialization completed successfully")
    return inserted


__all__ = ["initialize_database"]
