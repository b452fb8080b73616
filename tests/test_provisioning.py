from library_site.services.provisioning import initialize_database
from library_site.services.site_settings_service import (
    DEFAULT_SITE_SETTINGS,
    SiteSettingsService,
)


def test_initialize_database_without_seed_leaves_settings_empty(database):
    assert initialize_database() == []
    assert SiteSettingsService().list_settings() == []


def test_initialize_database_seeds_once(database):
    inserted = initialize_database(seed=True)

    assert set(inserted) == set(DEFAULT_SITE_SETTINGS)
    assert SiteSettingsService().get_setting("site_name").value == "Drishti Library"
    assert initialize_database(seed=True) == []
