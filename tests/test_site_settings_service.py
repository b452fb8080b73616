import pytest

from library_site.core.exceptions import ValidationException
from library_site.services.site_settings_service import (
    DEFAULT_SITE_SETTINGS,
    SiteSettingsService,
)


def test_upsert_round_trip(database):
    service = SiteSettingsService()

    service.update_setting("site_name", "Drishti")
    service.update_setting("site_name", "Drishti Library & Study Hall")

    stored = service.get_setting("site_name")
    assert stored.value == "Drishti Library & Study Hall"
    assert stored.updated_at is not None
    assert service.get_public_settings() == {"site_name": "Drishti Library & Study Hall"}


def test_empty_string_is_a_valid_value(database):
    service = SiteSettingsService()

    service.update_setting("tagline", "")

    assert service.get_setting("tagline").value == ""


def test_missing_value_is_rejected(database):
    service = SiteSettingsService()

    with pytest.raises(ValidationException) as excinfo:
        service.update_setting("tagline", None)

    assert excinfo.value.message == "value is required"
    assert service.get_setting("tagline") is None


def test_seed_defaults_keeps_existing_values(database):
    service = SiteSettingsService()
    service.update_setting("site_name", "My Library")

    inserted = service.seed_defaults()

    assert "site_name" not in inserted
    assert set(inserted) == set(DEFAULT_SITE_SETTINGS) - {"site_name"}
    assert service.get_setting("site_name").value == "My Library"
    assert service.seed_defaults() == []
