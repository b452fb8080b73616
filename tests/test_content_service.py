import pytest

from library_site.core.exceptions import ValidationException
from library_site.services.collections import FACILITIES, SHIFTS, SLIDES
from library_site.services.content_service import ContentService, coerce_sort_order


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 0),
        (True, 0),
        (3, 3),
        ("7", 7),
        (" 2 ", 2),
        ("2.9", 2),
        ("abc", 0),
        ("", 0),
        (4.5, 4),
        (float("nan"), 0),
        (2**63 - 1, 2**63 - 1),
        (10**20, 0),
        (-(10**20), 0),
        ("1e30", 0),
        (1e30, 0),
        ([1], 0),
    ],
)
def test_coerce_sort_order(value, expected):
    assert coerce_sort_order(value) == expected


def test_create_forces_active_and_fills_defaults(monkeypatch):
    service = ContentService(SHIFTS)
    created = {}

    def fake_create(item):
        item.id = 7
        created["item"] = item
        return item

    monkeypatch.setattr(service.store, "create", fake_create)

    result = service.create(
        {"time_slot": "6-10 AM", "is_active": False, "sort_order": "x"}
    )

    item = created["item"]
    assert item.is_active is True
    assert item.icon == "fa-clock"
    assert item.description == ""
    assert item.sort_order == 0
    assert result.id == 7


def test_create_rejects_blank_required_field(monkeypatch):
    service = ContentService(SLIDES)
    monkeypatch.setattr(
        service.store,
        "create",
        lambda item: pytest.fail("store must not be called"),
    )

    with pytest.raises(ValidationException) as excinfo:
        service.create({"image_url": "https://example.com/a.jpg", "title": "   "})

    assert excinfo.value.message == "title is required"
    assert excinfo.value.http_status == 400


def test_update_without_is_active_hides_row(monkeypatch):
    service = ContentService(FACILITIES)
    captured = {}

    def fake_update(item_id, fields):
        captured["id"] = item_id
        captured["fields"] = fields
        return True

    monkeypatch.setattr(service.store, "update", fake_update)

    assert service.update(4, {"title": "Wi-Fi", "icon": "", "sort_order": 2}) is True
    assert captured["id"] == 4
    assert captured["fields"] == {
        "title": "Wi-Fi",
        "icon": "fa-check",
        "description": "",
        "sort_order": 2,
        "is_active": False,
    }


def test_update_missing_row_is_not_an_error(monkeypatch):
    service = ContentService(FACILITIES)
    monkeypatch.setattr(service.store, "update", lambda item_id, fields: False)

    assert service.update(99, {"title": "Lockers", "is_active": True}) is False


def test_list_public_requests_active_rows_only(monkeypatch):
    service = ContentService(SLIDES)
    calls = []

    def fake_list_all(active_only=False):
        calls.append(active_only)
        return []

    monkeypatch.setattr(service.store, "list_all", fake_list_all)

    assert service.list_public() == []
    assert calls == [True]
