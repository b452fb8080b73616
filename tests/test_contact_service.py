import pytest

from library_site.core.exceptions import ValidationException
from library_site.services.contact_service import (
    ContactService,
    ContactSubmissionCreateData,
)


@pytest.mark.parametrize(
    "name, phone",
    [
        ("", "9876500000"),
        ("Rahul", ""),
        (None, "9876500000"),
        ("Rahul", None),
        ("   ", "9876500000"),
    ],
)
def test_submit_requires_name_and_phone(monkeypatch, name, phone):
    service = ContactService()
    monkeypatch.setattr(
        service.store, "create", lambda row: pytest.fail("store must not be called")
    )

    with pytest.raises(ValidationException) as excinfo:
        service.submit(ContactSubmissionCreateData(name=name, phone=phone))

    assert excinfo.value.message == "Name and phone are required"


def test_submit_stores_unread_row_with_defaults(monkeypatch):
    service = ContactService()
    stored = {}

    def fake_create(row):
        row.id = 1
        stored["row"] = row
        return row

    monkeypatch.setattr(service.store, "create", fake_create)

    service.submit(ContactSubmissionCreateData(name="Rahul", phone="9876500000"))

    row = stored["row"]
    assert row.is_read is False
    assert row.shift_preference == ""
    assert row.message == ""
    assert row.created_at is not None


def test_mark_read_of_missing_row_is_silent(monkeypatch):
    service = ContactService()
    monkeypatch.setattr(service.store, "mark_read", lambda submission_id: False)

    service.mark_read(404)
