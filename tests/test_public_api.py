import pytest

from library_site.core.error_codes import DatabaseErrorCode
from library_site.core.exceptions import DatabaseException
from library_site.stores.contact_store import ContactStore
from library_site.stores.content_store import ContentStore


def test_public_settings_is_a_key_value_map(client, admin_headers):
    client.put(
        "/api/admin/settings/site_name", json={"value": "Drishti"}, headers=admin_headers
    )
    client.put("/api/admin/settings/phone", json={"value": ""}, headers=admin_headers)

    response = client.get("/api/settings")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {"phone": "", "site_name": "Drishti"},
    }


def test_public_lists_are_active_only_and_sorted(client, admin_headers):
    for title, order in (("Lockers", 5), ("AC", 1), ("Wi-Fi", 3)):
        client.post(
            "/api/admin/facilities",
            json={"title": title, "sort_order": order},
            headers=admin_headers,
        )
    # Hide "Wi-Fi" (id 3) by replacing it without is_active
    client.put(
        "/api/admin/facilities/3",
        json={"title": "Wi-Fi", "sort_order": 3},
        headers=admin_headers,
    )

    response = client.get("/api/facilities")

    assert response.status_code == 200
    data = response.json()["data"]
    assert [item["title"] for item in data] == ["AC", "Lockers"]
    assert data[0] == {"id": 2, "icon": "fa-check", "title": "AC", "description": ""}


def test_empty_collection_returns_empty_list(client):
    response = client.get("/api/gallery")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


def test_contact_submission_is_listed_for_admin(client, admin_headers):
    response = client.post(
        "/api/contact", json={"name": "Rahul", "phone": "9876500000"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Form submitted successfully",
    }

    listed = client.get("/api/admin/contacts", headers=admin_headers).json()["data"]
    assert len(listed) == 1
    assert listed[0]["name"] == "Rahul"
    assert listed[0]["is_read"] is False
    assert listed[0]["shift_preference"] == ""
    assert listed[0]["created_at"]


def test_contact_without_phone_is_rejected(client):
    response = client.post("/api/contact", json={"name": "Rahul", "phone": ""})

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Name and phone are required",
    }
    assert ContactStore().count() == 0


def test_storage_fault_on_read_reports_database_error(client, monkeypatch):
    def broken_list_all(self, active_only=False):
        raise DatabaseException("disk I/O error", DatabaseErrorCode.QUERY_FAILED)

    monkeypatch.setattr(ContentStore, "list_all", broken_list_all)

    response = client.get("/api/slides")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Database error"}


def test_malformed_json_is_a_bad_request(client):
    response = client.post(
        "/api/contact",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_request_id_is_echoed(client):
    response = client.get("/api/shifts", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_health_reports_api_status(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["components"]["api"]["status"] == "healthy"


def test_long_contact_fields_are_accepted(client, admin_headers):
    response = client.post(
        "/api/contact", json={"name": "n" * 300, "phone": "1" * 80}
    )

    assert response.status_code == 200
    listed = client.get("/api/admin/contacts", headers=admin_headers).json()["data"]
    assert listed[0]["name"] == "n" * 300


def test_equal_sort_order_keeps_insertion_order(client, admin_headers):
    for title, order in (("A", 2), ("B", 2), ("Z", 1), ("C", 2)):
        client.post(
            "/api/admin/facilities",
            json={"title": title, "sort_order": order},
            headers=admin_headers,
        )

    data = client.get("/api/facilities").json()["data"]

    assert [item["title"] for item in data] == ["Z", "A", "B", "C"]


def test_admin_contacts_are_newest_first(client, admin_headers):
    client.post("/api/contact", json={"name": "first", "phone": "9000000001"})
    client.post("/api/contact", json={"name": "second", "phone": "9000000002"})

    listed = client.get("/api/admin/contacts", headers=admin_headers).json()["data"]

    assert [row["name"] for row in listed] == ["second", "first"]


def _raise_storage_fault(*_args, **_kwargs):
    raise DatabaseException("disk I/O error", DatabaseErrorCode.QUERY_FAILED)


@pytest.mark.parametrize(
    "method, path, body, store_method, message",
    [
        ("POST", "/api/admin/shifts", {"time_slot": "6-10 AM"}, "create", "Add failed"),
        ("PUT", "/api/admin/shifts/1", {"time_slot": "6-10 AM"}, "update", "Update failed"),
        ("DELETE", "/api/admin/shifts/1", None, "delete", "Delete failed"),
    ],
)
def test_storage_fault_on_write_reports_operation(
    client, admin_headers, monkeypatch, method, path, body, store_method, message
):
    monkeypatch.setattr(ContentStore, store_method, _raise_storage_fault)

    response = client.request(method, path, json=body, headers=admin_headers)

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": message}


def test_storage_fault_on_contact_submit(client, monkeypatch):
    monkeypatch.setattr(ContactStore, "create", _raise_storage_fault)

    response = client.post("/api/contact", json={"name": "Rahul", "phone": "98765"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Submission failed"}
