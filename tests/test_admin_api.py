import pytest

from conftest import basic_auth


def test_admin_routes_require_credentials(client):
    response = client.get("/api/admin/settings")

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Unauthorized"}


@pytest.mark.parametrize(
    "headers",
    [
        basic_auth("admin", "wrong"),
        basic_auth("Admin", "secret"),
    ],
)
def test_admin_routes_reject_wrong_credentials(client, headers):
    response = client.get("/api/admin/slides", headers=headers)

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid credentials"}


def test_non_basic_scheme_is_unauthorized(client):
    response = client.get(
        "/api/admin/contacts", headers={"Authorization": "Bearer token"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Unauthorized"


def test_login(client):
    ok = client.post("/api/admin/login", json={"username": "admin", "password": "secret"})
    assert ok.status_code == 200
    assert ok.json() == {"success": True, "message": "Login successful"}

    bad = client.post("/api/admin/login", json={"username": "admin", "password": "x"})
    assert bad.status_code == 401
    assert bad.json() == {"success": False, "error": "Invalid credentials"}


def test_settings_update_and_list(client, admin_headers):
    response = client.put(
        "/api/admin/settings/tagline", json={"value": "Read. Focus."}, headers=admin_headers
    )
    assert response.json() == {"success": True, "message": "Setting updated"}

    rows = client.get("/api/admin/settings", headers=admin_headers).json()["data"]
    assert [(row["key"], row["value"]) for row in rows] == [("tagline", "Read. Focus.")]
    assert rows[0]["updated_at"]


def test_settings_update_without_value(client, admin_headers):
    response = client.put("/api/admin/settings/tagline", json={}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "value is required"}


def test_slide_add_defaults(client, admin_headers):
    response = client.post(
        "/api/admin/slides",
        json={"image_url": "https://example.com/hall.jpg", "title": "Welcome"},
        headers=admin_headers,
    )
    assert response.json() == {"success": True, "message": "Slide added"}

    rows = client.get("/api/admin/slides", headers=admin_headers).json()["data"]
    assert rows == [
        {
            "id": 1,
            "image_url": "https://example.com/hall.jpg",
            "title": "Welcome",
            "subtitle": "",
            "is_active": True,
            "sort_order": 0,
        }
    ]


def test_add_without_required_field(client, admin_headers):
    response = client.post(
        "/api/admin/gallery", json={"caption": "Reading room"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "image_url is required"}
    assert client.get("/api/admin/gallery", headers=admin_headers).json()["data"] == []


def test_shift_update_without_is_active_hides_it(client, admin_headers):
    for slot in ("6-10 AM", "10-2 PM", "2-6 PM"):
        client.post("/api/admin/shifts", json={"time_slot": slot}, headers=admin_headers)

    response = client.put(
        "/api/admin/shifts/3",
        json={
            "icon": "fa-sun",
            "time_slot": "6-10 AM",
            "description": "Morning",
            "sort_order": 1,
        },
        headers=admin_headers,
    )
    assert response.json() == {"success": True, "message": "Shift updated"}

    shift = client.get("/api/admin/shifts/3", headers=admin_headers).json()["data"]
    assert shift["is_active"] is False
    assert shift["icon"] == "fa-sun"
    assert shift["sort_order"] == 1
    assert [s["id"] for s in client.get("/api/shifts").json()["data"]] == [1, 2]


def test_update_of_missing_row_still_succeeds(client, admin_headers):
    response = client.put(
        "/api/admin/facilities/42", json={"title": "Lockers"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Facility updated"


def test_get_missing_row_is_not_found(client, admin_headers):
    response = client.get("/api/admin/gallery/9", headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Image not found"}


def test_non_integer_id_is_a_bad_request(client, admin_headers):
    response = client.delete("/api/admin/slides/abc", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "item_id" in response.json()["error"]


def test_delete_is_idempotent(client, admin_headers):
    client.post("/api/admin/facilities", json={"title": "AC"}, headers=admin_headers)

    for _ in range(2):
        response = client.delete("/api/admin/facilities/1", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Facility deleted"}

    missing = client.delete("/api/admin/facilities/77", headers=admin_headers)
    assert missing.json() == {"success": True, "message": "Facility deleted"}


def test_ids_are_not_reused_after_delete(client, admin_headers):
    client.post("/api/admin/facilities", json={"title": "AC"}, headers=admin_headers)
    client.delete("/api/admin/facilities/1", headers=admin_headers)
    client.post("/api/admin/facilities", json={"title": "Wi-Fi"}, headers=admin_headers)

    rows = client.get("/api/admin/facilities", headers=admin_headers).json()["data"]
    assert [row["id"] for row in rows] == [2]


def test_contact_triage(client, admin_headers):
    client.post("/api/contact", json={"name": "Asha", "phone": "9000000001"})

    read = client.put("/api/admin/contacts/1/read", headers=admin_headers)
    assert read.json() == {"success": True, "message": "Marked as read"}
    rows = client.get("/api/admin/contacts", headers=admin_headers).json()["data"]
    assert rows[0]["is_read"] is True

    for _ in range(2):
        deleted = client.delete("/api/admin/contacts/1", headers=admin_headers)
        assert deleted.json() == {"success": True, "message": "Contact deleted"}
    assert client.get("/api/admin/contacts", headers=admin_headers).json()["data"] == []


def test_truthy_is_active_shows_row(client, admin_headers):
    client.post("/api/admin/gallery", json={"image_url": "a.jpg"}, headers=admin_headers)

    response = client.put(
        "/api/admin/gallery/1",
        json={"image_url": "a.jpg", "is_active": "yes"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    image = client.get("/api/admin/gallery/1", headers=admin_headers).json()["data"]
    assert image["is_active"] is True


def test_out_of_range_sort_order_is_stored_as_zero(client, admin_headers):
    response = client.post(
        "/api/admin/facilities",
        json={"title": "X", "sort_order": "1e30"},
        headers=admin_headers,
    )

    assert response.json() == {"success": True, "message": "Facility added"}
    facility = client.get("/api/admin/facilities/1", headers=admin_headers).json()["data"]
    assert facility["sort_order"] == 0
