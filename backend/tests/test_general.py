from unittest.mock import patch

from fastapi.testclient import TestClient

from allclear.database import DuplicateKeyError, StoreError
from allclear.handlers import format_validation_errors
from allclear.models import Friend


def test_health_reports_database(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "OK",
        "message": "AllClear API is running",
        "database": "Connected",
    }


def test_health_reports_disconnected_database(client, app):
    with patch.object(app.state.db, "ping", return_value=False):
        response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["database"] == "Disconnected"


def test_unknown_route_uses_message_shape(client):
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert "message" in response.json()


def test_malformed_json_is_a_validation_failure(client, auth_headers):
    response = client.post(
        "/api/friends",
        content="{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_non_numeric_id_is_a_validation_failure(client, auth_headers):
    response = client.delete("/api/friends/abc", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "friend_id"


def test_out_of_range_id_is_a_validation_failure(client, auth_headers):
    response = client.delete("/api/friends/99999999999999999999999", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "friend_id"

    response = client.put(
        "/api/locations/99999999999999999999999/coordinates",
        json={"lat": 1, "lng": 2},
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_unexpected_error_is_a_json_server_error(app, client, auth_headers):
    quiet_client = TestClient(app, raise_server_exceptions=False)
    with patch("allclear.registry.friends.list_friends", side_effect=RuntimeError("unexpected")):
        response = quiet_client.get("/api/friends", headers=auth_headers)
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"message": "Internal server error"}


def test_validation_errors_use_json_field_names():
    errors = [
        {"loc": ("body", "last_name"), "msg": "Last name is required"},
        {"loc": ("body", "location", "lat"), "msg": "Valid latitude is required"},
        {"loc": ("body", "items", 0, "current_password"), "msg": "Current password is required"},
        {"loc": ("path", "friend_id"), "msg": "Input should be a valid integer"},
    ]
    assert [error["field"] for error in format_validation_errors(errors)] == [
        "lastName",
        "location.lat",
        "items.0.currentPassword",
        "friend_id",
    ]


def test_store_failure_is_hidden_behind_server_error(client, auth_headers):
    with patch("allclear.registry.locations.commit", side_effect=StoreError("disk I/O error")):
        response = client.post(
            "/api/locations",
            json={"name": "Home", "location": {"lat": 1, "lng": 2}},
            headers=auth_headers,
        )
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_duplicate_key_race_becomes_duplicate_friend(client, auth_headers, db_session):
    # Simulates a concurrent insert that slipped past the existence check
    with patch("allclear.registry.friends.friend_exists", return_value=False), \
         patch("allclear.registry.friends.commit", side_effect=DuplicateKeyError()):
        response = client.post(
            "/api/friends",
            json={"username": "Bob", "email": "bob@x.com", "location": {"lat": 1, "lng": 2}},
            headers=auth_headers,
        )
    assert response.status_code == 400
    assert response.json() == {"message": "Friend with this email already exists"}


def test_unique_index_backs_the_friend_check(client, auth_headers, db_session):
    client.post(
        "/api/friends",
        json={"username": "Bob", "email": "bob@x.com", "location": {"lat": 1, "lng": 2}},
        headers=auth_headers,
    )
    with patch("allclear.registry.friends.friend_exists", return_value=False):
        response = client.post(
            "/api/friends",
            json={"username": "Bob", "email": "bob@x.com", "location": {"lat": 1, "lng": 2}},
            headers=auth_headers,
        )
    assert response.status_code == 400
    assert response.json()["message"] == "Friend with this email already exists"
    assert db_session.query(Friend).count() == 1
