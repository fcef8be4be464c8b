import pytest
from fastapi.testclient import TestClient

from allclear.config import Settings
from allclear.app import create_app

TEST_SECRET = "allclear-test-secret-0123456789abcdef"
DEFAULT_PASSWORD = "pw123456"


@pytest.fixture
def settings(tmp_path):
    db_path = tmp_path / "allclear_test.db"
    return Settings(database_url=f"sqlite:///{db_path}", jwt_secret=TEST_SECRET)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which connects and creates the schema
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app, client):
    """Direct store access for asserting on rows the API does not expose"""
    session = app.state.db.session()
    yield session
    session.close()


@pytest.fixture
def signup(client):
    """Sign up a user and return (response, auth headers)"""
    def _signup(email="a@x.com", password=DEFAULT_PASSWORD, first_name="Ada", last_name="Lovelace"):
        response = client.post(
            "/api/auth/signup",
            json={"firstName": first_name, "lastName": last_name, "email": email, "password": password},
        )
        headers = {}
        if response.status_code == 201:
            headers = {"Authorization": f"Bearer {response.json()['token']}"}
        return response, headers
    return _signup


@pytest.fixture
def auth_headers(signup):
    response, headers = signup()
    assert response.status_code == 201
    return headers


@pytest.fixture
def other_headers(signup):
    response, headers = signup(email="mallory@x.com", first_name="Mallory", last_name="Jones")
    assert response.status_code == 201
    return headers


@pytest.fixture
def add_friend(client):
    def _add_friend(headers, username="Bob", email="bob@x.com", lat=40, lng=-75, **extra):
        body = {"username": username, "email": email, "location": {"lat": lat, "lng": lng}}
        body.update(extra)
        return client.post("/api/friends", json=body, headers=headers)
    return _add_friend


@pytest.fixture
def add_location(client):
    def _add_location(headers, name="Home base", lat=40.7, lng=-74.0, **extra):
        body = {"name": name, "location": {"lat": lat, "lng": lng}}
        body.update(extra)
        return client.post("/api/locations", json=body, headers=headers)
    return _add_location
