from datetime import timedelta

import pytest
from jose import jwt

from allclear.auth import create_access_token, decode_access_token, hash_password, verify_password
from allclear.config import Settings
from allclear.errors import InvalidToken, TokenExpired
from allclear.models import User


@pytest.fixture
def token_settings():
    return Settings(database_url="sqlite://", jwt_secret="unit-test-secret-0123456789abcdef")


def test_token_round_trip_carries_identity(token_settings):
    token = create_access_token(token_settings, 7, "a@x.com")
    payload = decode_access_token(token_settings, token)
    assert payload["userId"] == 7
    assert payload["email"] == "a@x.com"
    assert payload["exp"] - payload["iat"] == 24 * 3600


def test_expired_token_is_rejected(token_settings):
    token = create_access_token(token_settings, 7, "a@x.com", expires_delta=timedelta(seconds=-10))
    with pytest.raises(TokenExpired):
        decode_access_token(token_settings, token)


def test_token_signed_with_other_key_is_invalid(token_settings):
    other = Settings(database_url="sqlite://", jwt_secret="a-completely-different-secret-key")
    token = create_access_token(other, 7, "a@x.com")
    with pytest.raises(InvalidToken):
        decode_access_token(token_settings, token)


def test_garbage_and_identity_less_tokens_are_invalid(token_settings):
    with pytest.raises(InvalidToken):
        decode_access_token(token_settings, "not-a-jwt")

    no_identity = jwt.encode({"email": "a@x.com"}, token_settings.signing_key, algorithm="HS256")
    with pytest.raises(InvalidToken):
        decode_access_token(token_settings, no_identity)


def test_password_hash_is_one_way():
    hashed = hash_password("pw123456")
    assert hashed != "pw123456"
    assert verify_password("pw123456", hashed)
    assert not verify_password("pw1234567", hashed)


def test_protected_route_requires_token(client):
    response = client.get("/api/user/profile")
    assert response.status_code == 401
    assert response.json() == {"message": "Access token required"}


def test_protected_route_rejects_malformed_token(client):
    response = client.get("/api/friends", headers={"Authorization": "Bearer nonsense"})
    assert response.status_code == 403
    assert response.json()["message"] == "Invalid token"


def test_protected_route_rejects_expired_token(client, settings, signup):
    response, _ = signup()
    user_id = response.json()["user"]["id"]
    token = create_access_token(settings, user_id, "a@x.com", expires_delta=timedelta(hours=-1))

    response = client.get("/api/friends", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
    assert response.json()["message"] == "Token expired"


def test_token_for_missing_user_is_rejected(client, settings):
    token = create_access_token(settings, 4242, "ghost@x.com")
    response = client.get("/api/user/profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
    assert response.json()["message"] == "User not found"


def test_token_for_deactivated_user_is_rejected(client, db_session, auth_headers):
    user = db_session.query(User).filter(User.email == "a@x.com").one()
    user.is_active = False
    db_session.commit()

    response = client.get("/api/user/profile", headers=auth_headers)
    assert response.status_code == 403
    assert response.json()["message"] == "User not found"
