"""Token service and auth gate tests."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from safecircle.core.errors import InvalidToken, TokenExpired
from safecircle.core.security import TokenService, hash_password, verify_password


def test_password_hash_roundtrip():
    hashed = hash_password("correct horse", rounds=4)
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_token_verifies_to_same_claims():
    """Verification before expiry is deterministic."""
    tokens = TokenService("secret")
    token = tokens.issue(7, "seven@test.com")
    assert tokens.verify(token) == tokens.verify(token)
    assert tokens.verify(token).user_id == 7
    assert tokens.verify(token).email == "seven@test.com"


def test_token_expires_after_one_hour():
    """A token checked 61 minutes after issuance is expired."""
    tokens = TokenService("secret", expire_minutes=60)
    issued = datetime.now(timezone.utc) - timedelta(minutes=61)
    token = tokens.issue(1, "old@test.com", now=issued)
    with pytest.raises(TokenExpired):
        tokens.verify(token)


def test_token_still_valid_at_59_minutes():
    tokens = TokenService("secret", expire_minutes=60)
    token = tokens.issue(1, "fresh@test.com", now=datetime.now(timezone.utc) - timedelta(minutes=59))
    assert tokens.verify(token).email == "fresh@test.com"


def test_token_signed_with_other_secret_is_invalid():
    token = TokenService("other-secret").issue(1, "x@test.com")
    with pytest.raises(InvalidToken):
        TokenService("secret").verify(token)


def test_token_without_identity_claims_is_invalid():
    token = jwt.encode({"exp": datetime.now(timezone.utc) + timedelta(minutes=5)}, "secret", algorithm="HS256")
    with pytest.raises(InvalidToken):
        TokenService("secret").verify(token)


def test_missing_token_is_unauthenticated(client):
    r = client.get("/api/v1/emergency-contacts")
    assert r.status_code == 401
    assert r.json() == {"error": "Token not provided"}
    assert r.headers["www-authenticate"] == "Bearer"


def test_non_bearer_scheme_is_unauthenticated(client):
    r = client.get("/api/v1/emergency-contacts", headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert r.status_code == 401
    assert r.json()["error"] == "Token not provided"


def test_garbage_token_is_invalid(client):
    r = client.get("/api/v1/emergency-contacts", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["error"] == "Invalid token"


def test_expired_token_is_rejected(client, app):
    issued = datetime.now(timezone.utc) - timedelta(minutes=61)
    token = app.state.token_service.issue(1, "late@test.com", now=issued)
    r = client.get("/api/v1/notifications", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["error"] == "Token expired"


def test_unexpected_verification_failure_is_internal(client, app, monkeypatch):
    """Errors outside the token taxonomy surface as 500."""

    def boom(token):
        raise RuntimeError("key store unavailable")

    monkeypatch.setattr(app.state.token_service, "verify", boom)
    r = client.get("/api/v1/notifications", headers={"Authorization": "Bearer whatever"})
    assert r.status_code == 500
    assert r.json()["error"] == "Error authenticating token"
