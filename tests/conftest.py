"""Pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from safecircle.core.config import Settings
from safecircle.db.base import Base
from safecircle.main import create_app
from safecircle.models import EmergencyContact, Incident, Message, Notification, User  # noqa: F401 - register for create_all


@pytest.fixture
def app():
    """App wired to a fresh in-memory database."""
    settings = Settings(
        database_url="sqlite://",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        _env_file=None,
    )
    application = create_app(settings)
    engine = application.state.engine
    Base.metadata.create_all(bind=engine)
    yield application
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(app):
    """Test client sharing one event loop with the app's websocket sessions."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def register_and_login(client):
    """Register a user and log in. The returned callable gives (user_id, auth headers)."""

    def _register_and_login(email, **extra):
        client.post("/api/v1/auth/register", json={"email": email, "password": "password123", **extra})
        body = client.post("/api/v1/auth/login", json={"email": email, "password": "password123"}).json()
        return body["user"]["id"], {"Authorization": f"Bearer {body['accessToken']}"}

    return _register_and_login
