"""User lookup tests."""


def test_lookup_by_email(client):
    client.post(
        "/api/v1/auth/register",
        json={"email": "find@test.com", "password": "password123", "name": "Finn", "phone": "555-2222"},
    )
    r = client.get("/api/v1/users", params={"email": "find@test.com"})
    assert r.status_code == 200
    data = r.json()
    assert data["name"] == "Finn"
    assert data["phone"] == "555-2222"
    assert data["role"] == "USER"
    assert "createdAt" in data
    assert not any("password" in key.lower() for key in data)


def test_lookup_requires_email(client):
    r = client.get("/api/v1/users")
    assert r.status_code == 400
    assert r.json()["error"]


def test_lookup_unknown_email(client):
    assert client.get("/api/v1/users", params={"email": "nobody@test.com"}).status_code == 404


def test_lookup_matches_registration_normalisation(client):
    """The address typed at registration finds the user even though the domain is stored lower-cased."""
    assert client.post(
        "/api/v1/auth/register", json={"email": "Ana@Example.COM", "password": "password123"}
    ).status_code == 201
    r = client.get("/api/v1/users", params={"email": "Ana@Example.COM"})
    assert r.status_code == 200
    assert r.json()["email"] == "Ana@example.com"


def test_lookup_rejects_malformed_email(client):
    assert client.get("/api/v1/users", params={"email": "not-an-email"}).status_code == 400
