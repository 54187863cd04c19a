"""Emergency contact registry tests."""

from sqlalchemy import func, select

from safecircle.models import EmergencyContact


def test_add_and_list_contacts(client, register_and_login):
    """Added contacts are listed with their public fields."""
    _, headers = register_and_login("owner@test.com")
    friend_id, _ = register_and_login("friend@test.com", name="Friend", phone="555-0101")

    r = client.post("/api/v1/emergency-contacts", headers=headers, json={"contactId": friend_id})
    assert r.status_code == 201
    edge = r.json()
    assert edge["contactId"] == friend_id
    assert edge["userId"] != friend_id

    contacts = client.get("/api/v1/emergency-contacts", headers=headers).json()
    assert contacts == [
        {"id": friend_id, "name": "Friend", "email": "friend@test.com", "phone": "555-0101", "notify": True}
    ]


def test_contacts_are_directed(client, register_and_login):
    """Adding B to A's contacts does not make A one of B's contacts."""
    a_id, a_headers = register_and_login("a@test.com")
    b_id, b_headers = register_and_login("b@test.com")
    client.post("/api/v1/emergency-contacts", headers=a_headers, json={"contactId": b_id})

    assert [c["id"] for c in client.get("/api/v1/emergency-contacts", headers=a_headers).json()] == [b_id]
    assert client.get("/api/v1/emergency-contacts", headers=b_headers).json() == []


def test_add_same_contact_twice(client, db, register_and_login):
    """Second add returns 400 and leaves a single edge."""
    _, headers = register_and_login("twice@test.com")
    friend_id, _ = register_and_login("twice-friend@test.com")

    first = client.post("/api/v1/emergency-contacts", headers=headers, json={"contactId": friend_id})
    second = client.post("/api/v1/emergency-contacts", headers=headers, json={"contactId": friend_id})
    assert first.status_code == 201
    assert second.status_code == 400
    assert "exists" in second.json()["error"]
    assert db.scalar(select(func.count()).select_from(EmergencyContact)) == 1


def test_add_unknown_user_is_not_found(client, register_and_login):
    _, headers = register_and_login("lonely@test.com")
    r = client.post("/api/v1/emergency-contacts", headers=headers, json={"contactId": 9999})
    assert r.status_code == 404


def test_add_self_is_rejected(client, register_and_login):
    me_id, headers = register_and_login("self@test.com")
    r = client.post("/api/v1/emergency-contacts", headers=headers, json={"contactId": me_id})
    assert r.status_code == 400


def test_add_requires_contact_id(client, register_and_login):
    _, headers = register_and_login("noid@test.com")
    r = client.post("/api/v1/emergency-contacts", headers=headers, json={})
    assert r.status_code == 400


def test_remove_contact(client, register_and_login):
    _, headers = register_and_login("rm@test.com")
    friend_id, _ = register_and_login("rm-friend@test.com")
    client.post("/api/v1/emergency-contacts", headers=headers, json={"contactId": friend_id})

    r = client.delete(f"/api/v1/emergency-contacts/{friend_id}", headers=headers)
    assert r.status_code == 204
    assert client.get("/api/v1/emergency-contacts", headers=headers).json() == []


def test_remove_missing_contact_is_not_found(client, register_and_login):
    """Removing an edge that does not exist returns 404 and changes nothing."""
    _, headers = register_and_login("rm2@test.com")
    friend_id, _ = register_and_login("rm2-friend@test.com")
    other_id, _ = register_and_login("rm2-other@test.com")
    client.post("/api/v1/emergency-contacts", headers=headers, json={"contactId": friend_id})

    r = client.delete(f"/api/v1/emergency-contacts/{other_id}", headers=headers)
    assert r.status_code == 404
    assert [c["id"] for c in client.get("/api/v1/emergency-contacts", headers=headers).json()] == [friend_id]


def test_contacts_require_auth(client):
    assert client.post("/api/v1/emergency-contacts", json={"contactId": 1}).status_code == 401
    assert client.delete("/api/v1/emergency-contacts/1").status_code == 401
