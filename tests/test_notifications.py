"""Notification retrieval tests."""


def _panic(client, sender_headers, contact_id):
    client.post("/api/v1/emergency-contacts", headers=sender_headers, json={"contactId": contact_id})
    client.post("/api/v1/panic-alert", headers=sender_headers)


def test_notifications_newest_first(client, register_and_login):
    _, first = register_and_login("first@test.com", name="First")
    _, second = register_and_login("second@test.com", name="Second")
    me_id, me = register_and_login("me@test.com")
    _panic(client, first, me_id)
    _panic(client, second, me_id)

    items = client.get("/api/v1/notifications", headers=me).json()
    assert [n["sender"]["name"] for n in items] == ["Second", "First"]


def test_notifications_only_for_recipient(client, register_and_login):
    _, sender = register_and_login("s@test.com")
    me_id, me = register_and_login("r@test.com")
    _, other = register_and_login("o@test.com")
    _panic(client, sender, me_id)

    assert len(client.get("/api/v1/notifications", headers=me).json()) == 1
    assert client.get("/api/v1/notifications", headers=other).json() == []
    assert client.get("/api/v1/notifications", headers=sender).json() == []


def test_mark_read(client, register_and_login):
    _, sender = register_and_login("rs@test.com")
    me_id, me = register_and_login("rr@test.com")
    _, other = register_and_login("ro@test.com")
    _panic(client, sender, me_id)
    notification_id = client.get("/api/v1/notifications", headers=me).json()[0]["id"]

    assert client.patch(f"/api/v1/notifications/{notification_id}/read", headers=other).status_code == 404

    r = client.patch(f"/api/v1/notifications/{notification_id}/read", headers=me)
    assert r.status_code == 200
    assert r.json()["isRead"] is True
    assert client.get("/api/v1/notifications", headers=me).json()[0]["isRead"] is True


def test_notifications_require_auth(client):
    assert client.get("/api/v1/notifications").status_code == 401
