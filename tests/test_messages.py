"""Contact-form message tests."""


def test_submit_and_list_messages(client):
    r = client.post(
        "/api/v1/contact",
        json={"name": "Lu", "email": "lu@test.com", "subject": "Hello", "message": "Great app"},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["data"]["subject"] == "Hello"

    listed = client.get("/api/v1/messages").json()
    assert listed["success"] is True
    assert [m["message"] for m in listed["data"]] == ["Great app"]


def test_submit_requires_every_field(client):
    r = client.post("/api/v1/contact", json={"name": "Lu", "email": "lu@test.com", "subject": "Hi"})
    assert r.status_code == 400
    assert r.json()["details"][0]["field"] == "message"
