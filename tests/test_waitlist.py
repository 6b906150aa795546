"""
Waitlist API tests.

Tests:
1-2. Signup persists and returns 201
3-4. Duplicate and invalid emails → 400
5.   Storage failure on insert → 500
6-7. Admin listing, with and without ADMIN_API_KEY
8.   Storage failure on the duplicate lookup → 500
9.   Routes answer on the bare path without a redirect
"""

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Query, Session

from scaffoldpro import models
from scaffoldpro.config import settings


def test_join_waitlist_returns_201(client):
    resp = client.post("/api/waitlist", json={"email": "builder@example.com"})
    assert resp.status_code == 201
    data = resp.json()
    assert data["success"] is True
    assert data["message"] == "Successfully added to waitlist"
    assert data["data"] == {"email": "builder@example.com"}


def test_join_waitlist_persists_normalized_email(client, db):
    client.post("/api/waitlist", json={"email": "Site.Lead@Example.COM"})
    entries = db.query(models.WaitlistEntry).all()
    assert len(entries) == 1
    assert entries[0].email == "site.lead@example.com"
    assert entries[0].created_at is not None


def test_duplicate_email_is_400(client, db):
    assert client.post("/api/waitlist", json={"email": "dup@example.com"}).status_code == 201
    resp = client.post("/api/waitlist", json={"email": "DUP@example.com"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert "already" in resp.json()["message"]
    assert db.query(models.WaitlistEntry).count() == 1


def test_invalid_email_is_400(client, db):
    for body in ({"email": "not-an-email"}, {"email": ""}, {}):
        resp = client.post("/api/waitlist", json=body)
        assert resp.status_code == 400, body
        assert resp.json()["success"] is False
        assert resp.json()["message"]
    assert db.query(models.WaitlistEntry).count() == 0


def test_storage_failure_is_500(client, monkeypatch):
    def broken_commit(self):
        raise OperationalError("INSERT INTO waitlist", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Session, "commit", broken_commit)
    resp = client.post("/api/waitlist", json={"email": "builder@example.com"})
    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "message": "Failed to add to waitlist. Please try again.",
    }


def test_list_waitlist_open_without_admin_key(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_API_KEY", "")
    client.post("/api/waitlist", json={"email": "a@example.com"})
    client.post("/api/waitlist", json={"email": "b@example.com"})
    resp = client.get("/api/waitlist")
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert [e["email"] for e in data["data"]] == ["a@example.com", "b@example.com"]


def test_list_waitlist_requires_admin_key_when_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_API_KEY", "admin-test-key")
    assert client.get("/api/waitlist").status_code == 401
    bad = client.get("/api/waitlist", headers={"Authorization": "Bearer wrong"})
    assert bad.status_code == 401
    ok = client.get("/api/waitlist", headers={"Authorization": "Bearer admin-test-key"})
    assert ok.status_code == 200
    assert ok.json()["data"] == []


def test_duplicate_lookup_failure_is_500(client, monkeypatch):
    def broken_first(self):
        raise OperationalError("SELECT FROM waitlist", {}, Exception("database is locked"))

    monkeypatch.setattr(Query, "first", broken_first)
    resp = client.post("/api/waitlist", json={"email": "builder@example.com"})
    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "message": "Failed to add to waitlist. Please try again.",
    }


def test_documented_paths_answer_without_redirect(client):
    resp = client.post("/api/waitlist", json={"email": "direct@example.com"},
                       follow_redirects=False)
    assert resp.status_code == 201
    assert client.get("/api/waitlist", follow_redirects=False).status_code == 200
