"""
Tests for ``AnnouncementClient``.

The client is pointed at the ASGI app through FastAPI's ``TestClient``,
which offers the same ``request`` interface as ``requests.Session``.
"""

import requests

from announcement_client import AnnouncementClient


def make_client(http):
    return AnnouncementClient(base_url="http://testserver/", session=http)


def test_crud_round_trip(empty_client):
    api = make_client(empty_client)

    created, error = api.create(title="Maintenance", content="Tonight 22:00")
    assert error is None
    assert created["id"] == 1
    assert created["active"] is True

    hidden, error = api.create(title="Draft", active=False)
    assert error is None

    public, error = api.list_announcements()
    assert error is None
    assert [item["id"] for item in public] == [1]

    everything, error = api.list_all()
    assert [item["id"] for item in everything] == [1, hidden["id"]]

    updated, error = api.update(hidden["id"], active=True)
    assert error is None
    assert updated["title"] == "Draft"
    assert updated["active"] is True

    fetched, error = api.get(hidden["id"])
    assert fetched == updated

    deleted, error = api.delete(1)
    assert deleted is True
    assert error is None


def test_not_found_reports_server_message(empty_client):
    api = make_client(empty_client)

    data, error = api.get(42)
    assert data is None
    assert error == {"status_code": 404, "message": "Announcement not found"}

    deleted, error = api.delete(42)
    assert deleted is False
    assert error["status_code"] == 404


class _FailingSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_connection_error():
    api = AnnouncementClient(base_url="http://localhost:3000", session=_FailingSession())
    items, error = api.list_announcements()
    assert items == []
    assert error == {"status_code": None, "message": "connection refused"}
