"""
Tests for the Supabase store against a fake HTTP session.
"""
import asyncio
import json

import pytest
import requests

from fuego_admin.constant import DEFAULT_MENU_ITEMS
from fuego_admin.models import Announcement, MenuItem
from fuego_admin.store import StoreError, SupabaseStore, menu_item_id


def make_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode() if body is not None else b""
    response.url = "http://supabase.test/rest/v1/table"
    return response


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def request(self, **kwargs):
        self.requests.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def waits():
    return []


def make_store(session, waits, retries=3):
    return SupabaseStore(
        url="http://supabase.test/",
        api_key="anon-key",
        timeout=5,
        retries=retries,
        retry_delay=1.0,
        session=session,
        sleep=waits.append,
    )


# ============ Requests ============

def test_fetch_reservations_sanitizes_rows(waits):
    session = FakeSession(make_response(200, [
        {"id": "r1", "client_name": "Ana", "status": "pending", "created_at": "1970-01-01T00:00:01+00:00"},
        {"client_name": "sem id"},
        None,
    ]))
    store = make_store(session, waits)

    result = asyncio.run(store.fetch_reservations())

    assert [r.id for r in result] == ["r1"]
    assert result[0].created_at == 1000
    sent = session.requests[0]
    assert sent["method"] == "GET"
    assert sent["url"] == "http://supabase.test/rest/v1/reservations"
    assert sent["headers"]["apikey"] == "anon-key"
    assert sent["headers"]["Authorization"] == "Bearer anon-key"
    assert sent["timeout"] == 5


def test_non_list_payload_yields_empty_list(waits):
    store = make_store(FakeSession(make_response(200, {"message": "oops"})), waits)

    assert asyncio.run(store.fetch_menu_items()) == []


def test_toggle_announcement_patches_by_id(waits):
    session = FakeSession(make_response(204))
    store = make_store(session, waits)

    asyncio.run(store.toggle_announcement("a1", False))

    sent = session.requests[0]
    assert sent["method"] == "PATCH"
    assert sent["params"] == {"id": "eq.a1"}
    assert sent["json"] == {"is_active": False}


def test_create_announcement_returns_created_row(waits):
    session = FakeSession(make_response(201, [{"id": "a9", "message": "Olá", "is_active": True}]))
    store = make_store(session, waits)

    created = asyncio.run(store.create_announcement("Olá"))

    assert created == Announcement(id="a9", message="Olá", is_active=True)
    assert session.requests[0]["headers"]["Prefer"] == "return=representation"


def test_create_announcement_empty_response_is_none(waits):
    store = make_store(FakeSession(make_response(201, [])), waits)

    assert asyncio.run(store.create_announcement("Olá")) is None


def test_add_menu_item_stores_popular_as_highlight(waits):
    session = FakeSession(make_response(201, [
        {"id": "picanha-abc123", "name": "Picanha", "price": 89.9, "category": "carnes", "highlight": True},
    ]))
    store = make_store(session, waits)

    created = asyncio.run(store.add_menu_item({
        "name": "Picanha",
        "description": "",
        "price": 89.9,
        "category": "carnes",
        "image": "https://example.com/p.jpg",
        "popular": True,
    }))

    row = session.requests[0]["json"]
    assert row["highlight"] is True
    assert "popular" not in row
    assert row["id"].startswith("picanha-")
    assert isinstance(created, MenuItem)
    assert created.highlight is True


def test_reset_menu_deletes_then_inserts_defaults(waits):
    session = FakeSession(make_response(204), make_response(201))
    store = make_store(session, waits)

    asyncio.run(store.reset_menu_to_defaults())

    delete, insert = session.requests
    assert delete["method"] == "DELETE"
    assert insert["method"] == "POST"
    assert [row["id"] for row in insert["json"]] == [item["id"] for item in DEFAULT_MENU_ITEMS]


def test_update_reservation_status_rejects_other_statuses(waits):
    session = FakeSession()
    store = make_store(session, waits)

    with pytest.raises(ValueError):
        asyncio.run(store.update_reservation_status("r1", "pending"))
    assert session.requests == []


def test_update_reservation_status(waits):
    session = FakeSession(make_response(204))
    store = make_store(session, waits)

    asyncio.run(store.update_reservation_status("r1", "confirmed"))

    assert session.requests[0]["json"] == {"status": "confirmed"}
    assert session.requests[0]["params"] == {"id": "eq.r1"}


# ============ Retries and errors ============

def test_transient_failures_are_retried_with_backoff(waits):
    session = FakeSession(
        requests.exceptions.ConnectionError("refused"),
        make_response(503),
        make_response(200, [{"id": "a1", "message": "x"}]),
    )
    store = make_store(session, waits)

    result = asyncio.run(store.fetch_announcements())

    assert [a.id for a in result] == ["a1"]
    assert waits == [1.0, 2.0]


def test_gives_up_after_max_retries(waits):
    session = FakeSession(*(requests.exceptions.Timeout("slow") for _ in range(3)))
    store = make_store(session, waits)

    with pytest.raises(StoreError) as exc_info:
        asyncio.run(store.fetch_reservations())

    assert exc_info.value.operation == "fetch_reservations"
    assert len(session.requests) == 3


def test_client_errors_are_not_retried(waits):
    session = FakeSession(make_response(401, {"message": "bad key"}))
    store = make_store(session, waits)

    with pytest.raises(StoreError):
        asyncio.run(store.update_menu_price("m1", 10.0))
    assert len(session.requests) == 1
    assert waits == []


def test_ping_reports_offline_instead_of_raising(waits):
    store = make_store(FakeSession(requests.exceptions.ConnectionError("down")), waits, retries=1)

    assert asyncio.run(store.ping()) is False


def test_ping_online(waits):
    store = make_store(FakeSession(make_response(200, [])), waits)

    assert asyncio.run(store.ping()) is True


def test_menu_item_id_slug():
    item_id = menu_item_id("Petit Gâteau & Sorvete")

    assert item_id.startswith("petit-gateau-sorvete-")
    assert len(item_id.rsplit("-", 1)[1]) == 6
