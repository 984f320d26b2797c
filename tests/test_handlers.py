import sqlite3

import pytest

from eventbooking import handlers
from eventbooking.db import create_tables
from eventbooking.events import get_event_by_id

PAYLOAD = {
    "name": "Launch",
    "description": "Product launch",
    "location": "Hall A",
    "date_time": "2025-06-01T10:00:00Z",
}


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    create_tables(connection)
    yield connection
    connection.close()


def _create(conn, user_id=1, **overrides):
    response = handlers.create_event(conn, user_id, {**PAYLOAD, **overrides})
    return response.body["event"]["id"]


def _registrations(conn):
    return conn.execute("SELECT user_id, event_id FROM registrations").fetchall()


def test_get_events_empty(conn):
    response = handlers.get_events(conn)
    assert response.status == 200
    assert response.body == {
        "events": [],
        "message": "Events retrieved successfully",
        "status": "success",
    }


def test_create_event_returns_created(conn):
    response = handlers.create_event(conn, 4, PAYLOAD)
    assert response.status == 201
    assert response.body["message"] == "Event created successfully"
    assert response.body["event"]["user_id"] == 4
    assert response.body["event"]["name"] == "Launch"
    assert handlers.get_events(conn).body["events"][0]["id"] == response.body["event"]["id"]


def test_create_event_invalid_input(conn):
    response = handlers.create_event(conn, 1, {"name": "Launch"})
    assert response.status == 400
    assert response.body == {"message": "Invalid input", "status": "error"}


def test_get_event_found(conn):
    event_id = _create(conn)
    response = handlers.get_event(conn, str(event_id))
    assert response.status == 200
    assert response.body["event"]["id"] == event_id
    assert response.body["event"]["date_time"] == "2025-06-01T10:00:00Z"


@pytest.mark.parametrize("raw", ["abc", "", "1.5", "99999999999999999999"])
def test_get_event_invalid_id(conn, raw):
    response = handlers.get_event(conn, raw)
    assert response.status == 400
    assert response.body["message"] == "Invalid event ID"


def test_get_event_not_found(conn):
    response = handlers.get_event(conn, "42")
    assert response.status == 404
    assert response.body["message"] == "Event not found"


def test_update_event_by_owner(conn):
    event_id = _create(conn, user_id=2)
    response = handlers.update_event(conn, 2, str(event_id), {**PAYLOAD, "name": "Renamed"})
    assert response.status == 200
    assert response.body["message"] == "Event updated successfully"
    assert get_event_by_id(conn, event_id).name == "Renamed"


def test_update_event_by_other_user(conn):
    event_id = _create(conn, user_id=2)
    response = handlers.update_event(conn, 3, str(event_id), {**PAYLOAD, "name": "Renamed"})
    assert response.status == 401
    assert response.body["message"] == "Unauthorized access"
    assert get_event_by_id(conn, event_id).name == "Launch"


def test_update_event_invalid_input(conn):
    event_id = _create(conn, user_id=2)
    response = handlers.update_event(conn, 2, str(event_id), {"name": "x"})
    assert response.status == 400
    assert response.body["message"] == "Invalid input"


def test_update_event_missing(conn):
    response = handlers.update_event(conn, 1, "9", PAYLOAD)
    assert response.status == 404


def test_delete_event_by_other_user(conn):
    event_id = _create(conn, user_id=2)
    response = handlers.delete_event(conn, 5, str(event_id))
    assert response.status == 401
    assert get_event_by_id(conn, event_id).id == event_id


def test_delete_event_by_owner(conn):
    event_id = _create(conn, user_id=2)
    response = handlers.delete_event(conn, 2, str(event_id))
    assert response.status == 200
    assert response.body["message"] == "Event deleted successfully"
    assert get_event_by_id(conn, event_id) is None


def test_register_and_cancel(conn):
    event_id = _create(conn)
    response = handlers.register_for_event(conn, 8, str(event_id))
    assert response.status == 200
    assert response.body["message"] == "Registered for event successfully"
    assert response.body["event"]["id"] == event_id
    assert _registrations(conn) == [(8, event_id)]

    response = handlers.cancel_registration(conn, 8, str(event_id))
    assert response.status == 200
    assert response.body["message"] == "Registration canceled successfully"
    assert _registrations(conn) == []


def test_register_invalid_and_missing(conn):
    assert handlers.register_for_event(conn, 1, "x").status == 400
    assert handlers.register_for_event(conn, 1, "7").status == 404
    assert handlers.cancel_registration(conn, 1, "7").status == 404


def test_database_failures_are_server_errors(conn):
    conn.close()
    assert handlers.get_events(conn).body["message"] == (
        "Could not retrieve events, try again later"
    )
    assert handlers.get_event(conn, "1").status == 500
    assert handlers.create_event(conn, 1, PAYLOAD).body["message"] == (
        "Could not create event, try again later"
    )
    assert handlers.register_for_event(conn, 1, "1").body["message"] == (
        "Could not retrieve event, Try again later"
    )