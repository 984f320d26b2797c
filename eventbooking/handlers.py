"""Request handlers for events and event registrations."""

from __future__ import annotations

import re
import sqlite3
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

from eventbooking.events import Event, get_event_by_id
from eventbooking.events import get_events as _load_events

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Response:
    """An HTTP status with its JSON body."""

    status: int
    body: dict[str, Any] = field(default_factory=dict)


def _error(status: HTTPStatus, message: str) -> Response:
    return Response(int(status), {"message": message, "status": "error"})


def _success(status: HTTPStatus, message: str, **extra: Any) -> Response:
    return Response(int(status), {**extra, "message": message, "status": "success"})


def _parse_id(raw: Any) -> int | None:
    text = str(raw)
    if not _ID_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if _INT64_MIN <= value <= _INT64_MAX else None


def _find_event(
    conn: sqlite3.Connection, raw_id: Any, retrieve_failure: str
) -> Event | Response:
    event_id = _parse_id(raw_id)
    if event_id is None:
        return _error(HTTPStatus.BAD_REQUEST, "Invalid event ID")
    try:
        event = get_event_by_id(conn, event_id)
    except sqlite3.Error:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, retrieve_failure)
    if event is None:
        return _error(HTTPStatus.NOT_FOUND, "Event not found")
    return event


def _find_owned_event(conn: sqlite3.Connection, user_id: int, raw_id: Any) -> Event | Response:
    found = _find_event(conn, raw_id, "Could not retrieve event, try again later")
    if isinstance(found, Event) and found.user_id != user_id:
        return _error(HTTPStatus.UNAUTHORIZED, "Unauthorized access")
    return found


def get_events(conn: sqlite3.Connection) -> Response:
    """List all events."""
    try:
        events = _load_events(conn)
    except sqlite3.Error:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR,
                      "Could not retrieve events, try again later")
    return _success(HTTPStatus.OK, "Events retrieved successfully",
                    events=[event.to_dict() for event in events])


def create_event(conn: sqlite3.Connection, user_id: int, payload: Any) -> Response:
    """Create an event owned by ``user_id`` from a decoded JSON payload."""
    try:
        event = Event.from_payload(payload)
    except ValueError:
        return _error(HTTPStatus.BAD_REQUEST, "Invalid input")
    try:
        event.save(conn, user_id)
    except sqlite3.Error:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR,
                      "Could not create event, try again later")
    return _success(HTTPStatus.CREATED, "Event created successfully", event=event.to_dict())


def get_event(conn: sqlite3.Connection, event_id: Any) -> Response:
    """Return one event by its id."""
    found = _find_event(conn, event_id, "Could not retrieve event, try again later")
    if isinstance(found, Response):
        return found
    return _success(HTTPStatus.OK, "Event retrieved successfully", event=found.to_dict())


def update_event(conn: sqlite3.Connection, user_id: int, event_id: Any, payload: Any) -> Response:
    """Replace an event's details if ``user_id`` owns it."""
    found = _find_owned_event(conn, user_id, event_id)
    if isinstance(found, Response):
        return found
    try:
        updated = Event.from_payload(payload)
    except ValueError:
        return _error(HTTPStatus.BAD_REQUEST, "Invalid input")
    updated.id = found.id
    try:
        updated.update(conn)
    except sqlite3.Error:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR,
                      "Could not update event, try again later")
    return _success(HTTPStatus.OK, "Event updated successfully")


def delete_event(conn: sqlite3.Connection, user_id: int, event_id: Any) -> Response:
    """Delete an event if ``user_id`` owns it."""
    found = _find_owned_event(conn, user_id, event_id)
    if isinstance(found, Response):
        return found
    try:
        found.delete(conn)
    except sqlite3.Error:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR,
                      "Could not delete event, try again later")
    return _success(HTTPStatus.OK, "Event deleted successfully")


def register_for_event(conn: sqlite3.Connection, user_id: int, event_id: Any) -> Response:
    """Register ``user_id`` for an event."""
    found = _find_event(conn, event_id, "Could not retrieve event, Try again later")
    if isinstance(found, Response):
        return found
    try:
        found.register_user(conn, user_id)
    except sqlite3.Error:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR,
                      "Could not register for event, Try again later")
    return _success(HTTPStatus.OK, "Registered for event successfully", event=found.to_dict())


def cancel_registration(conn: sqlite3.Connection, user_id: int, event_id: Any) -> Response:
    """Cancel ``user_id``'s registration for an event."""
    found = _find_event(conn, event_id, "Could not retrieve event, Try again later")
    if isinstance(found, Response):
        return found
    try:
        found.cancel_registration(conn, user_id)
    except sqlite3.Error:
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR,
                      "Could not canceling the registration, Try again later")
    return _success(HTTPStatus.OK, "Registration canceled successfully")