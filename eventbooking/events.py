"""Event records and their persistence."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

_COLUMNS = "id, name, description, location, date_time, user_id, created_at"
_REQUIRED_TEXT = ("name", "description", "location")


def _parse_payload_time(value: Any) -> datetime:
    if not isinstance(value, str) or not value:
        raise ValueError("date_time must be a non-empty RFC 3339 string")
    text = value[:-1] + "+00:00" if value[-1] in "Zz" else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"invalid date_time: {value!r}") from exc
    if parsed.tzinfo is None:
        raise ValueError(f"date_time lacks a time zone: {value!r}")
    return parsed


def _parse_stored_time(value: Any) -> datetime | None:
    if value is None:
        return None
    parsed = datetime.fromisoformat(str(value))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _format_time(value: datetime | None) -> str | None:
    if value is None:
        return None
    text = value.isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


@dataclass
class Event:
    """A bookable event owned by a user."""

    name: str
    description: str
    location: str
    date_time: datetime
    id: int = 0
    user_id: int = 0
    created_at: datetime | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Event":
        """Build an event from decoded JSON; raise ValueError if it is invalid."""
        if not isinstance(payload, Mapping):
            raise ValueError("payload must be a JSON object")
        fields: dict[str, Any] = {}
        for key in _REQUIRED_TEXT:
            value = payload.get(key)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{key} is required")
            fields[key] = value
        fields["date_time"] = _parse_payload_time(payload.get("date_time"))
        return cls(**fields)

    @classmethod
    def _from_row(cls, row: tuple) -> "Event":
        event_id, name, description, location, date_time, user_id, created_at = row
        return cls(
            id=event_id,
            name=name,
            description=description,
            location=location,
            date_time=_parse_stored_time(date_time),
            user_id=user_id,
            created_at=_parse_stored_time(created_at),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of the event."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "location": self.location,
            "date_time": _format_time(self.date_time),
            "user_id": self.user_id,
            "created_at": _format_time(self.created_at),
        }

    def save(self, conn: sqlite3.Connection, user_id: int) -> None:
        """Insert the event as owned by ``user_id`` and record its new id."""
        self.user_id = user_id
        with conn:
            cursor = conn.execute(
                "INSERT INTO events (name, description, location, date_time, user_id) "
                "VALUES (?, ?, ?, ?, ?)",
                (self.name, self.description, self.location,
                 self.date_time.isoformat(), self.user_id),
            )
        self.id = cursor.lastrowid

    def update(self, conn: sqlite3.Connection) -> None:
        """Write the event's editable fields to the row with its id."""
        with conn:
            conn.execute(
                "UPDATE events SET name = ?, description = ?, location = ?, date_time = ? "
                "WHERE id = ?",
                (self.name, self.description, self.location,
                 self.date_time.isoformat(), self.id),
            )

    def delete(self, conn: sqlite3.Connection) -> None:
        """Remove the event's row."""
        with conn:
            conn.execute("DELETE FROM events WHERE id = ?", (self.id,))

    def register_user(self, conn: sqlite3.Connection, user_id: int) -> None:
        """Record that ``user_id`` is registered for this event."""
        with conn:
            conn.execute(
                "INSERT INTO registrations (user_id, event_id) VALUES (?, ?)",
                (user_id, self.id),
            )

    def cancel_registration(self, conn: sqlite3.Connection, user_id: int) -> None:
        """Remove every registration of ``user_id`` for this event."""
        with conn:
            conn.execute(
                "DELETE FROM registrations WHERE user_id = ? AND event_id = ?",
                (user_id, self.id),
            )


def get_events(conn: sqlite3.Connection) -> list[Event]:
    """Return all stored events."""
    rows = conn.execute(f"SELECT {_COLUMNS} FROM events").fetchall()
    return [Event._from_row(row) for row in rows]


def get_event_by_id(conn: sqlite3.Connection, event_id: int) -> Event | None:
    """Return the event with ``event_id``, or None if there is none."""
    row = conn.execute(
        f"SELECT {_COLUMNS} FROM events WHERE id = ?", (event_id,)
    ).fetchone()
    return None if row is None else Event._from_row(row)