# eventbooking

The core of a small event booking service. Events and registrations are stored in
SQLite, passwords are hashed with bcrypt, and a set of handlers turns each event
operation into an HTTP status code and a JSON-ready response body.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Database

`eventbooking.db.init_db(path="api.db")` opens a SQLite database and creates the
`users`, `events` and `registrations` tables when they are missing, then returns the
`sqlite3.Connection`. Pass `":memory:"` for a throwaway database. If the database
cannot be opened, or a table cannot be created, it raises `RuntimeError`.

`create_tables(conn)` creates the same tables on a connection you already have.

## Events

`eventbooking.events.Event` is a dataclass holding one event: `name`, `description`,
`location`, `date_time`, and the `id`, `user_id` and `created_at` filled in by storage.

- `Event.from_payload(payload)` builds an event from a decoded JSON object. `name`,
  `description` and `location` must be non-empty strings, and `date_time` must be an
  RFC 3339 timestamp with a time zone (such as `"2025-01-01T18:00:00Z"`). Anything
  else raises `ValueError`.
- `event.to_dict()` gives the JSON form of the event; UTC times are written with a
  trailing `Z`.
- `event.save(conn, user_id)` inserts the event as owned by `user_id` and sets its `id`.
- `event.update(conn)` writes the name, description, location and date and time to the
  row with the event's `id`; `event.delete(conn)` removes that row.
- `event.register_user(conn, user_id)` adds a registration of the user for the event;
  `event.cancel_registration(conn, user_id)` removes all of that user's registrations
  for it.

`get_events(conn)` returns a list of every stored event. `get_event_by_id(conn,
event_id)` returns one event, or `None` when no event has that id.

## Passwords

`eventbooking.hashing.hash_password(password, rounds=14)` returns the bcrypt hash of a
password as a string. `compare_password_and_hash(password, hashed)` returns whether the
password matches the hash, and `False` for a malformed hash.

```python
from eventbooking.hashing import hash_password, compare_password_and_hash

password = "password"
hashed = hash_password(password, 4)
assert compare_password_and_hash(password, hashed)
```

## Handlers

Each function in `eventbooking.handlers` takes a connection and the request's data and
returns a `Response`, a frozen dataclass with an integer `status` and a `body` dict.
Every body has a `message` and a `status` of `"success"` or `"error"`.

```python
from eventbooking.db import init_db
from eventbooking import handlers

conn = init_db(":memory:")
response = handlers.create_event(conn, 1, {
    "name": "Meetup",
    "description": "Monthly meetup",
    "location": "Hall A",
    "date_time": "2025-01-01T18:00:00Z",
})
assert response.status == 201
assert response.body["event"]["id"] == 1
```

| Handler | Success |
| --- | --- |
| `get_events(conn)` | 200 with `events` |
| `create_event(conn, user_id, payload)` | 201 with `event` |
| `get_event(conn, event_id)` | 200 with `event` |
| `update_event(conn, user_id, event_id, payload)` | 200 |
| `delete_event(conn, user_id, event_id)` | 200 |
| `register_for_event(conn, user_id, event_id)` | 200 with `event` |
| `cancel_registration(conn, user_id, event_id)` | 200 |

Event ids may be given as strings, as they arrive in a URL path; an id that is not a
64-bit integer gives 400 `"Invalid event ID"`. An unknown event gives 404, an invalid
payload 400 `"Invalid input"`, and a database failure 500. Only the owner of an event
may update or delete it; any other user gets 401 `"Unauthorized access"`.

## What this package does not do

It runs no web server and defines no routes: the handlers are plain functions, and
wiring them to HTTP is left to the caller. It has no user accounts beyond the `users`
table itself: no sign-up, login or user listing, and no issuing or checking of
authentication tokens. The `user_id` passed to the handlers is taken on trust.