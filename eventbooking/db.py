"""SQLite storage setup for the event booking service."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from os import PathLike

_PK = "INTEGER PRIMARY KEY AUTOINCREMENT"


@dataclass(frozen=True)
class _Table:
    """Declarative description of one table in the schema."""

    name: str
    columns: tuple[tuple[str, str], ...]
    references: tuple[tuple[str, str], ...] = field(default=())

    def ddl(self) -> str:
        parts = [f"{col} {spec}" for col, spec in self.columns]
        parts.extend(
            f"FOREIGN KEY ({col}) REFERENCES {target}(id)"
            for col, target in self.references
        )
        body = ", ".join(parts)
        return f"CREATE TABLE IF NOT EXISTS {self.name} ({body})"


_SCHEMA: tuple[_Table, ...] = (
    _Table(
        "users",
        (
            ("id", _PK),
            ("email", "TEXT NOT NULL UNIQUE"),
            ("password", "TEXT NOT NULL"),
            ("name", "TEXT NOT NULL"),
        ),
    ),
    _Table(
        "events",
        (
            ("id", _PK),
            ("name", "TEXT NOT NULL"),
            ("description", "TEXT NOT NULL"),
            ("location", "TEXT NOT NULL"),
            ("date_time", "DATETIME NOT NULL"),
            ("user_id", "INTEGER NOT NULL"),
            ("created_at", "DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP"),
        ),
        (("user_id", "users"),),
    ),
    _Table(
        "registrations",
        (
            ("id", _PK),
            ("event_id", "INTEGER NOT NULL"),
            ("user_id", "INTEGER NOT NULL"),
        ),
        (("event_id", "events"), ("user_id", "users")),
    ),
)


def init_db(path: str | PathLike[str] = "api.db") -> sqlite3.Connection:
    """Open the database at ``path`` and make sure all tables exist."""
    try:
        conn = sqlite3.connect(path)
    except sqlite3.Error as exc:
        raise RuntimeError("Could not connect to database.") from exc
    create_tables(conn)
    return conn


def create_tables(conn: sqlite3.Connection) -> None:
    """Create the users, events and registrations tables if missing."""
    for table in _SCHEMA:
        try:
            conn.execute(table.ddl())
        except sqlite3.Error as exc:
            raise RuntimeError(
                f"Could not create {table.name} table: {exc}"
            ) from exc
    conn.commit()