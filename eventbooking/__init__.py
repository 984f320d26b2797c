"""Event booking: SQLite storage for events and registrations, password hashing and request handlers."""

__version__ = "0.1.0"
__all__ = ["db", "events", "hashing", "handlers"]