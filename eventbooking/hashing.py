"""Password hashing with bcrypt."""

from __future__ import annotations

import bcrypt

DEFAULT_ROUNDS = 14


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Return the bcrypt hash of ``password`` using ``rounds`` as the cost."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("ascii")


def compare_password_and_hash(password: str, hashed: str) -> bool:
    """Return whether ``password`` matches the bcrypt hash ``hashed``."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False