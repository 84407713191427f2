"""Password hashing utilities built on bcrypt."""
from __future__ import annotations

import bcrypt

from tech_news.core.settings import settings

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a salted bcrypt hash of the provided password.

    Args:
        password: Plaintext password.
        rounds: Cost factor override; defaults to ``settings.bcrypt_rounds``.

    Returns:
        The encoded hash, salt and cost factor included.
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Returns:
        True if ``password`` hashes to ``hashed``; False otherwise, including
        when ``hashed`` is not a bcrypt hash at all.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False
