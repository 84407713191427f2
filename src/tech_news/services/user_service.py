"""CRUD-style helpers for managing users, plus the login check."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from sqlalchemy.orm import Session, selectinload

from tech_news.core import security
from tech_news.db.errors import ValidationError, commit
from tech_news.models import Comment, User

logger = logging.getLogger(__name__)

__all__ = [
    "AuthOutcome",
    "AuthResult",
    "MIN_PASSWORD_LENGTH",
    "authenticate",
    "check_password",
    "create_user",
    "delete_user",
    "find_user_by_email",
    "get_user",
    "get_user_detail",
    "get_users",
    "prepare_user_fields",
    "update_user",
]

MIN_PASSWORD_LENGTH = 4
USER_FIELDS = frozenset({"username", "email", "password"})


class AuthOutcome(Enum):
    """Result of checking a set of credentials."""

    NO_USER = "no_user"
    INCORRECT_PASSWORD = "incorrect_password"
    SUCCESS = "success"


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a login attempt and, on success, the matching user."""

    outcome: AuthOutcome
    user: User | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is AuthOutcome.SUCCESS


def prepare_user_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Return the user fields ready to be written, with the password hashed.

    Every write path for users goes through this function, so plaintext
    passwords never reach the model.

    Raises:
        ValidationError: If the plaintext password is shorter than
            ``MIN_PASSWORD_LENGTH`` or longer than bcrypt accepts.
    """
    prepared = {
        key: value for key, value in fields.items() if key in USER_FIELDS and value is not None
    }
    if "password" in prepared:
        password = prepared["password"]
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        if len(password.encode("utf-8")) > security.BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"password must be at most {security.BCRYPT_MAX_PASSWORD_BYTES} bytes long"
            )
        prepared["password"] = security.hash_password(password)
    return prepared


def check_password(user: User, password: str) -> bool:
    """Return True if ``password`` matches the hash stored on ``user``."""
    return security.verify_password(password, user.password)


def get_user(db: Session, user_id: int) -> User | None:
    """Return a single user by primary key."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_detail(db: Session, user_id: int) -> User | None:
    """Return a user with posts, comments (and their posts) and voted posts loaded."""
    return (
        db.query(User)
        .options(
            selectinload(User.posts),
            selectinload(User.comments).joinedload(Comment.post),
            selectinload(User.voted_posts),
        )
        .filter(User.id == user_id)
        .first()
    )


def get_users(db: Session) -> Sequence[User]:
    """Return every user."""
    return db.query(User).order_by(User.id).all()


def find_user_by_email(db: Session, email: str | None) -> User | None:
    """Return the user with exactly this email, if any."""
    if email is None:
        return None
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, fields: Mapping[str, Any]) -> User:
    """Persist a new user with a hashed password.

    Raises:
        ValidationError: Missing required field, malformed email or bad password.
        UniqueConstraintViolation: The email is already registered.
    """
    db_user = User(**prepare_user_fields(fields))
    db.add(db_user)
    commit(db)
    db.refresh(db_user)
    logger.info("Created user %s", db_user.id)
    return db_user


def update_user(db: Session, user_id: int, fields: Mapping[str, Any]) -> int:
    """Apply partial updates to the user ``user_id``.

    Returns:
        The number of users updated; 0 when no user has that id.
    """
    update_dict = prepare_user_fields(fields)
    users = db.query(User).filter(User.id == user_id).all()
    try:
        for db_user in users:
            for key, value in update_dict.items():
                setattr(db_user, key, value)
    except ValidationError:
        db.rollback()
        raise
    commit(db)
    return len(users)


def delete_user(db: Session, user_id: int) -> int:
    """Delete the user ``user_id`` along with their posts, votes and comments.

    Returns:
        The number of users deleted; 0 when no user has that id.
    """
    users = db.query(User).filter(User.id == user_id).all()
    for db_user in users:
        db.delete(db_user)
    commit(db)
    if users:
        logger.info("Deleted user %s", user_id)
    return len(users)


def authenticate(db: Session, email: str | None, password: str | None) -> AuthResult:
    """Check an email/password pair.

    An unknown email yields ``NO_USER``; a known email with a wrong or missing
    password always yields ``INCORRECT_PASSWORD``. No session is created.
    """
    user = find_user_by_email(db, email)
    if user is None:
        return AuthResult(AuthOutcome.NO_USER)
    if password is None or not check_password(user, password):
        return AuthResult(AuthOutcome.INCORRECT_PASSWORD)
    return AuthResult(AuthOutcome.SUCCESS, user)
