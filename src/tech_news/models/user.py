# src/tech_news/models/user.py
"""SQLAlchemy model for registered users."""

from __future__ import annotations

from typing import TYPE_CHECKING

from email_validator import EmailNotValidError, validate_email
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from tech_news.db.errors import ValidationError
from tech_news.db.session import Base

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .comment import Comment
    from .post import Post
    from .vote import Vote


class User(Base):
    """A registered account.

    ``password`` only ever holds a bcrypt hash; plaintext is hashed by
    ``services.user_service.prepare_user_fields`` before it is assigned.
    """

    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    posts: Mapped[list[Post]] = relationship(
        "Post",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    votes: Mapped[list[Vote]] = relationship(
        "Vote",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    # Many-to-many through the vote table; read-only, writes go through Vote.
    voted_posts: Mapped[list[Post]] = relationship(
        "Post",
        secondary="vote",
        viewonly=True,
    )

    @validates("email")
    def _validate_email(self, key: str, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as err:
            raise ValidationError("email must be a valid email address") from err
        return value
