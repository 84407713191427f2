# src/tech_news/models/post.py
"""SQLAlchemy model for link posts."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from tech_news.db.errors import ValidationError
from tech_news.db.session import Base
from tech_news.db.time import utcnow

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .comment import Comment
    from .user import User
    from .vote import Vote

_http_url = TypeAdapter(HttpUrl)


class Post(Base):
    """A titled link submitted by a user.

    ``vote_count`` is not a column: it is a correlated subquery attached to
    the mapping in ``tech_news.models`` and evaluated on every load.
    """

    __tablename__ = "post"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    post_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    user: Mapped[User] = relationship("User", back_populates="posts")
    votes: Mapped[list[Vote]] = relationship(
        "Vote",
        back_populates="post",
        cascade="all, delete-orphan",
    )
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.created_at",
    )

    @validates("post_url")
    def _validate_post_url(self, key: str, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            _http_url.validate_python(value)
        except PydanticValidationError as err:
            raise ValidationError("post_url must be a valid URL") from err
        return value
