# src/tech_news/models/comment.py
"""SQLAlchemy model for comments on posts."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from tech_news.db.errors import ValidationError
from tech_news.db.session import Base
from tech_news.db.time import utcnow

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .post import Post
    from .user import User


class Comment(Base):
    """A user's comment on a post."""

    __tablename__ = "comment"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    comment_text: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
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

    user: Mapped[User] = relationship("User", back_populates="comments")
    post: Mapped[Post] = relationship("Post", back_populates="comments")

    @validates("comment_text")
    def _validate_comment_text(self, key: str, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValidationError("comment_text must not be empty")
        return value
