# src/tech_news/models/vote.py
"""Models capturing upvotes on posts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, func, select
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql.elements import Label

from tech_news.db.session import Base

from .post import Post

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .user import User


class Vote(Base):
    """One upvote event by a user on a post.

    There is no uniqueness on (user_id, post_id): every upvote inserts a row,
    so a post's vote count is the number of vote events.
    """

    __tablename__ = "vote"
    __table_args__ = (Index("ix_vote_post_id", "post_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )

    user: Mapped[User] = relationship("User", back_populates="votes")
    post: Mapped[Post] = relationship("Post", back_populates="votes")


def vote_count_subquery() -> Label[int]:
    """Return ``(SELECT count(vote.id) FROM vote WHERE vote.post_id = post.id)``.

    The subquery correlates against the enclosing ``post`` row, so it can be
    added to any SELECT over posts, including ones joining users or comments.
    """
    return (
        select(func.count(Vote.id))
        .where(Vote.post_id == Post.id)
        .correlate_except(Vote)
        .scalar_subquery()
        .label("vote_count")
    )
