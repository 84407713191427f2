# src/tech_news/models/__init__.py
"""SQLAlchemy models for the Tech News application."""

from sqlalchemy.orm import column_property

from .comment import Comment
from .post import Post
from .user import User
from .vote import Vote, vote_count_subquery

# Derived on every Post SELECT; never persisted.
Post.vote_count = column_property(vote_count_subquery())

__all__ = [
    "Comment",
    "Post",
    "User",
    "Vote",
    "vote_count_subquery",
]
