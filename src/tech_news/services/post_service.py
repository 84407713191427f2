"""Service-level helpers for posts, their vote counts and upvoting."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from sqlalchemy.orm import Session, joinedload

from tech_news.db.errors import ValidationError, commit
from tech_news.models import Comment, Post, Vote

logger = logging.getLogger(__name__)

__all__ = [
    "count_votes",
    "create_post",
    "delete_post",
    "get_home_posts",
    "get_post",
    "get_posts",
    "posts_by_user",
    "update_post",
    "upvote",
    "votes_by_user",
    "votes_for_post",
]

POST_FIELDS = frozenset({"title", "post_url", "user_id"})

# Newest first; id breaks ties between identical timestamps.
NEWEST_FIRST = (Post.created_at.desc(), Post.id.desc())


def get_posts(db: Session) -> Sequence[Post]:
    """Return all posts, newest first, each with its vote count and author."""
    return db.query(Post).options(joinedload(Post.user)).order_by(*NEWEST_FIRST).all()


def get_home_posts(db: Session) -> Sequence[Post]:
    """Return posts with vote counts, authors and comments with their authors.

    Everything is fetched in a single SELECT.
    """
    return (
        db.query(Post)
        .options(
            joinedload(Post.user),
            joinedload(Post.comments).joinedload(Comment.user),
        )
        .order_by(*NEWEST_FIRST)
        .all()
    )


def get_post(db: Session, post_id: int, *, with_user: bool = True) -> Post | None:
    """Return a post by id with a freshly computed vote count.

    ``populate_existing`` makes sure an instance already in the session is
    reloaded, so ``vote_count`` reflects the database at read time.
    """
    query = db.query(Post).filter(Post.id == post_id).populate_existing()
    if with_user:
        query = query.options(joinedload(Post.user))
    return query.first()


def count_votes(db: Session, post_id: int) -> int:
    """Return the vote count of one post (0 for an unknown post)."""
    return db.query(Post.vote_count).filter(Post.id == post_id).scalar() or 0


def posts_by_user(db: Session, user_id: int) -> Sequence[Post]:
    """Return the posts authored by ``user_id``, newest first."""
    return db.query(Post).filter(Post.user_id == user_id).order_by(*NEWEST_FIRST).all()


def votes_for_post(db: Session, post_id: int) -> Sequence[Vote]:
    """Return every vote cast on ``post_id``."""
    return db.query(Vote).filter(Vote.post_id == post_id).order_by(Vote.id).all()


def votes_by_user(db: Session, user_id: int) -> Sequence[Vote]:
    """Return every vote cast by ``user_id``."""
    return db.query(Vote).filter(Vote.user_id == user_id).order_by(Vote.id).all()


def create_post(db: Session, fields: Mapping[str, Any]) -> Post:
    """Persist a new post.

    Raises:
        ValidationError: Missing title/url/author or malformed ``post_url``.
        ForeignKeyViolation: ``user_id`` does not reference an existing user.
    """
    post = Post(
        **{key: value for key, value in fields.items() if key in POST_FIELDS and value is not None}
    )
    db.add(post)
    commit(db)
    db.refresh(post)
    logger.info("Created post %s by user %s", post.id, post.user_id)
    return post


def update_post(db: Session, post_id: int, title: str | None) -> int:
    """Replace the title of ``post_id``.

    Returns:
        The number of posts updated; 0 when no post has that id.
    """
    if title is None:
        raise ValidationError("title is required")
    posts = db.query(Post).filter(Post.id == post_id).all()
    for post in posts:
        post.title = title
    commit(db)
    return len(posts)


def delete_post(db: Session, post_id: int) -> int:
    """Delete ``post_id`` together with its votes and comments.

    Returns:
        The number of posts deleted; 0 when no post has that id.
    """
    posts = db.query(Post).filter(Post.id == post_id).all()
    for post in posts:
        db.delete(post)
    commit(db)
    if posts:
        logger.info("Deleted post %s", post_id)
    return len(posts)


def upvote(db: Session, *, user_id: int | None, post_id: int | None) -> Post | None:
    """Record one vote by ``user_id`` on ``post_id`` and return the post re-read.

    The vote is committed before the read, so the returned ``vote_count``
    includes it. When the insert fails nothing is read and the error
    propagates unchanged.

    Raises:
        ValidationError: ``user_id`` or ``post_id`` is missing.
        ForeignKeyViolation: Either id does not reference an existing row.
    """
    if user_id is None or post_id is None:
        raise ValidationError("user_id and post_id are required")
    db.add(Vote(user_id=user_id, post_id=post_id))
    commit(db)
    logger.info("User %s upvoted post %s", user_id, post_id)
    return get_post(db, post_id, with_user=False)
