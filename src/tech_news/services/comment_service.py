"""CRUD helpers for comments."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from sqlalchemy.orm import Session

from tech_news.db.errors import ValidationError, commit
from tech_news.models import Comment

logger = logging.getLogger(__name__)

COMMENT_FIELDS = frozenset({"comment_text", "user_id", "post_id"})


def get_comments(db: Session) -> Sequence[Comment]:
    """Return every comment, oldest first."""
    return db.query(Comment).order_by(Comment.created_at, Comment.id).all()


def get_comment(db: Session, comment_id: int) -> Comment | None:
    """Return one comment by id."""
    return db.query(Comment).filter(Comment.id == comment_id).first()


def comments_for_post(db: Session, post_id: int) -> Sequence[Comment]:
    """Return the comments on ``post_id``, oldest first."""
    return (
        db.query(Comment)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at, Comment.id)
        .all()
    )


def create_comment(db: Session, fields: Mapping[str, Any]) -> Comment:
    """Persist a new comment.

    Raises:
        ValidationError: Missing or empty field.
        ForeignKeyViolation: ``user_id`` or ``post_id`` does not exist.
    """
    comment = Comment(
        **{key: value for key, value in fields.items() if key in COMMENT_FIELDS and value is not None}
    )
    db.add(comment)
    commit(db)
    db.refresh(comment)
    logger.info("Created comment %s on post %s", comment.id, comment.post_id)
    return comment


def update_comment(db: Session, comment_id: int, comment_text: str | None) -> int:
    """Replace the text of ``comment_id``; returns the number of comments updated."""
    if comment_text is None:
        raise ValidationError("comment_text is required")
    comments = db.query(Comment).filter(Comment.id == comment_id).all()
    try:
        for comment in comments:
            comment.comment_text = comment_text
    except ValidationError:
        db.rollback()
        raise
    commit(db)
    return len(comments)


def delete_comment(db: Session, comment_id: int) -> int:
    """Delete ``comment_id``; returns the number of comments deleted."""
    comments = db.query(Comment).filter(Comment.id == comment_id).all()
    for comment in comments:
        db.delete(comment)
    commit(db)
    return len(comments)
