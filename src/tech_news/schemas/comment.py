"""Comment-related Pydantic schemas."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict

from .user import UserName


class CommentCreate(BaseModel):
    """Schema for creating a comment."""

    comment_text: str | None = None
    user_id: int | None = None
    post_id: int | None = None


class CommentUpdate(BaseModel):
    """Only the text of a comment can be changed."""

    comment_text: str | None = None


class CommentResponse(BaseModel):
    """A comment row."""

    id: int
    comment_text: str
    user_id: int
    post_id: int
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class CommentWithAuthor(CommentResponse):
    """A comment with its author's username."""

    user: UserName
