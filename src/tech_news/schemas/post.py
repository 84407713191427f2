"""Post-related Pydantic schemas."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field

from .comment import CommentWithAuthor
from .user import UserName


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str | None = Field(None, description="Headline shown in listings")
    post_url: str | None = Field(None, description="External link the post points to")
    user_id: int | None = Field(None, description="Author's user id")


class PostUpdate(BaseModel):
    """Only the title of a post can be changed."""

    title: str | None = None


class PostRecord(BaseModel):
    """A post row as stored, returned after creation."""

    id: int
    title: str
    post_url: str
    user_id: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class PostSummary(BaseModel):
    """A post with its derived vote count."""

    id: int
    post_url: str
    title: str
    created_at: datetime.datetime
    vote_count: int

    model_config = ConfigDict(from_attributes=True)


class PostResponse(PostSummary):
    """A post with its vote count and author."""

    user: UserName


class PostWithComments(PostResponse):
    """A post with author and comments, as rendered on the home page."""

    comments: list[CommentWithAuthor] = []
