"""User-related Pydantic schemas."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Registration payload.

    Fields are optional at this layer; the store reports missing or malformed
    values as validation errors.
    """

    username: str | None = Field(None, description="Public display name")
    email: str | None = Field(None, description="Unique email address")
    password: str | None = Field(None, description="Plaintext password (min 4 characters)")


class UserUpdate(BaseModel):
    """Partial update of a user; only supplied fields are written."""

    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    """Credentials submitted to the login endpoint."""

    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """Public view of a user; the password hash is never included."""

    id: int
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserName(BaseModel):
    """Author projection embedded in posts and comments."""

    username: str

    model_config = ConfigDict(from_attributes=True)


class UserPost(BaseModel):
    """A post as listed on its author's profile."""

    id: int
    title: str
    post_url: str
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class PostTitle(BaseModel):
    """Title-only projection of a post."""

    title: str

    model_config = ConfigDict(from_attributes=True)


class UserComment(BaseModel):
    """A comment as listed on its author's profile."""

    id: int
    comment_text: str
    created_at: datetime.datetime
    post: PostTitle

    model_config = ConfigDict(from_attributes=True)


class UserDetailResponse(UserResponse):
    """A user together with their posts, comments and voted posts."""

    posts: list[UserPost] = []
    comments: list[UserComment] = []
    voted_posts: list[PostTitle] = []


class LoginResponse(BaseModel):
    """Successful login result."""

    user: UserResponse
    message: str
