"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import CommentCreate, CommentResponse, CommentUpdate, CommentWithAuthor
from .common import AffectedRows, ErrorResponse, Message
from .post import PostCreate, PostRecord, PostResponse, PostSummary, PostUpdate, PostWithComments
from .user import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserDetailResponse,
    UserResponse,
    UserUpdate,
)
from .vote import VoteCreate

__all__ = [
    "AffectedRows", "ErrorResponse", "Message",
    "CommentCreate", "CommentResponse", "CommentUpdate", "CommentWithAuthor",
    "PostCreate", "PostRecord", "PostResponse", "PostSummary", "PostUpdate", "PostWithComments",
    "LoginRequest", "LoginResponse", "UserCreate", "UserDetailResponse", "UserResponse", "UserUpdate",
    "VoteCreate",
]
