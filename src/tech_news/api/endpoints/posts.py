# src/tech_news/api/endpoints/posts.py
"""Post-related endpoints for the Tech News API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from tech_news.api.dependencies import SessionDep
from tech_news.api.errors import not_found, store_error_response
from tech_news.db.errors import StoreError
from tech_news.models import Post
from tech_news.schemas import (
    AffectedRows,
    ErrorResponse,
    Message,
    PostCreate,
    PostRecord,
    PostResponse,
    PostSummary,
    PostUpdate,
    VoteCreate,
)
from tech_news.services import post_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])

STORE_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": Message}}


@router.get("", response_model=list[PostResponse], responses=STORE_ERROR)
def list_posts(db: SessionDep) -> list[Post]:
    """List all posts, newest first, with vote counts and authors."""
    return list(post_service.get_posts(db))


@router.post("", response_model=PostRecord, responses=STORE_ERROR)
def create_post(payload: PostCreate, db: SessionDep) -> Post:
    """Create a post.

    Expects ``{"title": ..., "post_url": "https://...", "user_id": 1}``.
    """
    return post_service.create_post(db, payload.model_dump())


# Declared before "/{post_id}" so the literal path wins.
@router.put(
    "/upvote",
    response_model=PostSummary,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **NOT_FOUND},
)
def upvote_post(payload: VoteCreate, db: SessionDep) -> Post | JSONResponse:
    """Record an upvote and return the post with its new vote count."""
    try:
        post = post_service.upvote(db, user_id=payload.user_id, post_id=payload.post_id)
    except StoreError as err:
        logger.warning("Upvote by user %s on post %s rejected: %s", payload.user_id, payload.post_id, err)
        return store_error_response(err, status.HTTP_400_BAD_REQUEST)
    if post is None:
        return not_found("post")
    return post


@router.get("/{post_id}", response_model=PostResponse, responses={**NOT_FOUND, **STORE_ERROR})
def get_post(post_id: int, db: SessionDep) -> Post | JSONResponse:
    """Get a single post with its vote count and author."""
    post = post_service.get_post(db, post_id)
    if post is None:
        return not_found("post")
    return post


@router.put("/{post_id}", response_model=AffectedRows, responses={**NOT_FOUND, **STORE_ERROR})
def update_post(post_id: int, payload: PostUpdate, db: SessionDep) -> AffectedRows | JSONResponse:
    """Rename a post."""
    affected = post_service.update_post(db, post_id, payload.title)
    if not affected:
        return not_found("post")
    return AffectedRows(affected_rows=affected)


@router.delete("/{post_id}", response_model=AffectedRows, responses={**NOT_FOUND, **STORE_ERROR})
def delete_post(post_id: int, db: SessionDep) -> AffectedRows | JSONResponse:
    """Delete a post along with its votes and comments."""
    affected = post_service.delete_post(db, post_id)
    if not affected:
        return not_found("post")
    return AffectedRows(affected_rows=affected)
