"""Comment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from tech_news.api.dependencies import SessionDep
from tech_news.api.errors import not_found
from tech_news.models import Comment
from tech_news.schemas import (
    AffectedRows,
    CommentCreate,
    CommentResponse,
    CommentUpdate,
    ErrorResponse,
    Message,
)
from tech_news.services import comment_service

router = APIRouter(prefix="/comments", tags=["comments"])

STORE_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": Message}}


@router.get("", response_model=list[CommentResponse], responses=STORE_ERROR)
def list_comments(db: SessionDep) -> list[Comment]:
    return list(comment_service.get_comments(db))


@router.get("/{comment_id}", response_model=CommentResponse, responses={**NOT_FOUND, **STORE_ERROR})
def get_comment(comment_id: int, db: SessionDep) -> Comment | JSONResponse:
    comment = comment_service.get_comment(db, comment_id)
    if comment is None:
        return not_found("comment")
    return comment


@router.post("", response_model=CommentResponse, responses=STORE_ERROR)
def create_comment(payload: CommentCreate, db: SessionDep) -> Comment:
    """Comment on a post. Expects ``{"comment_text", "user_id", "post_id"}``."""
    return comment_service.create_comment(db, payload.model_dump())


@router.put("/{comment_id}", response_model=AffectedRows, responses={**NOT_FOUND, **STORE_ERROR})
def update_comment(
    comment_id: int,
    payload: CommentUpdate,
    db: SessionDep,
) -> AffectedRows | JSONResponse:
    affected = comment_service.update_comment(db, comment_id, payload.comment_text)
    if not affected:
        return not_found("comment")
    return AffectedRows(affected_rows=affected)


@router.delete("/{comment_id}", response_model=AffectedRows, responses={**NOT_FOUND, **STORE_ERROR})
def delete_comment(comment_id: int, db: SessionDep) -> AffectedRows | JSONResponse:
    affected = comment_service.delete_comment(db, comment_id)
    if not affected:
        return not_found("comment")
    return AffectedRows(affected_rows=affected)
