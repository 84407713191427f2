"""User endpoints: registration, login, profile reads and edits."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from tech_news.api.dependencies import SessionDep
from tech_news.api.errors import not_found
from tech_news.models import User
from tech_news.schemas import (
    AffectedRows,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    Message,
    UserCreate,
    UserDetailResponse,
    UserResponse,
    UserUpdate,
)
from tech_news.services import user_service
from tech_news.services.user_service import AuthOutcome

router = APIRouter(prefix="/users", tags=["users"])

STORE_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": Message}}

LOGIN_FAILURES = {
    AuthOutcome.NO_USER: "No user with that email address!",
    AuthOutcome.INCORRECT_PASSWORD: "Incorrect password!",
}


@router.get("", response_model=list[UserResponse], responses=STORE_ERROR)
def list_users(db: SessionDep) -> list[User]:
    """List all users; passwords are never included."""
    return list(user_service.get_users(db))


@router.get(
    "/{user_id}",
    response_model=UserDetailResponse,
    responses={**NOT_FOUND, **STORE_ERROR},
)
def get_user(user_id: int, db: SessionDep) -> User | JSONResponse:
    """Get one user with their posts, comments and voted posts."""
    user = user_service.get_user_detail(db, user_id)
    if user is None:
        return not_found("user")
    return user


@router.post("", response_model=UserResponse, responses=STORE_ERROR)
def create_user(payload: UserCreate, db: SessionDep) -> User:
    """Register a new user.

    Expects ``{"username": ..., "email": ..., "password": ...}``.
    """
    return user_service.create_user(db, payload.model_dump())


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": Message}},
)
def login(credentials: LoginRequest, db: SessionDep) -> LoginResponse | JSONResponse:
    """Check an email/password pair. No session or token is issued."""
    result = user_service.authenticate(db, credentials.email, credentials.password)
    if not result.ok:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": LOGIN_FAILURES[result.outcome]},
        )
    return LoginResponse(
        user=UserResponse.model_validate(result.user),
        message="You are now logged in!",
    )


@router.put("/{user_id}", response_model=AffectedRows, responses={**NOT_FOUND, **STORE_ERROR})
def update_user(user_id: int, payload: UserUpdate, db: SessionDep) -> AffectedRows | JSONResponse:
    """Update any subset of username, email and password (re-hashed)."""
    affected = user_service.update_user(db, user_id, payload.model_dump(exclude_unset=True))
    if not affected:
        return not_found("user")
    return AffectedRows(affected_rows=affected)


@router.delete("/{user_id}", response_model=AffectedRows, responses={**NOT_FOUND, **STORE_ERROR})
def delete_user(user_id: int, db: SessionDep) -> AffectedRows | JSONResponse:
    """Delete a user and everything they own."""
    affected = user_service.delete_user(db, user_id)
    if not affected:
        return not_found("user")
    return AffectedRows(affected_rows=affected)
