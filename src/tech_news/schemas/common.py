"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, Field


class Message(BaseModel):
    """Human-readable message body used for 404 and login failures."""

    message: str


class ErrorResponse(Message):
    """Body returned when the store rejects a request."""

    error: str = Field(..., description="Error class, e.g. ValidationError")


class AffectedRows(BaseModel):
    """Number of rows touched by an update or delete."""

    affected_rows: int
