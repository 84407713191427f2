# src/tech_news/schemas/vote.py
"""Vote-related Pydantic schemas."""

from pydantic import BaseModel, Field


class VoteCreate(BaseModel):
    """Schema for upvoting a post."""

    user_id: int | None = Field(None, description="Voting user's id")
    post_id: int | None = Field(None, description="Id of the post being upvoted")
