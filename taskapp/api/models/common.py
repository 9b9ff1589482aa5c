"""Shared API response models."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str


class ProblemDetail(BaseModel):
    """RFC 7807 problem detail body returned for every domain error."""

    type: str = Field(description="URI identifying the error kind")
    title: str
    status: int
    detail: str
    instance: str


class UserSummaryResponse(BaseModel):
    """Lightweight user reference. Username is None when unresolvable."""

    id: str
    username: str | None = None
