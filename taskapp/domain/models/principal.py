"""Authenticated caller identity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of an operation.

    Attributes:
        user_id: Id of the authenticated user.
        email: Email captured when the session was issued, if known.
    """

    user_id: str
    email: str | None = None
