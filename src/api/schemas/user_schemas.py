# This file defines response schemas for client user endpoints.
# User listings are not paginated, so the list response carries no pagination block.

from __future__ import annotations

from pydantic import BaseModel

from src.api.schemas.common import EnvelopeFields, ParentReference


class UserV1(BaseModel):
    id: int
    username: str
    email: str
    firstname: str | None = None
    lastname: str | None = None
    client: ParentReference


class UserListResponseV1(EnvelopeFields):
    data: list[UserV1]
