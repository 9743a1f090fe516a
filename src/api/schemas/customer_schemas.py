# This file defines response schemas for customer endpoints.

from __future__ import annotations

from pydantic import BaseModel

from src.api.schemas.common import EnvelopeFields, PaginationMetadata, ParentReference


class CustomerV1(BaseModel):
    id: int
    firstname: str
    lastname: str
    email: str
    company: ParentReference


class CustomerListResponseV1(EnvelopeFields):
    data: list[CustomerV1]
    pagination: PaginationMetadata
