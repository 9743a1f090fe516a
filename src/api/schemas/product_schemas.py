# This file defines response schemas for product catalog endpoints.

from __future__ import annotations

from pydantic import BaseModel

from src.api.schemas.common import EnvelopeFields, PaginationMetadata


class ProductV1(BaseModel):
    id: int
    name: str
    brand: str
    description: str | None = None
    price: float


class ProductListResponseV1(EnvelopeFields):
    data: list[ProductV1]
    pagination: PaginationMetadata
