# This file defines read-only product catalog endpoints.
# The list endpoint shares the customer pagination rules; a missing product is a 400 error.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_product_repository
from src.api.error_handlers import not_found_error
from src.api.repositories.product_repository import ProductRepository
from src.api.response_envelope import build_list_envelope, build_pagination_metadata
from src.api.routers.list_params import resolve_list_params
from src.api.schemas.common import ErrorResponse
from src.api.schemas.product_schemas import ProductListResponseV1, ProductV1

router = APIRouter(prefix="/products", tags=["products"], responses={400: {"model": ErrorResponse}})
ProductRepoDep = Annotated[ProductRepository, Depends(get_product_repository)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.get("", response_model=ProductListResponseV1)
def list_products(
    request: Request,
    products: ProductRepoDep,
    config: ConfigDep,
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    order: str | None = Query(default="asc"),
) -> dict[str, object]:
    pagination, resolved_order = resolve_list_params(
        config=config, page=page, limit=limit, order=order
    )
    result = products.search(page=pagination.page, limit=pagination.limit, order=resolved_order)

    return build_list_envelope(
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=[product.as_payload() for product in result.rows],
        pagination=build_pagination_metadata(
            pagination=pagination,
            order=resolved_order,
            total_count=result.total_count,
            current_items=len(result.rows),
        ),
    )


@router.get("/{product_id:int}", response_model=ProductV1)
def show_product(product_id: int, products: ProductRepoDep) -> dict[str, object]:
    product = products.find_by_id(product_id)
    if product is None:
        raise not_found_error(error_code="PRODUCT_NOT_FOUND", message="Non existent product.")
    return product.as_payload()
