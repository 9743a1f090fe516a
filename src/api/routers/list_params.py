# This file turns raw `page`, `limit`, and `order` query values into validated pagination inputs.
# Paginated routers share it so invalid values always fail with the same 400 error.

from __future__ import annotations

from src.api.api_config import ApiConfig
from src.api.error_handlers import APIError
from src.api.pagination import PaginationSpec, normalize_pagination, parse_order


def resolve_list_params(
    *,
    config: ApiConfig,
    page: int,
    limit: int | None,
    order: str | None,
) -> tuple[PaginationSpec, str]:
    try:
        pagination = normalize_pagination(
            page=page,
            limit=limit,
            default_page_size=config.default_page_size,
            max_page_size=config.max_page_size,
        )
        resolved_order = parse_order(order)
    except ValueError as exc:
        raise APIError(
            status_code=400,
            error_code="INVALID_QUERY_PARAM",
            message=str(exc),
        ) from exc
    return pagination, resolved_order
