# This file defines customer endpoints scoped to a company.
# It exists so clients can page through, inspect, create, and delete the customers of one company.
# Path ids use the `int` convertor, so non-digit segments never match a route and return 404.
# Missing companies and customers surface as 400 errors; store failures on create surface as 500.

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, Request, Response
from sqlalchemy.exc import SQLAlchemyError

from src.api.api_config import ApiConfig
from src.api.dependencies import get_company_repository, get_config, get_customer_repository
from src.api.error_handlers import (
    APIError,
    not_found_error,
    persistence_error,
    validation_failed_error,
)
from src.api.repositories.customer_repository import CustomerRepository
from src.api.repositories.parent_repositories import CompanyRepository
from src.api.response_envelope import build_list_envelope, build_pagination_metadata
from src.api.routers.list_params import resolve_list_params
from src.api.schemas.common import ErrorResponse
from src.api.schemas.customer_schemas import CustomerListResponseV1, CustomerV1
from src.api.validation import CUSTOMER_RULES, validate_payload

logger = logging.getLogger(__name__)

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

router = APIRouter(tags=["customers"], responses=ERROR_RESPONSES)
CustomerRepoDep = Annotated[CustomerRepository, Depends(get_customer_repository)]
CompanyRepoDep = Annotated[CompanyRepository, Depends(get_company_repository)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


def _company_not_found() -> APIError:
    return not_found_error(error_code="COMPANY_NOT_FOUND", message="Non existent company.")


def _customer_not_found() -> APIError:
    return not_found_error(
        error_code="CUSTOMER_NOT_FOUND",
        message="Non existent company or customer.",
    )


@router.get("/companies/{company_id:int}/customers", response_model=CustomerListResponseV1)
def list_customers(
    request: Request,
    company_id: int,
    customers: CustomerRepoDep,
    companies: CompanyRepoDep,
    config: ConfigDep,
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    order: str | None = Query(default="asc"),
) -> dict[str, object]:
    pagination, resolved_order = resolve_list_params(
        config=config, page=page, limit=limit, order=order
    )

    if not companies.exists(company_id):
        raise _company_not_found()

    result = customers.search(
        company_id=company_id,
        page=pagination.page,
        limit=pagination.limit,
        order=resolved_order,
    )

    return build_list_envelope(
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=[customer.as_payload() for customer in result.rows],
        pagination=build_pagination_metadata(
            pagination=pagination,
            order=resolved_order,
            total_count=result.total_count,
            current_items=len(result.rows),
        ),
    )


@router.get("/companies/{company_id:int}/customers/{customer_id:int}", response_model=CustomerV1)
def show_customer(
    company_id: int,
    customer_id: int,
    customers: CustomerRepoDep,
) -> dict[str, object]:
    customer = customers.find_one(company_id=company_id, customer_id=customer_id)
    if customer is None:
        raise _customer_not_found()
    return customer.as_payload()


@router.delete(
    "/companies/{company_id:int}/customers/{customer_id:int}",
    status_code=204,
    response_class=Response,
)
def delete_customer(
    company_id: int,
    customer_id: int,
    customers: CustomerRepoDep,
) -> Response:
    if not customers.delete(company_id=company_id, customer_id=customer_id):
        raise _customer_not_found()
    return Response(status_code=204)


@router.post(
    "/companies/{company_id:int}/customers",
    status_code=201,
    response_model=CustomerV1,
)
def create_customer(
    company_id: int,
    customers: CustomerRepoDep,
    companies: CompanyRepoDep,
    payload: Annotated[dict[str, Any], Body()],
) -> dict[str, object]:
    values, violations = validate_payload(payload, CUSTOMER_RULES)
    if violations:
        raise validation_failed_error(violations)

    company = companies.find_by_id(company_id)
    if company is None:
        raise _company_not_found()

    try:
        customer = customers.create(company=company, **values)
    except SQLAlchemyError as exc:
        logger.exception("Customer insert failed for company %s", company_id)
        raise persistence_error() from exc
    return customer.as_payload()
