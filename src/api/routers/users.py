# This file defines user endpoints scoped to a client.
# Missing clients and users are 400 errors, except create against an unknown client, which is 404.
# The listing is unpaginated.
# Validation failures are 400 and store failures on create are 500.

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request, Response
from sqlalchemy.exc import SQLAlchemyError

from src.api.api_config import ApiConfig
from src.api.dependencies import get_client_repository, get_config, get_user_repository
from src.api.error_handlers import (
    APIError,
    not_found_error,
    persistence_error,
    validation_failed_error,
)
from src.api.repositories.parent_repositories import ClientRepository
from src.api.repositories.user_repository import UserRepository
from src.api.response_envelope import build_list_envelope
from src.api.schemas.common import ErrorResponse
from src.api.schemas.user_schemas import UserListResponseV1, UserV1
from src.api.validation import USER_RULES, validate_payload

logger = logging.getLogger(__name__)

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter(prefix="/clients/{client_id:int}/users", tags=["users"], responses=ERROR_RESPONSES)
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
ClientRepoDep = Annotated[ClientRepository, Depends(get_client_repository)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


def _client_not_found(*, status_code: int = 400) -> APIError:
    return not_found_error(status_code=status_code, error_code="CLIENT_NOT_FOUND", message="Unknown client.")


def _user_not_found() -> APIError:
    return not_found_error(error_code="USER_NOT_FOUND", message="Unknown client or user.")


@router.get("", response_model=UserListResponseV1)
def list_users(
    request: Request,
    client_id: int,
    users: UserRepoDep,
    clients: ClientRepoDep,
    config: ConfigDep,
) -> dict[str, object]:
    if not clients.exists(client_id):
        raise _client_not_found()

    return build_list_envelope(
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=[user.as_payload() for user in users.list_for_client(client_id=client_id)],
    )


@router.get("/{user_id:int}", response_model=UserV1)
def show_user(client_id: int, user_id: int, users: UserRepoDep) -> dict[str, object]:
    user = users.find_one(client_id=client_id, user_id=user_id)
    if user is None:
        raise _user_not_found()
    return user.as_payload()


@router.delete("/{user_id:int}", status_code=204, response_class=Response)
def delete_user(client_id: int, user_id: int, users: UserRepoDep) -> Response:
    if not users.delete(client_id=client_id, user_id=user_id):
        raise _user_not_found()
    return Response(status_code=204)


@router.post("", status_code=201, response_model=UserV1)
def create_user(
    client_id: int,
    users: UserRepoDep,
    clients: ClientRepoDep,
    payload: Annotated[dict[str, Any], Body()],
) -> dict[str, object]:
    values, violations = validate_payload(payload, USER_RULES)
    if violations:
        raise validation_failed_error(violations)

    client = clients.find_by_id(client_id)
    if client is None:
        raise _client_not_found(status_code=404)

    try:
        user = users.create(client=client, **values)
    except SQLAlchemyError as exc:
        logger.exception("User insert failed for client %s", client_id)
        raise persistence_error() from exc
    return user.as_payload()
