# This file provides dependency factories for FastAPI routes and middleware.
# It exists so the store handle and repositories are created once and shared through dependency injection.
# The setup keeps routers thin and makes endpoint tests easy to override.
# Centralized construction also ensures one consistent API configuration is used.

from __future__ import annotations

from functools import lru_cache

from src.api.api_config import ApiConfig, get_api_config
from src.api.db_access import DatabaseClient
from src.api.repositories.customer_repository import CustomerRepository
from src.api.repositories.parent_repositories import ClientRepository, CompanyRepository
from src.api.repositories.product_repository import ProductRepository
from src.api.repositories.user_repository import UserRepository


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


@lru_cache(maxsize=1)
def get_company_repository() -> CompanyRepository:
    return CompanyRepository(config=get_api_config(), db=get_database_client())


@lru_cache(maxsize=1)
def get_customer_repository() -> CustomerRepository:
    return CustomerRepository(config=get_api_config(), db=get_database_client())


@lru_cache(maxsize=1)
def get_product_repository() -> ProductRepository:
    return ProductRepository(config=get_api_config(), db=get_database_client())


@lru_cache(maxsize=1)
def get_client_repository() -> ClientRepository:
    return ClientRepository(config=get_api_config(), db=get_database_client())


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    return UserRepository(config=get_api_config(), db=get_database_client())


def get_config() -> ApiConfig:
    return get_api_config()
