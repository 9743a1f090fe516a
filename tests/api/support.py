# This file provides shared helpers for API endpoint tests.
# It exists so tests can override repository dependencies without touching real databases.
# The helpers build consistent config objects, in-memory fake repositories, and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from src.api.api_config import DEFAULT_TABLE_NAMES, ApiConfig
from src.api.app import app
from src.api.dependencies import (
    get_client_repository,
    get_company_repository,
    get_config,
    get_customer_repository,
    get_database_client,
    get_product_repository,
    get_user_repository,
)
from src.api.entities import Client, Company, Customer, Product, User
from src.api.pagination import PageResult


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test Catalog API",
        "api_prefix": "/api",
        "schema_version": "1.0.0",
        "environment": "test",
        "database_url": "sqlite://",
        "default_page_size": 10,
        "max_page_size": 50,
        "allowed_origins": [],
        "app_version": "0.1.0",
        "allowed_table_names": set(DEFAULT_TABLE_NAMES.values()),
    }
    values.update(overrides)
    return ApiConfig(**values)


class FakeDBClient:
    """Simple fake DB dependency for health/readiness endpoint tests."""

    def __init__(self, *, connected: bool = True, existing_tables: set[str] | None = None) -> None:
        self._connected = connected
        self._tables = set(DEFAULT_TABLE_NAMES.values()) if existing_tables is None else existing_tables

    def can_connect(self) -> bool:
        return self._connected

    def table_exists(self, table_name: str) -> bool:
        return self._connected and table_name in self._tables


class FakeParentRepository:
    """In-memory stand-in for CompanyRepository and ClientRepository."""

    def __init__(self, parents: list[Company] | list[Client]) -> None:
        self.parents = {parent.id: parent for parent in parents}

    def find_by_id(self, parent_id: int) -> Any:
        return self.parents.get(parent_id)

    def exists(self, parent_id: int) -> bool:
        return parent_id in self.parents


class FakeCustomerRepository:
    """In-memory customers ordered by last name then id, like the SQL repository."""

    def __init__(self, customers: list[Customer] | None = None, *, fail_on_create: bool = False) -> None:
        self.customers = {customer.id: customer for customer in customers or []}
        self.fail_on_create = fail_on_create
        self.create_calls = 0
        self.last_search: dict[str, object] = {}

    def search(self, *, company_id: int, page: int, limit: int, order: str) -> PageResult[Customer]:
        self.last_search = {"company_id": company_id, "page": page, "limit": limit, "order": order}
        matching = sorted(
            (c for c in self.customers.values() if c.company_id == company_id),
            key=lambda c: (c.lastname, c.id),
            reverse=order == "desc",
        )
        offset = (page - 1) * limit
        return PageResult(rows=matching[offset : offset + limit], total_count=len(matching))

    def find_one(self, *, company_id: int, customer_id: int) -> Customer | None:
        customer = self.customers.get(customer_id)
        if customer is None or customer.company_id != company_id:
            return None
        return customer

    def create(self, *, company: Company, firstname: str, lastname: str, email: str) -> Customer:
        self.create_calls += 1
        if self.fail_on_create:
            raise OperationalError("INSERT INTO customers", {}, Exception("database is locked"))
        new_id = max(self.customers, default=0) + 1
        customer = Customer(
            id=new_id,
            firstname=firstname,
            lastname=lastname,
            email=email,
            company_id=company.id,
            company_name=company.name,
        )
        self.customers[new_id] = customer
        return customer

    def delete(self, *, company_id: int, customer_id: int) -> bool:
        if self.find_one(company_id=company_id, customer_id=customer_id) is None:
            return False
        del self.customers[customer_id]
        return True


class FakeProductRepository:
    def __init__(self, products: list[Product]) -> None:
        self.products = {product.id: product for product in products}

    def search(self, *, page: int, limit: int, order: str) -> PageResult[Product]:
        ordered = sorted(self.products.values(), key=lambda p: (p.name, p.id), reverse=order == "desc")
        offset = (page - 1) * limit
        return PageResult(rows=ordered[offset : offset + limit], total_count=len(ordered))

    def find_by_id(self, product_id: int) -> Product | None:
        return self.products.get(product_id)


class FakeUserRepository:
    def __init__(self, users: list[User] | None = None, *, fail_on_create: bool = False) -> None:
        self.users = {user.id: user for user in users or []}
        self.fail_on_create = fail_on_create

    def list_for_client(self, *, client_id: int) -> list[User]:
        return sorted((u for u in self.users.values() if u.client_id == client_id), key=lambda u: u.id)

    def find_one(self, *, client_id: int, user_id: int) -> User | None:
        user = self.users.get(user_id)
        if user is None or user.client_id != client_id:
            return None
        return user

    def create(
        self,
        *,
        client: Client,
        username: str,
        email: str,
        firstname: str | None = None,
        lastname: str | None = None,
    ) -> User:
        if self.fail_on_create:
            raise OperationalError("INSERT INTO users", {}, Exception("connection reset"))
        new_id = max(self.users, default=0) + 1
        user = User(
            id=new_id,
            username=username,
            email=email,
            firstname=firstname,
            lastname=lastname,
            client_id=client.id,
            client_name=client.name,
        )
        self.users[new_id] = user
        return user

    def delete(self, *, client_id: int, user_id: int) -> bool:
        if self.find_one(client_id=client_id, user_id=user_id) is None:
            return False
        del self.users[user_id]
        return True


def _provide(value: Any) -> Any:
    return lambda: value


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    company_repository: Any | None = None,
    customer_repository: Any | None = None,
    product_repository: Any | None = None,
    client_repository: Any | None = None,
    user_repository: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()
    overrides: dict[Any, Any] = {
        get_database_client: db_client or FakeDBClient(),
        get_company_repository: company_repository,
        get_customer_repository: customer_repository,
        get_product_repository: product_repository,
        get_client_repository: client_repository,
        get_user_repository: user_repository,
    }

    app.dependency_overrides[get_config] = lambda: resolved_config
    for dependency, override in overrides.items():
        if override is not None:
            app.dependency_overrides[dependency] = _provide(override)

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
