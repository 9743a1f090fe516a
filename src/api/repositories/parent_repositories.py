# This file implements lookups for the scope parents: companies and clients.
# Routers resolve a parent through these before listing or creating child records.
# Both tables share the same `id, name` shape, so one base class serves both.

from __future__ import annotations

from typing import Generic, TypeVar

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.entities import Client, Company

P = TypeVar("P", Company, Client)


class _ParentRepository(Generic[P]):
    record_type: type[P]

    def __init__(self, *, db: DatabaseClient, table_name: str) -> None:
        self.db = db
        self.table = table_name

    def find_by_id(self, parent_id: int) -> P | None:
        row = self.db.fetch_one(
            f"SELECT id, name FROM {self.table} WHERE id = :parent_id",
            {"parent_id": parent_id},
        )
        return self.record_type.from_row(row) if row is not None else None

    def exists(self, parent_id: int) -> bool:
        query = f"SELECT 1 FROM {self.table} WHERE id = :parent_id LIMIT 1"
        return self.db.fetch_one(query, {"parent_id": parent_id}) is not None

    def create(self, *, name: str) -> P:
        new_id = self.db.insert_returning_id(
            f"INSERT INTO {self.table} (name) VALUES (:name) RETURNING id",
            {"name": name},
        )
        return self.record_type(id=new_id, name=name)


class CompanyRepository(_ParentRepository[Company]):
    """Lookups over the companies table."""

    record_type = Company

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        super().__init__(db=db, table_name=config.validate_table_name(config.company_table_name))


class ClientRepository(_ParentRepository[Client]):
    """Lookups over the clients table."""

    record_type = Client

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        super().__init__(db=db, table_name=config.validate_table_name(config.client_table_name))
