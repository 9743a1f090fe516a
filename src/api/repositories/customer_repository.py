# This file implements data access for customers scoped to their company.
# It exists so the customer router stays transport-focused while SQL lives in one layer.
# Searches are ordered by last name with the customer id as a deterministic tiebreaker.
# Every query is parameterized; only allowlisted table names and `ASC`/`DESC` are interpolated.

from __future__ import annotations

import logging

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.entities import Company, Customer
from src.api.pagination import PageResult, parse_order

logger = logging.getLogger(__name__)


class CustomerRepository:
    """Search, lookup, insert, and delete for customers."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.db = db
        self.customer_table = config.validate_table_name(config.customer_table_name)
        self.company_table = config.validate_table_name(config.company_table_name)

    def _select_sql(self) -> str:
        return f"""
        SELECT
            c.id,
            c.firstname,
            c.lastname,
            c.email,
            c.company_id,
            co.name AS company_name
        FROM {self.customer_table} c
        JOIN {self.company_table} co ON co.id = c.company_id
        """

    def search(self, *, company_id: int, page: int, limit: int, order: str) -> PageResult[Customer]:
        direction = parse_order(order).upper()
        params = {"company_id": company_id}

        total_count = int(
            self.db.fetch_scalar(
                f"SELECT COUNT(*) FROM {self.customer_table} c WHERE c.company_id = :company_id",
                params,
            )
        )

        data_query = f"""
        {self._select_sql()}
        WHERE c.company_id = :company_id
        ORDER BY c.lastname {direction}, c.id {direction}
        LIMIT :limit OFFSET :offset
        """
        rows = self.db.fetch_all(
            data_query,
            {**params, "limit": limit, "offset": (page - 1) * limit},
        )
        return PageResult(rows=[Customer.from_row(row) for row in rows], total_count=total_count)

    def find_one(self, *, company_id: int, customer_id: int) -> Customer | None:
        query = f"""
        {self._select_sql()}
        WHERE c.company_id = :company_id AND c.id = :customer_id
        """
        row = self.db.fetch_one(query, {"company_id": company_id, "customer_id": customer_id})
        return Customer.from_row(row) if row is not None else None

    def create(self, *, company: Company, firstname: str, lastname: str, email: str) -> Customer:
        new_id = self.db.insert_returning_id(
            f"""
            INSERT INTO {self.customer_table} (firstname, lastname, email, company_id)
            VALUES (:firstname, :lastname, :email, :company_id)
            RETURNING id
            """,
            {
                "firstname": firstname,
                "lastname": lastname,
                "email": email,
                "company_id": company.id,
            },
        )
        logger.info("Created customer %s for company %s", new_id, company.id)
        return Customer(
            id=new_id,
            firstname=firstname,
            lastname=lastname,
            email=email,
            company_id=company.id,
            company_name=company.name,
        )

    def delete(self, *, company_id: int, customer_id: int) -> bool:
        """Delete one customer; return False when no row matched."""

        deleted = self.db.execute(
            f"DELETE FROM {self.customer_table} WHERE company_id = :company_id AND id = :customer_id",
            {"company_id": company_id, "customer_id": customer_id},
        )
        if deleted:
            logger.info("Deleted customer %s from company %s", customer_id, company_id)
        return deleted > 0
