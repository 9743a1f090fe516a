# This file implements read access for the product catalog.
# Products have no owner, so search pages over the whole table ordered by name then id.

from __future__ import annotations

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.entities import Product
from src.api.pagination import PageResult, parse_order


class ProductRepository:
    """Search and lookup for products."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.db = db
        self.product_table = config.validate_table_name(config.product_table_name)

    def search(self, *, page: int, limit: int, order: str) -> PageResult[Product]:
        direction = parse_order(order).upper()
        total_count = int(self.db.fetch_scalar(f"SELECT COUNT(*) FROM {self.product_table}"))

        data_query = f"""
        SELECT p.id, p.name, p.brand, p.description, p.price
        FROM {self.product_table} p
        ORDER BY p.name {direction}, p.id {direction}
        LIMIT :limit OFFSET :offset
        """
        rows = self.db.fetch_all(data_query, {"limit": limit, "offset": (page - 1) * limit})
        return PageResult(rows=[Product.from_row(row) for row in rows], total_count=total_count)

    def find_by_id(self, product_id: int) -> Product | None:
        row = self.db.fetch_one(
            f"SELECT id, name, brand, description, price FROM {self.product_table} WHERE id = :product_id",
            {"product_id": product_id},
        )
        return Product.from_row(row) if row is not None else None

    def create(self, *, name: str, brand: str, price: float, description: str | None = None) -> Product:
        new_id = self.db.insert_returning_id(
            f"""
            INSERT INTO {self.product_table} (name, brand, description, price)
            VALUES (:name, :brand, :description, :price)
            RETURNING id
            """,
            {"name": name, "brand": brand, "description": description, "price": price},
        )
        return Product(id=new_id, name=name, brand=brand, description=description, price=price)
