# This file creates the API tables and optionally seeds demonstration rows.
# It exists so a fresh database can serve every endpoint without manual SQL.
# Seed rows come from `configs/seed_data.yaml`; a table that already holds rows is skipped.
# ruff: noqa: E402

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.api.api_config import ApiConfig, get_api_config
from src.api.db_access import DatabaseClient
from src.api.ddl import apply_api_ddl
from src.api.repositories.customer_repository import CustomerRepository
from src.api.repositories.parent_repositories import ClientRepository, CompanyRepository
from src.api.repositories.product_repository import ProductRepository
from src.api.repositories.user_repository import UserRepository
from src.common.logging import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = ROOT_DIR / "configs" / "seed_data.yaml"


def load_seed_data(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Seed data at {path} must be a mapping, got: {type(loaded).__name__}")
    return dict(loaded)


def _table_is_empty(db: DatabaseClient, table_name: str) -> bool:
    return int(db.fetch_scalar(f"SELECT COUNT(*) FROM {table_name}")) == 0


def seed_demo_data(*, config: ApiConfig, db: DatabaseClient, seed: dict[str, Any]) -> dict[str, int]:
    """Insert seed companies, customers, products, clients, and users into empty tables."""

    counts = {"companies": 0, "customers": 0, "products": 0, "clients": 0, "users": 0}

    if _table_is_empty(db, config.company_table_name):
        companies = CompanyRepository(config=config, db=db)
        customers = CustomerRepository(config=config, db=db)
        for entry in seed.get("companies", []):
            company = companies.create(name=entry["name"])
            counts["companies"] += 1
            for customer in entry.get("customers", []):
                customers.create(company=company, **customer)
                counts["customers"] += 1

    if _table_is_empty(db, config.product_table_name):
        products = ProductRepository(config=config, db=db)
        for product in seed.get("products", []):
            products.create(**product)
            counts["products"] += 1

    if _table_is_empty(db, config.client_table_name):
        clients = ClientRepository(config=config, db=db)
        users = UserRepository(config=config, db=db)
        for entry in seed.get("clients", []):
            client = clients.create(name=entry["name"])
            counts["clients"] += 1
            for user in entry.get("users", []):
                users.create(client=client, **user)
                counts["users"] += 1

    logger.info("Seeded rows: %s", counts)
    return counts


def main() -> int:
    parser = argparse.ArgumentParser(description="Create API tables and optionally seed demo data.")
    parser.add_argument("--seed", action="store_true", help="Insert demonstration rows into empty tables.")
    parser.add_argument("--seed-file", type=Path, default=DEFAULT_SEED_PATH)
    args = parser.parse_args()

    configure_logging()
    config = get_api_config()
    db = DatabaseClient(database_url=config.database_url)

    apply_api_ddl(db.engine, config)
    logger.info("API tables are in place.")

    result: dict[str, object] = {"tables": sorted(config.table_names().values())}
    if args.seed:
        result["seeded"] = seed_demo_data(config=config, db=db, seed=load_seed_data(args.seed_file))

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
