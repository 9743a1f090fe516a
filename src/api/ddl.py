"""Table definitions and DDL helpers for the catalog API store."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, MetaData, String, Table, Text
from sqlalchemy.engine import Engine

from src.api.api_config import ApiConfig


def build_metadata(config: ApiConfig) -> MetaData:
    """Describe the five API tables using the configured table names."""

    names = config.table_names()
    metadata = MetaData()

    Table(
        names["company_table_name"],
        metadata,
        Column("id", Integer, primary_key=True),
        Column("name", String(255), nullable=False),
    )
    Table(
        names["customer_table_name"],
        metadata,
        Column("id", Integer, primary_key=True),
        Column("firstname", String(255), nullable=False),
        Column("lastname", String(255), nullable=False, index=True),
        Column("email", String(255), nullable=False),
        Column(
            "company_id",
            Integer,
            ForeignKey(f"{names['company_table_name']}.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    )
    Table(
        names["product_table_name"],
        metadata,
        Column("id", Integer, primary_key=True),
        Column("name", String(255), nullable=False, index=True),
        Column("brand", String(255), nullable=False),
        Column("description", Text, nullable=True),
        Column("price", Float, nullable=False),
        CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
    )
    Table(
        names["client_table_name"],
        metadata,
        Column("id", Integer, primary_key=True),
        Column("name", String(255), nullable=False),
    )
    Table(
        names["user_table_name"],
        metadata,
        Column("id", Integer, primary_key=True),
        Column("username", String(180), nullable=False),
        Column("email", String(255), nullable=False),
        Column("firstname", String(255), nullable=True),
        Column("lastname", String(255), nullable=True),
        Column(
            "client_id",
            Integer,
            ForeignKey(f"{names['client_table_name']}.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    )
    return metadata


def apply_api_ddl(engine: Engine, config: ApiConfig) -> None:
    """Create missing API tables in foreign-key dependency order."""

    metadata = build_metadata(config)
    with engine.begin() as connection:
        metadata.create_all(connection, checkfirst=True)
