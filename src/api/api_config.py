# This file defines runtime settings for the API layer in one place.
# It exists so the route prefix, pagination defaults, and table names can be configured without code edits.
# The config loader reads environment variables and applies safe defaults for local development.
# Table names are validated so they can be interpolated into SQL text without injection risk.

from __future__ import annotations

import os
import re
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

DEFAULT_TABLE_NAMES: dict[str, str] = {
    "company_table_name": "companies",
    "customer_table_name": "customers",
    "product_table_name": "products",
    "client_table_name": "clients",
    "user_table_name": "users",
}


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Catalog API"
    api_prefix: str = "/api"
    schema_version: str = "1.0.0"
    environment: str = "local"
    database_url: str
    default_page_size: int = 10
    max_page_size: int = 100
    allowed_origins: list[str] = Field(default_factory=list)
    company_table_name: str = "companies"
    customer_table_name: str = "customers"
    product_table_name: str = "products"
    client_table_name: str = "clients"
    user_table_name: str = "users"
    app_version: str = "0.1.0"
    allowed_table_names: set[str] = Field(default_factory=set)

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("api_prefix must start with '/'.")
        cleaned = value.rstrip("/")
        if not cleaned:
            raise ValueError("api_prefix must not be the bare root path.")
        return cleaned

    @field_validator(*DEFAULT_TABLE_NAMES)
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        if not _IDENTIFIER_RE.match(value):
            raise ValueError(f"Unsafe SQL identifier: {value!r}")
        return value

    @field_validator("default_page_size", "max_page_size")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    def validate_table_name(self, table_name: str) -> str:
        if not _IDENTIFIER_RE.match(table_name):
            raise ValueError(f"Unsafe SQL identifier: {table_name!r}")
        if table_name not in self.allowed_table_names:
            raise ValueError(f"Table name is not in allowlist: {table_name!r}")
        return table_name

    def table_names(self) -> dict[str, str]:
        return {key: str(getattr(self, key)) for key in DEFAULT_TABLE_NAMES}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def _build_allowed_table_names(config_values: dict[str, object]) -> set[str]:
    configured_names = {str(config_values[key]) for key in DEFAULT_TABLE_NAMES}
    configured_names.update(DEFAULT_TABLE_NAMES.values())
    configured_names.update(_env_list("API_ALLOWED_TABLE_NAMES", []))
    for table_name in configured_names:
        if not _IDENTIFIER_RE.match(table_name):
            raise ValueError(f"Unsafe SQL identifier in allowlist: {table_name!r}")
    return configured_names


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Catalog API"),
        "api_prefix": os.getenv("API_PREFIX", "/api"),
        "schema_version": os.getenv("API_SCHEMA_VERSION", "1.0.0"),
        "environment": os.getenv("ENV", "local"),
        "database_url": os.getenv("DATABASE_URL", ""),
        "default_page_size": _env_int("API_DEFAULT_PAGE_SIZE", 10),
        "max_page_size": _env_int("API_MAX_PAGE_SIZE", 100),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "company_table_name": os.getenv("API_COMPANY_TABLE_NAME", "companies"),
        "customer_table_name": os.getenv("API_CUSTOMER_TABLE_NAME", "customers"),
        "product_table_name": os.getenv("API_PRODUCT_TABLE_NAME", "products"),
        "client_table_name": os.getenv("API_CLIENT_TABLE_NAME", "clients"),
        "user_table_name": os.getenv("API_USER_TABLE_NAME", "users"),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }
    if not config_values["database_url"]:
        raise RuntimeError("DATABASE_URL is required for API startup.")

    config_values["allowed_table_names"] = _build_allowed_table_names(config_values)

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
