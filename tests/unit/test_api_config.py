"""
Unit tests for API configuration loading.
They cover environment overrides, prefix normalization, and the SQL identifier allowlist.
"""

import pytest
from pydantic import ValidationError

from src.api.api_config import ApiConfig, load_api_config


def test_load_api_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("API_PREFIX", raising=False)
    monkeypatch.delenv("API_MAX_PAGE_SIZE", raising=False)
    config = load_api_config(load_env=False)

    assert config.api_prefix == "/api"
    assert config.default_page_size == 10
    assert config.max_page_size == 100
    assert config.table_names()["customer_table_name"] == "customers"
    assert "users" in config.allowed_table_names


def test_load_api_config_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_PREFIX", "/v2/")
    monkeypatch.setenv("API_MAX_PAGE_SIZE", "25")
    monkeypatch.setenv("API_CUSTOMER_TABLE_NAME", "crm_customers")
    monkeypatch.setenv("API_ALLOWED_ORIGINS", "http://a.test, http://b.test")
    config = load_api_config(load_env=False)

    assert config.api_prefix == "/v2"
    assert config.max_page_size == 25
    assert config.validate_table_name("crm_customers") == "crm_customers"
    assert config.allowed_origins == ["http://a.test", "http://b.test"]


def test_load_api_config_requires_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "")
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        load_api_config(load_env=False)


def test_api_config_rejects_unsafe_table_name() -> None:
    with pytest.raises(ValidationError):
        ApiConfig(database_url="sqlite://", customer_table_name="customers; DROP TABLE x")


@pytest.mark.parametrize("prefix", ["api", "/"])
def test_api_config_rejects_bad_prefix(prefix: str) -> None:
    with pytest.raises(ValidationError):
        ApiConfig(database_url="sqlite://", api_prefix=prefix)


def test_validate_table_name_enforces_allowlist() -> None:
    config = ApiConfig(database_url="sqlite://", allowed_table_names={"customers"})
    assert config.validate_table_name("customers") == "customers"
    with pytest.raises(ValueError, match="allowlist"):
        config.validate_table_name("secrets")
