'''
Pytest configuration for the backend services.

This file sets up fixtures for:
1. Configuration sources built from in-memory settings documents.
2. Settings instances isolated from the developer's environment and .env file.
3. A pre-computed low-cost bcrypt record to check rehash and verify logic against.
'''

import pytest

from generic_api_backend.common.config import Settings
from generic_api_backend.common.security_utils import PasswordHasher
from generic_api_backend.services.configuration import MappingConfigurationSource

from tests.constants import (
    TEST_PASSWORD,
    TEST_POSTGRES_CONNECTION_STRING,
    TEST_SQLSERVER_CONNECTION_STRING,
    TEST_MYSQL_CONNECTION_STRING,
)


@pytest.fixture
def connection_strings() -> dict[str, str]:
    return {
        "SqlServer": TEST_SQLSERVER_CONNECTION_STRING,
        "Postgres": TEST_POSTGRES_CONNECTION_STRING,
        "MySQL": TEST_MYSQL_CONNECTION_STRING,
    }


@pytest.fixture
def make_source(connection_strings):
    """
    Factory fixture: builds a MappingConfigurationSource shaped like a loaded
    settings document, with an optional provider selection.
    """
    def _make(provider=None, **overrides) -> MappingConfigurationSource:
        data = {"ConnectionStrings": dict(connection_strings)}
        if provider is not None:
            data["DatabaseProvider"] = provider
        data["ConnectionStrings"].update(overrides)
        return MappingConfigurationSource(data)
    return _make


@pytest.fixture
def isolated_settings(monkeypatch):
    """
    Builds Settings from explicit values only: strips any DATABASE_PROVIDER /
    CONNECTION_STRINGS variables and skips the .env file.
    """
    for var in ("DATABASE_PROVIDER", "CONNECTION_STRINGS"):
        monkeypatch.delenv(var, raising=False)

    def _make(**values) -> Settings:
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture(scope="session")
def cost_10_hash() -> str:
    """A real bcrypt record of TEST_PASSWORD at cost 10 (computed once per session)."""
    return PasswordHasher.get_hash(TEST_PASSWORD, cost=10)
