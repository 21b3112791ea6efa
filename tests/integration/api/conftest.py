"""Pytest fixtures for API integration tests.

Each test gets its own SQLite file. TestClient runs every request on a
fresh event loop and aiosqlite connections cannot cross loops, hence
NullPool.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from finwise.infrastructure.persistence.sqlalchemy.init_db import create_tables
from finwise.presentation.api.app import API_V1_PREFIX, create_app
from finwise.presentation.api.config import get_api_settings
from finwise.presentation.api.dependencies import get_db_session
from finwise_config.settings import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'finwise-test.db'}"


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        database_url=database_url,
        currency="BRL",
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        report_window_months=12,
        upcoming_bills_days=7,
    )


@pytest.fixture
def test_db_engine(database_url):
    """Create a file-backed SQLite database with all tables."""
    engine = create_async_engine(database_url, echo=False, poolclass=NullPool)
    asyncio.run(create_tables(engine))

    yield engine

    asyncio.run(engine.dispose())


@pytest.fixture
def test_client(api_settings, test_db_engine) -> TestClient:
    """Create a test client backed by the temporary database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    return TestClient(app)


@pytest.fixture
def create_category(test_client, api_v1_prefix):
    """Create a category through the API and return its JSON."""

    def _create(name, category_type, color=None):
        response = test_client.post(
            f"{api_v1_prefix}/categories",
            json={"name": name, "type": category_type, "color": color},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_transaction(test_client, api_v1_prefix):
    """Create a transaction through the API and return its JSON."""

    def _create(category, amount, on, status, **extra):
        body = {
            "description": extra.pop("description", f"{category['name']} entry"),
            "amount": amount,
            "date": on,
            "type": category["type"],
            "categoryId": category["id"],
            "status": status,
            **extra,
        }
        response = test_client.post(f"{api_v1_prefix}/transactions", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
