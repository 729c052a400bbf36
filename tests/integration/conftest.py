"""Integration test fixtures with an in-memory database behind the API."""

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from labor_cost_engine.api.app import create_app
from labor_cost_engine.api.dependencies import get_db_session
from labor_cost_engine.config import Settings, get_settings
from labor_cost_engine.services.config_resolver import SalaryConfigResolver

TEST_SETTINGS = Settings(
    database_url="sqlite+aiosqlite:///:memory:",
    engine_version="test",
    host="127.0.0.1",
    port=8000,
    debug=True,
    default_exchange_rate=Decimal("4000"),
    log_level="DEBUG",
)


@pytest_asyncio.fixture
async def seeded_db(session: AsyncSession, config) -> AsyncGenerator[AsyncSession, None]:
    """Session with the reference salary configuration stored."""
    await SalaryConfigResolver(session).save_config(config)
    yield session


@pytest_asyncio.fixture
async def client(seeded_db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client bound to the seeded session."""
    app = create_app()

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        yield seeded_db

    app.dependency_overrides[get_db_session] = override_session
    app.dependency_overrides[get_settings] = lambda: TEST_SETTINGS

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
