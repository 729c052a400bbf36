"""Pytest fixtures for labor cost engine tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from labor_cost_engine.calculators.types import SalaryConfig
from labor_cost_engine.models import Base

# In-memory SQLite for resolver and API tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def config() -> SalaryConfig:
    """Reference configuration with round numbers."""
    return SalaryConfig(
        year=2025,
        base_wage=Decimal("1423500"),
        transport_subsidy=Decimal("200000"),
        legal_monthly_hours=192,
        vat_percent=Decimal("19"),
        profit_margin_percent=Decimal("30"),
        employer_burden_factor=Decimal("50"),
    )


@pytest_asyncio.fixture
async def engine():
    """Create test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()
