"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from labor_cost_engine.config import Settings, get_settings
from labor_cost_engine.database import init_db
from labor_cost_engine.services.config_resolver import SalaryConfigResolver

MIN_YEAR = 2020
MAX_YEAR = 2100


class InvalidYearError(Exception):
    """Raised when a requested year is outside the supported range."""

    def __init__(self, year: int):
        self.year = year
        super().__init__(f"Year must be a number between {MIN_YEAR} and {MAX_YEAR}, got {year}")


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    _, factory = init_db()
    async with factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_resolver(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SalaryConfigResolver:
    """Get a config resolver bound to the request session."""
    return SalaryConfigResolver(session)


def resolve_year(year: int | None) -> int:
    """Default to the current year and check the supported range."""
    if year is None:
        return datetime.now(timezone.utc).year
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidYearError(year)
    return year


async def get_query_year(year: Annotated[int | None, Query()] = None) -> int:
    """Extract the configuration year from the query string."""
    return resolve_year(year)


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
Resolver = Annotated[SalaryConfigResolver, Depends(get_resolver)]
AppSettings = Annotated[Settings, Depends(get_settings)]
QueryYear = Annotated[int, Depends(get_query_year)]
