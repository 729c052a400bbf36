"""Seed script for the default salary configuration.

Run with:
    python scripts/seed_salary_config.py
    python scripts/seed_salary_config.py --exchange-rate 4150.25

This creates the tables and the default yearly configuration needed for
salary queries.
"""

from __future__ import annotations

import argparse
import asyncio
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from labor_cost_engine.calculators.rates import DEFAULT_SALARY_CONFIG
from labor_cost_engine.database import create_tables, dispose_db, get_session
from labor_cost_engine.models import ExchangeRateRecord
from labor_cost_engine.services.config_resolver import SalaryConfigResolver


async def seed_config(session: AsyncSession) -> None:
    """Create or refresh the default yearly configuration."""
    resolver = SalaryConfigResolver(session)
    await resolver.save_config(DEFAULT_SALARY_CONFIG)
    print(f"Saved salary configuration for {DEFAULT_SALARY_CONFIG.year}")


async def seed_exchange_rate(session: AsyncSession, rate: Decimal) -> None:
    """Store a USD/COP rate so USD values do not use the fallback."""
    session.add(ExchangeRateRecord(from_currency="USD", to_currency="COP", rate=rate))
    await session.flush()
    print(f"Stored exchange rate USD/COP {rate}")


async def main(exchange_rate: Decimal | None) -> None:
    """Run seed script."""
    print("Seeding salary configuration...")
    await create_tables()

    async with get_session() as session:
        await seed_config(session)
        if exchange_rate is not None:
            await seed_exchange_rate(session, exchange_rate)

    await dispose_db()
    print("\nDone! Salary configuration seeded successfully.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the default salary configuration")
    parser.add_argument("--exchange-rate", type=Decimal, default=None)
    args = parser.parse_args()
    asyncio.run(main(args.exchange_rate))
