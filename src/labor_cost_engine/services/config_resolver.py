"""Resolution of stored salary configuration for the cost engine.

The engine only ever receives fully resolved, in-memory values; this
service turns database rows into those values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from labor_cost_engine.calculators.types import RoleName, SalaryConfig
from labor_cost_engine.calculators.validation import validate_config
from labor_cost_engine.models import (
    ExchangeRateRecord,
    RoleMultiplierRecord,
    SalaryConfigRecord,
)

logger = logging.getLogger(__name__)


class ConfigNotFoundError(Exception):
    """Raised when no salary configuration exists for a year."""

    def __init__(self, year: int):
        self.year = year
        super().__init__(f"No salary configuration exists for year {year}")


@dataclass(frozen=True)
class ResolvedRate:
    """Exchange rate to present USD values with."""

    rate: Decimal
    timestamp: datetime | None
    fallback: bool


class SalaryConfigResolver:
    """Loads the authoritative yearly config, multiplier overrides and rates."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_config(self, year: int) -> SalaryConfig:
        """Get the validated salary configuration for a year.

        Raises:
            ConfigNotFoundError: If no row exists for the year
            ConfigurationError: If the stored row is incomplete or invalid
        """
        record = await self.session.get(SalaryConfigRecord, year)
        if record is None:
            raise ConfigNotFoundError(year)

        config = SalaryConfig.from_mapping(
            {field.name: getattr(record, field.name) for field in fields(SalaryConfig)}
        )
        return validate_config(config)

    async def get_base_wage(self, year: int) -> Decimal | None:
        """Get the stored base wage for a year without validating the row."""
        record = await self.session.get(SalaryConfigRecord, year)
        if record is None:
            return None
        return record.base_wage

    async def get_multiplier_overrides(self) -> dict[RoleName, Decimal]:
        """Get per-deployment multiplier overrides keyed by role.

        Rows whose name is outside the closed role set are skipped.
        """
        result = await self.session.execute(select(RoleMultiplierRecord))
        overrides: dict[RoleName, Decimal] = {}

        for record in result.scalars().all():
            try:
                role = RoleName(record.role_name)
            except ValueError:
                logger.warning(
                    "Skipping multiplier override for unknown role %r",
                    record.role_name,
                )
                continue
            overrides[role] = record.multiplier

        return overrides

    async def get_exchange_rate(self, default_rate: Decimal) -> ResolvedRate:
        """Get the latest stored USD/COP rate, or the default when none exists."""
        result = await self.session.execute(
            select(ExchangeRateRecord)
            .where(
                ExchangeRateRecord.from_currency == "USD",
                ExchangeRateRecord.to_currency == "COP",
            )
            .order_by(
                ExchangeRateRecord.created_at.desc(),
                ExchangeRateRecord.exchange_rate_id.desc(),
            )
            .limit(1)
        )
        record = result.scalar_one_or_none()

        if record is None or record.rate <= 0:
            logger.warning("No stored exchange rate, falling back to %s", default_rate)
            return ResolvedRate(rate=default_rate, timestamp=None, fallback=True)

        return ResolvedRate(rate=record.rate, timestamp=record.created_at, fallback=False)

    async def save_config(self, config: SalaryConfig) -> SalaryConfigRecord:
        """Insert or replace the configuration for config.year."""
        config = validate_config(config)

        record = await self.session.get(SalaryConfigRecord, config.year)
        if record is None:
            record = SalaryConfigRecord(year=config.year)
            self.session.add(record)

        record.base_wage = config.base_wage
        record.transport_subsidy = config.transport_subsidy
        record.legal_monthly_hours = config.legal_monthly_hours
        record.vat_percent = config.vat_percent
        record.profit_margin_percent = config.profit_margin_percent
        record.employer_burden_factor = config.employer_burden_factor

        await self.session.flush()
        logger.info("Saved salary configuration for year %s", config.year)
        return record
