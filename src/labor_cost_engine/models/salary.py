"""Salary configuration, role multiplier and exchange rate models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from labor_cost_engine.models.base import Base, TimestampMixin


class SalaryConfigRecord(Base, TimestampMixin):
    """Yearly salary configuration (one authoritative row per year)."""

    __tablename__ = "salary_config"
    __mapper_args__ = {"eager_defaults": True}
    __table_args__ = (
        CheckConstraint("legal_monthly_hours > 0", name="hours_positive"),
    )

    year: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    base_wage: Mapped[Decimal]
    transport_subsidy: Mapped[Decimal]
    legal_monthly_hours: Mapped[int] = mapped_column(Integer, nullable=False)
    vat_percent: Mapped[Decimal] = mapped_column(Numeric(7, 4), nullable=False)
    profit_margin_percent: Mapped[Decimal] = mapped_column(Numeric(7, 4), nullable=False)
    employer_burden_factor: Mapped[Decimal] = mapped_column(Numeric(7, 4), nullable=False)


class RoleMultiplierRecord(Base, TimestampMixin):
    """Per-deployment override of a role multiplier."""

    __tablename__ = "role_multiplier"
    __mapper_args__ = {"eager_defaults": True}

    role_name: Mapped[str] = mapped_column(String, primary_key=True)
    multiplier: Mapped[Decimal] = mapped_column(Numeric(9, 4), nullable=False)


class ExchangeRateRecord(Base):
    """Cached exchange rate written by the rate fetch job."""

    __tablename__ = "exchange_rate"
    __mapper_args__ = {"eager_defaults": True}

    exchange_rate_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    from_currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    to_currency: Mapped[str] = mapped_column(String(3), nullable=False, default="COP")
    rate: Mapped[Decimal] = mapped_column(Numeric(18, 6), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
