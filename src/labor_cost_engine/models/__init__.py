"""SQLAlchemy ORM models."""

from labor_cost_engine.models.base import Base, TimestampMixin
from labor_cost_engine.models.salary import (
    ExchangeRateRecord,
    RoleMultiplierRecord,
    SalaryConfigRecord,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "ExchangeRateRecord",
    "RoleMultiplierRecord",
    "SalaryConfigRecord",
]
