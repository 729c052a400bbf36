"""Services layer."""

from labor_cost_engine.services.config_resolver import (
    ConfigNotFoundError,
    ResolvedRate,
    SalaryConfigResolver,
)

__all__ = [
    "ConfigNotFoundError",
    "ResolvedRate",
    "SalaryConfigResolver",
]
