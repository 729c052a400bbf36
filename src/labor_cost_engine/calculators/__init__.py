"""Labor cost calculation engine."""

from labor_cost_engine.calculators.comparison import percent_increase
from labor_cost_engine.calculators.engine import (
    compute_all,
    compute_full,
    compute_hourly,
    compute_monthly,
    compute_premiums,
)
from labor_cost_engine.calculators.exceptions import (
    ConfigurationError,
    CostEngineError,
    InvalidInputError,
    InvalidRoleError,
)
from labor_cost_engine.calculators.net_view import compute_net_views
from labor_cost_engine.calculators.project_cost import compute_project_cost
from labor_cost_engine.calculators.types import RoleName, SalaryConfig

__all__ = [
    "compute_all",
    "compute_full",
    "compute_hourly",
    "compute_monthly",
    "compute_net_views",
    "compute_premiums",
    "compute_project_cost",
    "percent_increase",
    "ConfigurationError",
    "CostEngineError",
    "InvalidInputError",
    "InvalidRoleError",
    "RoleName",
    "SalaryConfig",
]
