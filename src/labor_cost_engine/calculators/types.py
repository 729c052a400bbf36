"""Type definitions for the cost calculation pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from labor_cost_engine.calculators.exceptions import ConfigurationError


class RoleName(str, Enum):
    """Closed set of roles priced by the catalog."""

    AUXILIAR = "Auxiliar"
    TECNICO = "Técnico"
    TECNOLOGO = "Tecnólogo"
    PROFESIONAL = "Profesional"
    ESPECIALISTA = "Especialista"
    MASTER = "Master"


class PremiumKind(str, Enum):
    """Statutory hour types with a surcharge over the ordinary hour."""

    DAY_OVERTIME = "day_overtime"
    NIGHT_DIFFERENTIAL = "night_differential"
    NIGHT_OVERTIME = "night_overtime"
    HOLIDAY = "holiday"


def _whole_number(data: Mapping[str, Any], name: str) -> int:
    value = Decimal(str(data[name]))
    if not value.is_finite() or value != value.to_integral_value():
        raise ConfigurationError(
            f"Salary configuration field '{name}' must be a whole number, got {data[name]!r}",
            fields=[name],
        )
    return int(value)


@dataclass(frozen=True)
class SalaryConfig:
    """Yearly salary configuration (one authoritative record per year)."""

    year: int
    base_wage: Decimal  # SMMLV
    transport_subsidy: Decimal
    legal_monthly_hours: int
    vat_percent: Decimal  # e.g. 19 for 19%
    profit_margin_percent: Decimal
    employer_burden_factor: Decimal  # e.g. 48.3 for 48.3%

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SalaryConfig:
        """Build a config from a loose mapping (storage row, JSON body).

        Raises:
            ConfigurationError: If a field is missing or not numeric, or if
                year or legal_monthly_hours is not a whole number
        """
        missing = [f.name for f in fields(cls) if data.get(f.name) is None]
        if missing:
            raise ConfigurationError(
                f"Salary configuration is missing required fields: {', '.join(missing)}",
                fields=missing,
            )

        try:
            return cls(
                year=_whole_number(data, "year"),
                base_wage=Decimal(str(data["base_wage"])),
                transport_subsidy=Decimal(str(data["transport_subsidy"])),
                legal_monthly_hours=_whole_number(data, "legal_monthly_hours"),
                vat_percent=Decimal(str(data["vat_percent"])),
                profit_margin_percent=Decimal(str(data["profit_margin_percent"])),
                employer_burden_factor=Decimal(str(data["employer_burden_factor"])),
            )
        except (InvalidOperation, TypeError, ValueError) as e:
            raise ConfigurationError(f"Salary configuration has a non-numeric field: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MonthlyBreakdown:
    """Monthly cost breakdown for one role.

    The role multiplier is applied once, to produce role_base_salary.
    Every later figure is derived from values computed before it.
    """

    role: RoleName
    multiplier: Decimal
    role_base_salary: Decimal
    transport_subsidy_applied: Decimal
    gross_salary: Decimal

    # Employee deductions
    employee_health_contribution: Decimal
    employee_pension_contribution: Decimal
    solidarity_fund_contribution: Decimal
    total_deductions: Decimal
    net_salary: Decimal  # Subsidy excluded

    # Employer side
    employer_burden_cost: Decimal
    total_labor_cost: Decimal
    profit_value: Decimal
    subtotal: Decimal
    vat_value: Decimal
    total_monthly: Decimal


@dataclass(frozen=True)
class HourlyBreakdown:
    """Monthly figures projected onto one legal hour (deductions excluded)."""

    role: RoleName
    legal_monthly_hours: int
    base_salary_per_hour: Decimal
    transport_subsidy_per_hour: Decimal
    gross_salary_per_hour: Decimal
    net_salary_per_hour: Decimal
    employer_burden_per_hour: Decimal
    labor_cost_per_hour: Decimal
    profit_per_hour: Decimal
    subtotal_per_hour: Decimal
    vat_per_hour: Decimal
    total_per_hour: Decimal


@dataclass(frozen=True)
class SalaryQuery:
    """Monthly and hourly breakdowns computed on a single basis."""

    config: SalaryConfig
    monthly: MonthlyBreakdown
    hourly: HourlyBreakdown


@dataclass(frozen=True)
class PremiumRates:
    """Hourly rates for each statutory hour type."""

    base_hourly_rate: Decimal
    ordinary: Decimal
    day_overtime: Decimal
    night_differential: Decimal
    night_overtime: Decimal
    holiday: Decimal

    def rate_for(self, kind: PremiumKind) -> Decimal:
        return getattr(self, kind.value)


@dataclass(frozen=True)
class OvertimeHours:
    """Hours worked per premium category."""

    day_overtime: Decimal = Decimal("0")
    night_overtime: Decimal = Decimal("0")
    night_differential: Decimal = Decimal("0")
    holiday: Decimal = Decimal("0")

    def hours_for(self, kind: PremiumKind) -> Decimal:
        return getattr(self, kind.value)


@dataclass(frozen=True)
class EmployeeView:
    """What the employee receives for the billed period."""

    hourly_rate: Decimal
    period_base_salary: Decimal
    premium_pay: dict[PremiumKind, Decimal]
    total_premium_pay: Decimal
    transport_subsidy_eligible: bool
    transport_subsidy: Decimal
    gross_pay: Decimal
    contribution_base: Decimal
    health_contribution: Decimal
    pension_contribution: Decimal
    solidarity_fund_contribution: Decimal
    total_deductions: Decimal
    net_pay: Decimal


@dataclass(frozen=True)
class EmployerView:
    """What the company bills for the same period."""

    period_base_salary: Decimal
    employer_burden: Decimal
    labor_cost: Decimal
    profit: Decimal
    total_premium_pay: Decimal
    transport_subsidy: Decimal
    subtotal: Decimal
    vat: Decimal
    total_employer_cost: Decimal


@dataclass(frozen=True)
class NetViews:
    """Employee/employer split produced by the interactive calculator."""

    employee_view: EmployeeView
    employer_view: EmployerView


@dataclass(frozen=True)
class PremiumLine:
    """Premium hours billed in a project quote."""

    kind: PremiumKind
    hours: Decimal
    rate: Decimal
    subtotal: Decimal


@dataclass(frozen=True)
class ProjectCost:
    """Cost of a role billed for a number of hours."""

    role: RoleName
    ordinary_hours: Decimal
    cost_per_ordinary_hour: Decimal
    ordinary_subtotal: Decimal
    premium_lines: list[PremiumLine] = field(default_factory=list)
    premium_subtotal: Decimal = Decimal("0")
    subtotal: Decimal = Decimal("0")
    vat: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
