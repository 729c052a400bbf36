"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Shared schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""

    detail: str
    code: str
    valid_roles: list[str] | None = None


class DualAmountResponse(BaseModel):
    """An amount in COP with its USD value, both rounded to 2 decimals."""

    cop: float
    usd: float


class ExchangeRateInfo(BaseModel):
    """Exchange rate used for the USD values."""

    pair: str = "USD/COP"
    rate: float
    timestamp: datetime | None = None
    fallback: bool


class OvertimeHoursInput(BaseModel):
    """Hours per premium category."""

    model_config = ConfigDict(extra="forbid")

    day_overtime: Decimal = Decimal("0")
    night_overtime: Decimal = Decimal("0")
    night_differential: Decimal = Decimal("0")
    holiday: Decimal = Decimal("0")


# ============================================================================
# Salary query schemas
# ============================================================================


class HourTypeResponse(BaseModel):
    """Value of one hour of a given type."""

    surcharge: float
    surcharge_text: str
    value_per_hour: DualAmountResponse


class RoleSalaryResponse(BaseModel):
    """Hourly breakdown and hour types for one role."""

    role: str
    multiplier: float
    legal_monthly_hours: int
    breakdown: dict[str, DualAmountResponse]
    hour_types: dict[str, HourTypeResponse]


class RoleSalaryDetailResponse(RoleSalaryResponse):
    """Single role query, with the year and rate it was computed for."""

    year: int
    exchange_rate: ExchangeRateInfo


class SalaryListResponse(BaseModel):
    """All roles for a year."""

    year: int
    base_wage: float
    base_wage_change_percent: float | None = None
    legal_monthly_hours: int
    exchange_rate: ExchangeRateInfo
    salaries: list[RoleSalaryResponse]


class MonthlyBreakdownResponse(BaseModel):
    """Monthly breakdown for one role."""

    year: int
    role: str
    multiplier: float
    exchange_rate: ExchangeRateInfo
    breakdown: dict[str, DualAmountResponse]


# ============================================================================
# Calculator schemas
# ============================================================================


class CalculatorRequest(BaseModel):
    """Input of the employee/employer what-if calculator."""

    year: int | None = None
    gross_monthly_salary: Decimal
    hours: Decimal
    overtime_hours: OvertimeHoursInput = Field(default_factory=OvertimeHoursInput)


class EmployeeViewResponse(BaseModel):
    """Employee side of the calculator."""

    hourly_rate: DualAmountResponse
    period_base_salary: DualAmountResponse
    premium_pay: dict[str, DualAmountResponse]
    total_premium_pay: DualAmountResponse
    transport_subsidy_eligible: bool
    transport_subsidy: DualAmountResponse
    gross_pay: DualAmountResponse
    contribution_base: DualAmountResponse
    health_contribution: DualAmountResponse
    pension_contribution: DualAmountResponse
    solidarity_fund_contribution: DualAmountResponse
    total_deductions: DualAmountResponse
    net_pay: DualAmountResponse


class EmployerViewResponse(BaseModel):
    """Employer side of the calculator."""

    period_base_salary: DualAmountResponse
    employer_burden: DualAmountResponse
    labor_cost: DualAmountResponse
    profit: DualAmountResponse
    total_premium_pay: DualAmountResponse
    transport_subsidy: DualAmountResponse
    subtotal: DualAmountResponse
    vat: DualAmountResponse
    total_employer_cost: DualAmountResponse


class CalculatorResponse(BaseModel):
    """Employee and employer views for the requested period."""

    year: int
    exchange_rate: ExchangeRateInfo
    employee: EmployeeViewResponse
    employer: EmployerViewResponse


# ============================================================================
# Project cost schemas
# ============================================================================


class ProjectCostRequest(BaseModel):
    """Hours to quote for a role."""

    year: int | None = None
    ordinary_hours: Decimal
    overtime_hours: OvertimeHoursInput = Field(default_factory=OvertimeHoursInput)


class PremiumLineResponse(BaseModel):
    """Premium hours in a quote."""

    hours: float
    rate: DualAmountResponse
    subtotal: DualAmountResponse


class ProjectCostResponse(BaseModel):
    """Quote for a role and a number of hours."""

    year: int
    role: str
    exchange_rate: ExchangeRateInfo
    ordinary_hours: float
    cost_per_ordinary_hour: DualAmountResponse
    ordinary_subtotal: DualAmountResponse
    premium_lines: dict[str, PremiumLineResponse]
    premium_subtotal: DualAmountResponse
    subtotal: DualAmountResponse
    vat: DualAmountResponse
    total: DualAmountResponse
