"""Role-driven cost engine: monthly, hourly and premium breakdowns."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from labor_cost_engine.calculators.rates import (
    HEALTH_RATE,
    PENSION_RATE,
    SOLIDARITY_FUND_RATE,
    SOLIDARITY_FUND_THRESHOLD,
    TRANSPORT_SUBSIDY_ROLES,
    premium_multiplier,
)
from labor_cost_engine.calculators.types import (
    HourlyBreakdown,
    MonthlyBreakdown,
    PremiumKind,
    PremiumRates,
    RoleName,
    SalaryConfig,
    SalaryQuery,
)
from labor_cost_engine.calculators.validation import (
    parse_role,
    require_non_negative,
    resolve_multiplier,
    validate_config,
)

HUNDRED = Decimal("100")


def compute_monthly(
    config: SalaryConfig,
    role: RoleName | str,
    multiplier_override: Mapping[RoleName, Decimal] | None = None,
) -> MonthlyBreakdown:
    """Compute the monthly cost breakdown for a role.

    Calculation order (each step uses the values computed before it):
    1) role_base_salary = base_wage * multiplier  (multiplier applied here only)
    2) transport subsidy, granted to Auxiliar and Técnico
    3) gross_salary = role_base_salary + subsidy
    4) employee health and pension (4% each)
    5) solidarity fund (1%) above 4 base wages
    6) net_salary = role_base_salary - deductions
    7) employer burden = role_base_salary * factor%
    8) total labor cost = role_base_salary + burden
    9) profit = role_base_salary * margin%
    10) subtotal = labor cost + profit + subsidy
    11) VAT on subtotal, total_monthly = subtotal + VAT

    Raises:
        ConfigurationError: If the config is incomplete or invalid
        InvalidRoleError: If the role is not in the closed role set
    """
    config = validate_config(config)
    role = parse_role(role)
    multiplier = resolve_multiplier(role, multiplier_override)

    role_base_salary = config.base_wage * multiplier

    if role in TRANSPORT_SUBSIDY_ROLES:
        transport_subsidy_applied = config.transport_subsidy
    else:
        transport_subsidy_applied = Decimal("0")

    gross_salary = role_base_salary + transport_subsidy_applied

    health = role_base_salary * HEALTH_RATE
    pension = role_base_salary * PENSION_RATE
    if role_base_salary > config.base_wage * SOLIDARITY_FUND_THRESHOLD:
        solidarity = role_base_salary * SOLIDARITY_FUND_RATE
    else:
        solidarity = Decimal("0")
    total_deductions = health + pension + solidarity
    net_salary = role_base_salary - total_deductions

    employer_burden_cost = role_base_salary * (config.employer_burden_factor / HUNDRED)
    total_labor_cost = role_base_salary + employer_burden_cost
    profit_value = role_base_salary * (config.profit_margin_percent / HUNDRED)
    subtotal = total_labor_cost + profit_value + transport_subsidy_applied
    vat_value = subtotal * (config.vat_percent / HUNDRED)
    total_monthly = subtotal + vat_value

    return MonthlyBreakdown(
        role=role,
        multiplier=multiplier,
        role_base_salary=role_base_salary,
        transport_subsidy_applied=transport_subsidy_applied,
        gross_salary=gross_salary,
        employee_health_contribution=health,
        employee_pension_contribution=pension,
        solidarity_fund_contribution=solidarity,
        total_deductions=total_deductions,
        net_salary=net_salary,
        employer_burden_cost=employer_burden_cost,
        total_labor_cost=total_labor_cost,
        profit_value=profit_value,
        subtotal=subtotal,
        vat_value=vat_value,
        total_monthly=total_monthly,
    )


def compute_hourly(config: SalaryConfig, monthly: MonthlyBreakdown) -> HourlyBreakdown:
    """Project a monthly breakdown onto one legal hour.

    Uses the given monthly object as-is; deduction fields are not projected.
    """
    config = validate_config(config)
    hours = Decimal(config.legal_monthly_hours)

    return HourlyBreakdown(
        role=monthly.role,
        legal_monthly_hours=config.legal_monthly_hours,
        base_salary_per_hour=monthly.role_base_salary / hours,
        transport_subsidy_per_hour=monthly.transport_subsidy_applied / hours,
        gross_salary_per_hour=monthly.gross_salary / hours,
        net_salary_per_hour=monthly.net_salary / hours,
        employer_burden_per_hour=monthly.employer_burden_cost / hours,
        labor_cost_per_hour=monthly.total_labor_cost / hours,
        profit_per_hour=monthly.profit_value / hours,
        subtotal_per_hour=monthly.subtotal / hours,
        vat_per_hour=monthly.vat_value / hours,
        total_per_hour=monthly.total_monthly / hours,
    )


def compute_full(
    config: SalaryConfig,
    role: RoleName | str,
    multiplier_override: Mapping[RoleName, Decimal] | None = None,
) -> SalaryQuery:
    """Compute monthly and hourly breakdowns on a single basis."""
    config = validate_config(config)
    monthly = compute_monthly(config, role, multiplier_override)
    hourly = compute_hourly(config, monthly)
    return SalaryQuery(config=config, monthly=monthly, hourly=hourly)


def compute_all(
    config: SalaryConfig,
    multiplier_override: Mapping[RoleName, Decimal] | None = None,
) -> list[SalaryQuery]:
    """Compute the full breakdown for every role, in catalog order."""
    return [compute_full(config, role, multiplier_override) for role in RoleName]


def compute_premiums(base_hourly_rate: Decimal | int | float | str) -> PremiumRates:
    """Compute the statutory premium rates for a base hourly rate.

    Call sites pass HourlyBreakdown.total_per_hour, so premiums are computed
    on the fully loaded rate (margin and VAT included).
    """
    rate = require_non_negative("base_hourly_rate", base_hourly_rate)

    return PremiumRates(
        base_hourly_rate=rate,
        ordinary=rate,
        day_overtime=rate * premium_multiplier(PremiumKind.DAY_OVERTIME),
        night_differential=rate * premium_multiplier(PremiumKind.NIGHT_DIFFERENTIAL),
        night_overtime=rate * premium_multiplier(PremiumKind.NIGHT_OVERTIME),
        holiday=rate * premium_multiplier(PremiumKind.HOLIDAY),
    )
