"""Conversion of engine records into dual-currency API responses."""

from __future__ import annotations

from decimal import Decimal

from labor_cost_engine.api.schemas import (
    DualAmountResponse,
    EmployeeViewResponse,
    EmployerViewResponse,
    ExchangeRateInfo,
    HourTypeResponse,
    PremiumLineResponse,
    RoleSalaryResponse,
)
from labor_cost_engine.calculators.comparison import percent_increase
from labor_cost_engine.calculators.currency import round_to_cents, to_dual_currency
from labor_cost_engine.calculators.engine import compute_premiums
from labor_cost_engine.calculators.rates import PREMIUM_PERCENTS
from labor_cost_engine.calculators.types import (
    EmployeeView,
    EmployerView,
    MonthlyBreakdown,
    PremiumKind,
    PremiumLine,
    SalaryQuery,
)
from labor_cost_engine.services.config_resolver import ResolvedRate

HOURLY_FIELDS = [
    "base_salary_per_hour",
    "transport_subsidy_per_hour",
    "gross_salary_per_hour",
    "net_salary_per_hour",
    "employer_burden_per_hour",
    "labor_cost_per_hour",
    "profit_per_hour",
    "subtotal_per_hour",
    "vat_per_hour",
    "total_per_hour",
]

MONTHLY_FIELDS = [
    "role_base_salary",
    "transport_subsidy_applied",
    "gross_salary",
    "employee_health_contribution",
    "employee_pension_contribution",
    "solidarity_fund_contribution",
    "total_deductions",
    "net_salary",
    "employer_burden_cost",
    "total_labor_cost",
    "profit_value",
    "subtotal",
    "vat_value",
    "total_monthly",
]


def dual(amount: Decimal, rate: Decimal) -> DualAmountResponse:
    """Round an engine amount into its COP/USD presentation."""
    value = to_dual_currency(amount, rate)
    return DualAmountResponse(cop=float(value.cop), usd=float(value.usd))


def exchange_rate_info(resolved: ResolvedRate) -> ExchangeRateInfo:
    return ExchangeRateInfo(
        rate=float(resolved.rate),
        timestamp=resolved.timestamp,
        fallback=resolved.fallback,
    )


def surcharge_text(percent: Decimal) -> str:
    if percent == 0:
        return "-"
    return f"+{(percent * 100).normalize():f}%"


def role_salary(query: SalaryQuery, rate: Decimal) -> RoleSalaryResponse:
    """Hourly breakdown plus the five hour types of a role."""
    premiums = compute_premiums(query.hourly.total_per_hour)

    hour_types = {
        "ordinary": HourTypeResponse(
            surcharge=0.0,
            surcharge_text=surcharge_text(Decimal("0")),
            value_per_hour=dual(premiums.ordinary, rate),
        )
    }
    for kind in PremiumKind:
        percent = PREMIUM_PERCENTS[kind]
        hour_types[kind.value] = HourTypeResponse(
            surcharge=float(percent),
            surcharge_text=surcharge_text(percent),
            value_per_hour=dual(premiums.rate_for(kind), rate),
        )

    return RoleSalaryResponse(
        role=query.monthly.role.value,
        multiplier=float(query.monthly.multiplier),
        legal_monthly_hours=query.hourly.legal_monthly_hours,
        breakdown={name: dual(getattr(query.hourly, name), rate) for name in HOURLY_FIELDS},
        hour_types=hour_types,
    )


def monthly_breakdown(monthly: MonthlyBreakdown, rate: Decimal) -> dict[str, DualAmountResponse]:
    return {name: dual(getattr(monthly, name), rate) for name in MONTHLY_FIELDS}


def employee_view(view: EmployeeView, rate: Decimal) -> EmployeeViewResponse:
    return EmployeeViewResponse(
        hourly_rate=dual(view.hourly_rate, rate),
        period_base_salary=dual(view.period_base_salary, rate),
        premium_pay={kind.value: dual(amount, rate) for kind, amount in view.premium_pay.items()},
        total_premium_pay=dual(view.total_premium_pay, rate),
        transport_subsidy_eligible=view.transport_subsidy_eligible,
        transport_subsidy=dual(view.transport_subsidy, rate),
        gross_pay=dual(view.gross_pay, rate),
        contribution_base=dual(view.contribution_base, rate),
        health_contribution=dual(view.health_contribution, rate),
        pension_contribution=dual(view.pension_contribution, rate),
        solidarity_fund_contribution=dual(view.solidarity_fund_contribution, rate),
        total_deductions=dual(view.total_deductions, rate),
        net_pay=dual(view.net_pay, rate),
    )


def employer_view(view: EmployerView, rate: Decimal) -> EmployerViewResponse:
    return EmployerViewResponse(
        period_base_salary=dual(view.period_base_salary, rate),
        employer_burden=dual(view.employer_burden, rate),
        labor_cost=dual(view.labor_cost, rate),
        profit=dual(view.profit, rate),
        total_premium_pay=dual(view.total_premium_pay, rate),
        transport_subsidy=dual(view.transport_subsidy, rate),
        subtotal=dual(view.subtotal, rate),
        vat=dual(view.vat, rate),
        total_employer_cost=dual(view.total_employer_cost, rate),
    )


def premium_lines(lines: list[PremiumLine], rate: Decimal) -> dict[str, PremiumLineResponse]:
    return {
        line.kind.value: PremiumLineResponse(
            hours=float(line.hours),
            rate=dual(line.rate, rate),
            subtotal=dual(line.subtotal, rate),
        )
        for line in lines
    }


def base_wage_change(previous: Decimal | None, current: Decimal) -> float | None:
    """Base wage change against the previous year, when that year is stored."""
    if previous is None:
        return None
    return float(round_to_cents(percent_increase(previous, current)))
