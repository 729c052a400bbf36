"""Interactive "what-if" calculator: employee and employer views.

This path starts from a user-supplied monthly salary instead of the role
catalog. Transport subsidy eligibility here is wage-band based (salary at
most two base wages), unlike the role-based rule of the catalog engine.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from labor_cost_engine.calculators.rates import (
    HEALTH_RATE,
    PENSION_RATE,
    SOLIDARITY_FUND_RATE,
    SOLIDARITY_FUND_THRESHOLD,
    TRANSPORT_SUBSIDY_WAGE_CAP,
    premium_multiplier,
)
from labor_cost_engine.calculators.types import (
    EmployeeView,
    EmployerView,
    NetViews,
    OvertimeHours,
    PremiumKind,
    SalaryConfig,
)
from labor_cost_engine.calculators.validation import (
    parse_overtime_hours,
    require_non_negative,
    validate_config,
)

HUNDRED = Decimal("100")


def compute_net_views(
    config: SalaryConfig,
    gross_monthly_input_salary: Decimal | int | float | str,
    hours_to_bill: Decimal | int | float | str,
    overtime_hours: OvertimeHours | Mapping[str, object] | None = None,
) -> NetViews:
    """Split a salary billed for a number of hours into employee/employer views.

    Raises:
        ConfigurationError: If the config is incomplete or invalid
        InvalidInputError: On negative or non-numeric salary, hours or overtime
    """
    config = validate_config(config)
    salary = require_non_negative("gross_monthly_input_salary", gross_monthly_input_salary)
    hours = require_non_negative("hours_to_bill", hours_to_bill)
    overtime = parse_overtime_hours(overtime_hours)
    legal_hours = Decimal(config.legal_monthly_hours)

    hourly_rate = salary / legal_hours
    period_base_salary = hourly_rate * hours

    subsidy_eligible = salary <= config.base_wage * TRANSPORT_SUBSIDY_WAGE_CAP
    if subsidy_eligible:
        # Prorated to the billed hours
        transport_subsidy = config.transport_subsidy / legal_hours * hours
    else:
        transport_subsidy = Decimal("0")

    premium_pay: dict[PremiumKind, Decimal] = {}
    for kind in PremiumKind:
        premium_pay[kind] = overtime.hours_for(kind) * hourly_rate * premium_multiplier(kind)
    total_premium_pay = sum(premium_pay.values(), Decimal("0"))

    gross_pay = period_base_salary + total_premium_pay + transport_subsidy

    # Contribution base excludes the subsidy
    contribution_base = period_base_salary + total_premium_pay
    health = contribution_base * HEALTH_RATE
    pension = contribution_base * PENSION_RATE
    if salary > config.base_wage * SOLIDARITY_FUND_THRESHOLD:
        solidarity = contribution_base * SOLIDARITY_FUND_RATE
    else:
        solidarity = Decimal("0")
    total_deductions = health + pension + solidarity
    net_pay = gross_pay - total_deductions

    employee_view = EmployeeView(
        hourly_rate=hourly_rate,
        period_base_salary=period_base_salary,
        premium_pay=premium_pay,
        total_premium_pay=total_premium_pay,
        transport_subsidy_eligible=subsidy_eligible,
        transport_subsidy=transport_subsidy,
        gross_pay=gross_pay,
        contribution_base=contribution_base,
        health_contribution=health,
        pension_contribution=pension,
        solidarity_fund_contribution=solidarity,
        total_deductions=total_deductions,
        net_pay=net_pay,
    )

    employer_burden = period_base_salary * (config.employer_burden_factor / HUNDRED)
    labor_cost = period_base_salary + employer_burden
    profit = period_base_salary * (config.profit_margin_percent / HUNDRED)
    subtotal = labor_cost + profit + total_premium_pay + transport_subsidy
    vat = subtotal * (config.vat_percent / HUNDRED)

    employer_view = EmployerView(
        period_base_salary=period_base_salary,
        employer_burden=employer_burden,
        labor_cost=labor_cost,
        profit=profit,
        total_premium_pay=total_premium_pay,
        transport_subsidy=transport_subsidy,
        subtotal=subtotal,
        vat=vat,
        total_employer_cost=subtotal + vat,
    )

    return NetViews(employee_view=employee_view, employer_view=employer_view)
