"""Project quoting helpers built on the role-driven engine."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from labor_cost_engine.calculators.engine import compute_full, compute_premiums
from labor_cost_engine.calculators.types import (
    OvertimeHours,
    PremiumKind,
    PremiumLine,
    ProjectCost,
    RoleName,
    SalaryConfig,
)
from labor_cost_engine.calculators.validation import (
    parse_overtime_hours,
    require_non_negative,
)

HUNDRED = Decimal("100")


def compute_project_cost(
    config: SalaryConfig,
    role: RoleName | str,
    ordinary_hours: Decimal | int | float | str,
    overtime_hours: OvertimeHours | Mapping[str, object] | None = None,
    multiplier_override: Mapping[RoleName, Decimal] | None = None,
) -> ProjectCost:
    """Quote a role for a number of ordinary and premium hours.

    Every hour is priced from the fully loaded hourly rate; VAT is then
    applied on the quote subtotal.
    """
    hours = require_non_negative("ordinary_hours", ordinary_hours)
    overtime = parse_overtime_hours(overtime_hours)

    query = compute_full(config, role, multiplier_override)
    premiums = compute_premiums(query.hourly.total_per_hour)

    cost_per_hour = query.hourly.total_per_hour
    ordinary_subtotal = cost_per_hour * hours

    premium_lines: list[PremiumLine] = []
    for kind in PremiumKind:
        kind_hours = overtime.hours_for(kind)
        rate = premiums.rate_for(kind)
        premium_lines.append(
            PremiumLine(kind=kind, hours=kind_hours, rate=rate, subtotal=kind_hours * rate)
        )
    premium_subtotal = sum((line.subtotal for line in premium_lines), Decimal("0"))

    subtotal = ordinary_subtotal + premium_subtotal
    vat = subtotal * (query.config.vat_percent / HUNDRED)

    return ProjectCost(
        role=query.monthly.role,
        ordinary_hours=hours,
        cost_per_ordinary_hour=cost_per_hour,
        ordinary_subtotal=ordinary_subtotal,
        premium_lines=premium_lines,
        premium_subtotal=premium_subtotal,
        subtotal=subtotal,
        vat=vat,
        total=subtotal + vat,
    )
