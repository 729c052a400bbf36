"""Static rate tables for Colombian labor cost calculation."""

from __future__ import annotations

from decimal import Decimal

from labor_cost_engine.calculators.types import PremiumKind, RoleName, SalaryConfig

# Applied once to the base wage to get the role's base salary
ROLE_MULTIPLIERS: dict[RoleName, Decimal] = {
    RoleName.AUXILIAR: Decimal("1"),
    RoleName.TECNICO: Decimal("2"),
    RoleName.TECNOLOGO: Decimal("3"),
    RoleName.PROFESIONAL: Decimal("4"),
    RoleName.ESPECIALISTA: Decimal("5"),
    RoleName.MASTER: Decimal("7"),
}

# Catalog path: only these roles receive the transport subsidy
TRANSPORT_SUBSIDY_ROLES: frozenset[RoleName] = frozenset(
    {RoleName.AUXILIAR, RoleName.TECNICO}
)

# Surcharge over the ordinary hour, as a fraction
PREMIUM_PERCENTS: dict[PremiumKind, Decimal] = {
    PremiumKind.DAY_OVERTIME: Decimal("0.25"),
    PremiumKind.NIGHT_DIFFERENTIAL: Decimal("0.35"),
    PremiumKind.NIGHT_OVERTIME: Decimal("0.75"),
    PremiumKind.HOLIDAY: Decimal("0.75"),
}

# Employee contributions, as a fraction of the contribution base
HEALTH_RATE = Decimal("0.04")
PENSION_RATE = Decimal("0.04")
SOLIDARITY_FUND_RATE = Decimal("0.01")

# Thresholds, in multiples of the base wage
SOLIDARITY_FUND_THRESHOLD = Decimal("4")
TRANSPORT_SUBSIDY_WAGE_CAP = Decimal("2")

DEFAULT_SALARY_CONFIG = SalaryConfig(
    year=2026,
    base_wage=Decimal("1750905"),
    transport_subsidy=Decimal("249095"),
    legal_monthly_hours=182,
    vat_percent=Decimal("19"),
    profit_margin_percent=Decimal("30"),
    employer_burden_factor=Decimal("48.3"),
)


def premium_multiplier(kind: PremiumKind) -> Decimal:
    """Factor applied to the ordinary hour for a premium hour type."""
    return Decimal("1") + PREMIUM_PERCENTS[kind]
