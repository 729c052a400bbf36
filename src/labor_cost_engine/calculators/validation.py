"""Boundary validation for calculator inputs.

Configuration completeness is checked once, here, instead of defaulting
missing values deep inside the calculation chain.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation

from labor_cost_engine.calculators.exceptions import (
    ConfigurationError,
    InvalidInputError,
    InvalidRoleError,
)
from labor_cost_engine.calculators.rates import ROLE_MULTIPLIERS
from labor_cost_engine.calculators.types import (
    OvertimeHours,
    PremiumKind,
    RoleName,
    SalaryConfig,
)

VALID_ROLES: list[str] = [role.value for role in RoleName]


def to_decimal(field: str, value: object) -> Decimal:
    """Convert a numeric input to Decimal, rejecting NaN and non-numbers."""
    if isinstance(value, bool) or value is None:
        raise InvalidInputError(field, value, "expected a number")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise InvalidInputError(field, value, "expected a number")

    if not result.is_finite():
        raise InvalidInputError(field, value, "must be a finite number")
    return result


def require_non_negative(field: str, value: object) -> Decimal:
    """Convert and check that an input is >= 0 (never clamped)."""
    result = to_decimal(field, value)
    if result < 0:
        raise InvalidInputError(field, value, "must not be negative")
    return result


def parse_role(role: RoleName | str) -> RoleName:
    """Parse a role name into the closed role set."""
    if isinstance(role, RoleName):
        return role
    try:
        return RoleName(role)
    except ValueError:
        raise InvalidRoleError(role, VALID_ROLES)


def resolve_multiplier(
    role: RoleName,
    multiplier_override: Mapping[RoleName, Decimal] | None = None,
) -> Decimal:
    """Resolve the multiplier for a role.

    Resolution order:
    1. Override entry for the role, if present
    2. Canonical table

    Raises:
        InvalidRoleError: If the role is in neither table
        ConfigurationError: If the resolved multiplier is not positive
    """
    if multiplier_override and role in multiplier_override:
        multiplier = multiplier_override[role]
    elif role in ROLE_MULTIPLIERS:
        multiplier = ROLE_MULTIPLIERS[role]
    else:
        raise InvalidRoleError(role, VALID_ROLES)

    try:
        multiplier = to_decimal(f"multiplier[{role.value}]", multiplier)
    except InvalidInputError as e:
        raise ConfigurationError(str(e), fields=[e.field]) from e

    if multiplier <= 0:
        raise ConfigurationError(
            f"Multiplier for role '{role.value}' must be positive, got {multiplier}",
            fields=[f"multiplier[{role.value}]"],
        )
    return multiplier


def validate_config(config: SalaryConfig) -> SalaryConfig:
    """Check that a configuration is complete and usable.

    Returns the config with every numeric field as Decimal (and the legal
    hours as int); the same object is returned when nothing needs converting.

    Raises:
        ConfigurationError: On zero or fractional legal hours, non-positive
            base wage, negative percentages/subsidy or non-finite values
    """
    checks: list[tuple[str, object, bool]] = [
        ("base_wage", config.base_wage, True),
        ("legal_monthly_hours", config.legal_monthly_hours, True),
        ("transport_subsidy", config.transport_subsidy, False),
        ("vat_percent", config.vat_percent, False),
        ("profit_margin_percent", config.profit_margin_percent, False),
        ("employer_burden_factor", config.employer_burden_factor, False),
    ]

    changes: dict[str, object] = {}
    for field, value, strictly_positive in checks:
        try:
            number = to_decimal(field, value)
        except InvalidInputError as e:
            raise ConfigurationError(str(e), fields=[field]) from e

        if strictly_positive and number <= 0:
            raise ConfigurationError(
                f"Salary configuration field '{field}' must be positive, got {value}",
                fields=[field],
            )
        if not strictly_positive and number < 0:
            raise ConfigurationError(
                f"Salary configuration field '{field}' must not be negative, got {value}",
                fields=[field],
            )

        if field == "legal_monthly_hours":
            if number != number.to_integral_value():
                raise ConfigurationError(
                    f"Salary configuration field '{field}' must be a whole number, got {value}",
                    fields=[field],
                )
            if type(value) is not int:
                changes[field] = int(number)
        elif not isinstance(value, Decimal):
            changes[field] = number

    if changes:
        return dataclasses.replace(config, **changes)
    return config


def parse_overtime_hours(
    overtime_hours: OvertimeHours | Mapping[str, object] | None,
) -> OvertimeHours:
    """Normalize overtime input into validated OvertimeHours.

    Missing categories count as zero hours; unknown categories are rejected.
    """
    if overtime_hours is None:
        return OvertimeHours()

    if isinstance(overtime_hours, OvertimeHours):
        raw: Mapping[str, object] = {
            kind.value: overtime_hours.hours_for(kind) for kind in PremiumKind
        }
    else:
        raw = overtime_hours

    known = {kind.value for kind in PremiumKind}
    unknown = [key for key in raw if key not in known]
    if unknown:
        raise InvalidInputError(
            "overtime_hours",
            unknown,
            f"unknown categories, expected one of {', '.join(sorted(known))}",
        )

    return OvertimeHours(
        **{
            key: require_non_negative(f"overtime_hours.{key}", raw.get(key, 0))
            for key in known
        }
    )
