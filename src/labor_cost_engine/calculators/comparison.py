"""Year-over-year comparison of salary configurations."""

from __future__ import annotations

from decimal import Decimal

from labor_cost_engine.calculators.validation import to_decimal

HUNDRED = Decimal("100")


def percent_increase(
    previous: Decimal | int | float | str,
    current: Decimal | int | float | str,
) -> Decimal:
    """Year-over-year change in percent; 0 when there is no previous value."""
    previous_value = to_decimal("previous", previous)
    current_value = to_decimal("current", current)
    if previous_value == 0:
        return Decimal("0")
    return (current_value - previous_value) / previous_value * HUNDRED
