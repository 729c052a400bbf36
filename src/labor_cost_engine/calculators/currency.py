"""Dual-currency presentation of engine outputs.

Rounding happens here and only here, at the presentation boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from labor_cost_engine.calculators.exceptions import InvalidInputError
from labor_cost_engine.calculators.validation import to_decimal

OUTPUT_PRECISION = Decimal("0.01")


@dataclass(frozen=True)
class DualAmount:
    """An amount in COP with its USD equivalent."""

    cop: Decimal
    usd: Decimal


def round_to_cents(amount: Decimal) -> Decimal:
    """Round amount to 2 decimal places."""
    return amount.quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)


def cop_to_usd(cop: Decimal, rate: Decimal | int | float | str) -> Decimal:
    """Convert COP to USD with a USD/COP exchange rate."""
    usd_rate = to_decimal("exchange_rate", rate)
    if usd_rate <= 0:
        raise InvalidInputError("exchange_rate", rate, "must be positive")
    return round_to_cents(cop / usd_rate)


def to_dual_currency(cop: Decimal, rate: Decimal | int | float | str) -> DualAmount:
    """Present a COP amount alongside its USD value."""
    return DualAmount(cop=round_to_cents(cop), usd=cop_to_usd(cop, rate))
