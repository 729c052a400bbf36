"""Property-based tests for cost engine invariants.

These tests use hypothesis to generate salary configurations and inputs
and verify that the calculation chain stays consistent for all of them.
"""

from __future__ import annotations

from decimal import Decimal

from hypothesis import given, settings
from hypothesis import strategies as st

from labor_cost_engine.calculators.currency import to_dual_currency
from labor_cost_engine.calculators.engine import compute_full, compute_premiums
from labor_cost_engine.calculators.net_view import compute_net_views
from labor_cost_engine.calculators.rates import TRANSPORT_SUBSIDY_ROLES
from labor_cost_engine.calculators.types import RoleName, SalaryConfig

configs = st.builds(
    SalaryConfig,
    year=st.integers(min_value=2020, max_value=2100),
    base_wage=st.integers(min_value=100_000, max_value=10_000_000).map(Decimal),
    transport_subsidy=st.integers(min_value=0, max_value=500_000).map(Decimal),
    legal_monthly_hours=st.integers(min_value=1, max_value=240),
    vat_percent=st.integers(min_value=0, max_value=30).map(Decimal),
    profit_margin_percent=st.integers(min_value=0, max_value=100).map(Decimal),
    employer_burden_factor=st.decimals(
        min_value=0, max_value=100, places=1, allow_nan=False, allow_infinity=False
    ),
)
roles = st.sampled_from(list(RoleName))
hours = st.decimals(min_value=0, max_value=400, places=2, allow_nan=False, allow_infinity=False)
amounts = st.decimals(
    min_value=0, max_value=100_000_000, places=4, allow_nan=False, allow_infinity=False
)


@given(config=configs, role=roles)
@settings(max_examples=200)
def test_monthly_chain_is_consistent(config, role):
    monthly = compute_full(config, role).monthly

    assert monthly.role_base_salary == config.base_wage * monthly.multiplier
    assert monthly.gross_salary == monthly.role_base_salary + monthly.transport_subsidy_applied
    assert monthly.net_salary + monthly.total_deductions == monthly.role_base_salary
    assert monthly.total_monthly == monthly.subtotal + monthly.vat_value
    assert monthly.total_monthly >= monthly.subtotal >= monthly.total_labor_cost

    has_subsidy = monthly.transport_subsidy_applied == config.transport_subsidy
    assert has_subsidy or role not in TRANSPORT_SUBSIDY_ROLES


@given(config=configs, role=roles)
def test_solidarity_only_above_four_base_wages(config, role):
    monthly = compute_full(config, role).monthly

    if monthly.role_base_salary > config.base_wage * 4:
        assert monthly.solidarity_fund_contribution > 0
    else:
        assert monthly.solidarity_fund_contribution == 0


@given(rate=amounts)
def test_premium_rates_are_ordered(rate):
    premiums = compute_premiums(rate)

    assert premiums.ordinary <= premiums.day_overtime <= premiums.night_differential
    assert premiums.night_differential <= premiums.night_overtime
    assert premiums.night_overtime == premiums.holiday


@given(config=configs, salary=amounts, billed=hours)
@settings(max_examples=200)
def test_net_views_are_non_negative(config, salary, billed):
    views = compute_net_views(config, salary, billed)
    employee = views.employee_view
    employer = views.employer_view

    assert employee.net_pay >= 0
    assert employee.net_pay <= employee.gross_pay
    assert employer.subtotal >= employer.labor_cost
    assert employer.total_employer_cost >= employer.subtotal


@given(amount=amounts, rate=st.integers(min_value=1, max_value=10_000))
def test_rounding_stays_within_half_a_cent(amount, rate):
    dual = to_dual_currency(amount, rate)

    assert abs(dual.cop - amount) <= Decimal("0.005")
    assert dual.cop.as_tuple().exponent == -2
