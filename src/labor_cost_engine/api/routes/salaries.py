"""Salary query endpoints consumed by external automation clients."""

from typing import Annotated

from fastapi import APIRouter, Path, status

from labor_cost_engine.api import presenters
from labor_cost_engine.api.dependencies import AppSettings, QueryYear, Resolver, resolve_year
from labor_cost_engine.api.schemas import (
    ErrorResponse,
    MonthlyBreakdownResponse,
    ProjectCostRequest,
    ProjectCostResponse,
    RoleSalaryDetailResponse,
    SalaryListResponse,
)
from labor_cost_engine.calculators.engine import compute_all, compute_full
from labor_cost_engine.calculators.project_cost import compute_project_cost
from labor_cost_engine.calculators.validation import parse_role

router = APIRouter(prefix="/salaries", tags=["salaries"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}


@router.get(
    "",
    response_model=SalaryListResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def list_salaries(
    resolver: Resolver,
    settings: AppSettings,
    year: QueryYear,
) -> SalaryListResponse:
    """Hourly values and hour types for every role in a year."""
    config = await resolver.get_config(year)
    overrides = await resolver.get_multiplier_overrides()
    previous_base_wage = await resolver.get_base_wage(config.year - 1)
    resolved = await resolver.get_exchange_rate(settings.default_exchange_rate)

    salaries = [
        presenters.role_salary(query, resolved.rate)
        for query in compute_all(config, overrides)
    ]

    return SalaryListResponse(
        year=config.year,
        base_wage=float(config.base_wage),
        base_wage_change_percent=presenters.base_wage_change(previous_base_wage, config.base_wage),
        legal_monthly_hours=config.legal_monthly_hours,
        exchange_rate=presenters.exchange_rate_info(resolved),
        salaries=salaries,
    )


@router.get(
    "/{role}",
    response_model=RoleSalaryDetailResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def get_role_salary(
    resolver: Resolver,
    settings: AppSettings,
    year: QueryYear,
    role: Annotated[str, Path()],
) -> RoleSalaryDetailResponse:
    """Hourly values and hour types for one role."""
    role_name = parse_role(role)
    config = await resolver.get_config(year)
    overrides = await resolver.get_multiplier_overrides()
    resolved = await resolver.get_exchange_rate(settings.default_exchange_rate)

    query = compute_full(config, role_name, overrides)
    salary = presenters.role_salary(query, resolved.rate)

    return RoleSalaryDetailResponse(
        **salary.model_dump(),
        year=config.year,
        exchange_rate=presenters.exchange_rate_info(resolved),
    )


@router.get(
    "/{role}/monthly",
    response_model=MonthlyBreakdownResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def get_role_monthly(
    resolver: Resolver,
    settings: AppSettings,
    year: QueryYear,
    role: Annotated[str, Path()],
) -> MonthlyBreakdownResponse:
    """Monthly cost breakdown for one role."""
    role_name = parse_role(role)
    config = await resolver.get_config(year)
    overrides = await resolver.get_multiplier_overrides()
    resolved = await resolver.get_exchange_rate(settings.default_exchange_rate)

    query = compute_full(config, role_name, overrides)

    return MonthlyBreakdownResponse(
        year=config.year,
        role=role_name.value,
        multiplier=float(query.monthly.multiplier),
        exchange_rate=presenters.exchange_rate_info(resolved),
        breakdown=presenters.monthly_breakdown(query.monthly, resolved.rate),
    )


@router.post(
    "/{role}/project-cost",
    response_model=ProjectCostResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def quote_project_cost(
    resolver: Resolver,
    settings: AppSettings,
    role: Annotated[str, Path()],
    payload: ProjectCostRequest,
) -> ProjectCostResponse:
    """Quote a role for ordinary and premium hours."""
    role_name = parse_role(role)
    year = resolve_year(payload.year)
    config = await resolver.get_config(year)
    overrides = await resolver.get_multiplier_overrides()
    resolved = await resolver.get_exchange_rate(settings.default_exchange_rate)
    rate = resolved.rate

    cost = compute_project_cost(
        config,
        role_name,
        payload.ordinary_hours,
        payload.overtime_hours.model_dump(),
        overrides,
    )

    return ProjectCostResponse(
        year=config.year,
        role=cost.role.value,
        exchange_rate=presenters.exchange_rate_info(resolved),
        ordinary_hours=float(cost.ordinary_hours),
        cost_per_ordinary_hour=presenters.dual(cost.cost_per_ordinary_hour, rate),
        ordinary_subtotal=presenters.dual(cost.ordinary_subtotal, rate),
        premium_lines=presenters.premium_lines(cost.premium_lines, rate),
        premium_subtotal=presenters.dual(cost.premium_subtotal, rate),
        subtotal=presenters.dual(cost.subtotal, rate),
        vat=presenters.dual(cost.vat, rate),
        total=presenters.dual(cost.total, rate),
    )
