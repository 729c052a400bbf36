"""Employee/employer what-if calculator endpoint."""

from fastapi import APIRouter, status

from labor_cost_engine.api import presenters
from labor_cost_engine.api.dependencies import AppSettings, Resolver, resolve_year
from labor_cost_engine.api.schemas import CalculatorRequest, CalculatorResponse, ErrorResponse
from labor_cost_engine.calculators.net_view import compute_net_views

router = APIRouter(prefix="/calculator", tags=["calculator"])


@router.post(
    "",
    response_model=CalculatorResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def calculate_net_views(
    resolver: Resolver,
    settings: AppSettings,
    payload: CalculatorRequest,
) -> CalculatorResponse:
    """Split a monthly salary billed for some hours into both views."""
    year = resolve_year(payload.year)
    config = await resolver.get_config(year)
    resolved = await resolver.get_exchange_rate(settings.default_exchange_rate)

    views = compute_net_views(
        config,
        payload.gross_monthly_salary,
        payload.hours,
        payload.overtime_hours.model_dump(),
    )

    return CalculatorResponse(
        year=config.year,
        exchange_rate=presenters.exchange_rate_info(resolved),
        employee=presenters.employee_view(views.employee_view, resolved.rate),
        employer=presenters.employer_view(views.employer_view, resolved.rate),
    )
