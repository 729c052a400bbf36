"""API routes."""

from labor_cost_engine.api.routes.calculator import router as calculator_router
from labor_cost_engine.api.routes.health import router as health_router
from labor_cost_engine.api.routes.salaries import router as salaries_router

__all__ = ["calculator_router", "health_router", "salaries_router"]
