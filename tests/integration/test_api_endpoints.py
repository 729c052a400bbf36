"""API endpoint integration tests.

Tests the FastAPI endpoints for salary queries and calculators.
"""

from decimal import Decimal

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from labor_cost_engine.models import ExchangeRateRecord, SalaryConfigRecord


class TestHealthEndpoints:
    """Test health check endpoints."""

    async def test_health_check(self, client: AsyncClient):
        """Health endpoint should report the database and newest configured year."""
        response = await client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "healthy"
        assert data["engine_version"] == "test"
        assert data["latest_config_year"] == 2025
        assert "timestamp" in data

    async def test_readiness_check(self, client: AsyncClient):
        response = await client.get("/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    async def test_liveness_check(self, client: AsyncClient):
        response = await client.get("/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"


class TestSalaryList:
    """Test GET /api/v1/salaries."""

    async def test_all_roles_listed(self, client: AsyncClient):
        response = await client.get("/api/v1/salaries", params={"year": 2025})
        assert response.status_code == 200, response.text

        data = response.json()
        assert data["year"] == 2025
        assert data["base_wage"] == 1423500.0
        assert data["legal_monthly_hours"] == 192
        assert [s["role"] for s in data["salaries"]] == [
            "Auxiliar",
            "Técnico",
            "Tecnólogo",
            "Profesional",
            "Especialista",
            "Master",
        ]
        assert [s["multiplier"] for s in data["salaries"]] == [1, 2, 3, 4, 5, 7]
        assert data["base_wage_change_percent"] is None

    async def test_base_wage_change_against_previous_year(
        self, client: AsyncClient, seeded_db: AsyncSession
    ):
        seeded_db.add(
            SalaryConfigRecord(
                year=2024,
                base_wage=Decimal("1300000"),
                transport_subsidy=Decimal("162000"),
                legal_monthly_hours=230,
                vat_percent=Decimal("19"),
                profit_margin_percent=Decimal("30"),
                employer_burden_factor=Decimal("50"),
            )
        )
        await seeded_db.flush()

        response = await client.get("/api/v1/salaries", params={"year": 2025})

        assert response.status_code == 200, response.text
        assert response.json()["base_wage_change_percent"] == 9.5

    async def test_fallback_exchange_rate(self, client: AsyncClient):
        response = await client.get("/api/v1/salaries", params={"year": 2025})
        rate = response.json()["exchange_rate"]

        assert rate["pair"] == "USD/COP"
        assert rate["rate"] == 4000.0
        assert rate["fallback"] is True
        assert rate["timestamp"] is None

    async def test_stored_exchange_rate_used(self, client: AsyncClient, seeded_db: AsyncSession):
        seeded_db.add(ExchangeRateRecord(rate=Decimal("4200")))
        await seeded_db.flush()

        response = await client.get("/api/v1/salaries", params={"year": 2025})
        data = response.json()
        auxiliar = data["salaries"][0]

        assert data["exchange_rate"]["rate"] == 4200.0
        assert data["exchange_rate"]["fallback"] is False
        assert auxiliar["breakdown"]["total_per_hour"] == {"cop": 17120.51, "usd": 4.08}

    async def test_year_out_of_range(self, client: AsyncClient):
        response = await client.get("/api/v1/salaries", params={"year": 1999})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_YEAR"

    async def test_missing_year_config(self, client: AsyncClient):
        response = await client.get("/api/v1/salaries", params={"year": 2030})

        assert response.status_code == 404
        assert response.json()["code"] == "CONFIG_NOT_FOUND"

    async def test_invalid_stored_config(self, client: AsyncClient, seeded_db: AsyncSession):
        seeded_db.add(
            SalaryConfigRecord(
                year=2024,
                base_wage=Decimal("1300000"),
                transport_subsidy=Decimal("162000"),
                legal_monthly_hours=230,
                vat_percent=Decimal("-19"),
                profit_margin_percent=Decimal("30"),
                employer_burden_factor=Decimal("50"),
            )
        )
        await seeded_db.flush()

        response = await client.get("/api/v1/salaries", params={"year": 2024})

        assert response.status_code == 500
        assert response.json()["code"] == "CONFIGURATION_ERROR"


class TestRoleSalary:
    """Test GET /api/v1/salaries/{role}."""

    async def test_auxiliar_hourly_values(self, client: AsyncClient):
        response = await client.get("/api/v1/salaries/Auxiliar", params={"year": 2025})
        assert response.status_code == 200, response.text

        data = response.json()
        assert data["role"] == "Auxiliar"
        assert data["year"] == 2025
        assert data["breakdown"]["total_per_hour"] == {"cop": 17120.51, "usd": 4.28}
        assert data["breakdown"]["base_salary_per_hour"]["cop"] == 7414.06

    async def test_hour_types(self, client: AsyncClient):
        response = await client.get("/api/v1/salaries/Auxiliar", params={"year": 2025})
        hour_types = response.json()["hour_types"]

        assert set(hour_types) == {
            "ordinary",
            "day_overtime",
            "night_differential",
            "night_overtime",
            "holiday",
        }
        assert hour_types["ordinary"]["surcharge_text"] == "-"
        assert hour_types["ordinary"]["value_per_hour"]["cop"] == 17120.51
        assert hour_types["day_overtime"]["surcharge_text"] == "+25%"
        assert hour_types["day_overtime"]["value_per_hour"]["cop"] == 21400.63
        assert hour_types["holiday"]["surcharge"] == 0.75
        assert hour_types["holiday"]["value_per_hour"] == {"cop": 29960.88, "usd": 7.49}

    async def test_accented_role(self, client: AsyncClient):
        response = await client.get("/api/v1/salaries/Técnico", params={"year": 2025})

        assert response.status_code == 200, response.text
        assert response.json()["multiplier"] == 2.0

    async def test_unknown_role(self, client: AsyncClient):
        response = await client.get("/api/v1/salaries/Gerente", params={"year": 2025})

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "INVALID_ROLE"
        assert "Auxiliar" in data["valid_roles"]
        assert "Gerente" in data["detail"]

    async def test_monthly_breakdown(self, client: AsyncClient):
        response = await client.get("/api/v1/salaries/Auxiliar/monthly", params={"year": 2025})
        assert response.status_code == 200, response.text

        breakdown = response.json()["breakdown"]
        assert breakdown["total_monthly"] == {"cop": 3287137.0, "usd": 821.78}
        assert breakdown["net_salary"]["cop"] == 1309620.0
        assert breakdown["total_deductions"]["cop"] == 113880.0


class TestCalculator:
    """Test POST /api/v1/calculator."""

    async def test_minimum_wage_month(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/calculator",
            json={"year": 2025, "gross_monthly_salary": 1423500, "hours": 192},
        )
        assert response.status_code == 200, response.text

        data = response.json()
        assert data["employee"]["transport_subsidy_eligible"] is True
        assert data["employee"]["transport_subsidy"]["cop"] == 200000.0
        assert data["employee"]["net_pay"]["cop"] == 1509620.0
        assert data["employer"]["total_employer_cost"]["cop"] == 3287137.0

    async def test_overtime_pay(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/calculator",
            json={
                "year": 2025,
                "gross_monthly_salary": "1423500",
                "hours": "192",
                "overtime_hours": {"holiday": 4},
            },
        )
        assert response.status_code == 200, response.text

        premium_pay = response.json()["employee"]["premium_pay"]
        # 4 h * 7414.0625 * 1.75
        assert premium_pay["holiday"]["cop"] == 51898.44
        assert premium_pay["day_overtime"]["cop"] == 0.0

    async def test_negative_hours(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/calculator",
            json={"year": 2025, "gross_monthly_salary": 1423500, "hours": -1},
        )

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_INPUT"

    async def test_unknown_overtime_category(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/calculator",
            json={
                "year": 2025,
                "gross_monthly_salary": 1423500,
                "hours": 192,
                "overtime_hours": {"sunday": 2},
            },
        )
        assert response.status_code == 422


class TestProjectCost:
    """Test POST /api/v1/salaries/{role}/project-cost."""

    async def test_ordinary_hours(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/salaries/Auxiliar/project-cost",
            json={"year": 2025, "ordinary_hours": 10},
        )
        assert response.status_code == 200, response.text

        data = response.json()
        assert data["role"] == "Auxiliar"
        assert data["cost_per_ordinary_hour"]["cop"] == 17120.51
        assert data["subtotal"]["cop"] == 171205.05
        assert data["total"]["cop"] == 203734.01

    async def test_premium_lines(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/salaries/Auxiliar/project-cost",
            json={"year": 2025, "ordinary_hours": 0, "overtime_hours": {"holiday": 2}},
        )
        assert response.status_code == 200, response.text

        lines = response.json()["premium_lines"]
        assert lines["holiday"]["hours"] == 2.0
        assert lines["holiday"]["rate"]["cop"] == 29960.88
        assert lines["holiday"]["subtotal"]["cop"] == 59921.77
        assert lines["night_overtime"]["subtotal"]["cop"] == 0.0

    async def test_unknown_role(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/salaries/Director/project-cost",
            json={"year": 2025, "ordinary_hours": 1},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ROLE"

    async def test_negative_hours(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/salaries/Auxiliar/project-cost",
            json={"year": 2025, "ordinary_hours": -5},
        )
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_INPUT"
