"""Integration tests for the investment simulation and health endpoints."""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


class TestSimulate:
    """Tests for POST /api/v1/investments/simulate."""

    def test_yearly_projection(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.post(
            f"{api_v1_prefix}/investments/simulate",
            json={"amount": 1000, "interestRate": 10, "years": 2},
        )

        assert response.status_code == 200
        assert response.json() == [
            {
                "year": 1,
                "amount": "1100.00",
                "totalContributed": "1000.00",
                "totalReturn": "100.00",
            },
            {
                "year": 2,
                "amount": "1210.00",
                "totalContributed": "1000.00",
                "totalReturn": "210.00",
            },
        ]

    def test_with_contribution_as_strings(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/investments/simulate",
            json={
                "amount": "1000",
                "interestRate": "10",
                "years": "1",
                "monthlyContribution": "100",
            },
        )

        assert response.status_code == 200
        assert response.json()[0]["amount"] == "2420.00"
        assert response.json()[0]["totalContributed"] == "2200.00"

    def test_malformed_amount(self, test_client: TestClient, api_v1_prefix: str):
        """Should report a parse error instead of simulating with zero."""
        response = test_client.post(
            f"{api_v1_prefix}/investments/simulate",
            json={"amount": "abc", "interestRate": "10", "years": 1},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "PARSE_ERROR"
        assert "'amount'" in data["detail"]

    def test_zero_years(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.post(
            f"{api_v1_prefix}/investments/simulate",
            json={"amount": 1000, "interestRate": 10, "years": 0},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PARAMETER"

    @pytest.mark.parametrize(
        "payload",
        [
            {"amount": 1000, "interestRate": 10, "years": "1e9"},
            {"amount": "1e30", "interestRate": 10, "years": 1},
            {"amount": 1000, "interestRate": 5000, "years": 1},
        ],
    )
    def test_out_of_range_inputs(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        payload: dict,
    ):
        """Should answer 400 rather than fail while computing."""
        response = test_client.post(
            f"{api_v1_prefix}/investments/simulate",
            json=payload,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PARAMETER"

    def test_large_result_is_returned(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/investments/simulate",
            json={"amount": 1000000, "interestRate": 100, "years": 100},
        )

        assert response.status_code == 200
        assert response.json()[-1]["amount"] == f"{1_000_000 * 2**100}.00"

    def test_missing_field_is_schema_error(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/investments/simulate",
            json={"amount": 1000, "years": 1},
        )

        assert response.status_code == 422


class TestAccumulation:
    """Tests for POST /api/v1/investments/simulate/accumulation."""

    def test_projection(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.post(
            f"{api_v1_prefix}/investments/simulate/accumulation",
            json={
                "initialAmount": "1000",
                "monthlyContribution": "0",
                "interestRate": "10",
                "years": "1",
                "inflationRate": "10",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["months"] == 12
        assert data["totalInvested"] == "1000.00"
        assert data["finalNominal"] == "1100.00"
        assert data["finalReal"] == "1000.00"
        assert len(data["points"]) == 12
        assert set(data["points"][0]) == {"month", "nominal", "real"}

    def test_malformed_years(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.post(
            f"{api_v1_prefix}/investments/simulate/accumulation",
            json={
                "initialAmount": "1000",
                "monthlyContribution": "0",
                "interestRate": "10",
                "years": "ten",
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "PARSE_ERROR"


class TestHealth:
    """Tests for the unversioned endpoints."""

    def test_health(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["api_versions"] == ["v1"]

    def test_root_reports_currency(self, test_client: TestClient, api_v1_prefix: str):
        data = test_client.get("/").json()

        assert data["api_base"] == api_v1_prefix
        assert data["currency"] == "BRL"
