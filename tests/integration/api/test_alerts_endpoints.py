"""Integration tests for the alert endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


@pytest.fixture
def create_alert(test_client, api_v1_prefix):
    """Create an alert through the API and return its JSON."""

    def _create(title, alert_type="due_date", **extra):
        response = test_client.post(
            f"{api_v1_prefix}/alerts",
            json={
                "title": title,
                "message": f"{title} needs attention",
                "type": alert_type,
                **extra,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


class TestAlerts:
    """Tests for /api/v1/alerts."""

    def test_create_and_list(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        create_category,
        create_transaction,
        create_alert,
    ):
        rent = create_category("Rent", "expense")
        bill = create_transaction(rent, "1500.00", "2025-01-05", "pending")

        created = create_alert("Rent due", relatedId=bill["id"])

        assert created["isRead"] is False
        assert created["type"] == "due_date"
        assert created["relatedId"] == bill["id"]
        assert "createdAt" in created

        listed = test_client.get(f"{api_v1_prefix}/alerts").json()
        assert [a["id"] for a in listed] == [created["id"]]

    def test_newest_first(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        create_alert,
    ):
        first = create_alert("First")
        second = create_alert("Second", "overdue")

        listed = test_client.get(f"{api_v1_prefix}/alerts").json()

        assert [a["id"] for a in listed] == [second["id"], first["id"]]

    def test_mark_read_and_unread_filter(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        create_alert,
    ):
        read_me = create_alert("Goal reached", "goal_milestone")
        keep = create_alert("CDB matures", "investment_maturity")

        response = test_client.put(f"{api_v1_prefix}/alerts/{read_me['id']}/read")
        assert response.status_code == 200
        assert response.json()["isRead"] is True

        unread = test_client.get(f"{api_v1_prefix}/alerts", params={"unread": "true"})
        assert [a["id"] for a in unread.json()] == [keep["id"]]

        everything = test_client.get(f"{api_v1_prefix}/alerts").json()
        assert len(everything) == 2

    def test_delete(self, test_client: TestClient, api_v1_prefix: str, create_alert):
        alert = create_alert("Rent due")

        response = test_client.delete(f"{api_v1_prefix}/alerts/{alert['id']}")

        assert response.status_code == 204
        assert test_client.get(f"{api_v1_prefix}/alerts").json() == []

    @pytest.mark.parametrize("method", ["put", "delete"])
    def test_missing_alert(self, test_client: TestClient, api_v1_prefix: str, method):
        path = f"{api_v1_prefix}/alerts/{uuid4()}"
        if method == "put":
            path += "/read"

        response = getattr(test_client, method)(path)

        assert response.status_code == 404
        assert response.json()["code"] == "ALERT_NOT_FOUND"

    def test_unknown_type_is_schema_error(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/alerts",
            json={"title": "Hi", "message": "There", "type": "birthday"},
        )

        assert response.status_code == 422
