"""
API tests for asset snapshot, fund account and credit card endpoints.

Tests cover:
- Recording and reading snapshots
- Fund account CRUD with totals
- Credit card CRUD and utilization
- Error responses (404, 422)
"""

from decimal import Decimal

from fastapi.testclient import TestClient


# =============================================================================
# ASSET SNAPSHOT TESTS
# =============================================================================


class TestAssetsAPI:
    """Tests for /assets endpoints."""

    def test_latest_is_zero_before_first_snapshot(self, client: TestClient):
        response = client.get("/assets")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] is None
        assert Decimal(data["total_assets"]) == Decimal("0")

    def test_record_snapshot(self, client: TestClient):
        """
        GIVEN no snapshots
        WHEN I POST /assets with balances
        THEN response is 201 with the total and GET /assets returns it
        """
        response = client.post("/assets", json={
            "cash": "1000.50",
            "checking": "2500",
            "retirement_401k": 40000,
        })

        assert response.status_code == 201
        created = response.json()
        assert Decimal(created["total_assets"]) == Decimal("43500.50")

        latest = client.get("/assets").json()
        assert latest["id"] == created["id"]
        assert Decimal(latest["stocks"]) == Decimal("0")

    def test_history_newest_first(self, client: TestClient):
        client.post("/assets", json={"cash": 100})
        client.post("/assets", json={"cash": 200})

        response = client.get("/assets/history", params={"limit": 10})

        assert response.status_code == 200
        assert [Decimal(s["cash"]) for s in response.json()] == [Decimal("200"), Decimal("100")]

    def test_history_limit_bounds(self, client: TestClient):
        assert client.get("/assets/history", params={"limit": 0}).status_code == 422
        assert client.get("/assets/history", params={"limit": 366}).status_code == 422


# =============================================================================
# FUND ACCOUNT TESTS
# =============================================================================


class TestFundAccountsAPI:
    """Tests for /fund-accounts endpoints."""

    def test_create_list_update_delete(self, client: TestClient):
        created = client.post("/fund-accounts", json={"name": "HYSA", "amount": "5000"})
        assert created.status_code == 201
        account_id = created.json()["id"]
        client.post("/fund-accounts", json={"name": "Brokerage cash", "amount": 800, "is_investing": True})

        listing = client.get("/fund-accounts").json()
        assert len(listing["accounts"]) == 2
        assert Decimal(listing["total"]) == Decimal("5800")
        assert Decimal(listing["investing_total"]) == Decimal("800")

        updated = client.put(f"/fund-accounts/{account_id}", json={"amount": "5200"})
        assert updated.status_code == 200
        assert Decimal(updated.json()["amount"]) == Decimal("5200")
        assert updated.json()["name"] == "HYSA"

        assert client.delete(f"/fund-accounts/{account_id}").status_code == 204
        assert len(client.get("/fund-accounts").json()["accounts"]) == 1

    def test_update_missing_returns_404(self, client: TestClient):
        response = client.put("/fund-accounts/missing", json={"name": "X"})

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_negative_amount_returns_422(self, client: TestClient):
        response = client.post("/fund-accounts", json={"name": "HYSA", "amount": -1})

        assert response.status_code == 422


# =============================================================================
# CREDIT CARD TESTS
# =============================================================================


class TestCreditCardsAPI:
    """Tests for /credit-cards endpoints."""

    def test_create_and_list_with_utilization(self, client: TestClient):
        response = client.post("/credit-cards", json={"name": "Visa", "balance": 500, "limit": 2000})

        assert response.status_code == 201
        assert Decimal(response.json()["utilization_percent"]) == Decimal("25.00")

        client.post("/credit-cards", json={"name": "Amex", "balance": 500, "limit": 3000})
        listing = client.get("/credit-cards").json()
        assert [c["name"] for c in listing["cards"]] == ["Amex", "Visa"]
        assert Decimal(listing["total_balance"]) == Decimal("1000")
        assert Decimal(listing["utilization_percent"]) == Decimal("20.00")

    def test_zero_limit_returns_422(self, client: TestClient):
        response = client.post("/credit-cards", json={"name": "Visa", "limit": 0})

        assert response.status_code == 422

    def test_get_update_delete(self, client: TestClient):
        card_id = client.post(
            "/credit-cards", json={"name": "Visa", "balance": 100, "limit": 1000}
        ).json()["id"]

        assert client.get(f"/credit-cards/{card_id}").json()["name"] == "Visa"

        updated = client.put(f"/credit-cards/{card_id}", json={"balance": 300})
        assert Decimal(updated.json()["balance"]) == Decimal("300")

        assert client.delete(f"/credit-cards/{card_id}").status_code == 204
        missing = client.get(f"/credit-cards/{card_id}")
        assert missing.status_code == 404
        assert "Credit card not found" in missing.json()["message"]
