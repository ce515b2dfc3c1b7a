"""
API tests for recurring bills, pay settings and pay period state.

Pending bill tests anchor the pay schedule on today's local date so the
current period always starts today.
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from finance_app.core.timezone import today_local


@pytest.fixture
def today():
    return today_local()


@pytest.fixture
def paid_today(client: TestClient, today):
    """Biweekly pay schedule whose last payday is today."""
    response = client.post("/pay-settings", json={
        "last_pay_date": today.isoformat(),
        "frequency": "biweekly",
    })
    assert response.status_code == 200
    return today


@pytest.fixture
def bill_due_today(client: TestClient, today) -> dict:
    response = client.post("/recurring-transactions", json={
        "name": "Phone",
        "amount": "65",
        "due_date": today.day,
    })
    assert response.status_code == 201
    return response.json()


# =============================================================================
# RECURRING CATEGORY AND BILL TESTS
# =============================================================================


class TestRecurringTransactionsAPI:
    """Tests for /recurring-categories and /recurring-transactions."""

    def test_category_crud(self, client: TestClient):
        created = client.post("/recurring-categories", json={"name": "Utilities"})
        assert created.status_code == 201
        category_id = created.json()["id"]

        renamed = client.put(f"/recurring-categories/{category_id}", json={"name": "Home"})
        assert renamed.json()["name"] == "Home"
        assert [c["name"] for c in client.get("/recurring-categories").json()] == ["Home"]

        assert client.delete(f"/recurring-categories/{category_id}").status_code == 204
        assert client.get("/recurring-categories").json() == []

    def test_deleting_category_keeps_bills(self, client: TestClient):
        """
        GIVEN a bill in a recurring category
        WHEN the category is deleted
        THEN the bill remains without a category
        """
        category_id = client.post("/recurring-categories", json={"name": "Utilities"}).json()["id"]
        bill = client.post("/recurring-transactions", json={
            "name": "Power", "amount": 90, "due_date": 12, "category_id": category_id,
        }).json()
        assert bill["category_id"] == category_id

        client.delete(f"/recurring-categories/{category_id}")

        assert client.get(f"/recurring-transactions/{bill['id']}").json()["category_id"] is None

    def test_bill_crud(self, client: TestClient):
        bill_id = client.post("/recurring-transactions", json={
            "name": "Rent", "amount": "1500", "due_date": 1, "is_essential": True,
        }).json()["id"]

        updated = client.put(f"/recurring-transactions/{bill_id}", json={"amount": "1550"})
        assert Decimal(updated.json()["amount"]) == Decimal("1550")
        assert updated.json()["is_essential"] is True

        assert len(client.get("/recurring-transactions").json()) == 1
        assert client.delete(f"/recurring-transactions/{bill_id}").status_code == 204
        missing = client.get(f"/recurring-transactions/{bill_id}")
        assert missing.status_code == 404
        assert "Recurring transaction not found" in missing.json()["message"]

    def test_update_can_clear_category(self, client: TestClient):
        """
        GIVEN a categorized bill
        WHEN it is updated with an explicit null category
        THEN the bill becomes uncategorized and other fields are kept
        """
        category_id = client.post("/recurring-categories", json={"name": "Utilities"}).json()["id"]
        bill_id = client.post("/recurring-transactions", json={
            "name": "Water", "amount": "40", "due_date": 20, "category_id": category_id,
        }).json()["id"]

        updated = client.put(f"/recurring-transactions/{bill_id}", json={"category_id": None})

        assert updated.status_code == 200
        assert updated.json()["category_id"] is None
        assert updated.json()["name"] == "Water"
        assert client.get(f"/recurring-transactions/{bill_id}").json()["category_id"] is None

    def test_update_without_category_keeps_it(self, client: TestClient):
        category_id = client.post("/recurring-categories", json={"name": "Utilities"}).json()["id"]
        bill_id = client.post("/recurring-transactions", json={
            "name": "Water", "amount": "40", "due_date": 20, "category_id": category_id,
        }).json()["id"]

        updated = client.put(f"/recurring-transactions/{bill_id}", json={"amount": "45"})

        assert updated.json()["category_id"] == category_id

    @pytest.mark.parametrize("due_date", [0, 32])
    def test_due_date_out_of_range_returns_422(self, client: TestClient, due_date):
        response = client.post("/recurring-transactions", json={
            "name": "Rent", "amount": 1500, "due_date": due_date,
        })

        assert response.status_code == 422


# =============================================================================
# PAY SETTINGS TESTS
# =============================================================================


class TestPaySettingsAPI:
    """Tests for /pay-settings."""

    def test_null_before_onboarding(self, client: TestClient):
        response = client.get("/pay-settings")

        assert response.status_code == 200
        assert response.json() is None

    def test_save_then_overwrite(self, client: TestClient):
        first = client.post("/pay-settings", json={"last_pay_date": "2024-06-07"}).json()
        second = client.post("/pay-settings", json={
            "last_pay_date": "2024-06-14", "frequency": "weekly",
        }).json()

        assert first["frequency"] == "biweekly"
        assert second["id"] == first["id"]
        assert client.get("/pay-settings").json()["last_pay_date"] == "2024-06-14"

    def test_unknown_frequency_returns_422(self, client: TestClient):
        response = client.post("/pay-settings", json={
            "last_pay_date": "2024-06-07", "frequency": "monthly",
        })

        assert response.status_code == 422


# =============================================================================
# PENDING BILL TESTS
# =============================================================================


class TestPendingTransactionsAPI:
    """Tests for /pending-transactions and /completed-transactions."""

    def test_empty_without_pay_settings(self, client: TestClient, bill_due_today):
        data = client.get("/pending-transactions").json()

        assert data["period"] is None
        assert data["bills"] == []
        assert data["count"] == 0

    def test_bill_due_today_is_pending(self, client: TestClient, paid_today, bill_due_today):
        """
        GIVEN a biweekly schedule paid today and a bill due today
        WHEN I GET /pending-transactions
        THEN the bill is listed for the period starting today, due in 0 days
        """
        data = client.get("/pending-transactions").json()

        assert data["period"]["start"] == paid_today.isoformat()
        assert data["period"]["end"] == (paid_today + timedelta(days=14)).isoformat()
        assert data["count"] == 1
        bill = data["bills"][0]
        assert bill["recurring_transaction_id"] == bill_due_today["id"]
        assert bill["days_until_due"] == 0
        assert bill["due_date"] == paid_today.isoformat()
        assert Decimal(data["pending_amount"]) == Decimal("65")

    def test_next_period_starts_on_next_payday(self, client: TestClient, paid_today):
        data = client.get("/pending-transactions/next").json()

        assert data["period"]["start"] == (paid_today + timedelta(days=14)).isoformat()
        assert data["period"]["end_inclusive"] is False

    def test_override_changes_amount_for_period(self, client: TestClient, paid_today, bill_due_today):
        period = client.get("/pending-transactions").json()["period"]

        response = client.put("/pending-transactions", json={
            "recurring_transaction_id": bill_due_today["id"],
            "amount": "80",
            "pay_period_start": period["start"],
            "pay_period_end": period["end"],
        })

        assert response.status_code == 200
        bill = client.get("/pending-transactions").json()["bills"][0]
        assert bill["has_override"] is True
        assert Decimal(bill["amount"]) == Decimal("80")
        assert Decimal(bill["base_amount"]) == Decimal("65")

    def test_override_unknown_bill_returns_404(self, client: TestClient):
        response = client.put("/pending-transactions", json={
            "recurring_transaction_id": "missing",
            "amount": "80",
            "pay_period_start": "2024-06-07",
            "pay_period_end": "2024-06-21",
        })

        assert response.status_code == 404

    def test_mark_completed_is_idempotent(self, client: TestClient, paid_today, bill_due_today):
        """
        GIVEN a pending bill
        WHEN I mark it completed twice
        THEN the same record is returned and the bill no longer counts as pending
        """
        period = client.get("/pending-transactions").json()["period"]
        payload = {
            "recurring_transaction_id": bill_due_today["id"],
            "pay_period_start": period["start"],
            "pay_period_end": period["end"],
        }

        first = client.post("/completed-transactions", json=payload)
        second = client.post("/completed-transactions", json=payload)

        assert first.status_code == 201
        assert second.json()["id"] == first.json()["id"]
        data = client.get("/pending-transactions").json()
        assert data["bills"][0]["is_completed"] is True
        assert Decimal(data["pending_amount"]) == Decimal("0")

        listed = client.get("/completed-transactions", params={
            "pay_period_start": period["start"], "pay_period_end": period["end"],
        }).json()
        assert [c["id"] for c in listed] == [first.json()["id"]]

        assert client.delete(f"/completed-transactions/{first.json()['id']}").status_code == 204
        assert client.delete(f"/completed-transactions/{first.json()['id']}").status_code == 404

    def test_inverted_period_returns_400(self, client: TestClient, bill_due_today):
        response = client.post("/completed-transactions", json={
            "recurring_transaction_id": bill_due_today["id"],
            "pay_period_start": "2024-06-21",
            "pay_period_end": "2024-06-07",
        })

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"


# =============================================================================
# MANUAL PENDING TESTS
# =============================================================================


class TestManualPendingAPI:
    """Tests for /manual-pending-transactions."""

    PERIOD = {"pay_period_start": "2024-06-07", "pay_period_end": "2024-06-21"}

    def test_create_filter_and_complete(self, client: TestClient):
        created = client.post("/manual-pending-transactions", json={
            "name": "Vet", "amount": "120.00", "due_date": "2024-06-12", **self.PERIOD,
        })
        assert created.status_code == 201
        item_id = created.json()["id"]
        client.post("/manual-pending-transactions", json={"name": "Gift", "amount": 40})

        in_period = client.get("/manual-pending-transactions", params=self.PERIOD).json()
        assert [i["name"] for i in in_period] == ["Vet"]

        patched = client.patch(
            f"/manual-pending-transactions/{item_id}/completion", json={"is_completed": True}
        )
        assert patched.status_code == 200
        assert patched.json()["is_completed"] is True

    def test_update_and_delete(self, client: TestClient):
        item_id = client.post("/manual-pending-transactions", json={"name": "Vet", "amount": 120}).json()["id"]

        updated = client.put(f"/manual-pending-transactions/{item_id}", json={"notes": "annual checkup"})
        assert updated.json()["notes"] == "annual checkup"
        assert updated.json()["name"] == "Vet"

        assert client.delete(f"/manual-pending-transactions/{item_id}").status_code == 204
        assert client.patch(
            f"/manual-pending-transactions/{item_id}/completion", json={"is_completed": True}
        ).status_code == 404

    def test_update_can_clear_optional_fields(self, client: TestClient):
        """
        GIVEN a manual pending item with notes and a due date
        WHEN it is updated with explicit nulls for both
        THEN both are cleared and the untouched fields are kept
        """
        item_id = client.post("/manual-pending-transactions", json={
            "name": "Vet", "amount": 120, "due_date": "2024-06-12", "notes": "annual checkup",
            **self.PERIOD,
        }).json()["id"]

        updated = client.put(f"/manual-pending-transactions/{item_id}", json={
            "notes": None, "due_date": None,
        })

        assert updated.status_code == 200
        body = updated.json()
        assert body["notes"] is None
        assert body["due_date"] is None
        assert body["pay_period_start"] == "2024-06-07"
        assert Decimal(body["amount"]) == Decimal("120")

    def test_negative_amount_returns_422(self, client: TestClient):
        response = client.post("/manual-pending-transactions", json={"name": "Vet", "amount": -1})

        assert response.status_code == 422
