"""
Unit tests for DashboardService.

Tests cover:
- Net worth from the latest snapshot, portfolio and card debt
- Projected savings with and without next-period bills
- Dashboard summary (payday countdown, pending totals, available checking)
"""

import pytest
from datetime import date
from decimal import Decimal

from finance_app.domain.models import IncomeData, IncomeFrequency, PayFrequency
from finance_app.services import (
    AssetBalances,
    CreditCardCreate,
    DashboardService,
    InvestmentCreate,
    ManualPendingCreate,
)

TODAY = date(2024, 6, 15)


@pytest.fixture
def funded_household(
    asset_service,
    investment_service,
    income_service,
    category_factory,
):
    """Snapshot, one card, one holding, biweekly income and a $600 budget."""
    asset_service.record_snapshot(
        AssetBalances(
            cash=Decimal("1000"),
            interest=Decimal("500"),
            checking=Decimal("3000"),
            retirement_401k=Decimal("25000"),
        )
    )
    asset_service.create_credit_card(
        CreditCardCreate(name="Visa", balance=Decimal("200"), limit=Decimal("2000"))
    )
    investment_service.create_investment(
        InvestmentCreate(symbol="AAPL", name="Apple", shares=Decimal("10"), avg_price=Decimal("150"))
    )
    income_service.save_income(
        IncomeData(pay_amount=Decimal("2000"), pay_frequency=IncomeFrequency.BIWEEKLY)
    )
    return category_factory(name="Groceries", allocated_amount=Decimal("600"))


# =============================================================================
# NET WORTH AND PROJECTED SAVINGS TESTS
# =============================================================================


class TestNetWorth:
    """Tests for net_worth."""

    def test_savings_minus_card_debt(self, dashboard_service: DashboardService, funded_household):
        """
        GIVEN cash 1000, interest 500, a $1,500 holding and $200 card debt
        WHEN I compute net worth
        THEN savings are 3000 and net worth 2800; retirement is not counted
        """
        view = dashboard_service.net_worth()

        assert view.total_savings == Decimal("3000")
        assert view.total_debt == Decimal("200")
        assert view.net_worth == Decimal("2800")

    def test_zero_without_data(self, dashboard_service: DashboardService):
        view = dashboard_service.net_worth()

        assert view.net_worth == Decimal("0")


class TestProjectedSavings:
    """Tests for projected_savings."""

    def test_uses_next_period_bills(
        self,
        dashboard_service: DashboardService,
        settings_service,
        funded_household,
        bill_factory,
    ):
        """
        GIVEN rent due on the 1st, which lands in the next period (06-21 .. 07-05)
        WHEN I project savings for 2024-06-15
        THEN income 2000 less rent 1500 less half the budget 300 leaves 200
        """
        settings_service.save_pay_settings(date(2024, 6, 7), PayFrequency.BIWEEKLY)
        bill_factory(name="Rent", amount=Decimal("1500"), due_date=1)
        bill_factory(name="Phone", amount=Decimal("60"), due_date=15)

        view = dashboard_service.projected_savings(TODAY)

        assert view.pay_period_income == Decimal("2000.00")
        assert view.recurring_expenses == Decimal("1500")
        assert view.budget_allocation == Decimal("300.00")
        assert view.projected_savings == Decimal("200.00")

    def test_falls_back_to_half_of_monthly_bills(
        self,
        dashboard_service: DashboardService,
        funded_household,
        bill_factory,
    ):
        bill_factory(name="Rent", amount=Decimal("1500"), due_date=1)

        view = dashboard_service.projected_savings(TODAY)

        assert view.recurring_expenses == Decimal("750.00")
        assert view.projected_savings == Decimal("950.00")


# =============================================================================
# SUMMARY TESTS
# =============================================================================


class TestDashboardSummary:
    """Tests for the combined dashboard view."""

    def test_summary_with_pay_schedule(
        self,
        dashboard_service: DashboardService,
        settings_service,
        recurring_service,
        funded_household,
        bill_factory,
        transaction_factory,
    ):
        """
        GIVEN a $60 bill and a $40 manual item due this period
        AND a pending $50 purchase with a $5 tip and $2 unposted cash back
        WHEN I build the dashboard for 2024-06-15
        THEN checking available is 3000 - (100 + 5 - 2) = 2897
        """
        settings_service.save_pay_settings(date(2024, 6, 7), PayFrequency.BIWEEKLY)
        bill_factory(name="Phone", amount=Decimal("60"), due_date=15)
        recurring_service.create_manual_pending(
            ManualPendingCreate(
                name="Gift",
                amount=Decimal("40"),
                pay_period_start=date(2024, 6, 7),
                pay_period_end=date(2024, 6, 21),
            )
        )
        transaction_factory(
            funded_household.id,
            Decimal("50"),
            txn_date=date(2024, 6, 10),
            cash_back=Decimal("2"),
            pending=True,
            pending_tip_amount=Decimal("5"),
        )

        view = dashboard_service.summary(TODAY)

        assert view.next_pay_date == date(2024, 6, 21)
        assert view.days_until_payday == 6
        assert view.pending_bills_total == Decimal("100")
        assert view.pending_tip_total == Decimal("5.00")
        assert view.pending_cashback_total == Decimal("2.00")
        assert view.budget_remaining == Decimal("247.00")
        assert view.available_checking == Decimal("2897.00")
        assert view.net_worth.net_worth == Decimal("2800")

    def test_summary_without_pay_schedule(self, dashboard_service: DashboardService, funded_household):
        view = dashboard_service.summary(TODAY)

        assert view.next_pay_date is None
        assert view.days_until_payday is None
        assert view.pending_bills_total == Decimal("0")
        assert view.budget_remaining == Decimal("600")
        assert view.available_checking == Decimal("3000")
